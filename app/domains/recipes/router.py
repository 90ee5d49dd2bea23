"""Recipes 도메인 라우터

읽기 전용 카탈로그 조회 API입니다.
"""

from fastapi import APIRouter, Depends, Request

from app.core.schemas import (
    APIResponse,
    ErrorResponse,
    ListAPIResponse,
    create_list_response,
    create_response,
)
from app.core.utils.pagination import PageParams
from app.domains.recipes.models import Catalog
from app.domains.recipes.schemas import RecipeResponse

router = APIRouter()


def get_catalog(request: Request) -> Catalog:
    """앱에 적재된 Catalog 의존성"""
    return request.app.state.catalog


@router.get("", response_model=ListAPIResponse[RecipeResponse])
def list_recipes(
    page_params: PageParams = Depends(),
    catalog: Catalog = Depends(get_catalog),
):
    """레시피 목록 조회 (카탈로그 순서)"""
    recipes = page_params.slice(catalog.recipes)
    return create_list_response(
        data=[RecipeResponse.model_validate(recipe) for recipe in recipes],
        total=len(catalog),
        page=page_params.page,
        size=page_params.size,
        message="레시피 목록을 조회했습니다.",
    )


@router.get(
    "/{recipe_id}",
    response_model=APIResponse[RecipeResponse],
    responses={404: {"model": ErrorResponse}},
)
def get_recipe(
    recipe_id: str,
    catalog: Catalog = Depends(get_catalog),
):
    """레시피 상세 조회"""
    recipe = catalog.get_recipe(recipe_id)
    return create_response(
        data=RecipeResponse.model_validate(recipe),
        message="레시피 정보를 조회했습니다.",
    )

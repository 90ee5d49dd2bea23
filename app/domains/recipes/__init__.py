"""Recipes 도메인 모듈

개인화 대상이 되는 고정 레시피 카탈로그를 다룹니다.

구조:
    - models.py: 도메인 모델 (Recipe, Catalog, Difficulty)
    - catalog.py: 카탈로그 로더 (내장 데이터 / JSON 파일)
    - schemas.py: Pydantic 응답 스키마
    - router.py: 카탈로그 조회 API
    - exceptions.py: 도메인 예외
"""

from app.domains.recipes.catalog import build_catalog, load_catalog
from app.domains.recipes.exceptions import (
    CatalogLoadError,
    RecipeErrorCode,
    RecipeNotFoundException,
)
from app.domains.recipes.models import Catalog, Difficulty, Recipe
from app.domains.recipes.router import router
from app.domains.recipes.schemas import RecipeResponse

__all__ = [
    "Catalog",
    "Difficulty",
    "Recipe",
    "RecipeResponse",
    "build_catalog",
    "load_catalog",
    "router",
    "RecipeErrorCode",
    "RecipeNotFoundException",
    "CatalogLoadError",
]

"""Recipes 도메인 모델

카탈로그는 기동 시 한 번 구성되며 이후 읽기 전용입니다.
"""

from enum import Enum
from typing import Iterable, Iterator, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.domains.recipes.exceptions import CatalogLoadError, RecipeNotFoundException


class Difficulty(str, Enum):
    """조리 난이도"""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class Recipe(BaseModel):
    """카탈로그 아이템 (불변)

    Attributes:
        id: 카탈로그 내 고유 ID
        name: 레시피 이름
        category: 분류 태그 (요리 국적). 선호도 집계 단위
        difficulty: 조리 난이도
        is_healthy: 건강식 여부
        image_ref: 이미지 경로
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("category", "cuisine")
    )
    difficulty: Difficulty
    is_healthy: bool = Field(
        default=False, validation_alias=AliasChoices("is_healthy", "isHealthy")
    )
    image_ref: str = Field(
        default="", validation_alias=AliasChoices("image_ref", "image")
    )


class Catalog:
    """순서가 고정된 불변 레시피 목록"""

    def __init__(self, recipes: Iterable[Recipe]):
        self._recipes: tuple[Recipe, ...] = tuple(recipes)
        self._by_id: dict[str, Recipe] = {}
        for recipe in self._recipes:
            if recipe.id in self._by_id:
                raise CatalogLoadError(
                    message="카탈로그에 중복된 레시피 ID가 있습니다.",
                    detail={"recipe_id": recipe.id},
                )
            self._by_id[recipe.id] = recipe

    @property
    def recipes(self) -> tuple[Recipe, ...]:
        return self._recipes

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def find(self, recipe_id: str) -> Optional[Recipe]:
        return self._by_id.get(recipe_id)

    def get_recipe(self, recipe_id: str) -> Recipe:
        """레시피 조회

        Raises:
            RecipeNotFoundException: 카탈로그에 없는 ID인 경우
        """
        recipe = self.find(recipe_id)
        if recipe is None:
            raise RecipeNotFoundException(recipe_id=recipe_id)
        return recipe

    def categories(self) -> list[str]:
        """카탈로그에 등장하는 카테고리 (첫 등장 순서)"""
        return list(dict.fromkeys(recipe.category for recipe in self._recipes))

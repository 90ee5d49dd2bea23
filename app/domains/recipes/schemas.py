"""Recipes 도메인 스키마 정의"""

from pydantic import BaseModel, ConfigDict

from app.domains.recipes.models import Difficulty


class RecipeResponse(BaseModel):
    """레시피 응답 스키마"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    category: str
    difficulty: Difficulty
    is_healthy: bool
    image_ref: str

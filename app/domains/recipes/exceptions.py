"""Recipes 도메인 예외 정의"""

from enum import Enum
from typing import Any, Optional

from app.core.exceptions import InternalServerException, NotFoundException


class RecipeErrorCode(str, Enum):
    """레시피 도메인 에러 코드"""

    RECIPE_NOT_FOUND = "RECIPE_NOT_FOUND"
    CATALOG_LOAD_FAILED = "CATALOG_LOAD_FAILED"


class RecipeNotFoundException(NotFoundException):
    """카탈로그에 없는 레시피 ID인 경우"""

    def __init__(self, recipe_id: str | None = None):
        detail = {"recipe_id": recipe_id} if recipe_id else {}
        super().__init__(
            message="레시피를 찾을 수 없습니다.",
            error_code=RecipeErrorCode.RECIPE_NOT_FOUND,
            detail=detail,
        )


class CatalogLoadError(InternalServerException):
    """카탈로그 파일을 읽거나 검증하지 못한 경우 (기동 시 발생)"""

    def __init__(
        self,
        message: str = "레시피 카탈로그를 불러오지 못했습니다.",
        detail: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code=RecipeErrorCode.CATALOG_LOAD_FAILED,
            detail=detail,
        )

"""레시피 카탈로그 로더

``CATALOG_PATH`` 가 설정되어 있으면 JSON 파일에서, 아니면 내장 데모
카탈로그에서 ``Catalog`` 를 구성합니다.

파일 형식::

    [
        {"id": "1", "name": "Chicken Adobo", "category": "Filipino",
         "difficulty": "Easy", "is_healthy": false, "image": "images/adobo.jpg"}
    ]
"""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from app.core.logging import get_logger
from app.domains.recipes.exceptions import CatalogLoadError
from app.domains.recipes.models import Catalog, Recipe

logger = get_logger(__name__)

_recipe_list_adapter = TypeAdapter(list[Recipe])

DEFAULT_RECIPES: list[dict[str, Any]] = [
    {
        "id": "1",
        "name": "Chicken Adobo",
        "category": "Filipino",
        "difficulty": "Easy",
        "is_healthy": False,
        "image_ref": "images/adobo.jpg",
    },
    {
        "id": "2",
        "name": "Sinigang na Baboy",
        "category": "Filipino",
        "difficulty": "Medium",
        "is_healthy": True,
        "image_ref": "images/sinigang.jpg",
    },
    {
        "id": "3",
        "name": "Sushi Roll",
        "category": "Japanese",
        "difficulty": "Hard",
        "is_healthy": True,
        "image_ref": "images/sushi.jpg",
    },
    {
        "id": "4",
        "name": "Ramen",
        "category": "Japanese",
        "difficulty": "Medium",
        "is_healthy": False,
        "image_ref": "images/ramen.jpg",
    },
    {
        "id": "5",
        "name": "Spaghetti Bolognese",
        "category": "Italian",
        "difficulty": "Easy",
        "is_healthy": False,
        "image_ref": "images/spaghetti.jpg",
    },
    {
        "id": "6",
        "name": "Margherita Pizza",
        "category": "Italian",
        "difficulty": "Medium",
        "is_healthy": False,
        "image_ref": "images/pizza.jpg",
    },
    {
        "id": "7",
        "name": "Chicken Curry",
        "category": "Indian",
        "difficulty": "Medium",
        "is_healthy": True,
        "image_ref": "images/curry.jpg",
    },
    {
        "id": "8",
        "name": "Chana Masala",
        "category": "Indian",
        "difficulty": "Easy",
        "is_healthy": True,
        "image_ref": "images/chana.jpg",
    },
]


def build_catalog(records: Any) -> Catalog:
    """원시 레코드 목록을 검증하여 Catalog 생성

    Raises:
        CatalogLoadError: 레코드 형식이 잘못되었거나 ID가 중복된 경우
    """
    try:
        recipes = _recipe_list_adapter.validate_python(records)
    except ValidationError as e:
        raise CatalogLoadError(
            message="카탈로그 레코드 형식이 올바르지 않습니다.",
            detail={"errors": e.errors(include_url=False, include_context=False)},
        ) from e
    return Catalog(recipes)


def load_catalog(path: Optional[str] = None) -> Catalog:
    """카탈로그 로드

    Args:
        path: JSON 카탈로그 파일 경로 (None이면 내장 카탈로그)

    Returns:
        읽기 전용 Catalog

    Raises:
        CatalogLoadError: 파일을 읽을 수 없거나 내용이 잘못된 경우
    """
    if path is None:
        catalog = build_catalog(DEFAULT_RECIPES)
        logger.info(f"Loaded built-in catalog ({len(catalog)} recipes)")
        return catalog

    try:
        records = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogLoadError(
            message="카탈로그 파일을 읽을 수 없습니다.",
            detail={"path": path, "reason": str(e)},
        ) from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(
            message="카탈로그 파일이 올바른 JSON이 아닙니다.",
            detail={"path": path, "reason": str(e)},
        ) from e

    catalog = build_catalog(records)
    logger.info(f"Loaded catalog from {path} ({len(catalog)} recipes)")
    return catalog

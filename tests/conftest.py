"""테스트 설정"""

import json

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.domains.personalization.session import SessionController
from app.domains.recipes.catalog import build_catalog
from app.domains.recipes.models import Catalog, Recipe
from app.main import create_app


def make_recipe(recipe_id: str, category: str, **overrides) -> Recipe:
    """테스트용 레시피 생성 헬퍼"""
    data = {
        "id": recipe_id,
        "name": f"Recipe {recipe_id}",
        "category": category,
        "difficulty": "Easy",
        "is_healthy": False,
        "image_ref": f"images/{recipe_id}.jpg",
    }
    data.update(overrides)
    return Recipe(**data)


@pytest.fixture
def small_catalog() -> Catalog:
    """Filipino 2개 + Japanese 1개 카탈로그"""
    return Catalog(
        [
            make_recipe("id1", "Filipino"),
            make_recipe("id2", "Filipino"),
            make_recipe("id3", "Japanese"),
        ]
    )


@pytest.fixture
def mixed_catalog() -> Catalog:
    """카테고리가 섞여 있는 카탈로그 (안정 분할 검증용)"""
    return Catalog(
        [
            make_recipe("a", "Italian"),
            make_recipe("b", "Japanese"),
            make_recipe("c", "Italian"),
            make_recipe("d", "Indian"),
            make_recipe("e", "Japanese"),
            make_recipe("f", "Italian"),
        ]
    )


@pytest.fixture
def default_catalog() -> Catalog:
    """내장 데모 카탈로그"""
    from app.domains.recipes.catalog import DEFAULT_RECIPES

    return build_catalog(DEFAULT_RECIPES)


@pytest.fixture
def controller(small_catalog: Catalog) -> SessionController:
    """기본 INCLUSIVE 모드 세션"""
    return SessionController(small_catalog)


@pytest.fixture
def test_settings() -> Settings:
    """내장 카탈로그를 사용하는 개발 환경 설정"""
    return Settings(app_env="development", catalog_path=None)


@pytest.fixture
def catalog_file(tmp_path):
    """JSON 카탈로그 파일 생성 팩토리"""

    def _write(records, name: str = "catalog.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return str(path)

    return _write


# NOTE:
# 테스트마다 새 앱을 만들어 세션 상태(원장/모드)가 테스트 간에 공유되지 않도록 함
@pytest_asyncio.fixture
async def client(test_settings: Settings):
    """비동기 테스트 클라이언트"""
    app = create_app(test_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client


@pytest.fixture
def anyio_backend():
    """anyio 백엔드 설정"""
    return "asyncio"

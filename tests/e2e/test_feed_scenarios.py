"""개인화 시나리오 E2E 테스트

실제 사용자 흐름(레시피 선택 → 모드 전환 → 초기화)을 시뮬레이션하여
전체 플로우가 올바르게 동작하는지 검증합니다.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.main import create_app


def _ids(body):
    return [item["id"] for item in body["data"]["items"]]


class TestPreferenceConvergence:
    """선호도 수렴 시나리오"""

    @pytest.mark.asyncio
    async def test_preference_shift_and_tie_break(self, client):
        """동점이면 먼저 선택한 카테고리가 유지되고, 앞서면 교체"""
        await client.post("/api/v1/feed/recipes/3/cook")  # Japanese
        body = (await client.post("/api/v1/feed/recipes/5/cook")).json()  # Italian
        assert body["data"]["dominant_category"] == "Japanese"

        body = (await client.post("/api/v1/feed/recipes/6/cook")).json()
        assert body["data"]["dominant_category"] == "Italian"
        assert body["data"]["counts"] == {"Japanese": 1, "Italian": 2}
        assert _ids(body) == ["5", "6", "1", "2", "3", "4", "7", "8"]

    @pytest.mark.asyncio
    async def test_echo_chamber_round_trip(self, client):
        """INCLUSIVE → EXCLUSIVE → INCLUSIVE 전환"""
        await client.post("/api/v1/feed/interactions", json={"category": "Filipino"})

        body = (await client.put("/api/v1/feed/mode", json={"inclusive": False})).json()
        assert _ids(body) == ["1", "2"]
        assert body["data"]["explanation"]["variant"] == "hiding"

        body = (await client.put("/api/v1/feed/mode", json={"inclusive": True})).json()
        assert len(_ids(body)) == 8
        assert body["data"]["explanation"]["variant"] == "highlighting"

        body = (await client.post("/api/v1/feed/reset")).json()
        assert body["data"]["state"] == "cold_start"
        assert body["data"]["explanation"]["variant"] == "none"


class TestCustomCatalog:
    """파일 카탈로그 시나리오"""

    @pytest.mark.asyncio
    async def test_end_to_end_example_catalog(self, catalog_file):
        """Filipino 2개 + Japanese 1개 카탈로그 예제"""
        path = catalog_file(
            [
                {"id": "id1", "name": "Adobo", "category": "Filipino", "difficulty": "Easy"},
                {"id": "id2", "name": "Sinigang", "category": "Filipino", "difficulty": "Medium"},
                {"id": "id3", "name": "Ramen", "category": "Japanese", "difficulty": "Medium"},
            ]
        )
        app = create_app(Settings(app_env="development", catalog_path=path))

        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            body = (
                await client.post(
                    "/api/v1/feed/interactions", json={"category": "Filipino"}
                )
            ).json()
            assert body["data"]["dominant_category"] == "Filipino"
            assert _ids(body) == ["id1", "id2", "id3"]

            body = (
                await client.put("/api/v1/feed/mode", json={"inclusive": False})
            ).json()
            assert _ids(body) == ["id1", "id2"]

            body = (await client.post("/api/v1/feed/reset")).json()
            assert _ids(body) == ["id1", "id2", "id3"]
            assert body["data"]["dominant_category"] is None

    def test_initial_mode_from_settings(self):
        app = create_app(
            Settings(app_env="development", default_inclusive_mode=False)
        )

        assert app.state.feed_session.mode.value == "exclusive"


class TestRequestTracking:
    """요청 추적 시나리오"""

    @pytest.mark.asyncio
    async def test_request_id_propagated(self, client):
        custom_id = "feed-request-001"

        response = await client.get(
            "/api/v1/feed", headers={"X-Request-ID": custom_id}
        )

        assert response.headers["x-request-id"] == custom_id
        assert response.headers["x-process-time"].endswith("ms")

    @pytest.mark.asyncio
    async def test_request_id_generated(self, client):
        first = await client.get("/api/v1/")
        second = await client.get("/api/v1/")

        assert first.headers["x-request-id"] != second.headers["x-request-id"]


class TestHealthCheckScenario:
    """헬스 체크 시나리오"""

    @pytest.mark.asyncio
    async def test_health_check(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "healthy"
        assert data["recipes"] == 8

    @pytest.mark.asyncio
    async def test_unknown_route_returns_envelope(self, client):
        response = await client.get("/api/v99/")

        assert response.status_code == 404
        assert response.json()["success"] is False

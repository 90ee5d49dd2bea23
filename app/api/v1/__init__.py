"""API v1 라우터"""

from typing import Any

from fastapi import APIRouter

from app.core.schemas import APIResponse
from app.domains.personalization.router import router as feed_router
from app.domains.recipes.router import router as recipes_router

api_router = APIRouter()

# 도메인 라우터 등록
api_router.include_router(recipes_router, prefix="/recipes", tags=["Recipes"])
api_router.include_router(feed_router, prefix="/feed", tags=["Feed"])


@api_router.get("/", response_model=APIResponse[dict[str, Any]])
async def api_v1_root():
    """API v1 루트 엔드포인트"""
    return APIResponse(
        success=True,
        message="Recipe Personalizer API v1",
        data={
            "version": "1.0.0",
            "docs": "/docs",
        },
    )

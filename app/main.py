from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1 import api_router as api_v1_router
from app.core.config import Settings, settings
from app.core.exceptions import (
    BaseAPIException,
    base_exception_handler,
    generic_exception_handler,
    http_exception_handler,
)
from app.core.logging import get_logger, setup_logging
from app.core.middlewares import LoggingMiddleware
from app.core.schemas import APIResponse
from app.domains.personalization.session import SessionController
from app.domains.recipes.catalog import load_catalog

# 로깅 설정 초기화
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리"""
    app_settings: Settings = app.state.settings
    logger.info(
        f"🚀 Starting {app_settings.app_name} "
        f"({len(app.state.catalog)} recipes, "
        f"mode={app.state.feed_session.mode.value})"
    )
    yield
    logger.info(f"👋 Shutting down {app_settings.app_name}...")


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """FastAPI 애플리케이션 팩토리

    카탈로그는 여기서 한 번 로드되며(실패 시 기동 중단),
    개인화 세션은 앱 인스턴스가 소유합니다.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.app_name,
        description="Session-based recipe personalization API",
        version="0.1.0",
        docs_url="/docs" if app_settings.is_development else None,
        redoc_url="/redoc" if app_settings.is_development else None,
        openapi_url="/openapi.json" if app_settings.is_development else None,
        lifespan=lifespan,
    )

    catalog = load_catalog(app_settings.catalog_path)
    app.state.settings = app_settings
    app.state.catalog = catalog
    app.state.feed_session = SessionController(
        catalog, inclusive=app_settings.default_inclusive_mode
    )

    # 미들웨어 설정 (순서 중요: 아래에서 위로 실행됨)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    # 예외 핸들러 등록
    app.add_exception_handler(BaseAPIException, base_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # API 라우터 등록 (버저닝)
    app.include_router(api_v1_router, prefix="/api/v1")

    @app.get(
        "/health", tags=["Health"], response_model=APIResponse[dict[str, Any]]
    )
    async def health_check():
        """헬스 체크 엔드포인트"""
        return APIResponse(
            success=True,
            message="OK",
            data={
                "status": "healthy",
                "app_name": app_settings.app_name,
                "environment": app_settings.app_env,
                "recipes": len(catalog),
            },
        )

    return app


app = create_app()


def run() -> None:
    """uvicorn으로 서버 실행"""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()

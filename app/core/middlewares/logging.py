"""요청/응답 로깅 미들웨어"""

import time
from typing import Callable, cast

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import get_logger
from app.core.middlewares.context import REQUEST_ID_HEADER, set_request_id

logger = get_logger(__name__)

# 로깅 제외 경로
EXCLUDE_PATHS = {"/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"}


class LoggingMiddleware(BaseHTTPMiddleware):
    """요청 ID 전파, 처리 시간 측정 및 접근 로그 미들웨어"""

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        if request.url.path in EXCLUDE_PATHS:
            return cast(Response, await call_next(request))

        request_id = set_request_id(request.headers.get(REQUEST_ID_HEADER))
        route = f"{request.method} {request.url.path}"

        logger.debug(f"[{request_id}] → {route}")

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.error(
                f"[{request_id}] ✗ {route} | Error: {e} "
                f"| Time: {elapsed_ms:.2f}ms"
            )
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed_ms:.2f}ms"

        log_method = (
            logger.info if response.status_code < 400 else logger.warning
        )
        log_method(
            f"[{request_id}] {route} | Status: {response.status_code} "
            f"| Time: {elapsed_ms:.2f}ms"
        )

        return cast(Response, response)

"""요청 ID 컨텍스트 관리"""

import contextvars
import uuid
from typing import Optional

REQUEST_ID_HEADER = "X-Request-ID"

request_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)


def get_request_id() -> Optional[str]:
    """현재 요청 ID 반환 (요청 밖에서는 None)"""
    return request_id_ctx.get()


def set_request_id(request_id: Optional[str] = None) -> str:
    """요청 ID 설정 (비어 있으면 새로 생성)"""
    if not request_id:
        request_id = uuid.uuid4().hex
    request_id_ctx.set(request_id)
    return request_id

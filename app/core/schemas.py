"""공통 API 응답 스키마

모든 엔드포인트는 ``{success, message, data}`` 형태의 봉투(envelope)로
응답합니다. 목록 응답은 ``meta`` 에 페이지네이션 정보를 포함합니다.

Usage::

    from app.core.schemas import APIResponse, create_response
    return create_response(data=feed, message="피드를 조회했습니다.")
"""

import math
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")

DEFAULT_MESSAGE = "요청이 성공적으로 처리되었습니다."


class APIResponse(BaseModel, Generic[DataT]):
    """단일 데이터 API 응답"""

    success: bool = True
    message: str = DEFAULT_MESSAGE
    data: Optional[DataT] = None


class PageMeta(BaseModel):
    """페이지네이션 메타 정보"""

    total: int = Field(..., description="전체 아이템 수")
    page: int = Field(..., description="현재 페이지")
    size: int = Field(..., description="페이지 크기")
    total_pages: int = Field(..., description="전체 페이지 수")
    has_next: bool = Field(..., description="다음 페이지 존재 여부")
    has_prev: bool = Field(..., description="이전 페이지 존재 여부")


class ListAPIResponse(BaseModel, Generic[DataT]):
    """목록 데이터 API 응답 (페이지네이션 포함)"""

    success: bool = True
    message: str = DEFAULT_MESSAGE
    data: list[DataT] = Field(default_factory=list)
    meta: PageMeta


def create_response(
    data: Optional[DataT] = None,
    message: str = DEFAULT_MESSAGE,
    success: bool = True,
) -> APIResponse[DataT]:
    """API 응답 생성 팩토리 함수"""
    return APIResponse(success=success, message=message, data=data)


def create_list_response(
    data: list[DataT],
    total: int,
    page: int,
    size: int,
    message: str = DEFAULT_MESSAGE,
) -> ListAPIResponse[DataT]:
    """목록 API 응답 생성 팩토리 함수

    Args:
        data: 현재 페이지의 데이터
        total: 전체 아이템 수
        page: 현재 페이지
        size: 페이지 크기
        message: 응답 메시지
    """
    total_pages = math.ceil(total / size) if size > 0 else 0
    return ListAPIResponse(
        success=True,
        message=message,
        data=data,
        meta=PageMeta(
            total=total,
            page=page,
            size=size,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        ),
    )


class ErrorDetail(BaseModel):
    """에러 상세 정보"""

    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    detail: Optional[dict[str, Any]] = Field(default=None, description="추가 정보")


class ErrorResponse(BaseModel):
    """에러 API 응답

    Example::

        {
            "success": false,
            "message": "레시피를 찾을 수 없습니다.",
            "error": {
                "code": "RECIPE_NOT_FOUND",
                "message": "레시피를 찾을 수 없습니다.",
                "detail": {"recipe_id": "42"}
            }
        }
    """

    success: bool = False
    message: str
    error: ErrorDetail

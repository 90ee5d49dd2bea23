"""개인화 피드 라우터

렌더링 측이 호출하는 트리거(상호작용 기록, 모드 변경, 초기화)와
현재 피드 조회 API입니다. 세션 컨트롤러가 동기 락을 사용하므로
핸들러는 스레드풀에서 실행되는 일반 함수로 정의합니다.
"""

from fastapi import APIRouter, Depends, Request

from app.core.schemas import APIResponse, ErrorResponse, create_response
from app.domains.personalization.schemas import (
    FeedResponse,
    InteractionCreate,
    ModeUpdate,
)
from app.domains.personalization.session import SessionController
from app.domains.personalization.types import FeedView

router = APIRouter()

EMPTY_FEED_MESSAGE = "표시할 레시피가 없습니다."


def get_session_controller(request: Request) -> SessionController:
    """앱이 소유한 SessionController 의존성"""
    return request.app.state.feed_session


def _feed_response(view: FeedView, message: str) -> APIResponse[FeedResponse]:
    feed = FeedResponse.from_view(view)
    return create_response(
        data=feed, message=EMPTY_FEED_MESSAGE if feed.empty else message
    )


@router.get("", response_model=APIResponse[FeedResponse])
def get_feed(
    session: SessionController = Depends(get_session_controller),
):
    """현재 피드 조회"""
    return _feed_response(session.view(), "피드를 조회했습니다.")


@router.post(
    "/interactions",
    response_model=APIResponse[FeedResponse],
    status_code=201,
)
def record_interaction(
    payload: InteractionCreate,
    session: SessionController = Depends(get_session_controller),
):
    """카테고리 상호작용 기록"""
    view = session.record_interaction(payload.category)
    return _feed_response(view, "상호작용이 기록되었습니다.")


@router.post(
    "/recipes/{recipe_id}/cook",
    response_model=APIResponse[FeedResponse],
    status_code=201,
    responses={404: {"model": ErrorResponse}},
)
def cook_recipe(
    recipe_id: str,
    session: SessionController = Depends(get_session_controller),
):
    """레시피 선택 ("Cook This") 기록"""
    view = session.record_recipe(recipe_id)
    return _feed_response(view, "상호작용이 기록되었습니다.")


@router.put("/mode", response_model=APIResponse[FeedResponse])
def set_mode(
    payload: ModeUpdate,
    session: SessionController = Depends(get_session_controller),
):
    """노출 모드 변경"""
    view = session.set_mode(payload.inclusive)
    return _feed_response(view, "노출 모드가 변경되었습니다.")


@router.post("/reset", response_model=APIResponse[FeedResponse])
def reset_feed(
    session: SessionController = Depends(get_session_controller),
):
    """세션 초기화 (모드는 유지)"""
    view = session.reset()
    return _feed_response(view, "세션이 초기화되었습니다.")

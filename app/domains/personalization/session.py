"""개인화 세션 컨트롤러

원장(InteractionLedger)과 모드를 소유하고, 상태를 바꾸는 세 가지
트리거(record_interaction / set_mode / reset)를 제공합니다.
각 트리거는 하나의 락 안에서 갱신 → 재계산까지 끝낸 뒤 FeedView를 반환하므로,
여러 요청이 동시에 들어와도 선호 카테고리와 노출 목록은 항상 같은
원장 스냅샷에서 계산됩니다.
"""

import threading
from typing import Optional

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.domains.personalization.ledger import InteractionLedger
from app.domains.personalization.policy import compute_visible
from app.domains.personalization.resolver import resolve_dominant
from app.domains.personalization.types import (
    ExplanationVariant,
    FeedMode,
    FeedView,
    SessionState,
)
from app.domains.recipes.models import Catalog, Recipe

logger = get_logger(__name__)


def resolve_state(dominant: Optional[str], mode: FeedMode) -> SessionState:
    """선호 카테고리와 모드로부터 세션 상태 결정"""
    if dominant is None:
        return SessionState.COLD_START
    if mode is FeedMode.INCLUSIVE:
        return SessionState.CONVERGED_INCLUSIVE
    return SessionState.CONVERGED_EXCLUSIVE


_EXPLANATIONS = {
    SessionState.COLD_START: ExplanationVariant.NONE,
    SessionState.CONVERGED_INCLUSIVE: ExplanationVariant.HIGHLIGHTING,
    SessionState.CONVERGED_EXCLUSIVE: ExplanationVariant.HIDING,
}


def explanation_for(state: SessionState) -> ExplanationVariant:
    return _EXPLANATIONS[state]


class SessionController:
    """개인화 세션

    상태:
        COLD_START → (record_interaction) → CONVERGED_{INCLUSIVE,EXCLUSIVE}
        CONVERGED_* ↔ (set_mode)
        * → (reset) → COLD_START  (모드는 유지)
    """

    def __init__(self, catalog: Catalog, inclusive: bool = True):
        """
        Args:
            catalog: 읽기 전용 레시피 카탈로그
            inclusive: 초기 모드 (기본 INCLUSIVE)
        """
        self._catalog = catalog
        self._ledger = InteractionLedger()
        self._mode = FeedMode.from_flag(inclusive)
        self._lock = threading.Lock()
        self._dominant: Optional[str] = None
        self._visible: tuple[Recipe, ...] = ()
        self._recompute()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def mode(self) -> FeedMode:
        return self._mode

    @property
    def dominant_category(self) -> Optional[str]:
        return self._dominant

    @property
    def state(self) -> SessionState:
        return resolve_state(self._dominant, self._mode)

    def record_interaction(self, category: str) -> FeedView:
        """카테고리 상호작용 기록

        카탈로그에 없는 카테고리도 그대로 기록합니다
        (EXCLUSIVE 모드에서는 빈 목록이 될 수 있음).
        """
        with self._lock:
            count = self._ledger.record(category)
            self._recompute()
            logger.info(
                "Interaction recorded",
                extra={
                    "request_id": get_request_id(),
                    "category": category,
                    "count": count,
                    "dominant_category": self._dominant,
                },
            )
            return self._snapshot()

    def record_recipe(self, recipe_id: str) -> FeedView:
        """레시피 단위 상호작용 ("Cook This") 기록

        Raises:
            RecipeNotFoundException: 카탈로그에 없는 레시피 ID인 경우
        """
        recipe = self._catalog.get_recipe(recipe_id)
        return self.record_interaction(recipe.category)

    def set_mode(self, inclusive: bool) -> FeedView:
        """모드 변경 (선호 카테고리는 영향 없음)"""
        with self._lock:
            self._mode = FeedMode.from_flag(inclusive)
            self._visible = compute_visible(
                self._catalog, self._dominant, self._mode
            )
            logger.info(
                "Feed mode changed",
                extra={
                    "request_id": get_request_id(),
                    "mode": self._mode.value,
                    "state": self.state.value,
                },
            )
            return self._snapshot()

    def reset(self) -> FeedView:
        """원장만 초기화 (모드는 유지)"""
        with self._lock:
            self._ledger.reset()
            self._recompute()
            logger.info(
                "Session reset",
                extra={
                    "request_id": get_request_id(),
                    "mode": self._mode.value,
                },
            )
            return self._snapshot()

    def view(self) -> FeedView:
        """현재 상태 스냅샷 (상태 변경 없음)"""
        with self._lock:
            return self._snapshot()

    def _recompute(self) -> None:
        self._dominant = resolve_dominant(self._ledger.snapshot())
        self._visible = compute_visible(self._catalog, self._dominant, self._mode)

    def _snapshot(self) -> FeedView:
        state = self.state
        return FeedView(
            state=state,
            mode=self._mode,
            dominant_category=self._dominant,
            counts=dict(self._ledger.snapshot()),
            items=self._visible,
            explanation=explanation_for(state),
        )

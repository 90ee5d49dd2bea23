"""Personalization 도메인 모듈

세션 중 수집한 암묵적 신호(카테고리 상호작용)로 레시피 노출 순서와
범위를 결정합니다.

구조:
    - ledger.py: 카테고리별 상호작용 원장
    - resolver.py: 선호 카테고리 결정 (순수 함수)
    - policy.py: 노출 정책 (순수 함수)
    - session.py: 세션 컨트롤러 (상태 소유, 트리거, 락)
    - types.py: 모드/상태/설명 타입, FeedView
    - schemas.py: Pydantic 요청/응답 스키마
    - router.py: 피드 API 엔드포인트
"""

from app.domains.personalization.ledger import InteractionLedger
from app.domains.personalization.policy import compute_visible, is_recommended
from app.domains.personalization.resolver import resolve_dominant
from app.domains.personalization.router import router
from app.domains.personalization.session import (
    SessionController,
    explanation_for,
    resolve_state,
)
from app.domains.personalization.types import (
    ExplanationVariant,
    FeedMode,
    FeedView,
    SessionState,
)

__all__ = [
    "InteractionLedger",
    "resolve_dominant",
    "compute_visible",
    "is_recommended",
    "SessionController",
    "resolve_state",
    "explanation_for",
    "ExplanationVariant",
    "FeedMode",
    "FeedView",
    "SessionState",
    "router",
]

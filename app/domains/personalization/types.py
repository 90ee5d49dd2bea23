"""개인화 관련 타입 정의"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.domains.recipes.models import Recipe


class FeedMode(str, Enum):
    """노출 정책 모드

    Attributes:
        INCLUSIVE: 전체를 보여주되 선호 카테고리를 앞으로 정렬
        EXCLUSIVE: 선호 카테고리만 노출
    """

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"

    @classmethod
    def from_flag(cls, inclusive: bool) -> "FeedMode":
        return cls.INCLUSIVE if inclusive else cls.EXCLUSIVE

    @property
    def is_inclusive(self) -> bool:
        return self is FeedMode.INCLUSIVE


class SessionState(str, Enum):
    """세션 상태"""

    COLD_START = "cold_start"
    CONVERGED_INCLUSIVE = "converged_inclusive"
    CONVERGED_EXCLUSIVE = "converged_exclusive"


class ExplanationVariant(str, Enum):
    """설명 문구 종류

    Attributes:
        NONE: 콜드 스타트 (설명 없음)
        HIGHLIGHTING: 선호 카테고리를 강조하되 숨기지 않음
        HIDING: 다른 카테고리를 숨김
    """

    NONE = "none"
    HIGHLIGHTING = "highlighting"
    HIDING = "hiding"


class FeedView(BaseModel):
    """한 시점의 세션 상태 스냅샷

    모든 필드는 동일한 원장 스냅샷에서 계산됩니다.
    """

    model_config = ConfigDict(frozen=True)

    state: SessionState
    mode: FeedMode
    dominant_category: Optional[str]
    counts: dict[str, int]
    items: tuple[Recipe, ...]
    explanation: ExplanationVariant

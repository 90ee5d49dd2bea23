"""개인화 도메인 스키마 정의"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.domains.personalization.policy import is_recommended
from app.domains.personalization.types import (
    ExplanationVariant,
    FeedMode,
    FeedView,
    SessionState,
)
from app.domains.recipes.schemas import RecipeResponse

EXPLANATION_MESSAGES: dict[ExplanationVariant, str] = {
    ExplanationVariant.HIGHLIGHTING: (
        "선호 카테고리 '{category}'을(를) 감지했습니다. "
        "일치하는 레시피를 강조하되 다른 선택지도 그대로 보여줍니다."
    ),
    ExplanationVariant.HIDING: (
        "선호 카테고리 '{category}'을(를) 감지했습니다. "
        "다른 카테고리는 숨겨졌습니다 (에코 챔버)."
    ),
}


class InteractionCreate(BaseModel):
    """상호작용 기록 요청 스키마"""

    category: str = Field(..., max_length=100, description="상호작용한 카테고리")

    @field_validator("category")
    @classmethod
    def strip_category(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("category must not be blank")
        return v


class ModeUpdate(BaseModel):
    """모드 변경 요청 스키마"""

    inclusive: bool = Field(..., description="True면 INCLUSIVE, False면 EXCLUSIVE")


class ExplanationResponse(BaseModel):
    """설명 응답 스키마"""

    variant: ExplanationVariant
    message: Optional[str] = None


class RecipeCard(RecipeResponse):
    """피드에 노출되는 레시피 카드"""

    recommended: bool = Field(default=False, description="'Best Match' 표시 여부")


class FeedResponse(BaseModel):
    """피드 응답 스키마"""

    state: SessionState
    mode: FeedMode
    inclusive: bool
    dominant_category: Optional[str] = None
    counts: dict[str, int] = Field(
        default_factory=dict, description="카테고리별 상호작용 횟수 (기록 순서)"
    )
    explanation: ExplanationResponse
    items: list[RecipeCard] = Field(default_factory=list)
    empty: bool = Field(..., description="노출할 레시피가 없는지 여부")

    @classmethod
    def from_view(cls, view: FeedView) -> "FeedResponse":
        template = EXPLANATION_MESSAGES.get(view.explanation)
        message = (
            template.format(category=view.dominant_category) if template else None
        )
        cards = [
            RecipeCard(
                **RecipeResponse.model_validate(recipe).model_dump(),
                recommended=is_recommended(
                    recipe, view.dominant_category, view.mode
                ),
            )
            for recipe in view.items
        ]
        return cls(
            state=view.state,
            mode=view.mode,
            inclusive=view.mode.is_inclusive,
            dominant_category=view.dominant_category,
            counts=dict(view.counts),
            explanation=ExplanationResponse(
                variant=view.explanation, message=message
            ),
            items=cards,
            empty=not cards,
        )

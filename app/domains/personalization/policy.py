"""노출 정책

카탈로그, 선호 카테고리, 모드로부터 노출할 레시피 순서를 계산하는
순수 함수 모음입니다.
"""

from typing import Iterable, Optional

from app.domains.personalization.types import FeedMode
from app.domains.recipes.models import Recipe


def compute_visible(
    catalog: Iterable[Recipe],
    dominant: Optional[str],
    mode: FeedMode,
) -> tuple[Recipe, ...]:
    """노출할 레시피 목록 계산

    - 콜드 스타트 (dominant 없음): 카탈로그 전체, 원래 순서 (모드 무관)
    - EXCLUSIVE: dominant 카테고리만, 카탈로그 순서 유지 (빈 결과 가능)
    - INCLUSIVE: dominant 카테고리 먼저, 나머지는 뒤에 (각 그룹 내 순서 유지)
    """
    recipes = tuple(catalog)
    if dominant is None:
        return recipes

    matches = tuple(r for r in recipes if r.category == dominant)
    if mode is FeedMode.EXCLUSIVE:
        return matches

    others = tuple(r for r in recipes if r.category != dominant)
    return matches + others


def is_recommended(
    recipe: Recipe, dominant: Optional[str], mode: FeedMode
) -> bool:
    """'Best Match' 표시 여부 (INCLUSIVE 모드의 선호 카테고리 레시피만)"""
    return (
        dominant is not None
        and mode is FeedMode.INCLUSIVE
        and recipe.category == dominant
    )

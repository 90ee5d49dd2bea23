"""노출 정책 단위 테스트"""

import pytest

from app.domains.personalization.policy import compute_visible, is_recommended
from app.domains.personalization.types import FeedMode


def _ids(recipes):
    return [r.id for r in recipes]


class TestColdStart:
    """콜드 스타트 (선호 카테고리 없음)"""

    @pytest.mark.parametrize("mode", list(FeedMode))
    def test_returns_full_catalog_in_order(self, mixed_catalog, mode):
        """모드와 무관하게 카탈로그 전체를 원래 순서로 반환"""
        visible = compute_visible(mixed_catalog, None, mode)

        assert visible == mixed_catalog.recipes

    def test_empty_catalog(self):
        """빈 카탈로그는 빈 결과"""
        assert compute_visible([], None, FeedMode.INCLUSIVE) == ()


class TestExclusiveMode:
    """EXCLUSIVE 모드"""

    def test_only_dominant_category_in_catalog_order(self, mixed_catalog):
        """선호 카테고리만, 카탈로그 순서 유지"""
        visible = compute_visible(mixed_catalog, "Italian", FeedMode.EXCLUSIVE)

        assert _ids(visible) == ["a", "c", "f"]

    @pytest.mark.parametrize("dominant", ["Italian", "Japanese", "Indian"])
    def test_equals_filtered_catalog(self, mixed_catalog, dominant):
        """결과는 정확히 category == dominant 인 아이템 집합"""
        visible = compute_visible(mixed_catalog, dominant, FeedMode.EXCLUSIVE)

        expected = [r for r in mixed_catalog if r.category == dominant]
        assert list(visible) == expected

    def test_unknown_category_yields_empty_sequence(self, mixed_catalog):
        """카탈로그에 없는 카테고리면 빈 튜플 (오류 아님)"""
        visible = compute_visible(mixed_catalog, "Korean", FeedMode.EXCLUSIVE)

        assert visible == ()


class TestInclusiveMode:
    """INCLUSIVE 모드"""

    def test_stable_partition(self, mixed_catalog):
        """선호 카테고리 먼저, 나머지는 원래 순서로 뒤에"""
        visible = compute_visible(mixed_catalog, "Japanese", FeedMode.INCLUSIVE)

        assert _ids(visible) == ["b", "e", "a", "c", "d", "f"]

    @pytest.mark.parametrize("dominant", ["Italian", "Japanese", "Indian", "Korean"])
    def test_is_permutation_of_catalog(self, mixed_catalog, dominant):
        """결과는 카탈로그 전체의 순열"""
        visible = compute_visible(mixed_catalog, dominant, FeedMode.INCLUSIVE)

        assert sorted(_ids(visible)) == sorted(_ids(mixed_catalog))
        matches = [r for r in mixed_catalog if r.category == dominant]
        others = [r for r in mixed_catalog if r.category != dominant]
        assert list(visible) == matches + others

    def test_unknown_category_keeps_catalog_order(self, mixed_catalog):
        """일치 항목이 없으면 카탈로그 순서 그대로"""
        visible = compute_visible(mixed_catalog, "Korean", FeedMode.INCLUSIVE)

        assert visible == mixed_catalog.recipes


class TestIsRecommended:
    """'Best Match' 표시 여부"""

    def test_only_in_inclusive_mode_for_dominant(self, small_catalog):
        filipino, _, japanese = small_catalog.recipes

        assert is_recommended(filipino, "Filipino", FeedMode.INCLUSIVE)
        assert not is_recommended(japanese, "Filipino", FeedMode.INCLUSIVE)
        assert not is_recommended(filipino, "Filipino", FeedMode.EXCLUSIVE)
        assert not is_recommended(filipino, None, FeedMode.INCLUSIVE)

"""카테고리별 상호작용 원장"""

from types import MappingProxyType
from typing import Mapping


class InteractionLedger:
    """카테고리 → 상호작용 횟수

    카운트는 record로만 증가하고 reset으로만 초기화됩니다.
    삽입 순서를 보존하며, 재계산은 호출 측(SessionController) 책임입니다.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def record(self, category: str) -> int:
        """카테고리 카운트를 1 증가시키고 새 카운트를 반환"""
        count = self._counts.get(category, 0) + 1
        self._counts[category] = count
        return count

    def reset(self) -> None:
        self._counts.clear()

    def snapshot(self) -> Mapping[str, int]:
        """현재 카운트의 읽기 전용 복사본 (삽입 순서 유지)"""
        return MappingProxyType(dict(self._counts))

    def count(self, category: str) -> int:
        return self._counts.get(category, 0)

    @property
    def is_empty(self) -> bool:
        return not self._counts

    def __len__(self) -> int:
        return len(self._counts)

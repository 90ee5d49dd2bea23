"""선호 카테고리 결정"""

from typing import Mapping, Optional


def resolve_dominant(counts: Mapping[str, int]) -> Optional[str]:
    """가장 많이 상호작용한 카테고리 반환

    삽입 순서대로 순회하며 카운트가 엄격히 클 때만 교체하므로,
    동점이면 먼저 기록된 카테고리가 유지됩니다. 비어 있으면 None.
    """
    dominant: Optional[str] = None
    max_count = 0
    for category, count in counts.items():
        if count > max_count:
            dominant = category
            max_count = count
    return dominant

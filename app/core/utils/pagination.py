"""페이지네이션 유틸리티"""

from typing import Sequence, TypeVar

from fastapi import Query

T = TypeVar("T")


class PageParams:
    """페이지네이션 파라미터 의존성

    Example::

        @router.get("", response_model=ListAPIResponse[RecipeResponse])
        def list_recipes(page_params: PageParams = Depends()):
            page = page_params.slice(catalog.recipes)
            ...
    """

    def __init__(
        self,
        page: int = Query(1, ge=1, description="페이지 번호"),
        size: int = Query(20, ge=1, le=100, description="페이지 크기"),
    ):
        self.page = page
        self.size = size

    @property
    def skip(self) -> int:
        """오프셋 계산"""
        return (self.page - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size

    def slice(self, items: Sequence[T]) -> list[T]:
        """메모리 상의 시퀀스에서 현재 페이지만 잘라 반환"""
        return list(items[self.skip : self.skip + self.limit])

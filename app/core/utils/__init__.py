"""유틸리티 모듈"""

from app.core.utils.pagination import PageParams

__all__ = [
    "PageParams",
]

"""Core 모듈"""

from app.core.config import settings
from app.core.exceptions import (
    BadRequestException,
    BaseAPIException,
    ErrorCode,
    InternalServerException,
    NotFoundException,
)
from app.core.logging import get_logger, setup_logging

__all__ = [
    "settings",
    "ErrorCode",
    "BaseAPIException",
    "BadRequestException",
    "NotFoundException",
    "InternalServerException",
    "get_logger",
    "setup_logging",
]

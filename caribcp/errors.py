"""
Engine Exceptions.

Only programmer errors raise. Data absence (unknown country, unknown
industry, missing translation, unmatched hazard) degrades to an empty
contribution and is logged, never raised.
"""

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Engine error codes."""

    INTERNAL_ERROR = "E1000"
    INVALID_INPUT = "E1001"
    UNKNOWN_SCHEME = "E1002"
    UNKNOWN_RATING = "E1003"
    CATALOG_ERROR = "E2000"


class CaribcpError(Exception):
    """Base exception for the pre-fill engine."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class InvalidInputError(CaribcpError):
    """A caller passed a value of the wrong shape or an unknown code."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_INPUT,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code=code, details=details)


class CatalogError(CaribcpError):
    """A catalog backend failed (raised by remote stores, not in-memory ones)."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, code=ErrorCode.CATALOG_ERROR, details=details)

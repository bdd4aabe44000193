"""
Error Taxonomy - Consistent error codes across the application.

Usage:
    from dataops.config.errors import ErrorCode, InvalidSequenceError

    raise InvalidSequenceError(ErrorCode.SEQUENCE_MISSING, "sequence is None")
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error responses."""

    # Sequence errors
    SEQUENCE_MISSING = "SEQUENCE_MISSING"
    SEQUENCE_INVALID_TYPE = "SEQUENCE_INVALID_TYPE"
    SEQUENCE_INVALID_ELEMENT = "SEQUENCE_INVALID_ELEMENT"
    SEQUENCE_TOO_LONG = "SEQUENCE_TOO_LONG"

    # Key errors
    KEY_INVALID = "KEY_INVALID"

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"


class DataOpsError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to API-friendly dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class InvalidSequenceError(DataOpsError, ValueError):
    """Sequence argument is absent, of the wrong kind, or holds a bad element."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(code, message, details)


class InvalidKeyError(DataOpsError, ValueError):
    """Search key is not a fixed-width integer."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.KEY_INVALID, message, details)

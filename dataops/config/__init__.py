"""
Configuration - Application settings, error taxonomy, and logging setup.
"""

from .errors import (
    DataOpsError,
    ErrorCode,
    InvalidKeyError,
    InvalidSequenceError,
)
from .log_setup import configure_logging
from .settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Errors
    "ErrorCode",
    "DataOpsError",
    "InvalidSequenceError",
    "InvalidKeyError",
    # Logging
    "configure_logging",
]

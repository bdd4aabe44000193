"""
API Routes.
"""

from . import health, operations

__all__ = ["health", "operations"]

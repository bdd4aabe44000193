"""
API Interface - FastAPI REST API over the sort/search capability.
"""

from .main import app, create_app

__all__ = ["app", "create_app"]

"""
CLI Interface - Command-line tools for dataops.

Provides commands for:
- The sort-then-search demo
- Sorting and searching ad-hoc values
- Running the API server
"""

from .main import app, main

__all__ = ["app", "main"]

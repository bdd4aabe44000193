"""
Operations Domain - One capability for sorting and searching.

This domain handles:
- The DataOperation contract clients depend on
- The adapter that backs it with concrete sort/search algorithms
"""

from .adapter import DataOperationAdapter
from .contracts import DataOperation

__all__ = [
    "DataOperation",
    "DataOperationAdapter",
]

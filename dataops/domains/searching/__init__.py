"""
Searching Domain - Lookups over ascending integer sequences.

This domain handles:
- Binary search with a not-found sentinel
- Probe tracing
"""

from dataops.domains.sequence import NOT_FOUND

from .binary_search import BinarySearcher
from .contracts import Searcher
from .models import SearchTrace

__all__ = [
    "NOT_FOUND",
    "Searcher",
    "SearchTrace",
    "BinarySearcher",
]

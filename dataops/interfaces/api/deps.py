"""
API Dependencies - Dependency injection for FastAPI routes.

Provides singleton instances of the operation objects. None of them keeps
per-request state, so one instance serves every request.
"""

from __future__ import annotations

from functools import lru_cache

from dataops.domains.operations import DataOperation, DataOperationAdapter
from dataops.domains.searching import BinarySearcher
from dataops.domains.sorting import QuickSorter


@lru_cache
def get_data_operation() -> DataOperation:
    """Get the sort/search capability singleton."""
    return DataOperationAdapter()


@lru_cache
def get_sort_tracer() -> QuickSorter:
    """Get the sorter used when work counters are requested."""
    return QuickSorter()


@lru_cache
def get_search_tracer() -> BinarySearcher:
    """Get the searcher used when a probe path is requested."""
    return BinarySearcher()

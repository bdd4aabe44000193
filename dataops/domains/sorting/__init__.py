"""
Sorting Domain - In-place ascending sort of integer sequences.

This domain handles:
- Partition-exchange sorting (last-element pivot)
- Work counters for algorithm fidelity checks
"""

from .contracts import Sorter
from .models import SortTrace
from .quicksort import QuickSorter

__all__ = [
    "Sorter",
    "SortTrace",
    "QuickSorter",
]

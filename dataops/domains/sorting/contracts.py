"""
Sorting Contracts - Interfaces for sorting domain.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from dataops.domains.sequence import MutableIntSequence


@runtime_checkable
class Sorter(Protocol):
    """Contract for in-place sort implementations."""

    def sort(self, sequence: MutableIntSequence) -> None:
        """Reorder ``sequence`` in place into ascending order."""
        ...

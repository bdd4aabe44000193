"""
Searching Contracts - Interfaces for searching domain.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from dataops.domains.sequence import IntSequence


@runtime_checkable
class Searcher(Protocol):
    """Contract for lookups over ascending integer sequences."""

    def search(self, sequence: IntSequence, key: int) -> int:
        """
        Locate ``key`` in ``sequence``.

        Args:
            sequence: Integers sorted ascending (not verified)
            key: Value to find

        Returns:
            Index of an element equal to ``key``, or NOT_FOUND
        """
        ...

"""
Quick Sorter - In-place partition-exchange sort.

Features:
- Lomuto partitioning with the last element of each subrange as pivot
- Left subrange fully sorted before the right one
- Optional work counters (comparisons, swaps, partitions, depth)

Already-sorted and reverse-sorted input take the quadratic path; the pivot
rule is fixed so swap counts stay reproducible.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dataops.domains.sequence import MutableIntSequence, ensure_sortable

from .models import SortTrace

logger = logging.getLogger(__name__)

__all__ = ["QuickSorter"]


@dataclass
class _Counters:
    comparisons: int = 0
    swaps: int = 0
    partitions: int = 0
    max_depth: int = 0


class QuickSorter:
    """
    Partition-exchange sort over a mutable integer sequence.

    Not stable: equal elements may change relative order.

    Example:
        >>> data = [5, 3, 8, 4, 9, 1, 2]
        >>> QuickSorter().sort(data)
        >>> data
        [1, 2, 3, 4, 5, 8, 9]
    """

    def sort(self, sequence: MutableIntSequence) -> None:
        """
        Sort ``sequence`` in place into ascending order.

        Args:
            sequence: Caller-owned integers; mutated, never retained

        Raises:
            InvalidSequenceError: If the sequence is missing, immutable, or
                holds a non-integer (nothing is mutated in that case)
        """
        ensure_sortable(sequence)
        self._run(sequence, _Counters())

    def sort_traced(self, sequence: MutableIntSequence) -> SortTrace:
        """
        Sort ``sequence`` exactly as :meth:`sort` does and report the work done.

        Returns:
            Counters for this call
        """
        ensure_sortable(sequence)
        counters = _Counters()
        self._run(sequence, counters)
        return SortTrace(
            length=len(sequence),
            comparisons=counters.comparisons,
            swaps=counters.swaps,
            partitions=counters.partitions,
            max_depth=counters.max_depth,
        )

    def _run(self, sequence: MutableIntSequence, counters: _Counters) -> None:
        # LIFO work list; pushing right before left reproduces the
        # recursive left-then-right visiting order.
        pending = [(0, len(sequence) - 1, 1)]
        while pending:
            low, high, depth = pending.pop()
            if low >= high:
                continue
            counters.max_depth = max(counters.max_depth, depth)
            boundary = self._partition(sequence, low, high, counters)
            pending.append((boundary + 1, high, depth + 1))
            pending.append((low, boundary - 1, depth + 1))

        logger.debug(
            "Sorted %d elements: comparisons=%d swaps=%d partitions=%d depth=%d",
            len(sequence),
            counters.comparisons,
            counters.swaps,
            counters.partitions,
            counters.max_depth,
        )

    @staticmethod
    def _partition(
        sequence: MutableIntSequence,
        low: int,
        high: int,
        counters: _Counters,
    ) -> int:
        """Place ``sequence[high]`` at its final index and return that index."""
        pivot = sequence[high]
        i = low - 1
        for j in range(low, high):
            counters.comparisons += 1
            if sequence[j] <= pivot:
                i += 1
                sequence[i], sequence[j] = sequence[j], sequence[i]
                counters.swaps += 1
        sequence[i + 1], sequence[high] = sequence[high], sequence[i + 1]
        counters.swaps += 1
        counters.partitions += 1
        return i + 1

"""
Data Operation Adapter - Binds a sorter and a searcher to one capability.

The two delegates share no structure; the adapter only forwards calls, so
either can be replaced without touching call sites.
"""

from __future__ import annotations

import logging

from dataops.domains.searching import BinarySearcher, Searcher
from dataops.domains.sequence import IntSequence, MutableIntSequence
from dataops.domains.sorting import QuickSorter, Sorter

logger = logging.getLogger(__name__)

__all__ = ["DataOperationAdapter"]


class DataOperationAdapter:
    """
    DataOperation backed by a Sorter and a Searcher.

    Example:
        >>> op = DataOperationAdapter()
        >>> data = [5, 3, 8, 4, 9, 1, 2]
        >>> op.sort(data)
        >>> op.search(data, 4)
        3
    """

    def __init__(
        self,
        sorter: Sorter | None = None,
        searcher: Searcher | None = None,
    ) -> None:
        """
        Initialize adapter.

        Args:
            sorter: Sort delegate (defaults to QuickSorter)
            searcher: Search delegate (defaults to BinarySearcher)
        """
        self._sorter = sorter if sorter is not None else QuickSorter()
        self._searcher = searcher if searcher is not None else BinarySearcher()

        logger.debug(
            "DataOperationAdapter bound: sorter=%s searcher=%s",
            type(self._sorter).__name__,
            type(self._searcher).__name__,
        )

    @property
    def sorter(self) -> Sorter:
        return self._sorter

    @property
    def searcher(self) -> Searcher:
        return self._searcher

    def sort(self, sequence: MutableIntSequence) -> None:
        """Sort ``sequence`` in place via the sort delegate."""
        self._sorter.sort(sequence)

    def search(self, sequence: IntSequence, key: int) -> int:
        """Look up ``key`` via the search delegate; ``sequence`` must be ascending."""
        return self._searcher.search(sequence, key)

"""
Binary Searcher - Logarithmic lookup over ascending integer sequences.

The sequence must already be sorted ascending. That precondition is the
caller's; it is not checked, and the sequence is never reordered here.
Unsorted input gives an unspecified index or NOT_FOUND.
"""

from __future__ import annotations

import logging

from dataops.config.errors import ErrorCode, InvalidSequenceError
from dataops.domains.sequence import NOT_FOUND, IntSequence, ensure_key, ensure_searchable

from .models import SearchTrace

logger = logging.getLogger(__name__)

__all__ = ["BinarySearcher"]


class BinarySearcher:
    """
    Closed-interval binary search.

    With repeated keys, the index returned is whichever equal element the
    probe sequence reaches first.

    Example:
        >>> BinarySearcher().search([1, 2, 3, 4, 5, 8, 9], 4)
        3
    """

    def search(self, sequence: IntSequence, key: int) -> int:
        """
        Find ``key`` in ``sequence``.

        Args:
            sequence: Integers sorted ascending
            key: Value to look up

        Returns:
            Index of a matching element, or NOT_FOUND (-1)

        Raises:
            InvalidSequenceError: If the sequence is missing, not indexable,
                or a probed element cannot be compared with an integer
            InvalidKeyError: If the key is not a 64-bit signed integer
        """
        return self._run(sequence, key, None)

    def search_traced(self, sequence: IntSequence, key: int) -> SearchTrace:
        """Same lookup as :meth:`search`, recording every probed midpoint."""
        probes: list[int] = []
        index = self._run(sequence, key, probes)
        return SearchTrace(key=int(key), index=index, probes=probes)

    @staticmethod
    def _run(sequence: IntSequence, key: int, probes: list[int] | None) -> int:
        ensure_searchable(sequence)
        ensure_key(key)

        low, high = 0, len(sequence) - 1
        while low <= high:
            mid = low + (high - low) // 2
            if probes is not None:
                probes.append(mid)

            value = sequence[mid]
            if value == key:
                logger.debug("Found key=%d at index=%d among %d", key, mid, len(sequence))
                return mid
            try:
                below = value < key
            except TypeError as e:
                raise InvalidSequenceError(
                    ErrorCode.SEQUENCE_INVALID_ELEMENT,
                    f"element at index {mid} cannot be compared with an integer: {value!r}",
                    {"index": mid, "value": repr(value)},
                ) from e
            if below:
                low = mid + 1
            else:
                high = mid - 1

        logger.debug("Key=%d not found among %d", key, len(sequence))
        return NOT_FOUND

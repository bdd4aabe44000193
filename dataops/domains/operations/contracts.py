"""
Operations Contracts - The sort/search capability seen by clients.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from dataops.domains.sequence import IntSequence, MutableIntSequence


@runtime_checkable
class DataOperation(Protocol):
    """
    Contract for anything offering in-place sort and sorted-input search.

    Clients program against this and stay unaware of the algorithms behind it.
    """

    def sort(self, sequence: MutableIntSequence) -> None:
        """Reorder ``sequence`` in place into ascending order."""
        ...

    def search(self, sequence: IntSequence, key: int) -> int:
        """Return the index of ``key`` in ascending ``sequence``, or NOT_FOUND."""
        ...

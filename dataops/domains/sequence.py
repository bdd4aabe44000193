"""
Sequence Rules - Argument checks shared by the sorting and searching domains.

A sequence is a mutable, ordered run of signed 64-bit integers owned by the
caller. ``list`` and ``array.array`` with a signed integer typecode qualify.
"""

from __future__ import annotations

import array
import numbers
from collections.abc import MutableSequence, Sequence
from typing import Any

from dataops.config.errors import ErrorCode, InvalidKeyError, InvalidSequenceError

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "NOT_FOUND",
    "IntSequence",
    "MutableIntSequence",
    "ensure_key",
    "ensure_searchable",
    "ensure_sortable",
    "is_fixed_width_int",
]

NOT_FOUND = -1

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

SIGNED_TYPECODES = frozenset("bhilq")

IntSequence = Sequence[int]
MutableIntSequence = MutableSequence[int]


def is_fixed_width_int(value: Any) -> bool:
    """True for integral values in the signed 64-bit range (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return False
    return INT64_MIN <= value <= INT64_MAX


def _ensure_present(sequence: Any) -> None:
    if sequence is None:
        raise InvalidSequenceError(ErrorCode.SEQUENCE_MISSING, "sequence is required, got None")


def _reject_type(sequence: Any, expected: str) -> InvalidSequenceError:
    return InvalidSequenceError(
        ErrorCode.SEQUENCE_INVALID_TYPE,
        f"expected {expected}, got {type(sequence).__name__}",
        {"type": type(sequence).__name__},
    )


def ensure_sortable(sequence: Any) -> None:
    """
    Reject anything ``sort`` cannot reorder in place.

    Every element is checked before the caller mutates anything, so a
    rejected sequence is left untouched.

    Raises:
        InvalidSequenceError: None, immutable or non-integer input
    """
    _ensure_present(sequence)

    if isinstance(sequence, array.array):
        if sequence.typecode not in SIGNED_TYPECODES:
            raise _reject_type(sequence, "a signed integer array")
        return

    if isinstance(sequence, (str, bytes, bytearray)) or not isinstance(sequence, MutableSequence):
        raise _reject_type(sequence, "a mutable sequence of integers")

    for index, value in enumerate(sequence):
        if not is_fixed_width_int(value):
            raise InvalidSequenceError(
                ErrorCode.SEQUENCE_INVALID_ELEMENT,
                f"element at index {index} is not a 64-bit signed integer: {value!r}",
                {"index": index, "value": repr(value)},
            )


def ensure_searchable(sequence: Any) -> None:
    """
    Reject anything ``search`` cannot index.

    Elements are not scanned: that would cost as much as a linear search.

    Raises:
        InvalidSequenceError: None or non-sequence input
    """
    _ensure_present(sequence)

    if isinstance(sequence, array.array):
        if sequence.typecode not in SIGNED_TYPECODES:
            raise _reject_type(sequence, "a signed integer array")
        return

    if isinstance(sequence, (str, bytes, bytearray)) or not isinstance(sequence, Sequence):
        raise _reject_type(sequence, "a sequence of integers")


def ensure_key(key: Any) -> None:
    """Raise InvalidKeyError unless ``key`` is a 64-bit signed integer."""
    if not is_fixed_width_int(key):
        raise InvalidKeyError(
            f"key must be a 64-bit signed integer, got {key!r}",
            {"key": repr(key)},
        )

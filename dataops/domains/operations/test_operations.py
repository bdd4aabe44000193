"""
Tests for the DataOperation contract and its adapter.
"""

from __future__ import annotations

import random
from unittest.mock import MagicMock

import pytest

from dataops.config.errors import InvalidKeyError, InvalidSequenceError
from dataops.domains.searching import NOT_FOUND, BinarySearcher
from dataops.domains.sorting import QuickSorter

from .adapter import DataOperationAdapter
from .contracts import DataOperation


@pytest.fixture
def op() -> DataOperationAdapter:
    """Create an adapter with the default delegates."""
    return DataOperationAdapter()


class BuiltinSorter:
    """Stand-in sorter built on the builtin sort."""

    def sort(self, sequence: list[int]) -> None:
        sequence.sort()


class LinearSearcher:
    """Stand-in searcher scanning left to right."""

    def search(self, sequence: list[int], key: int) -> int:
        for index, value in enumerate(sequence):
            if value == key:
                return index
        return NOT_FOUND


# --- Contract Tests ---


def test_adapter_satisfies_contract(op: DataOperationAdapter) -> None:
    """Test the adapter is a DataOperation."""
    assert isinstance(op, DataOperation)


def test_adapter_default_delegates(op: DataOperationAdapter) -> None:
    """Test defaults are the quick sorter and binary searcher."""
    assert isinstance(op.sorter, QuickSorter)
    assert isinstance(op.searcher, BinarySearcher)


def test_adapter_reuses_delegates(op: DataOperationAdapter) -> None:
    """Test delegates are created once and kept."""
    sorter, searcher = op.sorter, op.searcher
    op.sort([2, 1])
    op.search([1, 2], 2)
    assert op.sorter is sorter
    assert op.searcher is searcher


# --- End-to-end Scenario ---


def test_sample_scenario(op: DataOperationAdapter) -> None:
    """Test sort then search on the shipped example."""
    data = [5, 3, 8, 4, 9, 1, 2]

    op.sort(data)

    assert data == [1, 2, 3, 4, 5, 8, 9]
    assert op.search(data, 4) == 3
    assert op.search(data, 6) == NOT_FOUND


def test_boundaries(op: DataOperationAdapter) -> None:
    """Test empty and single-element behaviour through the adapter."""
    empty: list[int] = []
    op.sort(empty)
    assert empty == []
    assert op.search(empty, 3) == NOT_FOUND

    single = [5]
    op.sort(single)
    assert single == [5]
    assert op.search(single, 5) == 0
    assert op.search(single, 4) == NOT_FOUND


# --- Delegation Tests ---


def test_sort_forwards_same_object() -> None:
    """Test sort passes the caller's sequence through unchanged."""
    sorter = MagicMock()
    sorter.sort.return_value = None
    op = DataOperationAdapter(sorter=sorter)
    data = [3, 2, 1]

    assert op.sort(data) is None
    sorter.sort.assert_called_once()
    assert sorter.sort.call_args.args[0] is data


def test_search_forwards_arguments_and_result() -> None:
    """Test search returns exactly what the delegate returns."""
    searcher = MagicMock()
    searcher.search.return_value = 17
    op = DataOperationAdapter(searcher=searcher)
    data = [1, 2, 3]

    assert op.search(data, 2) == 17
    searcher.search.assert_called_once_with(data, 2)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_adapter_matches_direct_calls(op: DataOperationAdapter, seed: int) -> None:
    """Test adapter results equal calling the algorithms directly."""
    rng = random.Random(seed)
    sorter, searcher = QuickSorter(), BinarySearcher()

    for _ in range(20):
        data = [rng.randint(-30, 30) for _ in range(rng.randint(0, 40))]
        via_adapter, direct = list(data), list(data)

        op.sort(via_adapter)
        sorter.sort(direct)
        assert via_adapter == direct

        for key in range(-32, 33):
            assert op.search(via_adapter, key) == searcher.search(direct, key)


def test_substituted_delegates_need_no_call_site_change() -> None:
    """Test swapping algorithms keeps client code working."""

    def client(operation: DataOperation) -> tuple[list[int], int]:
        data = [5, 3, 8, 4, 9, 1, 2]
        operation.sort(data)
        return data, operation.search(data, 8)

    default = client(DataOperationAdapter())
    swapped = client(DataOperationAdapter(BuiltinSorter(), LinearSearcher()))

    assert default == swapped == ([1, 2, 3, 4, 5, 8, 9], 5)


# --- Error Surface Tests ---


def test_adapter_propagates_delegate_errors(op: DataOperationAdapter) -> None:
    """Test invalid arguments surface with the delegates' errors."""
    with pytest.raises(InvalidSequenceError):
        op.sort(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidSequenceError):
        op.search(None, 1)  # type: ignore[arg-type]
    with pytest.raises(InvalidKeyError):
        op.search([1, 2], "2")  # type: ignore[arg-type]

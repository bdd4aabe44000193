"""
Operation Routes - Sort and search endpoints.

Request payloads are copied into fresh lists, so no sequence outlives or is
shared across requests.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from dataops.config import DataOpsError, ErrorCode, get_settings
from dataops.domains.operations import DataOperation
from dataops.domains.searching import BinarySearcher
from dataops.domains.sequence import INT64_MAX, INT64_MIN
from dataops.domains.sorting import QuickSorter, SortTrace
from dataops.interfaces.api.deps import get_data_operation, get_search_tracer, get_sort_tracer

router = APIRouter()

Int64 = Annotated[int, Field(strict=True, ge=INT64_MIN, le=INT64_MAX)]


class SortRequest(BaseModel):
    """Sort request body."""

    data: list[Int64] = Field(..., description="Integers to sort")
    trace: bool = Field(default=False, description="Return work counters")


class SortResponse(BaseModel):
    """Sort response."""

    data: list[int]
    length: int
    trace: SortTrace | None = None


class SearchRequest(BaseModel):
    """Search request body."""

    data: list[Int64] = Field(..., description="Integers sorted ascending (not verified)")
    key: Int64
    trace: bool = Field(default=False, description="Return probed indices")


class SearchResponse(BaseModel):
    """Search response."""

    key: int
    index: int
    found: bool
    probes: list[int] | None = None


def _check_length(data: list[int]) -> None:
    limit = get_settings().api_max_length
    if len(data) > limit:
        raise DataOpsError(
            ErrorCode.SEQUENCE_TOO_LONG,
            f"sequence length {len(data)} exceeds limit {limit}",
            {"length": len(data), "limit": limit},
        )


@router.post("/sort", response_model=SortResponse)
def sort(
    request: SortRequest,
    op: DataOperation = Depends(get_data_operation),
    tracer: QuickSorter = Depends(get_sort_tracer),
):
    """
    Sort integers ascending.

    - **data**: Signed 64-bit integers
    - **trace**: Include comparison/swap/partition counters
    """
    _check_length(request.data)
    data = list(request.data)

    trace = None
    if request.trace:
        trace = tracer.sort_traced(data)
    else:
        op.sort(data)

    return SortResponse(data=data, length=len(data), trace=trace)


@router.post("/search", response_model=SearchResponse)
def search(
    request: SearchRequest,
    op: DataOperation = Depends(get_data_operation),
    tracer: BinarySearcher = Depends(get_search_tracer),
):
    """
    Binary-search integers that are already sorted ascending.

    Unsorted data is not rejected; the result is then unspecified.

    - **data**: Signed 64-bit integers, ascending
    - **key**: Value to look up
    - **trace**: Include the probed indices
    """
    _check_length(request.data)
    data = list(request.data)

    probes = None
    if request.trace:
        result = tracer.search_traced(data, request.key)
        index, probes = result.index, result.probes
    else:
        index = op.search(data, request.key)

    return SearchResponse(key=request.key, index=index, found=index >= 0, probes=probes)

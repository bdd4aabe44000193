"""
Sorting Models - Data types for sorting domain.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SortTrace(BaseModel):
    """Work counters recorded while sorting one sequence."""

    length: int = Field(..., ge=0)
    comparisons: int = Field(default=0, ge=0)  # element vs. pivot
    swaps: int = Field(default=0, ge=0)  # self-swaps and pivot placement included
    partitions: int = Field(default=0, ge=0)
    max_depth: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

"""
Searching Models - Data types for searching domain.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from dataops.domains.sequence import NOT_FOUND


class SearchTrace(BaseModel):
    """Outcome of one lookup with the midpoints it probed, in order."""

    key: int
    index: int = NOT_FOUND
    probes: list[int] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def found(self) -> bool:
        """Whether the lookup landed on a matching element."""
        return self.index != NOT_FOUND

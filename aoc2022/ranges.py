"""Inclusive integer ranges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InclusiveRange:
    """The integers from ``lower`` to ``upper``, both ends included."""

    lower: int
    upper: int

    def contains(self, i: int) -> bool:
        return self.lower <= i <= self.upper

    def intersection(self, other: Optional["InclusiveRange"]) -> Optional["InclusiveRange"]:
        """Return the overlap with ``other``, or None when there is none."""
        if other is None:
            return None
        lower = max(self.lower, other.lower)
        upper = min(self.upper, other.upper)
        if lower > upper:
            return None
        return InclusiveRange(lower, upper)

    def is_subset_of(self, other: Optional["InclusiveRange"]) -> bool:
        overlap = self.intersection(other)
        return overlap is not None and overlap == self
"""Day 4: camp cleanup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .core import Context, Day, Solution
from .ranges import InclusiveRange


def _parse_range(text: str) -> InclusiveRange:
    bounds = text.split("-")
    if len(bounds) < 2:
        raise ValueError(f"not a range: {text!r}")
    return InclusiveRange(int(bounds[0]), int(bounds[1]))


@dataclass
class Problem04:
    """Pairs of section assignments, one pair per elf couple."""

    pairs: list[tuple[InclusiveRange, InclusiveRange]] = field(default_factory=list)


class Solution04(Solution):
    @staticmethod
    def _pairs(problem: Any) -> list[tuple[InclusiveRange, InclusiveRange]]:
        if not isinstance(problem, Problem04):
            raise TypeError(f"expected Problem04, got {type(problem).__name__}")
        return problem.pairs

    def p1(self, ctx: Context, problem: Any) -> int:
        """Count pairs where one assignment fully contains the other."""
        return sum(
            1
            for first, second in self._pairs(problem)
            if first.is_subset_of(second) or second.is_subset_of(first)
        )

    def p2(self, ctx: Context, problem: Any) -> int:
        """Count pairs whose assignments overlap at all."""
        return sum(
            1
            for first, second in self._pairs(problem)
            if first.intersection(second) is not None
        )


class Day04(Day):
    def build_problem(self, ctx: Context) -> Problem04:
        pairs = []
        for line in ctx.split_lines():
            parts = line.split(",")
            if len(parts) < 2:
                raise ValueError(f"line does not hold a pair: {line!r}")
            pairs.append((_parse_range(parts[0]), _parse_range(parts[1])))
        return Problem04(pairs)

    def build_solution(self, ctx: Context, problem: Any) -> Solution04:
        return Solution04()
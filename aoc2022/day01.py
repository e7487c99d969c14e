"""Day 1: calorie counting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .core import Context, Day, Solution


@dataclass
class Problem01:
    """Rations carried by each elf."""

    elves: list[list[int]] = field(default_factory=list)


@dataclass
class Solution01(Solution):
    """Holds each elf's total calories, sorted ascending."""

    ration_totals: list[int] = field(default_factory=list)

    def p1(self, ctx: Context, problem: Any) -> int:
        if not self.ration_totals:
            raise ValueError("no elves to rank")
        return self.ration_totals[-1]

    def p2(self, ctx: Context, problem: Any) -> int:
        if len(self.ration_totals) < 3:
            raise ValueError("fewer than three elves")
        return sum(self.ration_totals[-3:])


class Day01(Day):
    def build_problem(self, ctx: Context) -> Problem01:
        elves: list[list[int]] = []
        rations: list[int] = []
        for line in ctx.split_lines():
            if line:
                rations.append(int(line))
            else:
                elves.append(rations)
                rations = []
        elves.append(rations)
        return Problem01(elves)

    def build_solution(self, ctx: Context, problem: Any) -> Solution01:
        if not isinstance(problem, Problem01):
            raise TypeError(f"expected Problem01, got {type(problem).__name__}")
        return Solution01(sorted(sum(rations) for rations in problem.elves))
"""Day 3: rucksack reorganisation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .core import Context, Day, Solution


def get_priority(ch: str) -> int:
    """a-z map to 1-26, A-Z to 27-52, anything else to 0."""
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 1
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 27
    return 0


@dataclass
class Problem03:
    rucksacks: list[str] = field(default_factory=list)


class Solution03(Solution):
    @staticmethod
    def _rucksacks(problem: Any) -> list[str]:
        if not isinstance(problem, Problem03):
            raise TypeError(f"expected Problem03, got {type(problem).__name__}")
        return problem.rucksacks

    def p1(self, ctx: Context, problem: Any) -> int:
        total = 0
        for rucksack in self._rucksacks(problem):
            halfway = len(rucksack) // 2
            common = set(rucksack[:halfway]) & set(rucksack[halfway:])
            total += sum(get_priority(ch) for ch in common)
        return total

    def p2(self, ctx: Context, problem: Any) -> int:
        rucksacks = self._rucksacks(problem)
        total = 0
        for start in range(0, len(rucksacks), 3):
            group = rucksacks[start:start + 3]
            if len(group) < 3:
                raise ValueError("rucksack count is not a multiple of three")
            first, second, third = (set(r) for r in group)
            common = first & second & third
            if len(common) != 1:
                raise ValueError("Expected common")
            total += get_priority(common.pop())
        return total


class Day03(Day):
    def build_problem(self, ctx: Context) -> Problem03:
        return Problem03(ctx.split_lines())

    def build_solution(self, ctx: Context, problem: Any) -> Solution03:
        return Solution03()
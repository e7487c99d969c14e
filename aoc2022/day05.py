"""Day 5: supply stacks."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from .core import Context, Day, Solution

_LAYER_CRATE = re.compile(r"\[\w\]", re.ASCII)
_NUMBERS_LINE = re.compile(r"^\s*(\d+\s+)*\d*\s*$", re.ASCII)
_CRANE_MOVE = re.compile(r"move (\d+) from (\d+) to (\d+)")


def parse_layer(s: str) -> list[str]:
    """Read one drawing row into crate labels by column, '' where there is none."""
    crates = [""] * ((len(s) + 1) // 4)
    for match in _LAYER_CRATE.finditer(s):
        crates[match.start() // 4] = s[match.start() + 1:match.end() - 1]
    return crates


def is_last_line(s: str) -> bool:
    """Whether the row is the line of stack numbers under the drawing."""
    return _NUMBERS_LINE.search(s) is not None


@dataclass(frozen=True)
class CraneMove:
    """Move ``amount`` crates from stack ``src`` to ``dest`` (both zero-based)."""

    amount: int
    src: int
    dest: int


def parse_crane_move(s: str) -> CraneMove:
    match = _CRANE_MOVE.search(s)
    if match is None:
        raise ValueError(f"not a crane move: {s!r}")
    amount, src, dest = (int(group) for group in match.groups())
    return CraneMove(amount, src - 1, dest - 1)


@dataclass
class CargoShip:
    """Stacks of crates, each listed bottom to top."""

    towers: list[list[str]] = field(default_factory=list)

    def clone(self) -> "CargoShip":
        return CargoShip([list(tower) for tower in self.towers])

    def move(self, move: Optional[CraneMove], crane9001: bool) -> None:
        """Apply a move; the older crane lifts one crate at a time, reversing their order."""
        if move is None:
            raise ValueError("no move given")
        for index in (move.src, move.dest):
            if not 0 <= index < len(self.towers):
                raise IndexError(f"no stack {index + 1}")
        source = self.towers[move.src]
        split = len(source) - move.amount
        if split < 0:
            raise ValueError(
                f"cannot move {move.amount} crates from a stack of {len(source)}"
            )
        crates = source[split:]
        del source[split:]
        if not crane9001:
            crates.reverse()
        self.towers[move.dest].extend(crates)


@dataclass
class Problem05:
    ship: CargoShip = field(default_factory=CargoShip)
    moves: list[CraneMove] = field(default_factory=list)


class Solution05(Solution):
    @staticmethod
    def _problem(problem: Any) -> Problem05:
        if not isinstance(problem, Problem05):
            raise TypeError(f"expected Problem05, got {type(problem).__name__}")
        return problem

    @staticmethod
    def _solve(problem: Problem05, crane9001: bool) -> str:
        ship = problem.ship.clone()
        for move in problem.moves:
            try:
                ship.move(move, crane9001)
            except ValueError:
                continue
        return "".join(tower[-1] if tower else "" for tower in ship.towers)

    def p1(self, ctx: Context, problem: Any) -> str:
        return self._solve(self._problem(problem), False)

    def p2(self, ctx: Context, problem: Any) -> str:
        return self._solve(self._problem(problem), True)


class Day05(Day):
    def build_problem(self, ctx: Context) -> Problem05:
        lines = iter(ctx.split_lines())
        layers: list[list[str]] = []
        for line in lines:
            if line == "":
                break
            if is_last_line(line):
                continue
            layers.append(parse_layer(line))
        if not layers:
            raise ValueError("no crate drawing in input")

        towers = []
        for x in range(len(layers[-1])):
            tower = []
            for row in reversed(layers):
                if x >= len(row):
                    raise ValueError(f"drawing row too short for stack {x + 1}")
                crate = row[x]
                if not crate:
                    break
                tower.append(crate)
            towers.append(tower)

        moves = []
        for line in lines:
            try:
                moves.append(parse_crane_move(line))
            except ValueError:
                break
        return Problem05(CargoShip(towers), moves)

    def build_solution(self, ctx: Context, problem: Any) -> Solution05:
        return Solution05()
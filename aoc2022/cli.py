"""Command line entry point: solve one day's puzzle from an input file."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .core import Context, Day
from .day01 import Day01
from .day02 import Day02
from .day03 import Day03
from .day04 import Day04
from .day05 import Day05

_DAYS: list[Optional[type[Day]]] = [None, Day01, Day02, Day03, Day04, Day05]


def get_day(d: int) -> Optional[Day]:
    """Return the solver for day ``d``; day 0 has none."""
    if not 0 <= d < len(_DAYS):
        raise IndexError(f"no puzzle for day {d}")
    day_class = _DAYS[d]
    return day_class() if day_class is not None else None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2022")
    parser.add_argument("day", type=int, help="Day to solve")
    parser.add_argument("file_path", help="Path to input file")
    parser.add_argument("-p", "--part", type=int, help="Which part of the day to solve")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    ctx = Context().on_day(args.day)
    ctx.with_input_from_path(args.file_path)
    day = get_day(ctx.day)
    if day is None:
        raise ValueError(f"no puzzle for day {ctx.day}")
    problem = day.build_problem(ctx)
    solution = day.build_solution(ctx, problem)
    if args.part is None or args.part == 1:
        print(f"Part 1: {solution.p1(ctx, problem)}")
    if args.part is None or args.part == 2:
        print(f"Part 2: {solution.p2(ctx, problem)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
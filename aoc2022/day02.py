"""Day 2: rock paper scissors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .core import Context, Day, Solution


class Hand(IntEnum):
    """A hand shape, valued by its score."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3


class Outcome(IntEnum):
    """A round's outcome, valued by its score."""

    LOSE = 0
    DRAW = 3
    WIN = 6


_SYMBOLS = {
    "A": Hand.ROCK,
    "X": Hand.ROCK,
    "B": Hand.PAPER,
    "Y": Hand.PAPER,
    "C": Hand.SCISSORS,
    "Z": Hand.SCISSORS,
}

_BEATS = {Hand.ROCK: Hand.SCISSORS, Hand.PAPER: Hand.ROCK, Hand.SCISSORS: Hand.PAPER}
_BEATEN_BY = {loser: winner for winner, loser in _BEATS.items()}


def sym_to_hand(sym: str) -> Hand:
    try:
        return _SYMBOLS[sym]
    except KeyError:
        raise ValueError(f"unknown hand symbol {sym!r}") from None


def game_result(opponent: Hand, own: Hand) -> Outcome:
    if opponent == own:
        return Outcome.DRAW
    if _BEATS[own] == opponent:
        return Outcome.WIN
    return Outcome.LOSE


def hand_that_wins_against(hand: Hand) -> Hand:
    return _BEATEN_BY[Hand(hand)]


def hand_that_loses_to(hand: Hand) -> Hand:
    return _BEATS[Hand(hand)]


@dataclass
class Problem02:
    """Pairs of (opponent symbol, second column symbol)."""

    plays: list[tuple[str, str]] = field(default_factory=list)


class Solution02(Solution):
    @staticmethod
    def _plays(problem: Any) -> list[tuple[str, str]]:
        if not isinstance(problem, Problem02):
            raise TypeError(f"expected Problem02, got {type(problem).__name__}")
        return problem.plays

    def p1(self, ctx: Context, problem: Any) -> int:
        score = 0
        for theirs, mine in self._plays(problem):
            opponent = sym_to_hand(theirs)
            own = sym_to_hand(mine)
            score += game_result(opponent, own) + own
        return score

    def p2(self, ctx: Context, problem: Any) -> int:
        score = 0
        for theirs, wanted in self._plays(problem):
            opponent = sym_to_hand(theirs)
            if wanted == "X":
                score += Outcome.LOSE + hand_that_loses_to(opponent)
            elif wanted == "Y":
                score += Outcome.DRAW + opponent
            elif wanted == "Z":
                score += Outcome.WIN + hand_that_wins_against(opponent)
        return score


class Day02(Day):
    def build_problem(self, ctx: Context) -> Problem02:
        plays = []
        for line in ctx.split_lines():
            if len(line) < 3:
                raise ValueError(f"line too short for a play: {line!r}")
            plays.append((line[0], line[2]))
        return Problem02(plays)

    def build_solution(self, ctx: Context, problem: Any) -> Solution02:
        return Solution02()
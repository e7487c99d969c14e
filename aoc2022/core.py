"""Shared pieces for the daily puzzles: input context, line splitting and interfaces."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from os import PathLike
from typing import IO, Any, Union

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(s: str) -> list[str]:
    """Split text on CRLF, CR or LF, keeping empty pieces (including a trailing one)."""
    return _LINE_BREAK.split(s)


@dataclass
class Context:
    """Run settings and raw puzzle input for one day."""

    day: int = 0
    testing: bool = False
    text: str = ""

    def on_day(self, day: int) -> "Context":
        self.day = day
        return self

    def with_testing(self, testing: bool) -> "Context":
        self.testing = testing
        return self

    def with_input(self, text: str) -> "Context":
        self.text = text
        return self

    def with_input_from_file(self, f: IO[Any]) -> "Context":
        """Read the whole of an open file as the puzzle input."""
        data = f.read()
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8")
        self.text = data
        return self

    def with_input_from_path(self, path: Union[str, "PathLike[str]"]) -> "Context":
        """Read the file at ``path`` as the puzzle input; OSError propagates."""
        with open(path, "rb") as f:
            return self.with_input_from_file(f)

    def split_lines(self) -> list[str]:
        return split_lines(self.text)


class Solution(ABC):
    """Answers both parts of a day's puzzle."""

    @abstractmethod
    def p1(self, ctx: Context, problem: Any) -> Any:
        """Answer part 1."""

    @abstractmethod
    def p2(self, ctx: Context, problem: Any) -> Any:
        """Answer part 2."""


class Day(ABC):
    """Parses a day's input into a problem and prepares its solution."""

    @abstractmethod
    def build_problem(self, ctx: Context) -> Any:
        """Parse the context's input into a problem."""

    @abstractmethod
    def build_solution(self, ctx: Context, problem: Any) -> Solution:
        """Create the solution for a parsed problem."""
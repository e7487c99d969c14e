"""Advent of Code 2022 puzzle solutions for days 1 to 5, with a command line entry point."""

__version__ = "0.1.0"
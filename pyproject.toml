[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2022"
version = "0.1.0"
description = "Solutions to the first five days of Advent of Code 2022, run from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc2022"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2022 = "aoc2022.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2022"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

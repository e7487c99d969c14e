# aoc2022

Solutions to days 1 to 5 of Advent of Code 2022.

## Installation

```
pip install .
```

## Usage

Pass the day number and the path to your puzzle input:

```
aoc2022 1 input.txt
```

Both parts are solved and printed, one line each:

```
Part 1: <answer>
Part 2: <answer>
```

Use `-p` / `--part` to solve only one part:

```
aoc2022 5 input.txt --part 2
```

The same command can be run as `python -m aoc2022.cli`.

Only days 1 to 5 are solved. Asking for any other day raises an error. A file that cannot be read raises the `OSError` from opening it.

## Days

| Day | Module   | Puzzle                  |
|-----|----------|-------------------------|
| 1   | `day01`  | Calorie Counting        |
| 2   | `day02`  | Rock Paper Scissors     |
| 3   | `day03`  | Rucksack Reorganization |
| 4   | `day04`  | Camp Cleanup            |
| 5   | `day05`  | Supply Stacks           |

## Using it as a library

Each day module has a `Day` subclass, such as `Day01`. It builds a problem from a `Context`. It then builds a solution whose `p1` and `p2` methods return the answers:

```python
from aoc2022.core import Context
from aoc2022.day01 import Day01

ctx = Context().on_day(1).with_input("1000\n2000\n\n4000")
day = Day01()
problem = day.build_problem(ctx)
solution = day.build_solution(ctx, problem)
print(solution.p1(ctx, problem))  # 4000
```

`Context` can also read its input with `with_input_from_path(path)` or `with_input_from_file(f)`. `aoc2022.core.split_lines` splits text on CRLF, CR or LF.

`aoc2022.cli.get_day(n)` returns a new `Day` for day `n`. For day 0 it returns `None`, and for a day outside 0 to 5 it raises `IndexError`.

`aoc2022.ranges.InclusiveRange` is an integer range that includes both ends. It has `contains`, `intersection` and `is_subset_of`.

## Running the tests

```
pip install .[test]
pytest
```
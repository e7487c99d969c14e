import pytest

from aoc2022.core import Context
from aoc2022.day05 import (
    CargoShip,
    CraneMove,
    Day05,
    Problem05,
    Solution05,
    is_last_line,
    parse_crane_move,
    parse_layer,
)

EXAMPLE = "\n".join(
    [
        "    [D]    ",
        "[N] [C]    ",
        "[Z] [M] [P]",
        " 1   2   3 ",
        "",
        "move 1 from 2 to 1",
        "move 3 from 1 to 3",
        "move 2 from 2 to 1",
        "move 1 from 1 to 2",
    ]
)


def _solve(text):
    ctx = Context().with_input(text)
    day = Day05()
    problem = day.build_problem(ctx)
    return ctx, problem, day.build_solution(ctx, problem)


def test_parse_full_layer():
    assert parse_layer("[Z] [M] [P]") == ["Z", "M", "P"]


def test_parse_partial_layer():
    assert parse_layer("    [D]    ") == ["", "D", ""]


def test_is_last_line():
    assert is_last_line(" 1   2   3 ")
    assert not is_last_line("[Z] [M] [P]")
    assert not is_last_line("move 1 from 2 to 1")


def test_parse_crane_move_is_zero_based():
    move = parse_crane_move("move 3 from 1 to 3")
    assert move.amount == 3
    assert (move.src + 1, move.dest + 1) == (1, 3)


def test_parse_crane_move_rejects_other_text():
    with pytest.raises(ValueError):
        parse_crane_move("")


def test_old_crane_reverses_lifted_crates():
    ship = CargoShip([["A", "B", "C"], []])
    ship.move(CraneMove(2, 0, 1), False)
    assert ship.towers == [["A"], ["C", "B"]]


def test_new_crane_keeps_order():
    ship = CargoShip([["A", "B", "C"], []])
    ship.move(CraneMove(2, 0, 1), True)
    assert ship.towers == [["A"], ["B", "C"]]


def test_move_too_many_raises():
    ship = CargoShip([["A"], []])
    with pytest.raises(ValueError):
        ship.move(CraneMove(2, 0, 1), False)
    assert ship.towers == [["A"], []]


def test_move_none_raises():
    with pytest.raises(ValueError):
        CargoShip([["A"]]).move(None, True)


def test_move_unknown_stack_raises():
    with pytest.raises(IndexError):
        CargoShip([["A"]]).move(CraneMove(1, 0, 5), True)


def test_clone_is_independent():
    ship = CargoShip([["A", "B"], ["C"]])
    copy = ship.clone()
    copy.move(CraneMove(1, 0, 1), False)
    assert ship.towers == [["A", "B"], ["C"]]
    assert copy.towers == [["A"], ["C", "B"]]


def test_build_problem_towers_and_moves():
    _, problem, _ = _solve(EXAMPLE)
    assert problem.ship.towers == [["Z", "N"], ["M", "C", "D"], ["P"]]
    assert len(problem.moves) == len(EXAMPLE.split("\n")) - 5
    assert problem.moves[0] == parse_crane_move("move 1 from 2 to 1")


def test_example_part1():
    ctx, problem, solution = _solve(EXAMPLE)
    assert solution.p1(ctx, problem) == "CMZ"


def test_example_part2():
    ctx, problem, solution = _solve(EXAMPLE)
    assert solution.p2(ctx, problem) == "MCD"


def test_trailing_newline_is_ignored():
    ctx, problem, solution = _solve(EXAMPLE + "\n")
    ctx2, problem2, solution2 = _solve(EXAMPLE)
    assert problem.moves == problem2.moves
    assert solution.p1(ctx, problem) == solution2.p1(ctx2, problem2)


def test_solving_does_not_change_problem():
    ctx, problem, solution = _solve(EXAMPLE)
    before = problem.ship.clone()
    solution.p1(ctx, problem)
    solution.p2(ctx, problem)
    assert problem.ship == before


def test_impossible_move_is_skipped():
    text = "[A] [B]\n 1   2 \n\nmove 5 from 1 to 2"
    ctx, problem, solution = _solve(text)
    assert solution.p1(ctx, problem) == "AB"


def test_empty_drawing_raises():
    with pytest.raises(ValueError):
        Day05().build_problem(Context().with_input(""))


def test_wrong_problem_type_raises():
    with pytest.raises(TypeError):
        Solution05().p1(Context(), object())
    with pytest.raises(TypeError):
        Solution05().p2(Context(), Problem05)
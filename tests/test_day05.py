import pytest

from aoc2022.solutions.day05 import CratesInfo, parse_input, part_one, part_two

EXAMPLE = (
    "    [D]    \n"
    "[N] [C]    \n"
    "[Z] [M] [P]\n"
    " 1   2   3 \n"
    "\n"
    "move 1 from 2 to 1\n"
    "move 3 from 1 to 3\n"
    "move 2 from 2 to 1\n"
    "move 1 from 1 to 2\n"
)


def test_part_one():
    assert part_one(EXAMPLE) == "CMZ"


def test_part_two():
    assert part_two(EXAMPLE) == "MCD"


def test_parse_input_stacks_and_actions():
    info = parse_input(EXAMPLE)
    assert info == CratesInfo(
        stacks=[["Z", "N"], ["M", "C", "D"], ["P"]],
        actions=[(1, 2, 1), (3, 1, 3), (2, 2, 1), (1, 1, 2)],
    )


def test_example_without_trailing_newline():
    assert part_one(EXAMPLE.rstrip("\n")) == "CMZ"


def test_moving_more_than_stack_holds_raises():
    text = "[A]    \n[B] [C]\n 1   2 \n\nmove 3 from 2 to 1\n"
    with pytest.raises(IndexError):
        part_one(text)


def test_missing_moves_section_raises():
    with pytest.raises(ValueError):
        parse_input("[A]\n 1 ")
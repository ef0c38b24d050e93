"""Day 2: rock paper scissors."""

from __future__ import annotations

import sys

from aoc2022.day import Day
from aoc2022.inputs import read_file
from aoc2022.runner import run_part

DAY = Day(2)

_STATE_VALUES = {"A": 1, "X": 1, "B": 2, "Y": 2, "C": 3, "Z": 3}


def _score(opponent: int, own: int) -> int:
    diff = abs(own - opponent)
    if diff == 0:
        return own + 3
    if diff == 1:
        return own + 6 if own > opponent else own
    if diff == 2:
        return own + 6 if own < opponent else own
    return 0


def _parse(text: str) -> list[tuple[int, int]]:
    return [(_STATE_VALUES.get(line[0], 0), _STATE_VALUES.get(line[2], 0)) for line in text.splitlines()]


def _choose(opponent: int, outcome: int) -> tuple[int, int]:
    match (opponent, outcome):
        case (1, 1):
            return 1, 3
        case (1, 3):
            return 1, 2
        case (3, 1):
            return 3, 2
        case (3, 3):
            return 3, 1
        case (_, 2):
            return opponent, opponent
        case _:
            return opponent, outcome


def part_one(text: str) -> int | None:
    return sum(_score(opponent, own) for opponent, own in _parse(text))


def part_two(text: str) -> int | None:
    return sum(_score(*_choose(opponent, outcome)) for opponent, outcome in _parse(text))


def main(argv=None) -> None:
    args = [sys.argv[0], *(sys.argv[1:] if argv is None else argv)]
    text = read_file("inputs", DAY)
    for part, func in ((1, part_one), (2, part_two)):
        run_part(func, text, DAY, part, args)


if __name__ == "__main__":
    main()
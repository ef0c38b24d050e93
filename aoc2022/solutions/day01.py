"""Day 1: calorie counting."""

from __future__ import annotations

import sys

from aoc2022.day import Day
from aoc2022.inputs import read_file
from aoc2022.runner import run_part

DAY = Day(1)


def parse_input(text: str) -> list[int]:
    """Return each elf's total calories, largest first."""
    totals = (sum(int(item) for item in block.splitlines()) for block in text.split("\n\n"))
    return sorted(totals, reverse=True)


def part_one(text: str) -> int | None:
    return parse_input(text)[0]


def part_two(text: str) -> int | None:
    top = parse_input(text)[:3]
    if len(top) < 3:
        raise ValueError("expected at least three elves")
    return sum(top)


def main(argv=None) -> None:
    args = [sys.argv[0], *(sys.argv[1:] if argv is None else argv)]
    text = read_file("inputs", DAY)
    for part, func in ((1, part_one), (2, part_two)):
        run_part(func, text, DAY, part, args)


if __name__ == "__main__":
    main()
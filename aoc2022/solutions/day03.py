"""Day 3: rucksack reorganization."""

from __future__ import annotations

import sys

from aoc2022.day import Day
from aoc2022.inputs import read_file
from aoc2022.runner import run_part

DAY = Day(3)


def _priority(item: str) -> int:
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise ValueError(f"unexpected item {item!r}")


def _first_common(first: str, *others: str) -> str:
    for item in first:
        if all(item in other for other in others):
            return item
    raise ValueError("no item shared by all groups")


def part_one(text: str) -> int | None:
    return sum(
        _priority(_first_common(sack[: len(sack) // 2], sack[len(sack) // 2 :]))
        for sack in text.splitlines()
    )


def part_two(text: str) -> int | None:
    lines = iter(text.splitlines())
    return sum(_priority(_first_common(*group)) for group in zip(lines, lines, lines))


def main(argv=None) -> None:
    args = [sys.argv[0], *(sys.argv[1:] if argv is None else argv)]
    text = read_file("inputs", DAY)
    for part, func in ((1, part_one), (2, part_two)):
        run_part(func, text, DAY, part, args)


if __name__ == "__main__":
    main()
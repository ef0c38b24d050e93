"""Day 4: camp cleanup."""

from __future__ import annotations

import sys

from aoc2022.day import Day
from aoc2022.inputs import read_file
from aoc2022.runner import run_part

DAY = Day(4)

Interval = tuple[int, int]


def _is_subinterval(interval: Interval, sub: Interval) -> bool:
    return interval[0] <= sub[0] and interval[1] >= sub[1]


def _is_overlapping(a: Interval, b: Interval) -> bool:
    return (a[0] <= b[0] <= a[1]) or (a[0] <= b[1] <= a[1])


def _parse_interval(text: str) -> Interval:
    start, end = text.split("-")[:2]
    return int(start), int(end)


def parse_line(line: str) -> tuple[Interval, Interval]:
    """Parse ``"a-b,c-d"`` into two intervals."""
    first, second = line.split(",")[:2]
    return _parse_interval(first), _parse_interval(second)


def part_one(text: str) -> int | None:
    return sum(
        _is_subinterval(a, b) or _is_subinterval(b, a)
        for a, b in map(parse_line, text.splitlines())
    )


def part_two(text: str) -> int | None:
    return sum(
        _is_overlapping(a, b) or _is_overlapping(b, a)
        for a, b in map(parse_line, text.splitlines())
    )


def main(argv=None) -> None:
    args = [sys.argv[0], *(sys.argv[1:] if argv is None else argv)]
    text = read_file("inputs", DAY)
    for part, func in ((1, part_one), (2, part_two)):
        run_part(func, text, DAY, part, args)


if __name__ == "__main__":
    main()
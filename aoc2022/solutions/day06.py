"""Day 6: tuning trouble."""

from __future__ import annotations

import sys
from collections import deque

from aoc2022.day import Day
from aoc2022.inputs import read_file
from aoc2022.runner import run_part

DAY = Day(6)


def idx_of_n_consecutive_chars(text: str, n: int) -> int | None:
    """Position just after the first run of ``n`` distinct lowercase letters.

    Characters other than ASCII lowercase letters are skipped but still
    counted in the position. Returns None when there is no such run.
    """
    window: deque[str] = deque()
    seen: set[str] = set()

    for index, char in enumerate(text):
        if not "a" <= char <= "z":
            continue
        if char in seen:
            while window:
                first = window.popleft()
                seen.discard(first)
                if first == char:
                    break
        window.append(char)
        seen.add(char)
        if len(window) == n:
            return index + 1
    return None


def part_one(text: str) -> int | None:
    return idx_of_n_consecutive_chars(text, 4)


def part_two(text: str) -> int | None:
    return idx_of_n_consecutive_chars(text, 14)


def main(argv=None) -> None:
    args = [sys.argv[0], *(sys.argv[1:] if argv is None else argv)]
    text = read_file("inputs", DAY)
    for part, func in ((1, part_one), (2, part_two)):
        run_part(func, text, DAY, part, args)


if __name__ == "__main__":
    main()
"""Day 5: supply stacks."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from aoc2022.day import Day
from aoc2022.inputs import read_file
from aoc2022.runner import run_part

DAY = Day(5)

Action = tuple[int, int, int]


@dataclass
class CratesInfo:
    """Crate stacks (bottom first) and the moves to apply to them."""

    stacks: list[list[str]] = field(default_factory=list)
    actions: list[Action] = field(default_factory=list)


def _parse_action(line: str) -> Action:
    numbers = [int(word) for word in line.split(" ") if word.isdigit()]
    if len(numbers) < 3:
        raise ValueError(f"malformed move: {line!r}")
    amount, source, target = numbers[:3]
    return amount, source, target


def parse_input(text: str) -> CratesInfo:
    """Parse the crate drawing and the list of moves."""
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("expected a crate drawing and a list of moves")
    crates_str, actions_str = sections[0], sections[1]

    actions = [_parse_action(line) for line in actions_str.splitlines()]

    drawing = crates_str.splitlines()
    if not drawing:
        raise ValueError("empty crate drawing")
    *layers, numbering = drawing
    stacks_num = (len(numbering) + 1) // 4

    stacks: list[list[str]] = []
    for column in range(stacks_num):
        stack: list[str] = []
        for layer in reversed(layers):
            crate = layer[4 * column + 1]
            if crate == " ":
                break
            stack.append(crate)
        stacks.append(stack)

    return CratesInfo(stacks=stacks, actions=actions)


def _pop_many(stack: list[str], amount: int) -> list[str]:
    return [stack.pop() for _ in range(amount)]


def _rearrange(text: str, keep_order: bool) -> str:
    info = parse_input(text)
    for amount, source, target in info.actions:
        moved = _pop_many(info.stacks[source - 1], amount)
        if keep_order:
            moved.reverse()
        info.stacks[target - 1].extend(moved)
    return "".join(stack.pop() for stack in info.stacks)


def part_one(text: str) -> str | None:
    return _rearrange(text, keep_order=False)


def part_two(text: str) -> str | None:
    return _rearrange(text, keep_order=True)


def main(argv=None) -> None:
    args = [sys.argv[0], *(sys.argv[1:] if argv is None else argv)]
    text = read_file("inputs", DAY)
    for part, func in ((1, part_one), (2, part_two)):
        run_part(func, text, DAY, part, args)


if __name__ == "__main__":
    main()
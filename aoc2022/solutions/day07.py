"""Day 7: no space left on device."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Union

from aoc2022.day import Day
from aoc2022.inputs import read_file
from aoc2022.runner import run_part

DAY = Day(7)


@dataclass
class FileNode:
    """A file with a size."""

    name: str
    size: int


@dataclass(eq=False)
class DirectoryNode:
    """A directory whose size is the total of its children, computed once."""

    name: str
    parent: DirectoryNode | None = field(default=None, repr=False)
    children: list[Union[FileNode, DirectoryNode]] = field(default_factory=list, repr=False)
    cached_size: int | None = None

    def add_child(self, child: FileNode | DirectoryNode) -> None:
        """Append a child; directories get this directory as their parent."""
        if isinstance(child, DirectoryNode):
            child.parent = self
        self.children.append(child)

    def size(self) -> int:
        """Total size of everything below this directory (cached after first call)."""
        if self.cached_size is None:
            self.cached_size = sum(
                child.size() if isinstance(child, DirectoryNode) else child.size
                for child in self.children
            )
        return self.cached_size

    def find_directory(self, name: str) -> DirectoryNode | None:
        """The child directory called ``name``, if any."""
        return next(
            (
                child
                for child in self.children
                if isinstance(child, DirectoryNode) and child.name == name
            ),
            None,
        )


def _follow_session(text: str) -> DirectoryNode | None:
    """Follow the ``cd`` commands of a terminal session.

    Returns the directory the session ends in, or None as soon as it
    changes into a directory that is not known.
    """
    root = DirectoryNode("root")
    current = root

    for line in text.splitlines():
        if not line.startswith("$"):
            continue
        parts = line.split(" ")
        if len(parts) < 3 or parts[1] != "cd":
            continue
        target = parts[2]
        if target == "/":
            current = root
        elif target == "..":
            if current.parent is None:
                raise ValueError("cannot leave the root directory")
            current = current.parent
        else:
            child = current.find_directory(target)
            if child is None:
                return None
            current = child

    return current


def part_one(text: str) -> int | None:
    _follow_session(text)
    return None


def part_two(text: str) -> int | None:
    _follow_session(text)
    return None


def main(argv=None) -> None:
    args = [sys.argv[0], *(sys.argv[1:] if argv is None else argv)]
    text = read_file("inputs", DAY)
    for part, func in ((1, part_one), (2, part_two)):
        run_part(func, text, DAY, part, args)


if __name__ == "__main__":
    main()
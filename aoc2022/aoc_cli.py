"""Thin wrapper around the external ``aoc`` command-line tool."""

from __future__ import annotations

import os
import re
import subprocess
from typing import Sequence

from aoc2022.day import Day

_YEAR_TEXT = re.compile(r"\+?[0-9]+")
_MAX_YEAR = 65535


class AocCommandError(Exception):
    """Raised when the ``aoc`` tool cannot be used."""

    default_message = "aoc-cli failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class CommandNotFound(AocCommandError):
    """The ``aoc`` tool is not installed."""

    default_message = "aoc-cli is not present in environment."


class CommandNotCallable(AocCommandError):
    """The ``aoc`` tool could not be started."""

    default_message = "aoc-cli could not be called."


class BadExitStatus(AocCommandError):
    """The ``aoc`` tool ran but exited with a non-zero status."""

    default_message = "aoc-cli exited with a non-zero status."

    def __init__(self, output: subprocess.CompletedProcess) -> None:
        super().__init__()
        self.output = output


def get_input_path(day: Day) -> str:
    """Path of the puzzle input file for ``day``."""
    return f"data/inputs/{day}.txt"


def get_puzzle_path(day: Day) -> str:
    """Path of the puzzle description file for ``day``."""
    return f"data/puzzles/{day}.md"


def _get_year() -> int | None:
    raw = os.environ.get("AOC_YEAR")
    if raw is None or not _YEAR_TEXT.fullmatch(raw):
        return None
    year = int(raw)
    return year if year <= _MAX_YEAR else None


def build_args(command: str, args: Sequence[str], day: Day) -> list[str]:
    """Assemble the argument list for an ``aoc`` invocation."""
    cmd_args = list(args)
    year = _get_year()
    if year is not None:
        cmd_args += ["--year", str(year)]
    cmd_args += ["--day", str(day), command]
    return cmd_args


def _call_aoc_cli(args: Sequence[str]) -> subprocess.CompletedProcess:
    try:
        completed = subprocess.run(["aoc", *args])
    except OSError:
        raise CommandNotCallable() from None
    if completed.returncode != 0:
        raise BadExitStatus(completed)
    return completed


def check() -> None:
    """Raise :class:`CommandNotFound` unless the ``aoc`` tool can be run."""
    try:
        subprocess.run(["aoc", "-V"], capture_output=True)
    except OSError:
        raise CommandNotFound() from None


def read(day: Day) -> subprocess.CompletedProcess:
    """Show the puzzle description for ``day``."""
    args = build_args(
        "read",
        ["--description-only", "--puzzle-file", get_puzzle_path(day)],
        day,
    )
    return _call_aoc_cli(args)


def download(day: Day) -> subprocess.CompletedProcess:
    """Download the input and puzzle description for ``day``."""
    input_path = get_input_path(day)
    puzzle_path = get_puzzle_path(day)
    args = build_args(
        "download",
        ["--overwrite", "--input-file", input_path, "--puzzle-file", puzzle_path],
        day,
    )
    completed = _call_aoc_cli(args)
    print("---")
    print(f'🎄 Successfully wrote input to "{input_path}".')
    print(f'🎄 Successfully wrote puzzle to "{puzzle_path}".')
    return completed


def submit(day: Day, part: int, result: str) -> subprocess.CompletedProcess:
    """Submit ``result`` as the answer to ``part`` of ``day``."""
    # The submit command takes the part and answer after the subcommand.
    args = build_args("submit", [], day)
    args += [str(part), str(result)]
    return _call_aoc_cli(args)
"""Reading puzzle data files from the working directory."""

from __future__ import annotations

from pathlib import Path

from aoc2022.day import Day

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"


def _as_day(day: Day | int) -> Day:
    return day if isinstance(day, Day) else Day(day)


def _data_path(folder: str, filename: str) -> Path:
    return Path.cwd() / "data" / folder / filename


def read_file(folder: str, day: Day | int) -> str:
    """Read ``data/<folder>/<day>.txt`` relative to the working directory."""
    return _data_path(folder, f"{_as_day(day)}.txt").read_text(encoding="utf-8")


def read_file_part(folder: str, day: Day | int, part: int) -> str:
    """Read ``data/<folder>/<day>-<part>.txt`` relative to the working directory."""
    return _data_path(folder, f"{_as_day(day)}-{part}.txt").read_text(encoding="utf-8")
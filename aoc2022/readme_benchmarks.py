"""Keeping the benchmark table in the README up to date."""

from __future__ import annotations

from pathlib import Path

from aoc2022.run_multi import get_path_for_bin
from aoc2022.timings import Timings

MARKER = "<!--- benchmarking table --->"


class ReadmeError(ValueError):
    """Raised when the README has no usable benchmark table markers."""


def locate_table(readme: str) -> tuple[int, int]:
    """Return the start and end offsets of the marked table in ``readme``."""
    positions = []
    start = readme.find(MARKER)
    while start != -1:
        positions.append(start)
        start = readme.find(MARKER, start + len(MARKER))

    if len(positions) > 2:
        raise ReadmeError("too many occurrences of marker in README.")
    if not positions:
        raise ReadmeError("Could not find table start position.")
    return positions[0], positions[-1] + len(MARKER)


def construct_table(prefix: str, timings: Timings, total_millis: float) -> str:
    """Render the benchmark table, markers included."""
    lines = [
        MARKER,
        f"{prefix} Benchmarks",
        "",
        "| Day | Part 1 | Part 2 |",
        "| :---: | :---: | :---:  |",
    ]
    for timing in timings.data:
        part_1 = timing.part_1 if timing.part_1 is not None else "-"
        part_2 = timing.part_2 if timing.part_2 is not None else "-"
        lines.append(
            f"| [Day {timing.day.value}]({get_path_for_bin(timing.day)}) "
            f"| `{part_1}` | `{part_2}` |"
        )
    lines += ["", f"**Total: {total_millis:.2f}ms**", MARKER]
    return "\n".join(lines)


def update_content(text: str, timings: Timings, total_millis: float) -> str:
    """Return ``text`` with its benchmark table replaced."""
    start, end = locate_table(text)
    table = construct_table("##", timings, total_millis)
    return text[:start] + table + text[end:]


def update(timings: Timings, path: str | Path = "README.md") -> None:
    """Rewrite the benchmark table in the README file at ``path``."""
    readme_path = Path(path)
    readme = readme_path.read_bytes().decode("utf-8", errors="replace")
    readme = update_content(readme, timings, timings.total_millis())
    readme_path.write_text(readme, encoding="utf-8")
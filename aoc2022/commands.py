"""Handlers for the project's subcommands."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from aoc2022 import aoc_cli, readme_benchmarks
from aoc2022.day import Day, all_days
from aoc2022.run_multi import get_path_for_bin, run_multi
from aoc2022.timings import Timings

_AOC_MISSING = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)

MODULE_TEMPLATE = '''"""Solution for day %DAY_NUMBER%."""

from __future__ import annotations

import sys

from aoc2022.day import Day
from aoc2022.inputs import read_file
from aoc2022.runner import run_part

DAY = Day(%DAY_NUMBER%)


def part_one(text):
    return None


def part_two(text):
    return None


def main(argv=None):
    args = [sys.argv[0], *(sys.argv[1:] if argv is None else argv)]
    text = read_file("inputs", DAY)
    for part, func in ((1, part_one), (2, part_two)):
        run_part(func, text, DAY, part, args)


if __name__ == "__main__":
    main()
'''


def _fail(message: str) -> None:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def _require_aoc() -> None:
    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        _fail(_AOC_MISSING)


def handle_all(is_release: bool) -> None:
    """Run every day's solution."""
    run_multi(set(all_days()), is_release, False)


def handle_download(day: Day) -> None:
    """Download the input and puzzle description for ``day``."""
    _require_aoc()
    try:
        aoc_cli.download(day)
    except aoc_cli.AocCommandError as exc:
        _fail(f"failed to call aoc-cli: {exc}")


def handle_read(day: Day) -> None:
    """Show the puzzle description for ``day``."""
    _require_aoc()
    try:
        aoc_cli.read(day)
    except aoc_cli.AocCommandError as exc:
        _fail(f"failed to call aoc-cli: {exc}")


def _touch(path: str, label: str) -> None:
    try:
        with open(path, "a", encoding="utf-8"):
            pass
    except OSError as exc:
        _fail(f"Failed to create {label} file: {exc}")
    print(f'Created empty {label} file "{path}"')


def handle_scaffold(day: Day) -> None:
    """Create the solution module and empty data files for ``day``."""
    module_path = get_path_for_bin(day)
    input_path = f"data/inputs/{day}.txt"
    example_path = f"data/examples/{day}.txt"

    try:
        module_file = open(module_path, "x", encoding="utf-8")
    except OSError as exc:
        _fail(f"Failed to create module file: {exc}")

    with module_file:
        try:
            module_file.write(MODULE_TEMPLATE.replace("%DAY_NUMBER%", str(day.value)))
        except OSError as exc:
            _fail(f"Failed to write module contents: {exc}")
    print(f'Created module file "{module_path}"')

    _touch(input_path, "input")
    _touch(example_path, "example")

    print("---")
    print(f"🎄 Type `python -m aoc2022.cli solve {day}` to run your solution.")


def handle_solve(
    day: Day, release: bool, dhat: bool, submit_part: int | None
) -> int:
    """Run the solution for ``day`` in a child process and return its exit status.

    ``release`` and ``dhat`` select build profiles and have no effect here.
    """
    cmd = [sys.executable, "-m", f"aoc2022.solutions.day{day}"]
    if submit_part is not None:
        cmd += ["--submit", str(submit_part)]
    return subprocess.run(cmd).returncode


def handle_time(day: Day | None, run_all: bool, store: bool) -> None:
    """Benchmark solutions, optionally storing results and updating the README."""
    stored_timings = Timings.read_from_file()

    if day is not None:
        days_to_run = {day}
    elif run_all:
        days_to_run = set(all_days())
    else:
        days_to_run = {d for d in all_days() if not stored_timings.is_day_complete(d)}

    timings = run_multi(days_to_run, True, True) or Timings()

    if not store:
        return

    merged = stored_timings.merge(timings)
    merged.store_file()

    print()
    try:
        readme_benchmarks.update(merged, Path("README.md"))
    except (OSError, readme_benchmarks.ReadmeError):
        print("Failed to store updated benchmarks.", file=sys.stderr)
    else:
        print("Stored updated benchmarks.")
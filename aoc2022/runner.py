"""Running, timing and reporting solution parts."""

from __future__ import annotations

import copy
import re
import subprocess
import sys
import time
from typing import Any, Callable, Sequence

from aoc2022 import aoc_cli
from aoc2022.day import Day
from aoc2022.inputs import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET

_NANOS_PER_SECOND = 1_000_000_000
_MAX_ITERATIONS = 10_000
_MIN_ITERATIONS = 10
_MAX_PART = 255
_PART_TEXT = re.compile(r"\+?[0-9]+")
_SUBMIT_USAGE = "Unexpected command-line input. Format: cargo solve 1 --submit 1"


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def run_part(
    func: Callable[[Any], Any],
    input: Any,
    day: Day,
    part: int,
    argv: Sequence[str] | None = None,
) -> None:
    """Run one part of a solution, print its result and optionally submit it."""
    argv = sys.argv if argv is None else argv
    part_str = f"Part {part}"
    result, duration, samples = run_timed(
        func, input, lambda res: print_result(res, part_str, ""), "--time" in argv
    )
    print_result(result, part_str, format_duration(duration, samples))
    if result is not None:
        try:
            submit_result(result, day, part, argv)
        except aoc_cli.AocCommandError as exc:
            print(f"failed to call aoc-cli: {exc}", file=sys.stderr)


def run_timed(
    func: Callable[[Any], Any],
    input: Any,
    hook: Callable[[Any], Any],
    timed: bool = False,
) -> tuple[Any, int, int]:
    """Run ``func`` once; when ``timed``, benchmark it as well.

    Returns the result, the duration in nanoseconds and the number of samples.
    """
    start = time.perf_counter_ns()
    result = func(copy.copy(input))
    base_time = time.perf_counter_ns() - start

    hook(result)

    if timed:
        duration, samples = bench(func, input, base_time)
    else:
        duration, samples = base_time, 1
    return result, duration, samples


def bench(func: Callable[[Any], Any], input: Any, base_time: int) -> tuple[int, int]:
    """Run ``func`` repeatedly for about a second; return average ns and sample count."""
    _write(f" > {ANSI_ITALIC}benching{ANSI_RESET}")
    iterations = min(
        _MAX_ITERATIONS,
        max(_NANOS_PER_SECOND // max(base_time, 10), _MIN_ITERATIONS),
    )
    timers = []
    for _ in range(iterations):
        cloned = copy.copy(input)
        start = time.perf_counter_ns()
        func(cloned)
        timers.append(time.perf_counter_ns() - start)
    return sum(timers) // len(timers), iterations


def _format_nanos(nanos: int) -> str:
    if nanos >= 1_000_000_000:
        unit, suffix = 1_000_000_000, "s"
    elif nanos >= 1_000_000:
        unit, suffix = 1_000_000, "ms"
    elif nanos >= 1_000:
        unit, suffix = 1_000, "µs"
    else:
        unit, suffix = 1, "ns"
    integer, fraction = divmod(nanos, unit)
    tenth, remainder = divmod(fraction * 10, unit)
    if remainder > 0 and remainder * 2 >= unit:
        tenth += 1
    if tenth == 10:
        integer += 1
        tenth = 0
    return f"{integer}.{tenth}{suffix}"


def format_duration(duration_ns: int, samples: int) -> str:
    """Format a duration (and sample count, if benched) for display."""
    text = _format_nanos(int(duration_ns))
    if samples == 1:
        return f" ({text})"
    return f" ({text} @ {samples} samples)"


def print_result(result: Any, part: str, duration_str: str) -> None:
    """Print a part's result; an empty ``duration_str`` marks an intermediate line."""
    intermediate = not duration_str
    if result is None:
        if intermediate:
            _write(f"{part}: ✖")
        else:
            _write("\r")
            _write(f"{part}: ✖             \n")
        return

    text = str(result)
    if "\n" in text:
        line = f"{part}: ▼ {duration_str}"
        if intermediate:
            _write(line)
        else:
            _write("\r")
            _write(f"{line}\n")
            _write(f"{text}\n")
    else:
        line = f"{part}: {ANSI_BOLD}{text}{ANSI_RESET}{duration_str}"
        if intermediate:
            _write(line)
        else:
            _write("\r")
            _write(f"{line}\n")


def _submit_part(args: list[str]) -> int | None:
    """The part number following ``--submit``, or None when missing or invalid."""
    index = args.index("--submit") + 1
    if index >= len(args) or not _PART_TEXT.fullmatch(args[index]):
        return None
    value = int(args[index])
    return value if value <= _MAX_PART else None


def submit_result(
    result: Any,
    day: Day,
    part: int,
    argv: Sequence[str] | None = None,
) -> subprocess.CompletedProcess | None:
    """Submit ``result`` when the arguments ask for this part with ``--submit``."""
    args = list(sys.argv if argv is None else argv)
    if "--submit" not in args:
        return None

    part_submit = None if len(args) < 3 else _submit_part(args)
    if part_submit is None:
        print(_SUBMIT_USAGE, file=sys.stderr)
        raise SystemExit(1)

    if part_submit != part:
        return None

    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        print(
            'command "aoc" not found or not callable. '
            'Try running "cargo install aoc-cli" to install it.',
            file=sys.stderr,
        )
        raise SystemExit(1) from None

    print("Submitting result via aoc-cli...")
    return aoc_cli.submit(day, part, str(result))
"""Running several day solutions as child processes and collecting timings."""

from __future__ import annotations

import subprocess
import sys
import threading
from pathlib import Path
from typing import Collection, Sequence

from aoc2022.day import Day, all_days
from aoc2022.inputs import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET
from aoc2022.timings import Timing, Timings


def get_path_for_bin(day: Day) -> str:
    """Path of the solution module for ``day``, relative to the project root."""
    return f"./aoc2022/solutions/day{day}.py"


def run_multi(
    days_to_run: Collection[Day],
    is_release: bool,
    is_timed: bool,
) -> Timings | None:
    """Run the requested days in order; return timings when ``is_timed``."""
    timings: list[Timing] = []
    need_space = False

    for day in all_days():
        if day not in days_to_run:
            continue
        if need_space:
            print()
        need_space = True

        print(f"{ANSI_BOLD}Day {day}{ANSI_RESET}")
        print("------")

        output = run_solution(day, is_timed, is_release)
        if not output:
            print("Not solved.")
        else:
            timings.append(parse_exec_time(output, day))

    if not is_timed:
        return None
    result = Timings(data=timings)
    total_millis = result.total_millis()
    print(
        f"\n{ANSI_BOLD}Total (Run):{ANSI_RESET} "
        f"{ANSI_ITALIC}{total_millis:.2f}ms{ANSI_RESET}"
    )
    return result


def _decode_line(raw: bytes) -> str:
    line = raw.decode("utf-8", errors="replace")
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def run_solution(day: Day, is_timed: bool, is_release: bool) -> list[str]:
    """Run the solution for ``day``, echoing its output; return its stdout lines.

    Days without a solution module yield no lines. ``is_release`` has no
    effect on how the child is started.
    """
    if not Path(get_path_for_bin(day)).exists():
        return []

    args = [sys.executable, "-m", f"aoc2022.solutions.day{day}"]
    if is_timed:
        args.append("--time")

    process = subprocess.Popen(args, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    if process.stdout is None or process.stderr is None:
        raise BrokenPipeError("child process has no output pipes")

    def forward_stderr() -> None:
        for raw in process.stderr:
            print(_decode_line(raw), file=sys.stderr)

    thread = threading.Thread(target=forward_stderr)
    thread.start()

    output = []
    for raw in process.stdout:
        line = _decode_line(raw)
        print(line)
        output.append(line)

    thread.join()
    process.wait()
    return output


def _parse_float(text: str) -> float | None:
    if text != text.strip() or "_" in text or not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _parse_scaled(text: str, postfix: str, factor: float) -> float | None:
    value = _parse_float(text.split(postfix)[0])
    return None if value is None else value * factor


def parse_time(line: str) -> tuple[str, float] | None:
    """Extract the timing text and its value in nanoseconds from a result line."""
    timing = line.split(" samples)")[0].split("(")[-1].split("@")[0].strip()

    if "ns" in timing:
        nanos = _parse_scaled(timing, "ns", 1.0)
    elif "µs" in timing:
        nanos = _parse_scaled(timing, "µs", 1_000.0)
    elif "ms" in timing:
        nanos = _parse_scaled(timing, "ms", 1_000_000.0)
    else:
        nanos = _parse_scaled(timing, "s", 1_000_000_000.0)

    if nanos is None:
        return None
    return timing, nanos


def parse_exec_time(output: Sequence[str], day: Day) -> Timing:
    """Collect the benchmark results printed by a solution run."""
    timing = Timing(day=day, part_1=None, part_2=None, total_nanos=0.0)

    for line in output:
        if " samples)" not in line:
            continue
        parsed = parse_time(line)
        if parsed is None:
            print(f"Could not parse timings from line: {line}", file=sys.stderr)
            continue
        timing_str, nanos = parsed
        part = line.split(":")[0]
        if "Part 1" in part:
            timing.part_1 = timing_str
        elif "Part 2" in part:
            timing.part_2 = timing_str
        timing.total_nanos += nanos

    return timing
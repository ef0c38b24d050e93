"""Benchmark timings per day, stored as JSON."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from aoc2022.day import Day, DayFromStrError

TIMINGS_FILE_PATH = "./data/timings.json"


class TimingsError(ValueError):
    """Raised when timing data cannot be decoded."""


@dataclass
class Timing:
    """Benchmark times for a single day."""

    day: Day
    part_1: str | None = None
    part_2: str | None = None
    total_nanos: float = 0.0

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "day": str(self.day),
            "total_nanos": self.total_nanos,
            "part_1": self.part_1,
            "part_2": self.part_2,
        }

    @classmethod
    def from_json(cls, value: Any) -> Timing:
        """Build a timing from a decoded JSON object."""
        if not isinstance(value, dict):
            raise TimingsError("Expected timing to be a JSON object.")

        raw_day = value.get("day")
        try:
            if not isinstance(raw_day, str):
                raise DayFromStrError()
            day = Day.parse(raw_day)
        except DayFromStrError:
            raise TimingsError("Expected timing.day to be a Day struct.") from None

        parts = []
        for key in ("part_1", "part_2"):
            if key not in value:
                raise TimingsError(f"Expected timing.{key} to be null or string.")
            raw = value[key]
            parts.append(raw if isinstance(raw, str) else None)

        total = value.get("total_nanos")
        if isinstance(total, bool) or not isinstance(total, (int, float)):
            raise TimingsError("Expected timing.total_nanos to be a number.")

        return cls(day=day, part_1=parts[0], part_2=parts[1], total_nanos=float(total))


@dataclass
class Timings:
    """Benchmark times for a set of days."""

    data: list[Timing] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {"data": [timing.to_json() for timing in self.data]}

    @classmethod
    def from_json(cls, text: str | bytes | Any) -> Timings:
        """Decode timings from JSON text (or an already decoded document)."""
        if isinstance(text, (str, bytes, bytearray)):
            try:
                document = json.loads(text)
            except (ValueError, UnicodeDecodeError):
                raise TimingsError("not valid JSON file.") from None
        else:
            document = text

        if not isinstance(document, dict):
            raise TimingsError("expected JSON document to be an object.")
        if "data" not in document:
            raise TimingsError("expected JSON document to have key `data`.")
        entries = document["data"]
        if not isinstance(entries, list):
            raise TimingsError("expected `json.data` to be an array.")
        return cls(data=[Timing.from_json(entry) for entry in entries])

    def store_file(self, path: str | Path = TIMINGS_FILE_PATH) -> None:
        """Write the timings to a JSON file."""
        Path(path).write_text(json.dumps(self.to_json()), encoding="utf-8")

    @classmethod
    def read_from_file(cls, path: str | Path = TIMINGS_FILE_PATH) -> Timings:
        """Read timings from a JSON file; on any failure report it and return empty timings."""
        try:
            return cls.from_json(Path(path).read_text(encoding="utf-8"))
        except (OSError, TimingsError) as exc:
            print(exc, file=sys.stderr)
            return cls()

    def merge(self, new: Timings) -> Timings:
        """Merge two sets of timings, entries of ``new`` taking precedence."""
        data = list(new.data)
        present = {timing.day for timing in data}
        data.extend(timing for timing in self.data if timing.day not in present)
        data.sort(key=lambda timing: timing.day)
        return Timings(data=data)

    def total_millis(self) -> float:
        """Total duration of all timings in milliseconds."""
        return sum(timing.total_nanos for timing in self.data) / 1_000_000

    def is_day_complete(self, day: Day | int) -> bool:
        """True if both parts of ``day`` have been benchmarked."""
        return any(
            timing.day == day and timing.part_1 is not None and timing.part_2 is not None
            for timing in self.data
        )
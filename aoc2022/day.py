"""Advent day numbers (1 to 25)."""

from __future__ import annotations

import functools
import re
from datetime import datetime, timedelta, timezone
from typing import Iterator

SERVER_UTC_OFFSET_HOURS = -5
_SERVER_TZ = timezone(timedelta(hours=SERVER_UTC_OFFSET_HOURS))
_FIRST_DAY = 1
_LAST_DAY = 25
_DAY_TEXT = re.compile(r"\+?[0-9]+")


class DayFromStrError(ValueError):
    """Raised when a value is not a valid day of advent."""

    def __init__(self, message: str = "expecting a day number between 1 and 25") -> None:
        super().__init__(message)


@functools.total_ordering
class Day:
    """A valid day number of advent, displayed as a two digit number."""

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DayFromStrError()
        if not _FIRST_DAY <= value <= _LAST_DAY:
            raise DayFromStrError()
        self._value = value

    @property
    def value(self) -> int:
        """The day as a plain integer."""
        return self._value

    @classmethod
    def parse(cls, text: str) -> Day:
        """Parse a day from text such as ``"8"`` or ``"08"``."""
        if not isinstance(text, str) or not _DAY_TEXT.fullmatch(text):
            raise DayFromStrError()
        return cls(int(text))

    @classmethod
    def today(cls) -> Day | None:
        """Return the current day in December (1st to 25th) on server time, else None."""
        now = datetime.now(_SERVER_TZ)
        if now.month == 12 and now.day <= _LAST_DAY:
            return cls(now.day)
        return None

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return f"{self._value:02d}"

    def __repr__(self) -> str:
        return f"Day({self._value})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self._value < other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value < other
        return NotImplemented


def all_days() -> Iterator[Day]:
    """Yield every day of advent from the 1st to the 25th."""
    for number in range(_FIRST_DAY, _LAST_DAY + 1):
        yield Day(number)
from datetime import datetime
from unittest.mock import patch

import pytest

from aoc2022.day import Day, DayFromStrError, all_days


def _fake_datetime(month, day):
    class FakeDatetime(datetime):
        @classmethod
        def now(cls, tz=None):
            return datetime(2022, month, day, 12, 0, tzinfo=tz)

    return FakeDatetime


def test_all_days_iterator():
    days = list(all_days())
    assert days == [Day(n) for n in range(1, 26)]
    assert len(days) == 25


def test_all_days_iterator_stops():
    it = all_days()
    for expected in range(1, 26):
        assert next(it) == Day(expected)
    with pytest.raises(StopIteration):
        next(it)


def test_display_is_two_digits():
    assert str(Day(8)) == "08"
    assert str(Day(25)) == "25"


@pytest.mark.parametrize("value", [0, 26, -1, 255])
def test_out_of_range_rejected(value):
    with pytest.raises(DayFromStrError):
        Day(value)


def test_error_message():
    with pytest.raises(DayFromStrError, match="expecting a day number between 1 and 25"):
        Day.parse("26")


@pytest.mark.parametrize("text,expected", [("1", 1), ("08", 8), ("25", 25), ("+3", 3)])
def test_parse_valid(text, expected):
    assert Day.parse(text) == Day(expected)


@pytest.mark.parametrize("text", ["", "0", "26", "abc", " 5", "-1", "1.0", "300"])
def test_parse_invalid(text):
    with pytest.raises(DayFromStrError):
        Day.parse(text)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        Day.parse("x")


def test_compare_with_int():
    day = Day(5)
    assert day == 5
    assert day < 6
    assert day > 4
    assert int(day) == 5
    assert day.value == 5


def test_ordering_and_hash():
    assert sorted([Day(3), Day(1), Day(2)]) == [Day(1), Day(2), Day(3)]
    assert {Day(1), Day(1), Day(2)} == {Day(1), Day(2)}


def test_today_in_december():
    with patch("aoc2022.day.datetime", _fake_datetime(12, 7)):
        assert Day.today() == Day(7)


def test_today_after_advent():
    with patch("aoc2022.day.datetime", _fake_datetime(12, 26)):
        assert Day.today() is None


def test_today_outside_december():
    with patch("aoc2022.day.datetime", _fake_datetime(11, 10)):
        assert Day.today() is None
import pytest

from aoc2022.solutions.day03 import part_one, part_two

EXAMPLE = """vJrwpWtwJgWrhcsFMMfFFhFp
jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL
PmmdzqPrVvPwwTWBwg
wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn
ttgJtRGJQctTZtZT
CrZsJsPPZsGzwwsLwLmpwMDw
"""


def test_part_one():
    assert part_one(EXAMPLE) == 157


def test_part_two():
    assert part_two(EXAMPLE) == 70


def test_incomplete_group_is_ignored():
    assert part_two(EXAMPLE + "abc\n") == 70


def test_no_common_item_is_error():
    with pytest.raises(ValueError):
        part_one("abcd\n")
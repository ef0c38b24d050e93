import pytest

from aoc2022.solutions.day01 import main, parse_input, part_one, part_two

EXAMPLE = """1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""


def test_part_one():
    assert part_one(EXAMPLE) == 24000


def test_part_two():
    assert part_two(EXAMPLE) == 45000


def test_parse_input_sorted_descending():
    totals = parse_input(EXAMPLE)
    assert totals == sorted(totals, reverse=True)
    assert len(totals) == 5


def test_part_two_needs_three_elves():
    with pytest.raises(ValueError):
        part_two("1\n\n2\n")


def test_main_prints_results(tmp_path, monkeypatch, capsys):
    (tmp_path / "data" / "inputs").mkdir(parents=True)
    (tmp_path / "data" / "inputs" / "01.txt").write_text(EXAMPLE)
    monkeypatch.chdir(tmp_path)
    main([])
    out = capsys.readouterr().out
    assert "24000" in out
    assert "45000" in out
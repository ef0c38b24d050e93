import pytest

from aoc2022.day import Day, DayFromStrError
from aoc2022.inputs import read_file, read_file_part


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    folder = tmp_path / "data" / "examples"
    folder.mkdir(parents=True)
    return folder


def test_read_file(data_dir):
    (data_dir / "03.txt").write_text("hello\nworld\n", encoding="utf-8")
    assert read_file("examples", Day(3)) == "hello\nworld\n"


def test_read_file_accepts_int_day(data_dir):
    (data_dir / "12.txt").write_text("content", encoding="utf-8")
    assert read_file("examples", 12) == "content"


def test_read_file_part(data_dir):
    (data_dir / "01-2.txt").write_text("second part", encoding="utf-8")
    (data_dir / "01.txt").write_text("whole", encoding="utf-8")
    assert read_file_part("examples", Day(1), 2) == "second part"
    assert read_file("examples", Day(1)) == "whole"


def test_missing_file_raises(data_dir):
    with pytest.raises(FileNotFoundError):
        read_file("examples", Day(9))


def test_missing_part_file_raises(data_dir):
    (data_dir / "09.txt").write_text("x", encoding="utf-8")
    with pytest.raises(FileNotFoundError):
        read_file_part("examples", Day(9), 1)


def test_invalid_day_rejected(data_dir):
    with pytest.raises(DayFromStrError):
        read_file("examples", 30)
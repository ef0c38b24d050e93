import subprocess
from unittest import mock

import pytest

from aoc2022 import runner
from aoc2022.day import Day
from aoc2022.inputs import ANSI_BOLD, ANSI_RESET


def test_format_duration_single_sample():
    assert runner.format_duration(74, 1) == " (74.0ns)"


def test_format_duration_with_samples():
    assert runner.format_duration(1_500_000, 20) == " (1.5ms @ 20 samples)"


def test_format_duration_units_and_samples_suffix():
    text = runner.format_duration(2_000_000_000, 10)
    assert text.endswith("s @ 10 samples)")
    assert "µs" in runner.format_duration(5_000, 1)


def test_print_result_none_intermediate(capsys):
    runner.print_result(None, "Part 1", "")
    assert capsys.readouterr().out == "Part 1: ✖"


def test_print_result_none_final(capsys):
    runner.print_result(None, "Part 1", " (1.0ns)")
    assert capsys.readouterr().out == "\rPart 1: ✖             \n"


def test_print_result_value_final(capsys):
    runner.print_result(5, "Part 2", " (1.0ns)")
    assert capsys.readouterr().out == f"\rPart 2: {ANSI_BOLD}5{ANSI_RESET} (1.0ns)\n"


def test_print_result_multiline(capsys):
    runner.print_result("a\nb", "Part 1", " (1.0ns)")
    out = capsys.readouterr().out
    assert "▼" in out
    assert out.endswith("a\nb\n")


def test_run_timed_untimed_calls_hook():
    seen = []
    result, duration, samples = runner.run_timed(lambda x: x * 2, 21, seen.append, False)
    assert result == 42
    assert samples == 1
    assert duration >= 0
    assert seen == [42]


def test_run_timed_timed_benches(capsys):
    result, _, samples = runner.run_timed(len, "abc", lambda r: None, True)
    assert result == 3
    assert 10 <= samples <= 10000


def test_bench_slow_base_time_uses_minimum(capsys):
    calls = []
    _, samples = runner.bench(calls.append, "x", 2_000_000_000)
    assert samples == 10
    assert len(calls) == 10


def test_bench_fast_base_time_uses_maximum(capsys):
    _, samples = runner.bench(len, "x", 0)
    assert samples == 10000


def test_submit_result_without_flag():
    assert runner.submit_result(1, Day(1), 1, ["prog", "01"]) is None


def test_submit_result_too_few_args():
    with pytest.raises(SystemExit):
        runner.submit_result(1, Day(1), 1, ["prog", "--submit"])


def test_submit_result_bad_part():
    with pytest.raises(SystemExit):
        runner.submit_result(1, Day(1), 1, ["prog", "--submit", "x"])


def test_submit_result_other_part():
    assert runner.submit_result(1, Day(1), 1, ["prog", "--submit", "2"]) is None


def test_submit_result_submits(monkeypatch, capsys):
    monkeypatch.delenv("AOC_YEAR", raising=False)
    ok = subprocess.CompletedProcess(["aoc"], 0)
    with mock.patch("aoc2022.aoc_cli.subprocess.run", return_value=ok) as run:
        result = runner.submit_result(99, Day(1), 2, ["prog", "--submit", "2"])
    assert result is ok
    assert run.call_args[0][0][-2:] == ["2", "99"]
    assert "Submitting result via aoc-cli..." in capsys.readouterr().out


def test_run_part_prints_missing_result(capsys):
    runner.run_part(lambda text: None, "input", Day(1), 2, ["prog"])
    assert "Part 2: ✖" in capsys.readouterr().out


def test_run_part_prints_result(capsys):
    runner.run_part(len, "abcd", Day(1), 1, ["prog"])
    out = capsys.readouterr().out
    assert f"Part 1: {ANSI_BOLD}4{ANSI_RESET}" in out
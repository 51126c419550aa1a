"""
Copyright (c) 2025. All rights reserved.
"""

"""
Tests for the benchmark helpers and the command line driver.
"""

import math
from functools import partial

import pytest

from lazymapreduce.benchmark import RunTiming, calculate_speedup, time_run
from lazymapreduce.cli import load_inputs, main, parse_arguments
from lazymapreduce.factories.registry import create_task
from lazymapreduce.pairs import KeyValuePair


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "doc1.txt").write_text("the cat sat\n\nthe end\n", encoding="utf-8")
    (tmp_path / "doc2.txt").write_text("the dog sat\n", encoding="utf-8")
    (tmp_path / "ignored.md").write_text("not an input\n", encoding="utf-8")
    return tmp_path


def test_load_inputs(data_dir):
    inputs = load_inputs(data_dir)
    assert inputs == [
        KeyValuePair("doc1.txt:1", "the cat sat"),
        KeyValuePair("doc1.txt:3", "the end"),
        KeyValuePair("doc2.txt:1", "the dog sat"),
    ], f"Unexpected inputs {inputs}"


def test_calculate_speedup():
    assert calculate_speedup(2.0, 1.0) == 2.0
    assert calculate_speedup(1.0, 4.0) == 0.25
    assert math.isinf(calculate_speedup(1.0, 0.0))


@pytest.mark.parametrize("parallel", [False, True])
def test_time_run(parallel):
    inputs = [("d1", "a b"), ("d2", "b c")]
    timing = time_run(partial(create_task, "word_count"), inputs, parallel, repeats=3)

    assert isinstance(timing, RunTiming)
    assert timing.mode == ("parallel" if parallel else "sequential")
    assert timing.repeats == 3
    assert timing.num_results == 3
    assert timing.min_seconds <= timing.mean_seconds
    assert timing.std_seconds >= 0


def test_time_run_rejects_zero_repeats():
    with pytest.raises(ValueError):
        time_run(partial(create_task, "word_count"), [], False, repeats=0)


def test_parse_arguments_defaults():
    args = parse_arguments([])
    assert args.mode == "both"
    assert args.job == "word_count"
    assert args.max_workers is None
    assert args.isolate_failures is False
    assert args.repeats == 1


def test_main_both_modes(data_dir, capsys):
    exit_code = main(["both", "--data-dir", str(data_dir), "--max-workers", "2", "--top", "3"])
    output = capsys.readouterr().out

    assert exit_code == 0, f"CLI failed:\n{output}"
    assert "Loaded 3 input pairs" in output
    assert "Sequential and parallel results are identical" in output
    assert "PERFORMANCE ANALYSIS" in output
    assert "the" in output


@pytest.mark.parametrize("job", ["word_length_average", "inverted_index"])
def test_main_runs_text_jobs(data_dir, job):
    assert main(["sequential", "--data-dir", str(data_dir), "--job", job]) == 0


def test_main_sums_numeric_data_file(tmp_path, capsys):
    (tmp_path / "sales.txt").write_text("apples 3\npears 2\napples 4\n", encoding="utf-8")
    (tmp_path / "totals.txt").write_text("1\n2\n3\n", encoding="utf-8")

    exit_code = main(["both", "--data-dir", str(tmp_path), "--job", "sum_values"])
    output = capsys.readouterr().out

    assert exit_code == 0, f"CLI failed:\n{output}"
    assert "Sequential and parallel results are identical" in output
    lines = output.splitlines()
    assert f"{'apples':<30} 7" in lines, f"Missing apples total in:\n{output}"
    assert f"{'pears':<30} 2" in lines
    assert f"{'totals.txt:3':<30} 3" in lines


def test_main_reports_user_function_failure(data_dir, capsys):
    """Summing lines of prose fails inside map, which the driver reports."""
    exit_code = main(["sequential", "--data-dir", str(data_dir), "--job", "sum_values"])
    assert exit_code == 1
    assert "sequential run failed: ValueError" in capsys.readouterr().out


def test_main_isolates_user_function_failures(data_dir, capsys):
    exit_code = main(["parallel", "--data-dir", str(data_dir), "--job", "sum_values", "--isolate-failures"])
    output = capsys.readouterr().out
    assert exit_code == 0, f"CLI failed:\n{output}"
    assert "0 results" in output
    assert "! map task" in output


def test_main_missing_data_dir(tmp_path, capsys):
    exit_code = main(["--data-dir", str(tmp_path / "missing")])
    assert exit_code == 1
    assert "does not exist" in capsys.readouterr().out


def test_main_empty_data_dir(tmp_path, capsys):
    assert main(["--data-dir", str(tmp_path)]) == 1
    assert "No non-empty lines" in capsys.readouterr().out


def test_main_rejects_bad_numbers(data_dir, capsys):
    assert main(["--data-dir", str(data_dir), "--max-workers", "0"]) == 1
    assert main(["--data-dir", str(data_dir), "--repeats", "0"]) == 1


def test_main_rejects_unknown_job(data_dir):
    with pytest.raises(SystemExit):
        main(["--data-dir", str(data_dir), "--job", "nope"])

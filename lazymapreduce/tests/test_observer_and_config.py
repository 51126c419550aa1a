"""
Copyright (c) 2025. All rights reserved.
"""

"""
Tests for LoggingObserver and EngineConfig.
"""

import logging

import pytest

from lazymapreduce import EngineConfig, KeyValuePair, LoggingObserver, MapReduceTask
from lazymapreduce.config import create_default_config, create_lenient_config, create_parallel_config


def test_logging_observer_reports_phases(caplog):
    task = MapReduceTask(
        map_function=lambda pair: [pair],
        reduce_function=lambda group: (group.key, sum(group.values)),
        observer=LoggingObserver(),
    )
    task.push_input("A", 1)

    with caplog.at_level(logging.DEBUG, logger="lazymapreduce"):
        task.run()

    messages = [record.getMessage() for record in caplog.records]
    assert "Map phase started (1 tasks)" in messages, f"Missing map phase message in {messages}"
    assert "Finished reduce phase" in messages
    assert any("Map task 1/1: done (1 outputs)" in m for m in messages)


def test_logging_observer_warns_on_skip_and_failure(caplog):
    def failing_map(pair):
        raise ValueError("nope")

    task = MapReduceTask(
        map_function=failing_map,
        reduce_function=lambda group: (group.key, 0),
        config=EngineConfig(isolate_failures=True, max_workers=2),
        observer=LoggingObserver(),
    )
    task.push_input("A", 1)

    with caplog.at_level(logging.WARNING, logger="lazymapreduce"):
        task.run()

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors, "Isolated failures should be logged at ERROR"
    assert "ValueError: nope" in errors[0].getMessage()
    assert any("isolated task failures" in r.getMessage() for r in caplog.records)


def test_logging_observer_accepts_custom_logger(caplog):
    custom = logging.getLogger("custom.progress")
    observer = LoggingObserver(custom)
    with caplog.at_level(logging.INFO, logger="custom.progress"):
        observer.phase_started("shuffle", 4)
    assert caplog.records[0].name == "custom.progress"
    assert caplog.records[0].getMessage() == "Shuffle phase started (4 tasks)"


def test_engine_is_silent_without_observer(capsys):
    task = MapReduceTask(lambda pair: [pair], lambda group: (group.key, len(group.values)))
    task.push_input(KeyValuePair("A", 1))
    task.run(parallel_map=True, parallel_reduce=True)

    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == "", "Engine should never print"


def test_engine_config_defaults():
    config = EngineConfig()
    assert config.max_workers is None
    assert config.isolate_failures is False
    assert config.thread_name_prefix == "mapreduce"


@pytest.mark.parametrize("max_workers", [0, -3])
def test_engine_config_rejects_non_positive_workers(max_workers):
    with pytest.raises(ValueError):
        EngineConfig(max_workers=max_workers)


def test_config_factories():
    assert create_default_config() == EngineConfig()
    assert create_parallel_config(8).max_workers == 8
    lenient = create_lenient_config(2)
    assert lenient.isolate_failures is True
    assert lenient.max_workers == 2

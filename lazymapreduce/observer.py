"""
Copyright (c) 2025. All rights reserved.
"""

"""
Progress hooks for the MapReduce engine.

The executors never print. They call the hooks of a TaskObserver, whose
methods are all no-ops by default, so tests can run the engine silently or
subclass TaskObserver to record events. LoggingObserver is the stock console
reporter.
"""

import logging
from typing import Any

from .errors import TaskType

logger = logging.getLogger(__name__)


class TaskObserver:
    """Receives phase and task lifecycle events. Override what you need."""

    def phase_started(self, phase: str, num_tasks: int) -> None:
        pass

    def phase_finished(self, phase: str) -> None:
        pass

    def task_started(self, task_type: TaskType, index: int, total: int) -> None:
        pass

    def task_completed(self, task_type: TaskType, index: int, total: int, num_outputs: int) -> None:
        pass

    def task_skipped(self, task_type: TaskType, index: int, total: int) -> None:
        pass

    def task_failed(self, task_type: TaskType, index: int, total: int, item: Any,
                    error: BaseException) -> None:
        pass


class LoggingObserver(TaskObserver):
    """Reports progress through the logging module"""

    def __init__(self, log: logging.Logger = None):
        self.log = log or logger

    def phase_started(self, phase, num_tasks):
        self.log.info(f"{phase.capitalize()} phase started ({num_tasks} tasks)")

    def phase_finished(self, phase):
        self.log.info(f"Finished {phase} phase")

    def task_started(self, task_type, index, total):
        self.log.debug(f"{task_type.value.capitalize()} task {index + 1}/{total}: executing ...")

    def task_completed(self, task_type, index, total, num_outputs):
        self.log.debug(
            f"{task_type.value.capitalize()} task {index + 1}/{total}: done ({num_outputs} outputs)"
        )

    def task_skipped(self, task_type, index, total):
        self.log.warning(
            f"{task_type.value.capitalize()} task {index + 1}/{total}: "
            f"failed to extract input, skipping this task"
        )

    def task_failed(self, task_type, index, total, item, error):
        self.log.error(
            f"{task_type.value.capitalize()} task {index + 1}/{total} failed on {item!r}: "
            f"{type(error).__name__}: {error}"
        )

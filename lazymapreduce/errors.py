"""
Copyright (c) 2025. All rights reserved.
"""

"""
Error types and failure records for the MapReduce engine.

An empty pop from a task queue is not an error (the work unit is skipped),
so it has no exception here. Failures raised by user map/reduce functions
propagate unchanged by default; with failure isolation enabled they are
recorded as TaskFailure entries instead.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TaskType(Enum):
    """Phases that run user code"""
    MAP = "map"
    REDUCE = "reduce"


class MapReduceError(Exception):
    """Base class for all engine errors."""


class MisconfiguredTaskError(MapReduceError):
    """A map or reduce function is missing or not callable when its phase starts."""

    def __init__(self, task_type: TaskType, message: str = None):
        self.task_type = task_type
        super().__init__(
            message or f"No callable {task_type.value} function configured"
        )


class EngineBusyError(MapReduceError):
    """The engine was mutated or re-run while a run is in flight."""


class UnknownJobError(MapReduceError, KeyError):
    """A sample job name is not registered."""

    def __str__(self):
        return str(self.args[0]) if self.args else ""


@dataclass(frozen=True)
class TaskFailure:
    """Record of a user function failure captured under failure isolation."""
    task_type: TaskType
    task_index: int
    item: Any
    error: BaseException

    def __str__(self):
        return (
            f"{self.task_type.value} task {self.task_index} failed on {self.item!r}: "
            f"{type(self.error).__name__}: {self.error}"
        )

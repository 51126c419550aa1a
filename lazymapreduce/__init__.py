"""
Copyright (c) 2025. All rights reserved.
"""

"""
In-memory MapReduce simulator for educational purposes.

Modules:
    pairs: Key/value pair types passed between phases
    task_queue: Thread-safe FIFO queues and the unordered result bag
    executors: Map and reduce executors, and the shuffler
    engine: MapReduceTask orchestrator and its TypelessMapReduce alias
    observer: Progress hooks (TaskObserver, LoggingObserver)
    config: EngineConfig and ready-made configurations
    factories: Sample jobs (word count, sum, word length average, inverted index)
"""

from .config import EngineConfig
from .engine import MapReduceTask, Phase, TypelessMapReduce
from .errors import (
    EngineBusyError,
    MapReduceError,
    MisconfiguredTaskError,
    TaskFailure,
    TaskType,
    UnknownJobError,
)
from .observer import LoggingObserver, TaskObserver
from .pairs import GroupedPair, InputPair, KeyValuePair, MapOutputPair, ResultPair
from .task_queue import ResultBag, TaskQueue

__version__ = "1.0.0"
__author__ = "LazyMapReduce Educational Implementation"

__all__ = [
    # Orchestrator
    "MapReduceTask",
    "TypelessMapReduce",
    "Phase",
    "EngineConfig",
    # Pair types
    "KeyValuePair",
    "GroupedPair",
    "InputPair",
    "MapOutputPair",
    "ResultPair",
    # Containers
    "TaskQueue",
    "ResultBag",
    # Observers
    "TaskObserver",
    "LoggingObserver",
    # Errors
    "MapReduceError",
    "MisconfiguredTaskError",
    "EngineBusyError",
    "UnknownJobError",
    "TaskFailure",
    "TaskType",
]

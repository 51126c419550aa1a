"""
Copyright (c) 2025. All rights reserved.
"""

"""
MapReduce orchestrator.

MapReduceTask runs the classic three phases on a single machine, in memory:

1. Map: every pushed input pair is handed to the map function, which emits
   zero or more intermediate pairs.
2. Shuffle: intermediate pairs are grouped by key (always sequential).
3. Reduce: every group is handed to the reduce function, which returns
   exactly one result pair.

Map and reduce can each run sequentially or on a thread pool. Phases never
overlap: each one completes before the next starts.

Example:
    task = MapReduceTask(
        map_function=lambda pair: ((word, 1) for word in pair.value.split()),
        reduce_function=lambda group: (group.key, sum(group.values)),
    )
    task.push_input("doc1", "the cat sat")
    task.run(parallel_map=True, parallel_reduce=True)
    counts = task.get_results().to_dict()
"""

import logging
import threading
from enum import Enum
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

from .config import EngineConfig
from .errors import EngineBusyError, MisconfiguredTaskError, TaskFailure, TaskType
from .executors import MapExecutor, ReduceExecutor, Shuffler
from .observer import TaskObserver
from .pairs import GroupedPair, KeyValuePair, PairLike, to_pair
from .task_queue import ResultBag, TaskQueue

logger = logging.getLogger(__name__)

K1 = TypeVar("K1")
V1 = TypeVar("V1")
K2 = TypeVar("K2")
V2 = TypeVar("V2")
K3 = TypeVar("K3")
V3 = TypeVar("V3")

_NO_VALUE = object()


class Phase(Enum):
    """Orchestrator states"""
    IDLE = "idle"
    MAPPING = "map"
    SHUFFLING = "shuffle"
    REDUCING = "reduce"


class MapReduceTask(Generic[K1, V1, K2, V2, K3, V3]):
    """
    In-memory MapReduce job.

    Args:
        map_function: Called with one KeyValuePair[K1, V1], returns an
            iterable of KeyValuePair[K2, V2] or (key, value) tuples.
        reduce_function: Called with one GroupedPair[K2, V2], returns a
            KeyValuePair[K3, V3] or a (key, value) tuple.
        config: Pool sizing and failure policy, see EngineConfig.
        observer: Receives progress events, see TaskObserver.

    Not safe for concurrent run() calls. Push inputs only between runs.
    """

    def __init__(self,
                 map_function: Optional[Callable[[KeyValuePair], Iterable[PairLike]]] = None,
                 reduce_function: Optional[Callable[[GroupedPair], PairLike]] = None,
                 config: EngineConfig = None,
                 observer: TaskObserver = None):
        self._map_function = map_function
        self._reduce_function = reduce_function
        self.config = config or EngineConfig()
        self.observer = observer or TaskObserver()

        self._map_inputs: TaskQueue[KeyValuePair] = TaskQueue("map_inputs")
        self._map_outputs: TaskQueue[KeyValuePair] = TaskQueue("map_outputs")
        self._reduce_inputs: TaskQueue[GroupedPair] = TaskQueue("reduce_inputs")
        self._results: ResultBag[KeyValuePair] = ResultBag()
        self._failures: List[TaskFailure] = []

        self._num_map_tasks = 0
        self._num_reduce_tasks = 0
        self._phase = Phase.IDLE
        self._run_lock = threading.Lock()

    @property
    def map_function(self):
        return self._map_function

    @property
    def reduce_function(self):
        return self._reduce_function

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def num_map_tasks(self) -> int:
        """Map tasks scheduled for the next (or current) run"""
        return self._num_map_tasks

    @property
    def num_reduce_tasks(self) -> int:
        """Reduce tasks found by the shuffle of the current run"""
        return self._num_reduce_tasks

    @property
    def failures(self) -> List[TaskFailure]:
        """User function failures isolated during the most recent run"""
        return list(self._failures)

    def configure(self, map_function: Callable = None, reduce_function: Callable = None) -> None:
        """Replace the map and/or reduce function between runs."""
        self._ensure_idle("configure")
        if map_function is not None:
            self._map_function = map_function
        if reduce_function is not None:
            self._reduce_function = reduce_function

    def push_input(self, key_or_pair: Any, value: Any = _NO_VALUE) -> None:
        """
        Queue one input pair for the next run.

        Accepts push_input(key, value) or push_input(pair) where pair is a
        KeyValuePair or a (key, value) tuple.
        """
        self._ensure_idle("push_input")
        if value is _NO_VALUE:
            pair = to_pair(key_or_pair)
        else:
            pair = KeyValuePair(key_or_pair, value)
        self._map_inputs.push(pair)
        self._num_map_tasks += 1

    def push_inputs(self, pairs: Iterable[PairLike]) -> int:
        """Queue many input pairs, return how many were pushed."""
        count = 0
        for pair in pairs:
            self.push_input(pair)
            count += 1
        return count

    def get_results(self) -> ResultBag:
        """Results of the most recent run. Empty before the first run."""
        return self._results

    def run(self, parallel_map: bool = False, parallel_reduce: bool = False) -> ResultBag:
        """
        Execute map, shuffle and reduce once, blocking until all are done.

        Raises:
            MisconfiguredTaskError: map or reduce function missing. Raised
                before any task of the offending phase is scheduled.
            EngineBusyError: another run is already in flight.
            Exception: whatever a user function raised, unless
                config.isolate_failures is set.
        """
        self._check_function(self._map_function, TaskType.MAP)
        self._check_function(self._reduce_function, TaskType.REDUCE)
        if not self._run_lock.acquire(blocking=False):
            raise EngineBusyError("run() called while another run is in progress")

        failed = True
        try:
            self._results = ResultBag()
            self._failures = []

            self._run_maps(parallel_map)
            self._shuffle()
            self._run_reduces(parallel_reduce)
            failed = False
        finally:
            self._finish_run(failed)
            self._run_lock.release()

        if self._failures:
            logger.warning(f"Run finished with {len(self._failures)} isolated task failures")
        return self._results

    def _run_maps(self, parallel: bool) -> None:
        self._phase = Phase.MAPPING
        self.observer.phase_started(Phase.MAPPING.value, self._num_map_tasks)
        executor = MapExecutor(
            self._map_function,
            self._map_inputs,
            self._map_outputs,
            observer=self.observer,
            config=self.config,
            failures=self._failures,
        )
        executor.run(parallel, self._num_map_tasks)
        self.observer.phase_finished(Phase.MAPPING.value)

    def _shuffle(self) -> None:
        self._phase = Phase.SHUFFLING
        self.observer.phase_started(Phase.SHUFFLING.value, len(self._map_outputs))
        self._num_reduce_tasks = Shuffler(self._map_outputs, self._reduce_inputs).run()
        self.observer.phase_finished(Phase.SHUFFLING.value)

    def _run_reduces(self, parallel: bool) -> None:
        self._phase = Phase.REDUCING
        self.observer.phase_started(Phase.REDUCING.value, self._num_reduce_tasks)
        executor = ReduceExecutor(
            self._reduce_function,
            self._reduce_inputs,
            self._results,
            observer=self.observer,
            config=self.config,
            failures=self._failures,
        )
        executor.run(parallel, self._num_reduce_tasks)
        self.observer.phase_finished(Phase.REDUCING.value)

    def _check_function(self, function, task_type: TaskType) -> None:
        if function is None or not callable(function):
            raise MisconfiguredTaskError(task_type)

    def _finish_run(self, failed: bool) -> None:
        if failed:
            dropped = self._map_inputs.clear()
            if dropped:
                logger.warning(f"Run failed, discarded {dropped} unconsumed inputs")
        self._map_outputs.clear()
        self._reduce_inputs.clear()
        self._num_map_tasks = 0
        self._num_reduce_tasks = 0
        self._phase = Phase.IDLE

    def _ensure_idle(self, operation: str) -> None:
        if self._phase is not Phase.IDLE or self._run_lock.locked():
            raise EngineBusyError(f"{operation}() is not allowed while a run is in progress")


class TypelessMapReduce(MapReduceTask[Any, Any, Any, Any, Any, Any]):
    """MapReduceTask with every key and value type left as Any"""

"""
Copyright (c) 2025. All rights reserved.
"""

"""
Phase executors for the MapReduce engine.

MapExecutor and ReduceExecutor share one work-unit model: a unit pops a
single item from its source queue and, if it got one, invokes the user
function on it. Units run either one after another on the calling thread
(sequential mode) or as a fixed batch submitted to a ThreadPoolExecutor
(parallel mode). In both modes run() returns only after every unit is done.

The Shuffler always runs on the calling thread and groups map outputs by key.
"""

import logging
import threading
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Dict, Iterable, List, Optional

from .config import EngineConfig
from .errors import MisconfiguredTaskError, TaskFailure, TaskType
from .observer import TaskObserver
from .pairs import GroupedPair, KeyValuePair, to_pair
from .task_queue import ResultBag, TaskQueue

logger = logging.getLogger(__name__)


class PhaseExecutor:
    """Common scheduling logic for the map and reduce phases"""

    task_type: TaskType = None

    def __init__(self,
                 function: Optional[Callable],
                 source: TaskQueue,
                 observer: TaskObserver = None,
                 config: EngineConfig = None,
                 failures: List[TaskFailure] = None):
        self.function = function
        self.source = source
        self.observer = observer or TaskObserver()
        self.config = config or EngineConfig()
        self.failures = failures if failures is not None else []
        self._failures_lock = threading.Lock()

    def process(self, item: Any) -> int:
        """Invoke the user function on one item, return the number of outputs."""
        raise NotImplementedError

    def check_configured(self):
        if self.function is None or not callable(self.function):
            raise MisconfiguredTaskError(self.task_type)

    def run(self, parallel: bool, num_tasks: int) -> None:
        """Run the phase to completion."""
        self.check_configured()
        if parallel:
            self._run_parallel(num_tasks)
        else:
            self._run_sequential(num_tasks)

    def run_unit(self, index: int, total: int) -> None:
        """Pop one item and process it. An empty pop is skipped, not failed."""
        self.observer.task_started(self.task_type, index, total)

        item = self.source.pop()
        if item is None:
            self.observer.task_skipped(self.task_type, index, total)
            return

        try:
            num_outputs = self.process(item)
        except Exception as e:
            self.observer.task_failed(self.task_type, index, total, item, e)
            if not self.config.isolate_failures:
                raise
            with self._failures_lock:
                self.failures.append(TaskFailure(self.task_type, index, item, e))
            return

        self.observer.task_completed(self.task_type, index, total, num_outputs)

    def _run_sequential(self, num_tasks: int) -> None:
        index = 0
        while self.source:
            self.run_unit(index, num_tasks)
            index += 1

    def _run_parallel(self, num_tasks: int) -> None:
        if num_tasks <= 0:
            return

        with ThreadPoolExecutor(max_workers=self.config.max_workers,
                                thread_name_prefix=self.config.thread_name_prefix) as executor:
            futures = [executor.submit(self.run_unit, i, num_tasks) for i in range(num_tasks)]
            try:
                for future in as_completed(futures):
                    future.result()
            except BaseException:
                # Units already running finish when the pool shuts down
                cancelled = sum(1 for f in futures if f.cancel())
                if cancelled:
                    logger.debug(f"Cancelled {cancelled} pending {self.task_type.value} tasks")
                raise


class MapExecutor(PhaseExecutor):
    """Applies the map function to input pairs and fans out into the map-output queue"""

    task_type = TaskType.MAP

    def __init__(self, function, source, sink: TaskQueue, **kwargs):
        super().__init__(function, source, **kwargs)
        self.sink = sink

    def process(self, item: KeyValuePair) -> int:
        outputs: Optional[Iterable] = self.function(item)
        if outputs is None:
            return 0
        # Materialise before pushing so a failing generator leaves no partial output
        pairs = [to_pair(output) for output in outputs]
        for pair in pairs:
            self.sink.push(pair)
        return len(pairs)


class ReduceExecutor(PhaseExecutor):
    """Applies the reduce function to grouped pairs, one result per group"""

    task_type = TaskType.REDUCE

    def __init__(self, function, source, results: ResultBag, **kwargs):
        super().__init__(function, source, **kwargs)
        self.results = results

    def process(self, item: GroupedPair) -> int:
        self.results.add(to_pair(self.function(item)))
        return 1


class Shuffler:
    """
    Groups map outputs by key into the reduce-input queue.

    Values within a group keep the order they were popped in. That order is
    arbitrary when the map phase ran in parallel.
    """

    def __init__(self, source: TaskQueue, sink: TaskQueue):
        self.source = source
        self.sink = sink

    def run(self) -> int:
        """Drain the source queue and return the number of groups produced."""
        groups: Dict[Any, List[Any]] = defaultdict(list)
        num_pairs = 0
        while True:
            pair = self.source.pop()
            if pair is None:
                break
            groups[pair.key].append(pair.value)
            num_pairs += 1

        logger.debug(f"Grouped {num_pairs} map outputs under {len(groups)} keys")

        for key, values in groups.items():
            self.sink.push(GroupedPair(key, tuple(values)))
        return len(groups)

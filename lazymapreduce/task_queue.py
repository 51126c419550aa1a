"""
Copyright (c) 2025. All rights reserved.
"""

"""
Thread-safe containers connecting the engine phases.

TaskQueue is a FIFO used for the map-input, map-output and reduce-input
queues. Popping from an empty queue returns None instead of blocking or
raising, which is how a parallel work unit learns that another unit already
claimed the last item.

ResultBag is the unordered, multi-inserter safe collection that receives
reduce outputs.
"""

import threading
from collections import deque
from typing import Deque, Dict, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class TaskQueue(Generic[T]):
    """Lock-protected FIFO safe for any number of producers and consumers"""

    def __init__(self, name: str = "queue"):
        self.name = name
        self._items: Deque[T] = deque()
        self._lock = threading.Lock()

    def push(self, item: T) -> None:
        with self._lock:
            self._items.append(item)

    def pop(self) -> Optional[T]:
        """Remove and return the oldest item, or None if the queue is empty."""
        with self._lock:
            if not self._items:
                return None
            return self._items.popleft()

    def drain(self) -> List[T]:
        """Atomically remove and return every queued item in FIFO order."""
        with self._lock:
            items = list(self._items)
            self._items.clear()
        return items

    def clear(self) -> int:
        """Discard all queued items and return how many were dropped."""
        with self._lock:
            dropped = len(self._items)
            self._items.clear()
        return dropped

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self):
        return f"TaskQueue({self.name!r}, size={len(self)})"


class ResultBag(Generic[T]):
    """Unordered collection of reduce results, safe for concurrent inserts"""

    def __init__(self):
        self._items: List[T] = []
        self._lock = threading.Lock()

    def add(self, item: T) -> None:
        with self._lock:
            self._items.append(item)

    def snapshot(self) -> List[T]:
        with self._lock:
            return list(self._items)

    def to_dict(self) -> Dict:
        """Map each result key to its value. Later duplicates win."""
        result = {}
        for pair in self.snapshot():
            result[pair.key] = pair.value
        return result

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, item) -> bool:
        with self._lock:
            return item in self._items

    def __repr__(self):
        return f"ResultBag(size={len(self)})"

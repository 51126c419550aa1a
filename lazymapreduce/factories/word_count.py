"""
Copyright (c) 2025. All rights reserved.
"""

"""
Word Count MapReduce Job

Implements word frequency counting on top of MapReduceTask.
Input pairs are (document_id, text); results are (word, count).
"""

from functools import reduce
from typing import Generator, Tuple

from ..pairs import GroupedPair, KeyValuePair


class WordCountMapReduce:
    """MapReduce operations for word frequency counting."""

    @staticmethod
    def map(pair: KeyValuePair) -> Generator[Tuple[str, int], None, None]:
        """Map phase: Extract words from the text and emit (word, 1) pairs."""
        words = str(pair.value).split()
        for word in words:
            yield (word, 1)

    @staticmethod
    def reduce(group: GroupedPair) -> KeyValuePair:
        """Reduce phase: Sum the counts emitted for one word."""
        # reduce(function, iterable, initial_value), the first argument of
        # the function is the accumulated count
        total = reduce(lambda acc, count: acc + count, group.values, 0)
        return KeyValuePair(group.key, total)

"""
Copyright (c) 2025. All rights reserved.
"""

"""
Inverted Index MapReduce Job

Builds a word -> documents index. Input pairs are (document_id, text);
results are (word, sorted tuple of document ids containing the word).
"""

from typing import Generator, Tuple

from ..pairs import GroupedPair, KeyValuePair


class InvertedIndexMapReduce:
    """MapReduce operations for building an inverted index."""

    @staticmethod
    def map(pair: KeyValuePair) -> Generator[Tuple[str, str], None, None]:
        """Map phase: Emit (word, document id) once per distinct word."""
        for word in set(str(pair.value).lower().split()):
            yield (word, pair.key)

    @staticmethod
    def reduce(group: GroupedPair) -> KeyValuePair:
        """Reduce phase: Collect the distinct documents for one word."""
        return KeyValuePair(group.key, tuple(sorted(set(group.values), key=str)))

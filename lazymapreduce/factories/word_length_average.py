"""
Copyright (c) 2025. All rights reserved.
"""

"""
Word Length Average MapReduce Job

Computes the average length of words grouped by their first letter.
Input pairs are (document_id, text); results are (letter, average_length).
"""

from typing import Generator, Tuple

from ..pairs import GroupedPair, KeyValuePair


class WordLengthAverageMapReduce:
    """MapReduce operations for calculating average word length per initial letter."""

    @staticmethod
    def map(pair: KeyValuePair) -> Generator[Tuple[str, int], None, None]:
        """Map phase: Emit (first letter, word length) for every word."""
        for word in str(pair.value).split():
            yield (word[0].lower(), len(word))

    @staticmethod
    def reduce(group: GroupedPair) -> KeyValuePair:
        """Reduce phase: Average the lengths collected for one letter."""
        total_chars = sum(group.values)
        num_words = len(group.values)
        return KeyValuePair(group.key, total_chars / num_words)

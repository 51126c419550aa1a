"""
Copyright (c) 2025. All rights reserved.
"""

"""
Sum MapReduce Job

The reduce phase sums the values collected under each key. Numeric input
values pass through the map phase unchanged. Text values are parsed so the
job also runs on data files: a line "<key> <number>" contributes the number
under that key, and a line holding only "<number>" contributes it under the
input key.
"""

from typing import List, Union

from ..pairs import GroupedPair, KeyValuePair


def parse_number(text: str) -> Union[int, float]:
    """Parse an int, falling back to float. Raises ValueError otherwise."""
    try:
        return int(text)
    except ValueError:
        return float(text)


class SumValuesMapReduce:
    """Passthrough (or parsing) map followed by a per-key sum."""

    @staticmethod
    def map(pair: KeyValuePair) -> List[KeyValuePair]:
        if not isinstance(pair.value, str):
            return [pair]
        fields = pair.value.split()
        if len(fields) == 1:
            return [KeyValuePair(pair.key, parse_number(fields[0]))]
        if len(fields) == 2:
            return [KeyValuePair(fields[0], parse_number(fields[1]))]
        raise ValueError(f"Expected '<key> <number>' or '<number>', got {pair.value!r}")

    @staticmethod
    def reduce(group: GroupedPair) -> KeyValuePair:
        return KeyValuePair(group.key, sum(group.values))

"""
Copyright (c) 2025. All rights reserved.
"""

"""
Pair types flowing between the map, shuffle and reduce phases.

Input pairs, map-output pairs and result pairs all share the same shape
(one key, one value) and are represented by KeyValuePair. The shuffle phase
produces GroupedPair: one key with every value emitted under it.
"""

from dataclasses import dataclass
from typing import Any, Generic, Tuple, TypeVar, Union

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class KeyValuePair(Generic[K, V]):
    """A single key with a single value."""

    key: K
    value: V

    def as_tuple(self) -> Tuple[K, V]:
        return (self.key, self.value)


@dataclass(frozen=True)
class GroupedPair(Generic[K, V]):
    """
    A key with all values emitted under it during the map phase.

    The order of ``values`` is the order in which the shuffle phase popped
    them. With a parallel map phase that order is non-deterministic, so
    consumers must treat ``values`` as an unordered multiset.
    """

    key: K
    values: Tuple[V, ...]

    def __len__(self) -> int:
        return len(self.values)


# Aliases naming each pair by the phase boundary it crosses
InputPair = KeyValuePair
MapOutputPair = KeyValuePair
ResultPair = KeyValuePair

PairLike = Union[KeyValuePair, Tuple[Any, Any]]


def to_pair(item: PairLike) -> KeyValuePair:
    """Normalise a KeyValuePair or a two-item tuple/list to a KeyValuePair."""
    if isinstance(item, KeyValuePair):
        return item
    if not isinstance(item, (tuple, list)) or len(item) != 2:
        raise TypeError(f"Expected a KeyValuePair or a (key, value) tuple, got {item!r}")
    key, value = item
    return KeyValuePair(key, value)

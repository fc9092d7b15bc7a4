"""Geocoding storage strategies for sorted prefix -> description tables.

Both strategies keep entries sorted by prefix and answer positional
queries; they differ in how descriptions are held.

* :class:`DefaultMapStorage` keeps one description string per entry.
* :class:`FlyweightMapStorage` keeps each distinct description once and a
  compact index per entry, with prefixes narrowed to 2 bytes when they fit.

The size estimates mirror a compact binary serialization: 4-byte counts
and prefixes (2 bytes when the largest value fits a signed short), and
length-prefixed strings (2 bytes of length plus the UTF-8 payload). They
are deterministic, so the same table always picks the same strategy.
"""

from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Final

_INT_NUM_BYTES: Final = 4
_SHORT_NUM_BYTES: Final = 2
_SHORT_MAX_VALUE: Final = 32767


def _optimal_number_of_bytes(value: int) -> int:
    return _SHORT_NUM_BYTES if value <= _SHORT_MAX_VALUE else _INT_NUM_BYTES


def _string_size(text: str) -> int:
    return _SHORT_NUM_BYTES + len(text.encode("utf-8"))


def _possible_lengths(sorted_map: Mapping[int, str]) -> tuple[int, ...]:
    return tuple(sorted({len(str(prefix)) for prefix in sorted_map}))


class AreaCodeMapStorage(abc.ABC):
    """Port: sorted prefix table answering positional lookups."""

    def __init__(self) -> None:
        self._possible_lengths: tuple[int, ...] = ()

    @property
    def possible_lengths(self) -> tuple[int, ...]:
        """Distinct prefix lengths, ascending."""
        return self._possible_lengths

    @property
    @abc.abstractmethod
    def num_of_entries(self) -> int: ...

    @abc.abstractmethod
    def get_prefix(self, index: int) -> int: ...

    @abc.abstractmethod
    def get_description(self, index: int) -> str: ...

    @abc.abstractmethod
    def read_from_sorted_map(self, sorted_map: Mapping[int, str]) -> None:
        """Load *sorted_map*, whose keys must be in ascending order."""

    @classmethod
    @abc.abstractmethod
    def estimate_size(cls, sorted_map: Mapping[int, str]) -> int:
        """Bytes this strategy would need for *sorted_map*."""

    def __len__(self) -> int:
        return self.num_of_entries

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={self.num_of_entries})"


class DefaultMapStorage(AreaCodeMapStorage):
    """Parallel prefix and description lists."""

    def __init__(self) -> None:
        super().__init__()
        self._prefixes: list[int] = []
        self._descriptions: list[str] = []

    @property
    def num_of_entries(self) -> int:
        return len(self._prefixes)

    def get_prefix(self, index: int) -> int:
        return self._prefixes[index]

    def get_description(self, index: int) -> str:
        return self._descriptions[index]

    def read_from_sorted_map(self, sorted_map: Mapping[int, str]) -> None:
        self._prefixes = list(sorted_map)
        self._descriptions = list(sorted_map.values())
        self._possible_lengths = _possible_lengths(sorted_map)

    @classmethod
    def estimate_size(cls, sorted_map: Mapping[int, str]) -> int:
        lengths = _possible_lengths(sorted_map)
        size = _INT_NUM_BYTES  # entry count
        size += sum(_INT_NUM_BYTES + _string_size(description) for description in sorted_map.values())
        size += _INT_NUM_BYTES + _INT_NUM_BYTES * len(lengths)
        return size


class FlyweightMapStorage(AreaCodeMapStorage):
    """Deduplicated description pool plus a per-entry index into it."""

    def __init__(self) -> None:
        super().__init__()
        self._prefixes: list[int] = []
        self._description_indexes: list[int] = []
        self._description_pool: tuple[str, ...] = ()
        self._prefix_size_in_bytes = _INT_NUM_BYTES
        self._desc_index_size_in_bytes = _INT_NUM_BYTES

    @property
    def num_of_entries(self) -> int:
        return len(self._prefixes)

    @property
    def description_pool(self) -> tuple[str, ...]:
        return self._description_pool

    def get_prefix(self, index: int) -> int:
        return self._prefixes[index]

    def get_description(self, index: int) -> str:
        return self._description_pool[self._description_indexes[index]]

    def read_from_sorted_map(self, sorted_map: Mapping[int, str]) -> None:
        pool = sorted(set(sorted_map.values()))
        position = {description: index for index, description in enumerate(pool)}
        self._description_pool = tuple(pool)
        self._prefixes = list(sorted_map)
        self._description_indexes = [position[description] for description in sorted_map.values()]
        self._possible_lengths = _possible_lengths(sorted_map)
        self._prefix_size_in_bytes = _optimal_number_of_bytes(self._prefixes[-1] if self._prefixes else 0)
        self._desc_index_size_in_bytes = _optimal_number_of_bytes(max(len(pool) - 1, 0))

    @classmethod
    def estimate_size(cls, sorted_map: Mapping[int, str]) -> int:
        if not sorted_map:
            return _INT_NUM_BYTES * 3
        pool = set(sorted_map.values())
        prefix_bytes = _optimal_number_of_bytes(max(sorted_map))
        index_bytes = _optimal_number_of_bytes(len(pool) - 1)
        lengths = _possible_lengths(sorted_map)
        size = _INT_NUM_BYTES * 3  # entry count, prefix width, index width
        size += len(sorted_map) * (prefix_bytes + index_bytes)
        size += _INT_NUM_BYTES + sum(_string_size(description) for description in pool)
        size += _INT_NUM_BYTES + _INT_NUM_BYTES * len(lengths)
        return size


__all__ = ["AreaCodeMapStorage", "DefaultMapStorage", "FlyweightMapStorage"]

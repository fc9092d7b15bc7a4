"""Area code map: longest-prefix lookup of a description for a number."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from mp_phonenumbers.geocoding.storage import AreaCodeMapStorage, DefaultMapStorage, FlyweightMapStorage
from mp_phonenumbers.kernel.types.phone_number import PhoneNumber, get_national_significant_number

logger = logging.getLogger(__name__)


class AreaCodeMap:
    """Maps ``country code + national prefix`` digits to a description.

    Keys are the calling code followed by the leading digits of the national
    significant number, read as one integer (``1650`` for California).
    Italian leading zeros are part of the key (``3902`` for Milan).

    Usage::

        area_codes = AreaCodeMap()
        area_codes.read_area_code_map({1212: "New York", 1650: "California"})
        area_codes.lookup(number)  # -> "California" | None
    """

    def __init__(self) -> None:
        self._storage: AreaCodeMapStorage | None = None

    @property
    def storage(self) -> AreaCodeMapStorage | None:
        return self._storage

    def get_smaller_map_storage(self, sorted_map: Mapping[int, str]) -> AreaCodeMapStorage:
        """Build whichever storage strategy is estimated to be smaller for *sorted_map*."""
        flyweight_size = FlyweightMapStorage.estimate_size(sorted_map)
        default_size = DefaultMapStorage.estimate_size(sorted_map)
        storage: AreaCodeMapStorage = (
            FlyweightMapStorage() if flyweight_size < default_size else DefaultMapStorage()
        )
        storage.read_from_sorted_map(sorted_map)
        logger.debug(
            "geocoding.storage.chosen strategy=%s entries=%d flyweight_bytes=%d default_bytes=%d",
            type(storage).__name__,
            len(sorted_map),
            flyweight_size,
            default_size,
        )
        return storage

    def read_area_code_map(self, sorted_map: Mapping[int, str]) -> None:
        """Load *sorted_map*, whose keys must be in ascending order."""
        self._storage = self.get_smaller_map_storage(sorted_map)

    def lookup(self, number: PhoneNumber) -> str | None:
        """Description of the longest prefix of *number* in the map, or ``None``.

        Prefix lengths are tried from the longest present in the map down to
        the shortest. Each round binary-searches only the part of the table
        below the previous hit, since a shorter prefix sorts lower.
        """
        storage = self._storage
        if storage is None or storage.num_of_entries == 0:
            return None
        phone_prefix = int(f"{number.country_code}{get_national_significant_number(number)}")
        current_index = storage.num_of_entries - 1
        for possible_length in reversed(storage.possible_lengths):
            digits = str(phone_prefix)
            if len(digits) > possible_length:
                phone_prefix = int(digits[:possible_length])
            current_index = self._binary_search(storage, 0, current_index, phone_prefix)
            if current_index < 0:
                return None
            if storage.get_prefix(current_index) == phone_prefix:
                return storage.get_description(current_index)
        return None

    @staticmethod
    def _binary_search(storage: AreaCodeMapStorage, start: int, end: int, value: int) -> int:
        """Index of the largest prefix not above *value* within ``[start, end]``, or -1."""
        current = 0
        while start <= end:
            current = (start + end) // 2
            prefix = storage.get_prefix(current)
            if prefix == value:
                return current
            if prefix > value:
                current -= 1
                end = current
            else:
                start = current + 1
        return current

    def __repr__(self) -> str:
        return f"AreaCodeMap(storage={self._storage!r})"


__all__ = ["AreaCodeMap"]

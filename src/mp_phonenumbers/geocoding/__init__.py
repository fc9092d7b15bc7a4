"""Geocoding: prefix tables mapping numbers to area descriptions."""

from mp_phonenumbers.geocoding.area_code_map import AreaCodeMap
from mp_phonenumbers.geocoding.storage import AreaCodeMapStorage, DefaultMapStorage, FlyweightMapStorage

__all__ = ["AreaCodeMap", "AreaCodeMapStorage", "DefaultMapStorage", "FlyweightMapStorage"]

"""conftest.py for benchmarks.

Benchmarks share the session-scoped ``phone_util`` fixture so registry
loading and regex compilation stay out of the timed section.
"""

from __future__ import annotations

import pytest

from mp_phonenumbers import PhoneNumber
from mp_phonenumbers.geocoding import AreaCodeMap


@pytest.fixture(scope="session")
def nz_number() -> PhoneNumber:
    return PhoneNumber(country_code=64, national_number=33316005)


@pytest.fixture(scope="session")
def us_area_table() -> dict[int, str]:
    """800 four-digit North American prefixes, ``1200`` to ``1999``."""
    return {1200 + i: f"Area {i}" for i in range(800)}


@pytest.fixture(scope="session")
def us_area_map(us_area_table) -> AreaCodeMap:
    area_map = AreaCodeMap()
    area_map.read_area_code_map(us_area_table)
    return area_map

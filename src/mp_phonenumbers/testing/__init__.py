"""Testing support - test metadata, builders, strategies and fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["mp_phonenumbers.testing.fixtures"]
"""

from mp_phonenumbers.testing.builders import Builder, PhoneNumberFixtureBuilder
from mp_phonenumbers.testing.metadata import TEST_METADATA, build_test_registry
from mp_phonenumbers.testing.strategies import (
    area_code_map_strategy,
    national_number_strategy,
    phone_number_strategy,
    phone_text_strategy,
)

__all__ = [
    "TEST_METADATA",
    "Builder",
    "PhoneNumberFixtureBuilder",
    "area_code_map_strategy",
    "build_test_registry",
    "national_number_strategy",
    "phone_number_strategy",
    "phone_text_strategy",
]

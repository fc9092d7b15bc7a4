"""Kernel value types."""

from mp_phonenumbers.kernel.types.phone_number import (
    CountryCodeSource,
    PhoneNumber,
    PhoneNumberBuilder,
    get_national_significant_number,
)
from mp_phonenumbers.kernel.types.regions import (
    NANPA_COUNTRY_CODE,
    REGION_CODE_FOR_NON_GEO_ENTITY,
    UNKNOWN_REGION,
)

__all__ = [
    "NANPA_COUNTRY_CODE",
    "REGION_CODE_FOR_NON_GEO_ENTITY",
    "UNKNOWN_REGION",
    "CountryCodeSource",
    "PhoneNumber",
    "PhoneNumberBuilder",
    "get_national_significant_number",
]

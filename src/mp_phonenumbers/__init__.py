"""
mp_phonenumbers - phone number parsing, formatting and validation.

Import path convention::

    from mp_phonenumbers import PhoneNumberUtil, PhoneNumberFormat
    from mp_phonenumbers.metadata import load_registry_from_json
    from mp_phonenumbers.geocoding import AreaCodeMap
"""

from mp_phonenumbers.formatting.styles import PhoneNumberFormat
from mp_phonenumbers.kernel.errors.parse import ErrorType, NumberParseError
from mp_phonenumbers.kernel.types.phone_number import CountryCodeSource, PhoneNumber, PhoneNumberBuilder
from mp_phonenumbers.matching.matcher import MatchType
from mp_phonenumbers.util import PhoneNumberUtil
from mp_phonenumbers.validation.types import PhoneNumberType, ValidationResult

__version__ = "0.1.0"
__all__ = [
    "CountryCodeSource",
    "ErrorType",
    "MatchType",
    "NumberParseError",
    "PhoneNumber",
    "PhoneNumberBuilder",
    "PhoneNumberFormat",
    "PhoneNumberType",
    "PhoneNumberUtil",
    "ValidationResult",
    "__version__",
]

"""Number categories and possibility verdicts."""

from __future__ import annotations

import enum
import re


class PhoneNumberType(enum.Enum):
    """Category of a valid number; ``UNKNOWN`` for anything that does not validate."""

    FIXED_LINE = 0
    MOBILE = 1
    # Regions where fixed-line and mobile numbers cannot be told apart.
    FIXED_LINE_OR_MOBILE = 2
    TOLL_FREE = 3
    PREMIUM_RATE = 4
    SHARED_COST = 5
    VOIP = 6
    PERSONAL_NUMBER = 7
    PAGER = 8
    UAN = 9
    UNKNOWN = 10


class ValidationResult(enum.Enum):
    """Outcome of a length-only possibility check."""

    IS_POSSIBLE = 0
    INVALID_COUNTRY_CODE = 1
    TOO_SHORT = 2
    TOO_LONG = 3


def check_number_length(pattern: re.Pattern[str], number: str) -> ValidationResult:
    """Compare *number* against a possible-number pattern.

    A full match is possible; a match of a prefix means the number carries
    extra digits; anything else is too short.
    """
    if pattern.fullmatch(number):
        return ValidationResult.IS_POSSIBLE
    if pattern.match(number):
        return ValidationResult.TOO_LONG
    return ValidationResult.TOO_SHORT


__all__ = ["PhoneNumberType", "ValidationResult", "check_number_length"]

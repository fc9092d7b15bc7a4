"""Matcher: how likely two numbers are to reach the same line."""

from __future__ import annotations

import enum
import logging

from mp_phonenumbers.kernel.errors.parse import ErrorType, NumberParseError
from mp_phonenumbers.kernel.types.phone_number import PhoneNumber
from mp_phonenumbers.kernel.types.regions import UNKNOWN_REGION
from mp_phonenumbers.metadata.registry import MetadataRegistry
from mp_phonenumbers.parsing.parser import Parser

logger = logging.getLogger(__name__)


class MatchType(enum.Enum):
    """Strength of a match, weakest first."""

    NOT_A_NUMBER = 0
    NO_MATCH = 1
    SHORT_NSN_MATCH = 2
    NSN_MATCH = 3
    EXACT_MATCH = 4


def _comparable(number: PhoneNumber) -> PhoneNumber:
    """Drop the fields that say how a number was written, not which line it is."""
    builder = (
        number.to_builder()
        .clear_raw_input()
        .clear_country_code_source()
        .clear_preferred_domestic_carrier_code()
    )
    if number.extension == "":
        builder.clear_extension()
    return builder.build()


def _is_national_number_suffix(first: PhoneNumber, second: PhoneNumber) -> bool:
    first_digits = str(first.national_number)
    second_digits = str(second.national_number)
    return first_digits.endswith(second_digits) or second_digits.endswith(first_digits)


class Matcher:
    """Compares numbers given as :class:`PhoneNumber` values or as text.

    Text is parsed without a default region first. When that fails for want
    of a calling code, the other side's calling code is borrowed, which can
    only give a :attr:`MatchType.NSN_MATCH` at best.
    """

    def __init__(self, registry: MetadataRegistry, parser: Parser) -> None:
        self._registry = registry
        self._parser = parser

    def is_number_match(self, first: PhoneNumber | str, second: PhoneNumber | str) -> MatchType:
        if isinstance(first, PhoneNumber) and isinstance(second, PhoneNumber):
            return self._match_numbers(first, second)
        if isinstance(first, PhoneNumber):
            return self._match_number_and_text(first, str(second))
        if isinstance(second, PhoneNumber):
            return self._match_number_and_text(second, first)
        return self._match_texts(first, second)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _match_numbers(self, first: PhoneNumber, second: PhoneNumber) -> MatchType:
        first = _comparable(first)
        second = _comparable(second)
        if first.has_extension and second.has_extension and first.extension != second.extension:
            return MatchType.NO_MATCH

        first_code = first.country_code
        second_code = second.country_code
        if first_code != 0 and second_code != 0:
            if first.exactly_same_as(second):
                return MatchType.EXACT_MATCH
            if first_code == second_code and _is_national_number_suffix(first, second):
                # One side may have lost its area code or a leading zero.
                return MatchType.SHORT_NSN_MATCH
            return MatchType.NO_MATCH

        # At least one calling code is unknown: compare on the other's.
        first = first.to_builder().set_country_code(second_code).build()
        if first.exactly_same_as(second):
            return MatchType.NSN_MATCH
        if _is_national_number_suffix(first, second):
            return MatchType.SHORT_NSN_MATCH
        return MatchType.NO_MATCH

    def _match_number_and_text(self, number: PhoneNumber, text: str) -> MatchType:
        try:
            other = self._parser.parse(text, UNKNOWN_REGION)
        except NumberParseError as exc:
            if exc.error_type is not ErrorType.INVALID_COUNTRY_CODE:
                return MatchType.NOT_A_NUMBER
        else:
            return self._match_numbers(number, other)

        region = self._registry.get_region_code_for_country_code(number.country_code)
        try:
            if region != UNKNOWN_REGION:
                other = self._parser.parse(text, region)
                match = self._match_numbers(number, other)
                # The calling code was assumed, so the best possible is an NSN match.
                return MatchType.NSN_MATCH if match is MatchType.EXACT_MATCH else match
            other = self._parser.parse_with_options(text, None, check_region=False)
        except NumberParseError:
            return MatchType.NOT_A_NUMBER
        return self._match_numbers(number, other)

    def _match_texts(self, first: str, second: str) -> MatchType:
        try:
            number = self._parser.parse(first, UNKNOWN_REGION)
        except NumberParseError as exc:
            if exc.error_type is not ErrorType.INVALID_COUNTRY_CODE:
                return MatchType.NOT_A_NUMBER
        else:
            return self._match_number_and_text(number, second)

        try:
            number = self._parser.parse(second, UNKNOWN_REGION)
        except NumberParseError as exc:
            if exc.error_type is not ErrorType.INVALID_COUNTRY_CODE:
                return MatchType.NOT_A_NUMBER
        else:
            return self._match_number_and_text(number, first)

        try:
            first_number = self._parser.parse_with_options(first, None, check_region=False)
            second_number = self._parser.parse_with_options(second, None, check_region=False)
        except NumberParseError:
            logger.debug("matcher.not_a_number")
            return MatchType.NOT_A_NUMBER
        return self._match_numbers(first_number, second_number)


__all__ = ["MatchType", "Matcher"]

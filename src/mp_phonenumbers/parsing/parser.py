"""Parser: free-form text to a structured :class:`PhoneNumber`.

The pipeline, in order:

1. cap the input length and cut the text down to its number-like part
   (RFC 3966 ``tel:`` URIs contribute their ``phone-context``);
2. reject text that is not viable, or that needs a default region but
   names none;
3. split off an extension;
4. find the country calling code (plus sign, international prefix, or the
   default region's code written without a plus);
5. strip the national prefix and any carrier selection code;
6. bound-check the remaining digits and keep leading zeros aside.

Every failure raises :class:`NumberParseError` with its :class:`ErrorType`.
"""

from __future__ import annotations

import logging

from mp_phonenumbers.kernel.errors.parse import ErrorType, NumberParseError
from mp_phonenumbers.kernel.types.phone_number import (
    CountryCodeSource,
    PhoneNumber,
    PhoneNumberBuilder,
)
from mp_phonenumbers.metadata.region import PhoneMetadata
from mp_phonenumbers.metadata.registry import MetadataRegistry
from mp_phonenumbers.text.constants import (
    CAPTURING_DIGIT_PATTERN,
    MAX_INPUT_STRING_LENGTH,
    MAX_LENGTH_COUNTRY_CODE,
    MAX_LENGTH_FOR_NSN,
    MIN_LENGTH_FOR_NSN,
    NON_MATCHING_IDD,
    PLUS_CHARS_PATTERN,
    PLUS_SIGN,
    RFC3966_ISDN_SUBADDRESS,
    RFC3966_PHONE_CONTEXT,
    RFC3966_PREFIX,
)
from mp_phonenumbers.text.normalizer import (
    expand_group_references,
    extract_possible_number,
    is_viable_phone_number,
    maybe_strip_extension,
    normalize,
    normalize_digits_only,
)
from mp_phonenumbers.validation.types import ValidationResult, check_number_length

logger = logging.getLogger(__name__)


def build_national_number_for_parsing(text: str) -> str:
    """Reduce *text* to the characters worth parsing.

    For a ``tel:`` URI the number part is taken from between the scheme and
    ``;phone-context=``; the context is prepended when it is a global number
    (starts with ``+``) and ignored otherwise. Any ``;isub=`` subaddress is
    dropped.
    """
    context_index = text.find(RFC3966_PHONE_CONTEXT)
    if context_index > 0:
        national = ""
        context_start = context_index + len(RFC3966_PHONE_CONTEXT)
        if text.startswith(PLUS_SIGN, context_start):
            context_end = text.find(";", context_start)
            national = text[context_start:context_end] if context_end > 0 else text[context_start:]
        scheme_index = text.find(RFC3966_PREFIX)
        number_start = scheme_index + len(RFC3966_PREFIX) if scheme_index >= 0 else 0
        national += text[number_start:context_index]
    else:
        national = extract_possible_number(text)

    subaddress_index = national.find(RFC3966_ISDN_SUBADDRESS)
    if subaddress_index > 0:
        national = national[:subaddress_index]
    return national


class Parser:
    """Turns user text into :class:`PhoneNumber` values using one registry."""

    def __init__(self, registry: MetadataRegistry) -> None:
        self._registry = registry

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def parse(self, text: str | None, default_region: str | None) -> PhoneNumber:
        """Parse *text*, reading national numbers as dialed from *default_region*.

        *default_region* may be ``None`` or ``"ZZ"`` only when the text
        starts with a plus sign.
        """
        return self.parse_with_options(text, default_region)

    def parse_and_keep_raw_input(self, text: str | None, default_region: str | None) -> PhoneNumber:
        """Like :meth:`parse` but also records the raw input, the country code
        source and the preferred domestic carrier code."""
        return self.parse_with_options(text, default_region, keep_raw_input=True)

    def parse_with_options(
        self,
        text: str | None,
        default_region: str | None,
        *,
        keep_raw_input: bool = False,
        check_region: bool = True,
    ) -> PhoneNumber:
        """Full pipeline; ``check_region=False`` lets numbers without a
        country code through with ``country_code == 0``."""
        if text is None:
            raise NumberParseError(ErrorType.NOT_A_NUMBER, "The phone number supplied was None.")
        if len(text) > MAX_INPUT_STRING_LENGTH:
            raise NumberParseError(ErrorType.TOO_LONG, "The string supplied was too long to parse.")

        national = build_national_number_for_parsing(text)
        if not is_viable_phone_number(national):
            raise NumberParseError(
                ErrorType.NOT_A_NUMBER, "The string supplied did not seem to be a phone number."
            )
        if check_region and not self._check_region_for_parsing(national, default_region):
            raise NumberParseError(
                ErrorType.INVALID_COUNTRY_CODE, "Missing or invalid default region."
            )

        builder = PhoneNumberBuilder()
        if keep_raw_input:
            builder.set_raw_input(text)
        national, extension = maybe_strip_extension(national)
        if extension:
            builder.set_extension(extension)

        region_metadata = self._registry.get_metadata_for_region(default_region)
        try:
            country_code, normalized = self.maybe_extract_country_code(
                national, region_metadata, builder, keep_raw_input
            )
        except NumberParseError as exc:
            plus = PLUS_CHARS_PATTERN.match(national)
            if exc.error_type is not ErrorType.INVALID_COUNTRY_CODE or plus is None:
                raise
            # A plus followed by an international prefix: read past the plus.
            country_code, normalized = self.maybe_extract_country_code(
                national[plus.end():], region_metadata, builder, keep_raw_input
            )
            if country_code == 0:
                raise NumberParseError(
                    ErrorType.INVALID_COUNTRY_CODE, "Could not interpret numbers after plus-sign."
                ) from exc

        if country_code != 0:
            number_region = self._registry.get_region_code_for_country_code(country_code)
            if number_region != default_region:
                region_metadata = self._registry.get_metadata_for_region_or_calling_code(
                    country_code, number_region
                )
        else:
            normalized = normalize(national)
            if region_metadata is not None:
                country_code = region_metadata.country_code
            elif keep_raw_input:
                builder.clear_country_code_source()
        builder.set_country_code(country_code)

        if len(normalized) < MIN_LENGTH_FOR_NSN:
            raise NumberParseError(
                ErrorType.TOO_SHORT_NSN, "The string supplied is too short to be a phone number."
            )
        if region_metadata is not None:
            _, normalized, carrier_code = self.maybe_strip_national_prefix_and_carrier_code(
                normalized, region_metadata
            )
            if keep_raw_input:
                builder.set_preferred_domestic_carrier_code(carrier_code)
        if len(normalized) < MIN_LENGTH_FOR_NSN:
            raise NumberParseError(
                ErrorType.TOO_SHORT_NSN, "The string supplied is too short to be a phone number."
            )
        if len(normalized) > MAX_LENGTH_FOR_NSN:
            raise NumberParseError(
                ErrorType.TOO_LONG, "The string supplied is too long to be a phone number."
            )

        if (
            normalized.startswith("0")
            and region_metadata is not None
            and region_metadata.leading_zero_possible
        ):
            builder.set_italian_leading_zero(True)
            zeros = 1
            while zeros < len(normalized) - 1 and normalized[zeros] == "0":
                zeros += 1
            if zeros != 1:
                builder.set_number_of_leading_zeros(zeros)
        builder.set_national_number(int(normalized))
        number = builder.build()
        logger.debug(
            "parser.parsed country_code=%d source=%s", number.country_code, number.country_code_source.name
        )
        return number

    # ------------------------------------------------------------------
    # Building blocks
    # ------------------------------------------------------------------

    def maybe_extract_country_code(
        self,
        number: str,
        default_metadata: PhoneMetadata | None,
        builder: PhoneNumberBuilder,
        keep_raw_input: bool,
    ) -> tuple[int, str]:
        """Find a country calling code at the start of *number*.

        Returns ``(country_code, national_number)``. The national number is
        normalized and stripped of the code; both are ``(0, "")`` when no
        code was written. With *keep_raw_input* the builder records where
        the code came from.
        """
        if not number:
            return 0, ""
        idd = default_metadata.international_prefix if default_metadata is not None else NON_MATCHING_IDD
        source, full_number = self.maybe_strip_international_prefix_and_normalize(number, idd)
        if keep_raw_input:
            builder.set_country_code_source(source)

        if source is not CountryCodeSource.FROM_DEFAULT_COUNTRY:
            if len(full_number) <= MIN_LENGTH_FOR_NSN:
                raise NumberParseError(
                    ErrorType.TOO_SHORT_AFTER_IDD,
                    "Phone number had an IDD, but after this was not long enough to be a viable phone number.",
                )
            country_code, national = self.extract_country_code(full_number)
            if country_code != 0:
                return country_code, national
            raise NumberParseError(
                ErrorType.INVALID_COUNTRY_CODE, "Country calling code supplied was not recognised."
            )

        if default_metadata is not None:
            code = str(default_metadata.country_code)
            if full_number.startswith(code):
                potential = full_number[len(code):]
                general = default_metadata.general_desc
                valid_pattern = self._registry.regex(general.national_number_pattern)
                _, potential, _ = self.maybe_strip_national_prefix_and_carrier_code(
                    potential, default_metadata
                )
                possible_pattern = self._registry.regex(general.possible_number_pattern)
                if (
                    not valid_pattern.fullmatch(full_number) and valid_pattern.fullmatch(potential)
                ) or check_number_length(possible_pattern, full_number) is ValidationResult.TOO_LONG:
                    if keep_raw_input:
                        builder.set_country_code_source(CountryCodeSource.FROM_NUMBER_WITHOUT_PLUS_SIGN)
                    return default_metadata.country_code, potential
        return 0, ""

    def maybe_strip_international_prefix_and_normalize(
        self, number: str, possible_idd_prefix: str
    ) -> tuple[CountryCodeSource, str]:
        """Strip a leading plus or international prefix and normalize the rest.

        Returns the :class:`CountryCodeSource` that applies and the
        normalized remainder.
        """
        if not number:
            return CountryCodeSource.FROM_DEFAULT_COUNTRY, number
        plus = PLUS_CHARS_PATTERN.match(number)
        if plus is not None:
            return CountryCodeSource.FROM_NUMBER_WITH_PLUS_SIGN, normalize(number[plus.end():])
        normalized = normalize(number)
        stripped = self._parse_prefix_as_idd(possible_idd_prefix, normalized)
        if stripped is None:
            return CountryCodeSource.FROM_DEFAULT_COUNTRY, normalized
        return CountryCodeSource.FROM_NUMBER_WITH_IDD, stripped

    def _parse_prefix_as_idd(self, idd_pattern: str, number: str) -> str | None:
        match = self._registry.regex(idd_pattern).match(number)
        if match is None:
            return None
        # Country codes never start with 0, so "IDD then 0" is not an IDD.
        digit = CAPTURING_DIGIT_PATTERN.search(number, match.end())
        if digit is not None and normalize_digits_only(digit.group(1)) == "0":
            return None
        return number[match.end():]

    def extract_country_code(self, full_number: str) -> tuple[int, str]:
        """Read the shortest known calling code off the front of *full_number*.

        Returns ``(0, full_number)`` when none of the first three digits form
        a known code.
        """
        if not full_number or full_number[0] == "0":
            return 0, full_number
        for length in range(1, min(MAX_LENGTH_COUNTRY_CODE, len(full_number)) + 1):
            candidate = int(full_number[:length])
            if self._registry.has_country_code(candidate):
                return candidate, full_number[length:]
        return 0, full_number

    def maybe_strip_national_prefix_and_carrier_code(
        self, number: str, metadata: PhoneMetadata
    ) -> tuple[bool, str, str]:
        """Strip the national prefix (and a carrier code captured with it).

        Returns ``(stripped, national_number, carrier_code)``. The prefix is
        left in place when the number is valid as written and stripping it
        would make it invalid.
        """
        prefix_for_parsing = metadata.national_prefix_for_parsing
        if not number or not prefix_for_parsing:
            return False, number, ""
        match = self._registry.regex(prefix_for_parsing).match(number)
        if match is None:
            return False, number, ""

        national_rule = self._registry.regex(metadata.general_desc.national_number_pattern)
        viable_original = national_rule.fullmatch(number) is not None
        group_count = len(match.groups())
        transform_rule = metadata.national_prefix_transform_rule
        last_group = match.group(group_count) if group_count else None

        if not transform_rule or last_group is None:
            rest = number[match.end():]
            if viable_original and not national_rule.fullmatch(rest):
                return False, number, ""
            carrier_code = match.group(1) if group_count and last_group is not None else ""
            return True, rest, carrier_code

        transformed = expand_group_references(transform_rule, match) + number[match.end():]
        if viable_original and not national_rule.fullmatch(transformed):
            return False, number, ""
        carrier_code = (match.group(1) or "") if group_count > 1 else ""
        return True, transformed, carrier_code

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_region_for_parsing(self, number: str, default_region: str | None) -> bool:
        if self._registry.is_valid_region_code(default_region):
            return True
        return bool(number) and PLUS_CHARS_PATTERN.match(number) is not None


__all__ = ["Parser", "build_national_number_for_parsing"]

"""PhoneNumberUtil: one object wiring every engine component to a registry.

The components can be used on their own; this facade only shares one
:class:`MetadataRegistry` (and so one compiled-regex cache) between them and
adds the queries that need more than one component::

    util = PhoneNumberUtil(load_registry_from_json("metadata.json"), default_region="NZ")
    number = util.parse("03-331 6005")
    util.format(number, PhoneNumberFormat.INTERNATIONAL)  # '+64 3-331 6005'

There is no process-wide instance; build one per configuration, for example
with :meth:`PhoneNumberUtil.from_settings`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

from mp_phonenumbers.config.settings.phonenumbers import PhoneNumberSettings
from mp_phonenumbers.formatting.formatter import Formatter
from mp_phonenumbers.formatting.styles import PhoneNumberFormat
from mp_phonenumbers.kernel.errors.parse import NumberParseError
from mp_phonenumbers.kernel.types.phone_number import PhoneNumber, get_national_significant_number
from mp_phonenumbers.kernel.types.regions import UNKNOWN_REGION
from mp_phonenumbers.matching.matcher import Matcher, MatchType
from mp_phonenumbers.metadata.format_rule import NumberFormat
from mp_phonenumbers.metadata.loaders import load_registry_from_json
from mp_phonenumbers.metadata.region import DESC_FIELDS, PhoneMetadata
from mp_phonenumbers.metadata.registry import MetadataRegistry
from mp_phonenumbers.observability.logging.factory import JsonLoggerFactory
from mp_phonenumbers.observability.logging.processors import get_logger
from mp_phonenumbers.parsing.parser import Parser
from mp_phonenumbers.text import normalizer
from mp_phonenumbers.text.constants import NON_DIGITS_PATTERN
from mp_phonenumbers.validation.classifier import Classifier, get_number_desc_by_type
from mp_phonenumbers.validation.types import PhoneNumberType, ValidationResult

logger = logging.getLogger(__name__)

# Digits dialled between the country code and the area code of mobile numbers.
_MOBILE_TOKENS: Final = {54: "9"}


class PhoneNumberUtil:
    """Parse, format, validate and compare phone numbers against one registry."""

    def __init__(self, registry: MetadataRegistry, *, default_region: str = UNKNOWN_REGION) -> None:
        self._registry = registry
        self._default_region = default_region
        self.parser = Parser(registry)
        self.classifier = Classifier(registry)
        self.formatter = Formatter(registry, self.parser, self.classifier)
        self.matcher = Matcher(registry, self.parser)

    @classmethod
    def from_settings(cls, settings: PhoneNumberSettings) -> PhoneNumberUtil:
        """Build a facade from configuration, setting up JSON logging if asked."""
        if settings.json_logs:
            JsonLoggerFactory.configure(level=settings.log_level_number)
        registry = load_registry_from_json(settings.metadata_path)
        util = cls(registry, default_region=settings.default_region)
        get_logger(__name__).info(
            "phonenumbers.util.ready",
            metadata_path=settings.metadata_path,
            default_region=settings.default_region,
            regions=len(registry.supported_regions),
        )
        return util

    @property
    def registry(self) -> MetadataRegistry:
        return self._registry

    @property
    def default_region(self) -> str:
        return self._default_region

    def _region_or_default(self, region_code: str | None) -> str | None:
        return region_code if region_code is not None else self._default_region

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def get_metadata_for_region(self, region_code: str | None) -> PhoneMetadata | None:
        return self._registry.get_metadata_for_region(region_code)

    def get_metadata_for_non_geographical_region(self, country_code: int) -> PhoneMetadata | None:
        return self._registry.get_metadata_for_non_geographical_region(country_code)

    def get_supported_regions(self) -> frozenset[str]:
        return self._registry.supported_regions

    def get_supported_global_network_calling_codes(self) -> frozenset[int]:
        return self._registry.supported_global_network_calling_codes

    def get_region_code_for_country_code(self, country_code: int) -> str:
        return self._registry.get_region_code_for_country_code(country_code)

    def get_region_codes_for_country_code(self, country_code: int) -> tuple[str, ...]:
        return self._registry.get_region_codes_for_country_code(country_code)

    def get_country_code_for_region(self, region_code: str | None) -> int:
        return self._registry.get_country_code_for_region(region_code)

    def get_ndd_prefix_for_region(self, region_code: str | None, strip_non_digits: bool) -> str | None:
        return self.classifier.get_ndd_prefix_for_region(region_code, strip_non_digits)

    def is_nanpa_country(self, region_code: str | None) -> bool:
        return self.classifier.is_nanpa_country(region_code)

    def is_leading_zero_possible(self, country_code: int) -> bool:
        return self.classifier.is_leading_zero_possible(country_code)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    @staticmethod
    def normalize(text: str) -> str:
        return normalizer.normalize(text)

    @staticmethod
    def normalize_digits_only(text: str) -> str:
        return normalizer.normalize_digits_only(text)

    @staticmethod
    def convert_alpha_characters_in_number(text: str) -> str:
        return normalizer.convert_alpha_characters_in_number(text)

    @staticmethod
    def extract_possible_number(text: str) -> str:
        return normalizer.extract_possible_number(text)

    @staticmethod
    def is_viable_phone_number(text: str) -> bool:
        return normalizer.is_viable_phone_number(text)

    @staticmethod
    def is_alpha_number(text: str) -> bool:
        return normalizer.is_alpha_number(text)

    @staticmethod
    def get_national_significant_number(number: PhoneNumber) -> str:
        return get_national_significant_number(number)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, text: str | None, default_region: str | None = None) -> PhoneNumber:
        """Parse *text*; *default_region* falls back to the facade's default."""
        return self.parser.parse(text, self._region_or_default(default_region))

    def parse_and_keep_raw_input(self, text: str | None, default_region: str | None = None) -> PhoneNumber:
        return self.parser.parse_and_keep_raw_input(text, self._region_or_default(default_region))

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, number: PhoneNumber, style: PhoneNumberFormat) -> str:
        return self.formatter.format(number, style)

    def format_by_pattern(
        self, number: PhoneNumber, style: PhoneNumberFormat, user_formats: Sequence[NumberFormat]
    ) -> str:
        return self.formatter.format_by_pattern(number, style, user_formats)

    def format_national_number_with_carrier_code(self, number: PhoneNumber, carrier_code: str) -> str:
        return self.formatter.format_national_number_with_carrier_code(number, carrier_code)

    def format_national_number_with_preferred_carrier_code(
        self, number: PhoneNumber, fallback_carrier_code: str
    ) -> str:
        return self.formatter.format_national_number_with_preferred_carrier_code(number, fallback_carrier_code)

    def format_number_for_mobile_dialing(
        self, number: PhoneNumber, region_calling_from: str | None, with_formatting: bool
    ) -> str:
        return self.formatter.format_number_for_mobile_dialing(number, region_calling_from, with_formatting)

    def format_out_of_country_calling_number(self, number: PhoneNumber, region_calling_from: str | None) -> str:
        return self.formatter.format_out_of_country_calling_number(number, region_calling_from)

    def format_out_of_country_keeping_alpha_chars(
        self, number: PhoneNumber, region_calling_from: str | None
    ) -> str:
        return self.formatter.format_out_of_country_keeping_alpha_chars(number, region_calling_from)

    def format_in_original_format(self, number: PhoneNumber, region_calling_from: str | None) -> str:
        return self.formatter.format_in_original_format(number, region_calling_from)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def get_number_type(self, number: PhoneNumber) -> PhoneNumberType:
        return self.classifier.get_number_type(number)

    def is_number_geographical(self, number: PhoneNumber) -> bool:
        return self.classifier.is_number_geographical(number)

    def is_valid_number(self, number: PhoneNumber) -> bool:
        return self.classifier.is_valid_number(number)

    def is_valid_number_for_region(self, number: PhoneNumber, region_code: str | None) -> bool:
        return self.classifier.is_valid_number_for_region(number, region_code)

    def get_region_code_for_number(self, number: PhoneNumber) -> str | None:
        return self.classifier.get_region_code_for_number(number)

    def is_possible_number(self, number: PhoneNumber) -> bool:
        return self.classifier.is_possible_number(number)

    def is_possible_number_with_reason(self, number: PhoneNumber) -> ValidationResult:
        return self.classifier.is_possible_number_with_reason(number)

    def is_possible_number_string(self, text: str, region_dialing_from: str | None) -> bool:
        """Parse *text* and check its length; unparseable text is not possible."""
        try:
            number = self.parse(text, region_dialing_from)
        except NumberParseError as exc:
            logger.debug("util.possible_string.unparseable error_type=%s", exc.error_type.name)
            return False
        return self.is_possible_number(number)

    def truncate_too_long_number(self, number: PhoneNumber) -> tuple[bool, PhoneNumber]:
        return self.classifier.truncate_too_long_number(number)

    def can_be_internationally_dialled(self, number: PhoneNumber) -> bool:
        return self.classifier.can_be_internationally_dialled(number)

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def is_number_match(self, first: PhoneNumber | str, second: PhoneNumber | str) -> MatchType:
        return self.matcher.is_number_match(first, second)

    # ------------------------------------------------------------------
    # Area and destination codes
    # ------------------------------------------------------------------

    def get_length_of_geographical_area_code(self, number: PhoneNumber) -> int:
        """Digits of the area code of a geographical number, 0 when there is none.

        Only regions that use a national prefix (or numbers with leading
        zeros, like Italian ones) are considered to have area codes.
        """
        metadata = self._registry.get_metadata_for_region(self.get_region_code_for_number(number))
        if metadata is None:
            return 0
        if not metadata.has_national_prefix and not number.italian_leading_zero:
            return 0
        if not self.is_number_geographical(number):
            return 0
        return self.get_length_of_national_destination_code(number)

    def get_length_of_national_destination_code(self, number: PhoneNumber) -> int:
        """Digits of the national destination code, read off the INTERNATIONAL layout.

        The code is the first group after the country code; for mobile
        numbers of countries with a mobile token the token group counts too.
        Numbers laid out as one block have no destination code.
        """
        without_extension = number.to_builder().clear_extension().build()
        formatted = self.format(without_extension, PhoneNumberFormat.INTERNATIONAL)
        groups = NON_DIGITS_PATTERN.split(formatted)
        # groups[0] is empty (before the plus) and groups[1] is the country code.
        if len(groups) <= 3:
            return 0
        if self.get_number_type(number) is PhoneNumberType.MOBILE and _MOBILE_TOKENS.get(number.country_code):
            return len(groups[2]) + len(groups[3])
        return len(groups[2])

    # ------------------------------------------------------------------
    # Example numbers
    # ------------------------------------------------------------------

    def get_example_number(self, region_code: str) -> PhoneNumber | None:
        return self.get_example_number_for_type(region_code, PhoneNumberType.FIXED_LINE)

    def get_example_number_for_type(self, region_code: str, number_type: PhoneNumberType) -> PhoneNumber | None:
        """Parsed example of *number_type* in *region_code*, ``None`` when there is none."""
        metadata = self._registry.get_metadata_for_region(region_code)
        if metadata is None:
            logger.warning("util.example.unknown_region region=%s", region_code)
            return None
        example = get_number_desc_by_type(metadata, number_type).example_number
        if not example:
            return None
        try:
            return self.parser.parse(example, region_code)
        except NumberParseError as exc:
            logger.error("util.example.unparseable region=%s error_type=%s", region_code, exc.error_type.name)
            return None

    def get_example_number_for_non_geo_entity(self, country_code: int) -> PhoneNumber | None:
        """First example number of a non-geographic calling code, general one first."""
        metadata = self._registry.get_metadata_for_non_geographical_region(country_code)
        if metadata is None:
            logger.warning("util.example.unknown_non_geo country_code=%d", country_code)
            return None
        for field in DESC_FIELDS:
            example = getattr(metadata, field).example_number
            if not example:
                continue
            try:
                return self.parser.parse(f"+{country_code}{example}", UNKNOWN_REGION)
            except NumberParseError as exc:
                logger.error(
                    "util.example.unparseable country_code=%d error_type=%s", country_code, exc.error_type.name
                )
        return None

    def __repr__(self) -> str:
        return f"PhoneNumberUtil(registry={self._registry!r}, default_region={self._default_region!r})"


__all__ = ["PhoneNumberUtil"]

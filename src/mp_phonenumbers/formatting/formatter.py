"""Formatter: structured numbers to human-readable text.

Formatting looks up the metadata of the *main* region of the number's
calling code, so every NANPA number is laid out with the US rules. The
national significant number is matched against the region's rule list
(the international list for international styles, when the region has one)
and the first rule whose last leading-digits pattern and full pattern both
accept it is applied. Numbers no rule accepts are emitted as plain digits.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence

from mp_phonenumbers.formatting.styles import PhoneNumberFormat
from mp_phonenumbers.kernel.errors.parse import NumberParseError
from mp_phonenumbers.kernel.types.phone_number import (
    CountryCodeSource,
    PhoneNumber,
    get_national_significant_number,
)
from mp_phonenumbers.kernel.types.regions import NANPA_COUNTRY_CODE
from mp_phonenumbers.metadata.format_rule import NumberFormat
from mp_phonenumbers.metadata.region import PhoneMetadata
from mp_phonenumbers.metadata.registry import MetadataRegistry
from mp_phonenumbers.parsing.parser import Parser
from mp_phonenumbers.text.constants import (
    ALL_PLUS_NUMBER_GROUPING_SYMBOLS,
    DEFAULT_EXTN_PREFIX,
    DIALLABLE_CHAR_MAPPINGS,
    FIRST_GROUP_PATTERN,
    LEADING_SEPARATOR_PATTERN,
    PLUS_SIGN,
    RFC3966_EXTN_PREFIX,
    RFC3966_PREFIX,
    SEPARATOR_PATTERN,
    UNIQUE_INTERNATIONAL_PREFIX_PATTERN,
)
from mp_phonenumbers.text.normalizer import (
    expand_group_references,
    normalize_digits_only,
    normalize_helper,
)
from mp_phonenumbers.validation.classifier import Classifier

logger = logging.getLogger(__name__)

_KEEP_EVERYTHING_PATTERN = r"(\d+)(.*)"
_KEEP_EVERYTHING_FORMAT = "$1$2"


def _prefix_with_country_code(country_code: int, style: PhoneNumberFormat, formatted: str) -> str:
    if style is PhoneNumberFormat.E164:
        return f"{PLUS_SIGN}{country_code}{formatted}"
    if style is PhoneNumberFormat.INTERNATIONAL:
        return f"{PLUS_SIGN}{country_code} {formatted}"
    if style is PhoneNumberFormat.RFC3966:
        return f"{RFC3966_PREFIX}{PLUS_SIGN}{country_code}-{formatted}"
    return formatted


def _insert_around_first_group(layout: str, rule: str) -> str:
    """Replace the first ``$n`` of *layout* with *rule*, whose ``$FG`` stands for it."""
    match = FIRST_GROUP_PATTERN.search(layout)
    if match is None:
        return layout
    first_group = match.group(1)
    return layout[: match.start()] + rule.replace("$FG", first_group) + layout[match.end():]


class Formatter:
    """Every formatting entry point, bound to one registry.

    The parser and classifier are needed by the entry points that re-read
    raw input or decide whether a number can be dialled from abroad.
    """

    def __init__(self, registry: MetadataRegistry, parser: Parser, classifier: Classifier) -> None:
        self._registry = registry
        self._parser = parser
        self._classifier = classifier

    # ------------------------------------------------------------------
    # Plain styles
    # ------------------------------------------------------------------

    def format(self, number: PhoneNumber, style: PhoneNumberFormat) -> str:
        """Render *number* in *style*.

        All-zero numbers are test or spoof numbers: their raw input is
        returned as typed when there is one, ``"0"`` otherwise. A rule that
        marks the national prefix optional leaves it out of NATIONAL output
        when the raw input was typed without it.
        """
        if number.national_number == 0:
            return number.raw_input or "0"
        country_code = number.country_code
        national_number = get_national_significant_number(number)
        if style is PhoneNumberFormat.E164:
            return _prefix_with_country_code(country_code, style, national_number)
        metadata = self._main_metadata(country_code)
        if metadata is None:
            return national_number
        formatted = self._format_nsn(national_number, metadata, style, number=number)
        formatted += self._formatted_extension(number, metadata, style)
        return _prefix_with_country_code(country_code, style, formatted)

    def format_by_pattern(
        self,
        number: PhoneNumber,
        style: PhoneNumberFormat,
        user_formats: Sequence[NumberFormat],
    ) -> str:
        """Render *number* with caller-supplied rules instead of the metadata's.

        ``$NP`` in a rule's national prefix template is resolved against the
        number's main region; without a national prefix the template is
        dropped. *user_formats* is never modified.
        """
        country_code = number.country_code
        national_number = get_national_significant_number(number)
        metadata = self._main_metadata(country_code)
        if metadata is None:
            return national_number
        rule = self.choose_formatting_pattern_for_number(user_formats, national_number)
        if rule is None:
            formatted = national_number
        else:
            template = rule.national_prefix_formatting_rule
            if template:
                if metadata.national_prefix:
                    template = template.replace("$NP", metadata.national_prefix, 1)
                else:
                    template = ""
                rule = dataclasses.replace(rule, national_prefix_formatting_rule=template)
            formatted = self.format_nsn_using_pattern(national_number, rule, style)
        formatted += self._formatted_extension(number, metadata, style)
        return _prefix_with_country_code(country_code, style, formatted)

    # ------------------------------------------------------------------
    # Carrier codes
    # ------------------------------------------------------------------

    def format_national_number_with_carrier_code(self, number: PhoneNumber, carrier_code: str) -> str:
        """NATIONAL rendering with *carrier_code* spliced in where the region allows it."""
        country_code = number.country_code
        national_number = get_national_significant_number(number)
        metadata = self._main_metadata(country_code)
        if metadata is None:
            return national_number
        formatted = self._format_nsn(national_number, metadata, PhoneNumberFormat.NATIONAL, carrier_code)
        formatted += self._formatted_extension(number, metadata, PhoneNumberFormat.NATIONAL)
        return _prefix_with_country_code(country_code, PhoneNumberFormat.NATIONAL, formatted)

    def format_national_number_with_preferred_carrier_code(
        self, number: PhoneNumber, fallback_carrier_code: str
    ) -> str:
        """Like :meth:`format_national_number_with_carrier_code` using the number's own
        preferred carrier code when it has one, even an empty one."""
        carrier_code = (
            number.preferred_domestic_carrier_code
            if number.has_preferred_domestic_carrier_code
            else fallback_carrier_code
        )
        return self.format_national_number_with_carrier_code(number, carrier_code)

    # ------------------------------------------------------------------
    # Dialling from somewhere
    # ------------------------------------------------------------------

    def format_number_for_mobile_dialing(
        self, number: PhoneNumber, region_calling_from: str | None, with_formatting: bool
    ) -> str:
        """What to dial on a mobile phone in *region_calling_from*.

        The extension is dropped. Numbers that cannot be reached from abroad
        come back empty unless the caller is in their region.
        """
        if not self._registry.has_country_code(number.country_code):
            return number.raw_input or ""
        without_extension = number.to_builder().clear_extension().build()
        if self._classifier.can_be_internationally_dialled(without_extension):
            style = PhoneNumberFormat.INTERNATIONAL if with_formatting else PhoneNumberFormat.E164
            return self.format(without_extension, style)
        region = self._registry.get_region_code_for_country_code(number.country_code)
        formatted = (
            self.format(without_extension, PhoneNumberFormat.NATIONAL)
            if region == region_calling_from
            else ""
        )
        return formatted if with_formatting else normalize_helper(formatted, DIALLABLE_CHAR_MAPPINGS, True)

    def format_out_of_country_calling_number(
        self, number: PhoneNumber, region_calling_from: str | None
    ) -> str:
        """Render *number* as dialled from *region_calling_from*.

        Calls within a calling code are formatted nationally (NANPA numbers
        get a leading ``1``); other calls start with the caller's
        international prefix, or ``+`` when that prefix is ambiguous and no
        preferred one is declared.
        """
        if not self._registry.is_valid_region_code(region_calling_from):
            logger.debug("formatter.unknown_calling_region region=%s", region_calling_from)
            return self.format(number, PhoneNumberFormat.INTERNATIONAL)
        country_code = number.country_code
        national_number = get_national_significant_number(number)
        if not self._registry.has_country_code(country_code):
            return national_number
        if country_code == NANPA_COUNTRY_CODE:
            if self._classifier.is_nanpa_country(region_calling_from):
                return f"{country_code} {self.format(number, PhoneNumberFormat.NATIONAL)}"
        elif country_code == self._registry.get_country_code_for_region(region_calling_from):
            return self.format(number, PhoneNumberFormat.NATIONAL)

        calling_metadata = self._registry.get_metadata_for_region(region_calling_from)
        international_prefix = self._international_prefix_for(calling_metadata)
        metadata = self._main_metadata(country_code)
        if metadata is None:
            return national_number
        formatted = self._format_nsn(national_number, metadata, PhoneNumberFormat.INTERNATIONAL)
        formatted += self._formatted_extension(number, metadata, PhoneNumberFormat.INTERNATIONAL)
        if international_prefix:
            return f"{international_prefix} {country_code} {formatted}"
        return _prefix_with_country_code(country_code, PhoneNumberFormat.INTERNATIONAL, formatted)

    def format_out_of_country_keeping_alpha_chars(
        self, number: PhoneNumber, region_calling_from: str | None
    ) -> str:
        """Out-of-country rendering that keeps the letters of the raw input.

        The grouping the user typed is kept; only the international prefix
        (or the national layout for calls within the calling code) is added.
        """
        raw_input = number.raw_input
        if not raw_input:
            return self.format_out_of_country_calling_number(number, region_calling_from)
        country_code = number.country_code
        if not self._registry.has_country_code(country_code):
            return raw_input

        raw_input = normalize_helper(raw_input, ALL_PLUS_NUMBER_GROUPING_SYMBOLS, True)
        national_number = get_national_significant_number(number)
        if len(national_number) > 3:
            # Drop the calling code and anything before the number proper.
            start = raw_input.find(national_number[:3])
            if start != -1:
                raw_input = raw_input[start:]

        calling_metadata = self._registry.get_metadata_for_region(region_calling_from)
        if country_code == NANPA_COUNTRY_CODE:
            if self._classifier.is_nanpa_country(region_calling_from):
                return f"{country_code} {raw_input}"
        elif calling_metadata is not None and country_code == self._registry.get_country_code_for_region(
            region_calling_from
        ):
            rule = self.choose_formatting_pattern_for_number(calling_metadata.number_format, national_number)
            if rule is None:
                return raw_input
            # The raw input already carries whatever national prefix was typed.
            rule = dataclasses.replace(
                rule,
                pattern=_KEEP_EVERYTHING_PATTERN,
                format=_KEEP_EVERYTHING_FORMAT,
                national_prefix_formatting_rule="",
            )
            return self.format_nsn_using_pattern(raw_input, rule, PhoneNumberFormat.NATIONAL)

        international_prefix = (
            self._international_prefix_for(calling_metadata) if calling_metadata is not None else ""
        )
        metadata = self._main_metadata(country_code)
        if metadata is None:
            return raw_input
        formatted = raw_input + self._formatted_extension(
            number, metadata, PhoneNumberFormat.INTERNATIONAL
        )
        if international_prefix:
            return f"{international_prefix} {country_code} {formatted}"
        return _prefix_with_country_code(country_code, PhoneNumberFormat.INTERNATIONAL, formatted)

    def format_in_original_format(self, number: PhoneNumber, region_calling_from: str | None) -> str:
        """Render *number* the way it was written, as far as that can be told.

        Uses the country code source recorded by
        :meth:`Parser.parse_and_keep_raw_input`. Whenever the result would
        dial differently from the raw input, the raw input wins.
        """
        raw_input = number.raw_input
        if raw_input and (
            self._has_unexpected_italian_leading_zero(number)
            or not self._has_formatting_pattern_for_number(number)
        ):
            return raw_input
        if not number.has_country_code_source:
            return self.format(number, PhoneNumberFormat.NATIONAL)

        source = number.country_code_source
        if source is CountryCodeSource.FROM_NUMBER_WITH_PLUS_SIGN:
            formatted = self.format(number, PhoneNumberFormat.INTERNATIONAL)
        elif source is CountryCodeSource.FROM_NUMBER_WITH_IDD:
            formatted = self.format_out_of_country_calling_number(number, region_calling_from)
        elif source is CountryCodeSource.FROM_NUMBER_WITHOUT_PLUS_SIGN:
            formatted = self.format(number, PhoneNumberFormat.INTERNATIONAL)[1:]
        else:
            formatted = self._format_as_dialled_nationally(number)

        if formatted and raw_input:
            dialled = normalize_helper(formatted, DIALLABLE_CHAR_MAPPINGS, True)
            typed = normalize_helper(raw_input, DIALLABLE_CHAR_MAPPINGS, True)
            if dialled != typed:
                return raw_input
        return formatted

    # ------------------------------------------------------------------
    # Rule selection and application
    # ------------------------------------------------------------------

    def choose_formatting_pattern_for_number(
        self, formats: Sequence[NumberFormat], national_number: str
    ) -> NumberFormat | None:
        """First rule in *formats* whose last leading-digits pattern matches the
        start of *national_number* and whose pattern matches all of it."""
        for rule in formats:
            leading = rule.leading_digits_pattern
            if leading and not self._registry.regex(leading[-1]).match(national_number):
                continue
            if self._registry.regex(rule.pattern).fullmatch(national_number):
                return rule
        return None

    def format_nsn_using_pattern(
        self,
        national_number: str,
        rule: NumberFormat,
        style: PhoneNumberFormat,
        carrier_code: str | None = None,
    ) -> str:
        """Apply *rule* to *national_number*.

        In NATIONAL style the carrier-code template (when a carrier code is
        given) or the national prefix template is wrapped around the first
        group. RFC3966 output uses ``-`` as its only separator.
        """
        layout = rule.format
        if (
            style is PhoneNumberFormat.NATIONAL
            and carrier_code
            and rule.domestic_carrier_code_formatting_rule
        ):
            template = rule.domestic_carrier_code_formatting_rule.replace("$CC", carrier_code, 1)
            layout = _insert_around_first_group(layout, template)
        elif style is PhoneNumberFormat.NATIONAL and rule.national_prefix_formatting_rule:
            layout = _insert_around_first_group(layout, rule.national_prefix_formatting_rule)

        pattern = self._registry.regex(rule.pattern)
        formatted = pattern.sub(lambda match: expand_group_references(layout, match), national_number)
        if style is PhoneNumberFormat.RFC3966:
            formatted = LEADING_SEPARATOR_PATTERN.sub("", formatted, count=1)
            formatted = SEPARATOR_PATTERN.sub("-", formatted)
        return formatted

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _main_metadata(self, country_code: int) -> PhoneMetadata | None:
        if not self._registry.has_country_code(country_code):
            return None
        region = self._registry.get_region_code_for_country_code(country_code)
        return self._registry.get_metadata_for_region_or_calling_code(country_code, region)

    def _format_nsn(
        self,
        national_number: str,
        metadata: PhoneMetadata,
        style: PhoneNumberFormat,
        carrier_code: str | None = None,
        number: PhoneNumber | None = None,
    ) -> str:
        formats = (
            metadata.number_format
            if not metadata.intl_number_format or style is PhoneNumberFormat.NATIONAL
            else metadata.intl_number_format
        )
        rule = self.choose_formatting_pattern_for_number(formats, national_number)
        if rule is None:
            return national_number
        if (
            style is PhoneNumberFormat.NATIONAL
            and number is not None
            and rule.national_prefix_optional_when_formatting
            and rule.national_prefix_formatting_rule
            and number.raw_input
            and not self._national_prefix_was_typed(number)
        ):
            rule = dataclasses.replace(rule, national_prefix_formatting_rule="")
        return self.format_nsn_using_pattern(national_number, rule, style, carrier_code)

    @staticmethod
    def _formatted_extension(number: PhoneNumber, metadata: PhoneMetadata, style: PhoneNumberFormat) -> str:
        if not number.extension:
            return ""
        if style is PhoneNumberFormat.RFC3966:
            return RFC3966_EXTN_PREFIX + number.extension
        prefix = metadata.preferred_extn_prefix or DEFAULT_EXTN_PREFIX
        return prefix + number.extension

    @staticmethod
    def _international_prefix_for(metadata: PhoneMetadata | None) -> str:
        if metadata is None:
            return ""
        prefix = metadata.international_prefix
        if UNIQUE_INTERNATIONAL_PREFIX_PATTERN.fullmatch(prefix):
            return prefix
        return metadata.preferred_international_prefix or ""

    def _has_unexpected_italian_leading_zero(self, number: PhoneNumber) -> bool:
        return number.italian_leading_zero and not self._classifier.is_leading_zero_possible(number.country_code)

    def _has_formatting_pattern_for_number(self, number: PhoneNumber) -> bool:
        metadata = self._main_metadata(number.country_code)
        if metadata is None:
            return False
        national_number = get_national_significant_number(number)
        return self.choose_formatting_pattern_for_number(metadata.number_format, national_number) is not None

    def _format_as_dialled_nationally(self, number: PhoneNumber) -> str:
        national_format = self.format(number, PhoneNumberFormat.NATIONAL)
        if self._national_prefix_was_typed(number):
            return national_format
        region = self._registry.get_region_code_for_country_code(number.country_code)
        if not self._classifier.get_ndd_prefix_for_region(region, True):
            return national_format

        # The national prefix was not typed: format without it, if the
        # region's rule puts it in front of the first group.
        metadata = self._registry.get_metadata_for_region(region)
        if metadata is None:
            return national_format
        national_number = get_national_significant_number(number)
        rule = self.choose_formatting_pattern_for_number(metadata.number_format, national_number)
        if rule is None:
            return national_format
        template = rule.national_prefix_formatting_rule
        first_group_index = template.find("$FG")
        if first_group_index <= 0:
            return national_format
        if not normalize_digits_only(template[:first_group_index]):
            return national_format
        without_prefix = dataclasses.replace(rule, national_prefix_formatting_rule="")
        return self.format_by_pattern(number, PhoneNumberFormat.NATIONAL, [without_prefix])

    def _national_prefix_was_typed(self, number: PhoneNumber) -> bool:
        region = self._registry.get_region_code_for_country_code(number.country_code)
        national_prefix = self._classifier.get_ndd_prefix_for_region(region, True)
        if not national_prefix:
            return False
        return self._raw_input_contains_national_prefix(number.raw_input or "", national_prefix, region)

    def _raw_input_contains_national_prefix(self, raw_input: str, national_prefix: str, region: str) -> bool:
        digits = normalize_digits_only(raw_input)
        if not digits.startswith(national_prefix):
            return False
        try:
            candidate = self._parser.parse(digits[len(national_prefix):], region)
        except NumberParseError:
            return False
        return self._classifier.is_valid_number(candidate)


__all__ = ["Formatter"]

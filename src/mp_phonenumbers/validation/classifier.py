"""Classifier: number categories, validity and possibility checks.

Categories are tried in a fixed priority order and the first descriptor
that accepts the national significant number wins. Fixed-line and mobile
come last; when a region uses one pattern for both, or a number matches
both, the result is :attr:`PhoneNumberType.FIXED_LINE_OR_MOBILE`.
"""

from __future__ import annotations

import logging
from typing import Final

from mp_phonenumbers.kernel.types.phone_number import PhoneNumber, get_national_significant_number
from mp_phonenumbers.kernel.types.regions import NANPA_COUNTRY_CODE, REGION_CODE_FOR_NON_GEO_ENTITY
from mp_phonenumbers.metadata.descriptor import NumberDesc
from mp_phonenumbers.metadata.region import PhoneMetadata
from mp_phonenumbers.metadata.registry import MetadataRegistry
from mp_phonenumbers.text.constants import MAX_LENGTH_FOR_NSN, MIN_LENGTH_FOR_NSN
from mp_phonenumbers.validation.types import PhoneNumberType, ValidationResult, check_number_length

logger = logging.getLogger(__name__)

# Checked before fixed line and mobile, most specific first.
_PRIORITY: Final = (
    (PhoneNumberType.PREMIUM_RATE, "premium_rate"),
    (PhoneNumberType.TOLL_FREE, "toll_free"),
    (PhoneNumberType.SHARED_COST, "shared_cost"),
    (PhoneNumberType.VOIP, "voip"),
    (PhoneNumberType.PERSONAL_NUMBER, "personal_number"),
    (PhoneNumberType.PAGER, "pager"),
    (PhoneNumberType.UAN, "uan"),
)

_DESC_BY_TYPE: Final = {
    PhoneNumberType.FIXED_LINE: "fixed_line",
    PhoneNumberType.FIXED_LINE_OR_MOBILE: "fixed_line",
    PhoneNumberType.MOBILE: "mobile",
    **{number_type: field for number_type, field in _PRIORITY},
}


def get_number_desc_by_type(metadata: PhoneMetadata, number_type: PhoneNumberType) -> NumberDesc:
    """Descriptor of *metadata* for *number_type*; the general one for ``UNKNOWN``."""
    field = _DESC_BY_TYPE.get(number_type)
    return getattr(metadata, field) if field is not None else metadata.general_desc


class Classifier:
    """Validity and category queries against one :class:`MetadataRegistry`."""

    def __init__(self, registry: MetadataRegistry) -> None:
        self._registry = registry

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def get_number_type(self, number: PhoneNumber) -> PhoneNumberType:
        region = self.get_region_code_for_number(number)
        metadata = self._registry.get_metadata_for_region_or_calling_code(number.country_code, region)
        if metadata is None:
            return PhoneNumberType.UNKNOWN
        return self._number_type(get_national_significant_number(number), metadata)

    def is_number_geographical(self, number: PhoneNumber) -> bool:
        """True for numbers tied to a place: fixed lines and ambiguous fixed/mobile ones."""
        return self.get_number_type(number) in (
            PhoneNumberType.FIXED_LINE,
            PhoneNumberType.FIXED_LINE_OR_MOBILE,
        )

    def _number_type(self, national_number: str, metadata: PhoneMetadata) -> PhoneNumberType:
        if not self.is_number_matching_desc(national_number, metadata.general_desc):
            return PhoneNumberType.UNKNOWN
        for number_type, field in _PRIORITY:
            if self.is_number_matching_desc(national_number, getattr(metadata, field)):
                return number_type

        if self.is_number_matching_desc(national_number, metadata.fixed_line):
            if metadata.same_mobile_and_fixed_line_pattern:
                return PhoneNumberType.FIXED_LINE_OR_MOBILE
            if self.is_number_matching_desc(national_number, metadata.mobile):
                return PhoneNumberType.FIXED_LINE_OR_MOBILE
            return PhoneNumberType.FIXED_LINE
        if not metadata.same_mobile_and_fixed_line_pattern and self.is_number_matching_desc(
            national_number, metadata.mobile
        ):
            return PhoneNumberType.MOBILE
        return PhoneNumberType.UNKNOWN

    def is_number_matching_desc(self, national_number: str, desc: NumberDesc) -> bool:
        """Both the possible and the national pattern of *desc* accept the whole number."""
        if not desc.has_data:
            return False
        possible = self._registry.regex(desc.possible_number_pattern)
        national = self._registry.regex(desc.national_number_pattern)
        return bool(possible.fullmatch(national_number) and national.fullmatch(national_number))

    # ------------------------------------------------------------------
    # Validity
    # ------------------------------------------------------------------

    def is_valid_number(self, number: PhoneNumber) -> bool:
        region = self.get_region_code_for_number(number)
        return self.is_valid_number_for_region(number, region)

    def is_valid_number_for_region(self, number: PhoneNumber, region_code: str | None) -> bool:
        """Valid against the rules of *region_code* specifically.

        A number sharing its calling code with other regions may be valid
        for the code but not for every region that uses it.
        """
        country_code = number.country_code
        metadata = self._registry.get_metadata_for_region_or_calling_code(country_code, region_code)
        if metadata is None:
            return False
        if (
            region_code != REGION_CODE_FOR_NON_GEO_ENTITY
            and country_code != self._registry.get_country_code_for_region(region_code)
        ):
            return False
        national_number = get_national_significant_number(number)
        if not metadata.general_desc.has_data:
            # No numbering plan known: accept any plausible length.
            return MIN_LENGTH_FOR_NSN < len(national_number) <= MAX_LENGTH_FOR_NSN
        return self._number_type(national_number, metadata) is not PhoneNumberType.UNKNOWN

    def get_region_code_for_number(self, number: PhoneNumber) -> str | None:
        """The single region *number* belongs to, or ``None``.

        Regions sharing a calling code are told apart by their leading
        digits when they declare some, otherwise by validating the number
        against each region in turn.
        """
        regions = self._registry.get_region_codes_for_country_code(number.country_code)
        if not regions:
            logger.debug("classifier.unknown_country_code country_code=%d", number.country_code)
            return None
        if len(regions) == 1:
            return regions[0]
        national_number = get_national_significant_number(number)
        for region in regions:
            metadata = self._registry.get_metadata_for_region(region)
            if metadata is None:
                continue
            if metadata.leading_digits:
                if self._registry.regex(metadata.leading_digits).match(national_number):
                    return region
            elif self._number_type(national_number, metadata) is not PhoneNumberType.UNKNOWN:
                return region
        return None

    # ------------------------------------------------------------------
    # Possibility (length only)
    # ------------------------------------------------------------------

    def is_possible_number(self, number: PhoneNumber) -> bool:
        return self.is_possible_number_with_reason(number) is ValidationResult.IS_POSSIBLE

    def is_possible_number_with_reason(self, number: PhoneNumber) -> ValidationResult:
        national_number = get_national_significant_number(number)
        country_code = number.country_code
        if not self._registry.has_country_code(country_code):
            return ValidationResult.INVALID_COUNTRY_CODE
        region = self._registry.get_region_code_for_country_code(country_code)
        metadata = self._registry.get_metadata_for_region_or_calling_code(country_code, region)
        if metadata is None:
            return ValidationResult.INVALID_COUNTRY_CODE
        general = metadata.general_desc
        if not general.has_data:
            if len(national_number) < MIN_LENGTH_FOR_NSN:
                return ValidationResult.TOO_SHORT
            if len(national_number) > MAX_LENGTH_FOR_NSN:
                return ValidationResult.TOO_LONG
            return ValidationResult.IS_POSSIBLE
        return check_number_length(self._registry.regex(general.possible_number_pattern), national_number)

    def truncate_too_long_number(self, number: PhoneNumber) -> tuple[bool, PhoneNumber]:
        """Drop trailing digits until *number* validates.

        Returns ``(True, truncated)`` on success. When the number becomes
        too short first, returns ``(False, number)`` with the input untouched.
        A number that is already valid comes back as it is.
        """
        if self.is_valid_number(number):
            return True, number
        builder = number.to_builder()
        national_number = number.national_number
        while True:
            national_number //= 10
            candidate = builder.set_national_number(national_number).build()
            if (
                national_number == 0
                or self.is_possible_number_with_reason(candidate) is ValidationResult.TOO_SHORT
            ):
                return False, number
            if self.is_valid_number(candidate):
                logger.debug(
                    "classifier.truncated digits_removed=%d",
                    len(str(number.national_number)) - len(str(national_number)),
                )
                return True, candidate

    # ------------------------------------------------------------------
    # Region facts
    # ------------------------------------------------------------------

    def can_be_internationally_dialled(self, number: PhoneNumber) -> bool:
        metadata = self._registry.get_metadata_for_region(self.get_region_code_for_number(number))
        if metadata is None:
            # Non-geographic and unknown numbers are assumed diallable.
            return True
        return not self.is_number_matching_desc(
            get_national_significant_number(number), metadata.no_international_dialling
        )

    def is_nanpa_country(self, region_code: str | None) -> bool:
        return region_code is not None and region_code in self._registry.get_region_codes_for_country_code(
            NANPA_COUNTRY_CODE
        )

    def is_leading_zero_possible(self, country_code: int) -> bool:
        region = self._registry.get_region_code_for_country_code(country_code)
        metadata = self._registry.get_metadata_for_region_or_calling_code(country_code, region)
        return metadata.leading_zero_possible if metadata is not None else False

    def get_ndd_prefix_for_region(self, region_code: str | None, strip_non_digits: bool) -> str | None:
        """National dialling prefix of *region_code*, ``None`` when it has none.

        With *strip_non_digits* the ``~`` wait marker is removed.
        """
        metadata = self._registry.get_metadata_for_region(region_code)
        if metadata is None or not metadata.national_prefix:
            return None
        prefix = metadata.national_prefix
        return prefix.replace("~", "") if strip_non_digits else prefix


__all__ = ["Classifier", "get_number_desc_by_type"]

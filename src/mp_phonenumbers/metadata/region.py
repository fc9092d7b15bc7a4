"""Per-region dialing rules and the builder that assembles them."""

from __future__ import annotations

import dataclasses
from typing import Any, Final

from mp_phonenumbers.metadata.descriptor import NO_PATTERN, NumberDesc
from mp_phonenumbers.metadata.format_rule import NumberFormat

# Descriptor fields in classification priority order (after the general one).
DESC_FIELDS: Final = (
    "general_desc",
    "premium_rate",
    "toll_free",
    "shared_cost",
    "voip",
    "personal_number",
    "pager",
    "uan",
    "fixed_line",
    "mobile",
    "no_international_dialling",
)

# Categories that inherit the whole general descriptor when left out.
_INHERITING_DESCS: Final = frozenset({"fixed_line", "mobile"})

_NO_DATA: Final = NumberDesc()


@dataclasses.dataclass(frozen=True, slots=True)
class PhoneMetadata:
    """Immutable dialing rules of one region or non-geographic calling code."""

    id: str
    country_code: int
    international_prefix: str = ""
    preferred_international_prefix: str | None = None
    national_prefix: str = ""
    preferred_extn_prefix: str | None = None
    national_prefix_for_parsing: str = ""
    national_prefix_transform_rule: str = ""
    leading_digits: str = ""
    leading_zero_possible: bool = False
    main_country_for_code: bool = False
    general_desc: NumberDesc = _NO_DATA
    fixed_line: NumberDesc = _NO_DATA
    mobile: NumberDesc = _NO_DATA
    toll_free: NumberDesc = _NO_DATA
    premium_rate: NumberDesc = _NO_DATA
    shared_cost: NumberDesc = _NO_DATA
    personal_number: NumberDesc = _NO_DATA
    voip: NumberDesc = _NO_DATA
    pager: NumberDesc = _NO_DATA
    uan: NumberDesc = _NO_DATA
    no_international_dialling: NumberDesc = _NO_DATA
    number_format: tuple[NumberFormat, ...] = ()
    intl_number_format: tuple[NumberFormat, ...] = ()

    @property
    def has_national_prefix(self) -> bool:
        return bool(self.national_prefix)

    @property
    def has_preferred_international_prefix(self) -> bool:
        return self.preferred_international_prefix is not None

    @property
    def same_mobile_and_fixed_line_pattern(self) -> bool:
        return self.mobile.national_number_pattern == self.fixed_line.national_number_pattern


class PhoneMetadataBuilder:
    """Accumulates region rules and freezes them into :class:`PhoneMetadata`.

    ``build()`` applies the loading conventions of the metadata format:

    * fixed-line and mobile descriptors that are left out copy the general
      descriptor; any other missing category becomes ``"NA"``;
    * a descriptor without a possible-number pattern inherits the general one;
    * ``$NP`` in formatting rules is replaced with the national prefix, and
      region-wide formatting defaults fill rules that leave them unset;
    * the international format list is kept only when at least one rule
      declared an explicit international format. A declared ``"NA"`` drops
      that rule from the international list.
    """

    def __init__(self, region_id: str, country_code: int) -> None:
        self._attrs: dict[str, Any] = {"id": region_id, "country_code": country_code}
        self._descs: dict[str, NumberDesc] = {}
        self._formats: list[tuple[NumberFormat, str | None]] = []
        self._national_prefix_formatting_rule = ""
        self._national_prefix_optional_when_formatting = False
        self._carrier_code_formatting_rule = ""

    # ------------------------------------------------------------------
    # Region-wide settings
    # ------------------------------------------------------------------

    def set_international_prefix(self, value: str) -> PhoneMetadataBuilder:
        self._attrs["international_prefix"] = value
        return self

    def set_preferred_international_prefix(self, value: str) -> PhoneMetadataBuilder:
        self._attrs["preferred_international_prefix"] = value
        return self

    def set_national_prefix(self, value: str) -> PhoneMetadataBuilder:
        self._attrs["national_prefix"] = value
        return self

    def set_preferred_extn_prefix(self, value: str) -> PhoneMetadataBuilder:
        self._attrs["preferred_extn_prefix"] = value
        return self

    def set_national_prefix_for_parsing(self, value: str) -> PhoneMetadataBuilder:
        self._attrs["national_prefix_for_parsing"] = value
        return self

    def set_national_prefix_transform_rule(self, value: str) -> PhoneMetadataBuilder:
        self._attrs["national_prefix_transform_rule"] = value
        return self

    def set_leading_digits(self, value: str) -> PhoneMetadataBuilder:
        self._attrs["leading_digits"] = value
        return self

    def set_leading_zero_possible(self, value: bool) -> PhoneMetadataBuilder:
        self._attrs["leading_zero_possible"] = value
        return self

    def set_main_country_for_code(self, value: bool) -> PhoneMetadataBuilder:
        self._attrs["main_country_for_code"] = value
        return self

    def set_national_prefix_formatting_rule(self, value: str) -> PhoneMetadataBuilder:
        self._national_prefix_formatting_rule = value
        return self

    def set_national_prefix_optional_when_formatting(self, value: bool) -> PhoneMetadataBuilder:
        self._national_prefix_optional_when_formatting = value
        return self

    def set_carrier_code_formatting_rule(self, value: str) -> PhoneMetadataBuilder:
        self._carrier_code_formatting_rule = value
        return self

    # ------------------------------------------------------------------
    # Descriptors and formats
    # ------------------------------------------------------------------

    def set_number_desc(self, kind: str, desc: NumberDesc) -> PhoneMetadataBuilder:
        if kind not in DESC_FIELDS:
            raise ValueError(f"Unknown number descriptor {kind!r}")
        self._descs[kind] = desc
        return self

    def add_number_format(
        self, number_format: NumberFormat, intl_format: str | None = None
    ) -> PhoneMetadataBuilder:
        """Append a national rule; *intl_format* overrides its international layout."""
        self._formats.append((number_format, intl_format))
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(self) -> PhoneMetadata:
        attrs = dict(self._attrs)
        national_prefix: str = attrs.get("national_prefix", "")
        if national_prefix and "national_prefix_for_parsing" not in attrs:
            attrs["national_prefix_for_parsing"] = national_prefix

        general = self._descs.get("general_desc", _NO_DATA)
        attrs["general_desc"] = general
        for kind in DESC_FIELDS[1:]:
            desc = self._descs.get(kind)
            if desc is None:
                attrs[kind] = general if kind in _INHERITING_DESCS else _NO_DATA
            else:
                attrs[kind] = desc.merged_over(general)

        national: list[NumberFormat] = []
        intl: list[NumberFormat] = []
        explicit_intl = False
        for number_format, intl_format in self._formats:
            national.append(self._resolve_format(number_format, national_prefix))
            if intl_format is None:
                intl.append(NumberFormat(
                    pattern=number_format.pattern,
                    format=number_format.format,
                    leading_digits_pattern=number_format.leading_digits_pattern,
                ))
                continue
            explicit_intl = True
            if intl_format != NO_PATTERN:
                intl.append(NumberFormat(
                    pattern=number_format.pattern,
                    format=intl_format,
                    leading_digits_pattern=number_format.leading_digits_pattern,
                ))
        attrs["number_format"] = tuple(national)
        attrs["intl_number_format"] = tuple(intl) if explicit_intl else ()
        return PhoneMetadata(**attrs)

    def _resolve_format(self, number_format: NumberFormat, national_prefix: str) -> NumberFormat:
        np_rule = number_format.national_prefix_formatting_rule or self._national_prefix_formatting_rule
        cc_rule = number_format.domestic_carrier_code_formatting_rule or self._carrier_code_formatting_rule
        return dataclasses.replace(
            number_format,
            national_prefix_formatting_rule=np_rule.replace("$NP", national_prefix, 1),
            national_prefix_optional_when_formatting=(
                number_format.national_prefix_optional_when_formatting
                or self._national_prefix_optional_when_formatting
            ),
            domestic_carrier_code_formatting_rule=cc_rule.replace("$NP", national_prefix, 1),
        )


__all__ = ["DESC_FIELDS", "PhoneMetadata", "PhoneMetadataBuilder"]

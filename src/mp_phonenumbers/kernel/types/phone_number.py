"""Structured phone number value object and its builder."""

from __future__ import annotations

import dataclasses
import enum
from typing import Any


class CountryCodeSource(enum.Enum):
    """Where the country calling code of a parsed number came from."""

    UNSPECIFIED = 0
    FROM_NUMBER_WITH_PLUS_SIGN = 1
    FROM_NUMBER_WITH_IDD = 5
    FROM_NUMBER_WITHOUT_PLUS_SIGN = 10
    FROM_DEFAULT_COUNTRY = 20


@dataclasses.dataclass(frozen=True, slots=True)
class PhoneNumber:
    """Immutable structured phone number.

    ``national_number`` cannot hold leading zeros; ``italian_leading_zero``
    and ``number_of_leading_zeros`` carry them instead. Optional string
    fields are ``None`` when absent, which is distinct from ``""``.
    """

    country_code: int = 0
    national_number: int = 0
    extension: str | None = None
    italian_leading_zero: bool = False
    number_of_leading_zeros: int = 1
    raw_input: str | None = None
    country_code_source: CountryCodeSource = CountryCodeSource.UNSPECIFIED
    preferred_domestic_carrier_code: str | None = None

    @property
    def has_extension(self) -> bool:
        return self.extension is not None

    @property
    def has_raw_input(self) -> bool:
        return self.raw_input is not None

    @property
    def has_preferred_domestic_carrier_code(self) -> bool:
        return self.preferred_domestic_carrier_code is not None

    @property
    def has_country_code_source(self) -> bool:
        return self.country_code_source is not CountryCodeSource.UNSPECIFIED

    def exactly_same_as(self, other: PhoneNumber) -> bool:
        """Structural equality over every field."""
        return self == other

    def to_builder(self) -> PhoneNumberBuilder:
        return PhoneNumberBuilder().merge_from(self)

    def __str__(self) -> str:
        text = f"Country Code: {self.country_code} National Number: {self.national_number}"
        if self.italian_leading_zero:
            text += f" Leading Zero(s): true Number of leading zeros: {self.number_of_leading_zeros}"
        if self.extension is not None:
            text += f" Extension: {self.extension}"
        if self.has_country_code_source:
            text += f" Country Code Source: {self.country_code_source.name}"
        if self.preferred_domestic_carrier_code is not None:
            text += f" Preferred Domestic Carrier Code: {self.preferred_domestic_carrier_code}"
        return text


class PhoneNumberBuilder:
    """Mutable accumulator that produces a frozen :class:`PhoneNumber`.

    Every setter returns ``self`` so calls can be chained::

        number = PhoneNumberBuilder().set_country_code(64).set_national_number(33316005).build()
    """

    def __init__(self) -> None:
        self._attrs: dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_country_code(self, value: int) -> PhoneNumberBuilder:
        self._attrs["country_code"] = value
        return self

    def set_national_number(self, value: int) -> PhoneNumberBuilder:
        self._attrs["national_number"] = value
        return self

    def set_extension(self, value: str) -> PhoneNumberBuilder:
        self._attrs["extension"] = value
        return self

    def set_italian_leading_zero(self, value: bool) -> PhoneNumberBuilder:
        self._attrs["italian_leading_zero"] = value
        return self

    def set_number_of_leading_zeros(self, value: int) -> PhoneNumberBuilder:
        self._attrs["number_of_leading_zeros"] = value
        return self

    def set_raw_input(self, value: str) -> PhoneNumberBuilder:
        self._attrs["raw_input"] = value
        return self

    def set_country_code_source(self, value: CountryCodeSource) -> PhoneNumberBuilder:
        self._attrs["country_code_source"] = value
        return self

    def set_preferred_domestic_carrier_code(self, value: str) -> PhoneNumberBuilder:
        self._attrs["preferred_domestic_carrier_code"] = value
        return self

    # ------------------------------------------------------------------
    # Clearing
    # ------------------------------------------------------------------

    def clear_extension(self) -> PhoneNumberBuilder:
        self._attrs.pop("extension", None)
        return self

    def clear_raw_input(self) -> PhoneNumberBuilder:
        self._attrs.pop("raw_input", None)
        return self

    def clear_country_code_source(self) -> PhoneNumberBuilder:
        self._attrs.pop("country_code_source", None)
        return self

    def clear_preferred_domestic_carrier_code(self) -> PhoneNumberBuilder:
        self._attrs.pop("preferred_domestic_carrier_code", None)
        return self

    def clear_italian_leading_zero(self) -> PhoneNumberBuilder:
        self._attrs.pop("italian_leading_zero", None)
        self._attrs.pop("number_of_leading_zeros", None)
        return self

    # ------------------------------------------------------------------
    # Merging / building
    # ------------------------------------------------------------------

    def merge_from(self, other: PhoneNumber) -> PhoneNumberBuilder:
        """Copy every field of *other* that differs from the default value."""
        for field in dataclasses.fields(PhoneNumber):
            value = getattr(other, field.name)
            if value != field.default:
                self._attrs[field.name] = value
        return self

    @property
    def country_code(self) -> int:
        return self._attrs.get("country_code", 0)

    @property
    def national_number(self) -> int:
        return self._attrs.get("national_number", 0)

    def build(self) -> PhoneNumber:
        return PhoneNumber(**self._attrs)


def get_national_significant_number(number: PhoneNumber) -> str:
    """Digits of *number* after the calling code, leading zeros restored."""
    zeros = "0" * number.number_of_leading_zeros if number.italian_leading_zero else ""
    return zeros + str(number.national_number)


__all__ = ["CountryCodeSource", "PhoneNumber", "PhoneNumberBuilder", "get_national_significant_number"]

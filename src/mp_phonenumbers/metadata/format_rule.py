"""Formatting rules attached to region metadata."""

from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True, slots=True)
class NumberFormat:
    """One way of laying out a national significant number.

    ``pattern`` must match the whole number; ``format`` references its
    capture groups as ``$1``, ``$2``... Only the *last* entry of
    ``leading_digits_pattern`` is consulted when selecting a rule, since
    entries are listed in order of increasing specificity.

    ``national_prefix_formatting_rule`` may contain ``$FG`` (replaced at
    format time with the first group reference of ``format``).
    ``domestic_carrier_code_formatting_rule`` may additionally contain
    ``$CC`` for the carrier code.
    """

    pattern: str
    format: str
    leading_digits_pattern: tuple[str, ...] = ()
    national_prefix_formatting_rule: str = ""
    national_prefix_optional_when_formatting: bool = False
    domestic_carrier_code_formatting_rule: str = ""

    @property
    def has_national_prefix_formatting_rule(self) -> bool:
        return bool(self.national_prefix_formatting_rule)

    def to_builder(self) -> NumberFormatBuilder:
        return NumberFormatBuilder().merge_from(self)


class NumberFormatBuilder:
    """Accumulates fields for a :class:`NumberFormat`."""

    def __init__(self) -> None:
        self._attrs: dict[str, Any] = {}

    def set_pattern(self, value: str) -> NumberFormatBuilder:
        self._attrs["pattern"] = value
        return self

    def set_format(self, value: str) -> NumberFormatBuilder:
        self._attrs["format"] = value
        return self

    def add_leading_digits_pattern(self, value: str) -> NumberFormatBuilder:
        self._attrs["leading_digits_pattern"] = (*self._attrs.get("leading_digits_pattern", ()), value)
        return self

    def clear_leading_digits_pattern(self) -> NumberFormatBuilder:
        self._attrs.pop("leading_digits_pattern", None)
        return self

    def set_national_prefix_formatting_rule(self, value: str) -> NumberFormatBuilder:
        self._attrs["national_prefix_formatting_rule"] = value
        return self

    def clear_national_prefix_formatting_rule(self) -> NumberFormatBuilder:
        self._attrs.pop("national_prefix_formatting_rule", None)
        return self

    def set_national_prefix_optional_when_formatting(self, value: bool) -> NumberFormatBuilder:
        self._attrs["national_prefix_optional_when_formatting"] = value
        return self

    def set_domestic_carrier_code_formatting_rule(self, value: str) -> NumberFormatBuilder:
        self._attrs["domestic_carrier_code_formatting_rule"] = value
        return self

    @property
    def national_prefix_formatting_rule(self) -> str:
        return self._attrs.get("national_prefix_formatting_rule", "")

    def merge_from(self, other: NumberFormat) -> NumberFormatBuilder:
        """Copy every non-default field of *other*; leading digits are appended."""
        for field in dataclasses.fields(NumberFormat):
            value = getattr(other, field.name)
            if field.name == "leading_digits_pattern":
                for entry in value:
                    self.add_leading_digits_pattern(entry)
            elif field.default is dataclasses.MISSING or value != field.default:
                self._attrs[field.name] = value
        return self

    def build(self) -> NumberFormat:
        return NumberFormat(**self._attrs)


__all__ = ["NumberFormat", "NumberFormatBuilder"]

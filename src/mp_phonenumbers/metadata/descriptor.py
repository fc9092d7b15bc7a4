"""Per-category number descriptor."""

from __future__ import annotations

import dataclasses
from typing import Final

NO_PATTERN: Final = "NA"


@dataclasses.dataclass(frozen=True, slots=True)
class NumberDesc:
    """Regexes describing one category of numbers (fixed line, mobile, ...).

    A pattern of ``"NA"`` means the region has no numbers of this category.
    """

    national_number_pattern: str = NO_PATTERN
    possible_number_pattern: str = NO_PATTERN
    example_number: str | None = None

    @property
    def has_data(self) -> bool:
        return self.national_number_pattern not in ("", NO_PATTERN)

    @property
    def has_example_number(self) -> bool:
        return bool(self.example_number)

    def merged_over(self, base: NumberDesc) -> NumberDesc:
        """Return a copy whose unset possible pattern falls back to *base*.

        The national pattern and the example are never inherited: an explicit
        ``"NA"`` must stay empty even when *base* has data.
        """
        return NumberDesc(
            national_number_pattern=self.national_number_pattern,
            possible_number_pattern=(
                self.possible_number_pattern
                if self.possible_number_pattern != NO_PATTERN
                else base.possible_number_pattern
            ),
            example_number=self.example_number,
        )


__all__ = ["NO_PATTERN", "NumberDesc"]

"""Output styles understood by the formatter."""

from __future__ import annotations

import enum


class PhoneNumberFormat(enum.Enum):
    """How a number is rendered.

    ``E164`` is digits only with a leading ``+``; ``INTERNATIONAL`` and
    ``NATIONAL`` follow the region's grouping; ``RFC3966`` is a ``tel:`` URI
    with ``-`` as the only separator.
    """

    E164 = 0
    INTERNATIONAL = 1
    NATIONAL = 2
    RFC3966 = 3


__all__ = ["PhoneNumberFormat"]

"""Region code constants shared across the engine."""

from __future__ import annotations

from typing import Final

UNKNOWN_REGION: Final = "ZZ"
REGION_CODE_FOR_NON_GEO_ENTITY: Final = "001"
NANPA_COUNTRY_CODE: Final = 1

__all__ = ["NANPA_COUNTRY_CODE", "REGION_CODE_FOR_NON_GEO_ENTITY", "UNKNOWN_REGION"]

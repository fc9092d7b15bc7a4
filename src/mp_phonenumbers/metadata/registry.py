"""Metadata registry: the immutable store every engine component reads from."""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Iterable

from mp_phonenumbers.kernel.types.regions import REGION_CODE_FOR_NON_GEO_ENTITY, UNKNOWN_REGION
from mp_phonenumbers.metadata.region import PhoneMetadata

logger = logging.getLogger(__name__)


class MetadataRegistry:
    """Immutable lookup of :class:`PhoneMetadata` by region and calling code.

    A calling code may be shared by several regions (``1`` for the NANPA
    countries). Regions are kept in load order except that the region
    flagged ``main_country_for_code`` always comes first. Records whose id
    is ``"001"`` are non-geographic entities and are keyed by calling code
    only.

    The registry also owns the process-wide compiled regex cache. Entries
    are added under a lock; compiling the same pattern twice is harmless.
    """

    def __init__(self, metadata: Iterable[PhoneMetadata]) -> None:
        self._by_region: dict[str, PhoneMetadata] = {}
        self._non_geo: dict[int, PhoneMetadata] = {}
        regions_by_code: dict[int, list[str]] = {}
        for entry in metadata:
            if entry.id == REGION_CODE_FOR_NON_GEO_ENTITY:
                self._non_geo[entry.country_code] = entry
                regions_by_code.setdefault(entry.country_code, []).append(entry.id)
                continue
            self._by_region[entry.id] = entry
            regions = regions_by_code.setdefault(entry.country_code, [])
            if entry.main_country_for_code:
                regions.insert(0, entry.id)
            else:
                regions.append(entry.id)
        self._regions_by_code: dict[int, tuple[str, ...]] = {
            code: tuple(regions) for code, regions in regions_by_code.items()
        }
        self._patterns: dict[str, re.Pattern[str]] = {}
        self._lock = threading.Lock()
        logger.info(
            "metadata.registry.loaded regions=%d non_geo=%d",
            len(self._by_region),
            len(self._non_geo),
        )

    # ------------------------------------------------------------------
    # Metadata lookup
    # ------------------------------------------------------------------

    def get_metadata_for_region(self, region_code: str | None) -> PhoneMetadata | None:
        if not region_code:
            return None
        return self._by_region.get(region_code)

    def get_metadata_for_non_geographical_region(self, country_code: int) -> PhoneMetadata | None:
        return self._non_geo.get(country_code)

    def get_metadata_for_region_or_calling_code(
        self, country_code: int, region_code: str | None
    ) -> PhoneMetadata | None:
        if region_code == REGION_CODE_FOR_NON_GEO_ENTITY:
            return self.get_metadata_for_non_geographical_region(country_code)
        return self.get_metadata_for_region(region_code)

    # ------------------------------------------------------------------
    # Calling code <-> region
    # ------------------------------------------------------------------

    def get_region_codes_for_country_code(self, country_code: int) -> tuple[str, ...]:
        return self._regions_by_code.get(country_code, ())

    def get_region_code_for_country_code(self, country_code: int) -> str:
        regions = self._regions_by_code.get(country_code)
        return regions[0] if regions else UNKNOWN_REGION

    def get_country_code_for_region(self, region_code: str | None) -> int:
        metadata = self.get_metadata_for_region(region_code)
        return metadata.country_code if metadata is not None else 0

    def has_country_code(self, country_code: int) -> bool:
        return country_code in self._regions_by_code

    def is_valid_region_code(self, region_code: str | None) -> bool:
        return region_code is not None and region_code in self._by_region

    @property
    def supported_regions(self) -> frozenset[str]:
        return frozenset(self._by_region)

    @property
    def supported_global_network_calling_codes(self) -> frozenset[int]:
        return frozenset(self._non_geo)

    @property
    def country_codes(self) -> frozenset[int]:
        return frozenset(self._regions_by_code)

    # ------------------------------------------------------------------
    # Regex cache
    # ------------------------------------------------------------------

    def regex(self, pattern: str) -> re.Pattern[str]:
        """Return the compiled form of *pattern*, compiling it at most once per registry."""
        compiled = self._patterns.get(pattern)
        if compiled is not None:
            return compiled
        compiled = re.compile(pattern)
        with self._lock:
            return self._patterns.setdefault(pattern, compiled)

    def __len__(self) -> int:
        return len(self._by_region) + len(self._non_geo)

    def __repr__(self) -> str:
        return f"MetadataRegistry(regions={len(self._by_region)}, non_geo={len(self._non_geo)})"


__all__ = ["MetadataRegistry"]

"""Build a :class:`MetadataRegistry` from plain mappings or JSON documents.

Document shape::

    {
        "regions": [
            {
                "id": "NZ",
                "country_code": 64,
                "international_prefix": "00",
                "national_prefix": "0",
                "national_prefix_formatting_rule": "$NP$FG",
                "general_desc": {"national_number_pattern": "[289]\\\\d{7,9}|[3-7]\\\\d{7}",
                                 "possible_number_pattern": "\\\\d{7,10}"},
                "mobile": {"national_number_pattern": "2\\\\d{7,9}"},
                "number_format": [
                    {"pattern": "(\\\\d)(\\\\d{3})(\\\\d{4})", "format": "$1-$2 $3",
                     "leading_digits_pattern": ["[3467]|9[1-9]"]}
                ]
            }
        ]
    }

Keys mirror the :class:`PhoneMetadata` field names. A format may carry an
``intl_format`` key (``"NA"`` removes it from international formatting).
"""

from __future__ import annotations

import json
import logging
import pathlib
from collections.abc import Iterable, Mapping
from typing import Any, Final

from mp_phonenumbers.kernel.errors.application import MetadataLoadError
from mp_phonenumbers.kernel.types.regions import REGION_CODE_FOR_NON_GEO_ENTITY
from mp_phonenumbers.metadata.descriptor import NumberDesc
from mp_phonenumbers.metadata.format_rule import NumberFormat
from mp_phonenumbers.metadata.region import DESC_FIELDS, PhoneMetadata, PhoneMetadataBuilder
from mp_phonenumbers.metadata.registry import MetadataRegistry

logger = logging.getLogger(__name__)

_SETTERS: Final = {
    "international_prefix": PhoneMetadataBuilder.set_international_prefix,
    "preferred_international_prefix": PhoneMetadataBuilder.set_preferred_international_prefix,
    "national_prefix": PhoneMetadataBuilder.set_national_prefix,
    "preferred_extn_prefix": PhoneMetadataBuilder.set_preferred_extn_prefix,
    "national_prefix_for_parsing": PhoneMetadataBuilder.set_national_prefix_for_parsing,
    "national_prefix_transform_rule": PhoneMetadataBuilder.set_national_prefix_transform_rule,
    "leading_digits": PhoneMetadataBuilder.set_leading_digits,
    "leading_zero_possible": PhoneMetadataBuilder.set_leading_zero_possible,
    "main_country_for_code": PhoneMetadataBuilder.set_main_country_for_code,
    "national_prefix_formatting_rule": PhoneMetadataBuilder.set_national_prefix_formatting_rule,
    "national_prefix_optional_when_formatting": (
        PhoneMetadataBuilder.set_national_prefix_optional_when_formatting
    ),
    "carrier_code_formatting_rule": PhoneMetadataBuilder.set_carrier_code_formatting_rule,
}

_DESC_KEYS: Final = frozenset({"national_number_pattern", "possible_number_pattern", "example_number"})
_FORMAT_KEYS: Final = frozenset({
    "pattern",
    "format",
    "leading_digits_pattern",
    "national_prefix_formatting_rule",
    "national_prefix_optional_when_formatting",
    "domestic_carrier_code_formatting_rule",
    "intl_format",
})


def _load_desc(data: Mapping[str, Any], where: str, source: str | None) -> NumberDesc:
    unknown = set(data) - _DESC_KEYS
    if unknown:
        raise MetadataLoadError(f"{where}: unknown descriptor keys {sorted(unknown)}", source=source)
    return NumberDesc(**data)


def _load_format(data: Mapping[str, Any], where: str, source: str | None) -> tuple[NumberFormat, str | None]:
    unknown = set(data) - _FORMAT_KEYS
    if unknown:
        raise MetadataLoadError(f"{where}: unknown format keys {sorted(unknown)}", source=source)
    if "pattern" not in data or "format" not in data:
        raise MetadataLoadError(f"{where}: a format needs 'pattern' and 'format'", source=source)
    attrs = {k: v for k, v in data.items() if k != "intl_format"}
    attrs["leading_digits_pattern"] = tuple(data.get("leading_digits_pattern", ()))
    return NumberFormat(**attrs), data.get("intl_format")


def load_region(data: Mapping[str, Any], *, source: str | None = None) -> PhoneMetadata:
    """Build one :class:`PhoneMetadata` from its mapping form."""
    try:
        region_id = data["id"]
        country_code = int(data["country_code"])
    except (KeyError, TypeError, ValueError) as exc:
        raise MetadataLoadError(
            "region entry needs an 'id' and an integer 'country_code'", source=source, cause=exc
        ) from exc

    where = f"region {region_id}"
    builder = PhoneMetadataBuilder(region_id, country_code)
    for key, value in data.items():
        if key in ("id", "country_code"):
            continue
        if key in _SETTERS:
            _SETTERS[key](builder, value)
        elif key in DESC_FIELDS:
            builder.set_number_desc(key, _load_desc(value, f"{where}.{key}", source))
        elif key == "number_format":
            for index, entry in enumerate(value):
                number_format, intl_format = _load_format(entry, f"{where}.number_format[{index}]", source)
                builder.add_number_format(number_format, intl_format)
        else:
            raise MetadataLoadError(f"{where}: unknown key {key!r}", source=source)
    return builder.build()


def load_registry_from_mapping(
    data: Mapping[str, Any] | Iterable[Mapping[str, Any]], *, source: str | None = None
) -> MetadataRegistry:
    """Build a registry from ``{"regions": [...]}`` or a bare list of region mappings."""
    regions = data.get("regions") if isinstance(data, Mapping) else data
    if regions is None:
        raise MetadataLoadError("metadata document has no 'regions' list", source=source)
    seen: set[str] = set()
    loaded: list[PhoneMetadata] = []
    for entry in regions:
        metadata = load_region(entry, source=source)
        key = metadata.id
        if key == REGION_CODE_FOR_NON_GEO_ENTITY:
            key = f"{key}/{metadata.country_code}"
        if key in seen:
            raise MetadataLoadError(f"duplicate metadata for {key}", source=source)
        seen.add(key)
        loaded.append(metadata)
    logger.debug("metadata.loader.parsed entries=%d source=%s", len(loaded), source)
    return MetadataRegistry(loaded)


def load_registry_from_json(path: str | pathlib.Path) -> MetadataRegistry:
    """Read a JSON metadata document from *path* and build a registry."""
    source = str(path)
    try:
        text = pathlib.Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise MetadataLoadError(f"cannot read metadata file: {exc}", source=source, cause=exc) from exc
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MetadataLoadError(f"metadata file is not valid JSON: {exc}", source=source, cause=exc) from exc
    return load_registry_from_mapping(document, source=source)


__all__ = ["load_region", "load_registry_from_json", "load_registry_from_mapping"]

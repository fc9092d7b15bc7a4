"""Region metadata: descriptors, formatting rules, the registry and its loaders."""

from mp_phonenumbers.metadata.descriptor import NO_PATTERN, NumberDesc
from mp_phonenumbers.metadata.format_rule import NumberFormat, NumberFormatBuilder
from mp_phonenumbers.metadata.loaders import (
    load_region,
    load_registry_from_json,
    load_registry_from_mapping,
)
from mp_phonenumbers.metadata.region import DESC_FIELDS, PhoneMetadata, PhoneMetadataBuilder
from mp_phonenumbers.metadata.registry import MetadataRegistry

__all__ = [
    "DESC_FIELDS",
    "NO_PATTERN",
    "MetadataRegistry",
    "NumberDesc",
    "NumberFormat",
    "NumberFormatBuilder",
    "PhoneMetadata",
    "PhoneMetadataBuilder",
    "load_region",
    "load_registry_from_json",
    "load_registry_from_mapping",
]

"""Text normalization and the shared character classes."""

from mp_phonenumbers.text.normalizer import (
    convert_alpha_characters_in_number,
    expand_group_references,
    extract_possible_number,
    is_alpha_number,
    is_viable_phone_number,
    maybe_strip_extension,
    normalize,
    normalize_digits_only,
    normalize_helper,
)

__all__ = [
    "convert_alpha_characters_in_number",
    "expand_group_references",
    "extract_possible_number",
    "is_alpha_number",
    "is_viable_phone_number",
    "maybe_strip_extension",
    "normalize",
    "normalize_digits_only",
    "normalize_helper",
]

"""Text normalizer: turns free-form user input into canonical digit strings.

All functions here are pure and need no metadata.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Mapping

from mp_phonenumbers.text.constants import (
    ALPHA_MAPPINGS,
    ALPHA_PHONE_MAPPINGS,
    EXTN_PATTERN,
    GROUP_REFERENCE_PATTERN,
    MIN_LENGTH_FOR_NSN,
    SECOND_NUMBER_START_PATTERN,
    UNWANTED_END_CHAR_PATTERN,
    VALID_ALPHA_PHONE_PATTERN,
    VALID_PHONE_NUMBER_PATTERN,
    VALID_START_CHAR_PATTERN,
)


def _fold_digit(char: str) -> str | None:
    value = unicodedata.decimal(char, None)
    return None if value is None else str(value)


def convert_alpha_characters_in_number(text: str) -> str:
    """Replace letters with their keypad digit; everything else is kept."""
    return "".join(ALPHA_MAPPINGS.get(char.upper(), char) for char in text)


def normalize_digits_only(text: str, keep_non_digits: bool = False) -> str:
    """Fold every Unicode decimal digit to ASCII and drop the rest.

    With *keep_non_digits* the other characters are kept untouched.
    """
    out: list[str] = []
    for char in text:
        digit = _fold_digit(char)
        if digit is not None:
            out.append(digit)
        elif keep_non_digits:
            out.append(char)
    return "".join(out)


def normalize_helper(text: str, replacements: Mapping[str, str], remove_non_matches: bool) -> str:
    """Map characters (looked up upper-cased) through *replacements*.

    Characters without a replacement are dropped when *remove_non_matches*,
    otherwise copied as they are.
    """
    out: list[str] = []
    for char in text:
        mapped = replacements.get(char.upper())
        if mapped is not None:
            out.append(mapped)
        elif not remove_non_matches:
            out.append(char)
    return "".join(out)


def normalize(text: str) -> str:
    """Canonical digit string of *text*.

    Letters are converted through the keypad only when the text looks like
    an alpha number (three letters or more); otherwise they are dropped.
    """
    if VALID_ALPHA_PHONE_PATTERN.fullmatch(text):
        return normalize_helper(
            normalize_digits_only(text, keep_non_digits=True), ALPHA_PHONE_MAPPINGS, True
        )
    return normalize_digits_only(text)


def extract_possible_number(text: str) -> str:
    """Trim *text* down to the part that could be a phone number.

    Leading text up to the first digit or plus sign goes, as does trailing
    text that is neither a letter, a number nor ``#``. A second number
    introduced by ``/ x`` or ``\\ x`` is cut off.
    """
    match = VALID_START_CHAR_PATTERN.search(text)
    if match is None:
        return ""
    number = text[match.start():]
    trailing = UNWANTED_END_CHAR_PATTERN.search(number)
    if trailing is not None:
        number = number[: trailing.start()]
    second = SECOND_NUMBER_START_PATTERN.search(number)
    if second is not None:
        number = number[: second.start()]
    return number


def is_viable_phone_number(text: str) -> bool:
    """Cheap shape check run before any metadata-driven parsing."""
    if len(text) < MIN_LENGTH_FOR_NSN:
        return False
    return VALID_PHONE_NUMBER_PATTERN.fullmatch(text) is not None


def maybe_strip_extension(text: str) -> tuple[str, str]:
    """Split a trailing extension off *text*.

    Returns ``(number, extension)``; the extension is ``""`` when none was
    found or when the remaining text would not be viable on its own.
    """
    match = EXTN_PATTERN.search(text)
    if match is not None and is_viable_phone_number(text[: match.start()]):
        for group in match.groups():
            if group is not None:
                return text[: match.start()], group
    return text, ""


def expand_group_references(template: str, match: re.Match[str]) -> str:
    """Substitute ``$n`` and ``${n}`` in *template* with the groups of *match*.

    Groups that did not take part in the match expand to ``""``.
    """

    def group(reference: re.Match[str]) -> str:
        index = int(reference.group(1))
        if index > len(match.groups()):
            return ""
        return match.group(index) or ""

    return GROUP_REFERENCE_PATTERN.sub(group, template)


def is_alpha_number(text: str) -> bool:
    """True when *text* is viable and, without its extension, spells letters."""
    if not is_viable_phone_number(text):
        return False
    number, _ = maybe_strip_extension(text)
    return VALID_ALPHA_PHONE_PATTERN.fullmatch(number) is not None


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

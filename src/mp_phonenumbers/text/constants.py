"""Character classes, limits and compiled patterns shared by the engine."""

from __future__ import annotations

import re
from typing import Final

# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------

MIN_LENGTH_FOR_NSN: Final = 2
# The ITU allows 15 digits; a few regions use longer national numbers.
MAX_LENGTH_FOR_NSN: Final = 16
MAX_LENGTH_COUNTRY_CODE: Final = 3
# Checked before any regex runs on caller input.
MAX_INPUT_STRING_LENGTH: Final = 250

# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

PLUS_SIGN: Final = "+"
STAR_SIGN: Final = "*"
RFC3966_EXTN_PREFIX: Final = ";ext="
RFC3966_PREFIX: Final = "tel:"
RFC3966_PHONE_CONTEXT: Final = ";phone-context="
RFC3966_ISDN_SUBADDRESS: Final = ";isub="
DEFAULT_EXTN_PREFIX: Final = " ext. "

# ---------------------------------------------------------------------------
# Character maps
# ---------------------------------------------------------------------------

ALPHA_MAPPINGS: Final[dict[str, str]] = {
    letter: digit
    for digit, letters in (
        ("2", "ABC"),
        ("3", "DEF"),
        ("4", "GHI"),
        ("5", "JKL"),
        ("6", "MNO"),
        ("7", "PQRS"),
        ("8", "TUV"),
        ("9", "WXYZ"),
    )
    for letter in letters
}

ASCII_DIGIT_MAPPINGS: Final[dict[str, str]] = {str(d): str(d) for d in range(10)}

ALPHA_PHONE_MAPPINGS: Final[dict[str, str]] = {**ALPHA_MAPPINGS, **ASCII_DIGIT_MAPPINGS}

# Characters a handset can actually dial.
DIALLABLE_CHAR_MAPPINGS: Final[dict[str, str]] = {**ASCII_DIGIT_MAPPINGS, "+": "+", "*": "*"}

# Keeps letters, digits and grouping punctuation (folded to one form each).
ALL_PLUS_NUMBER_GROUPING_SYMBOLS: Final[dict[str, str]] = {
    **{letter: letter for letter in ALPHA_MAPPINGS},
    **{letter.lower(): letter for letter in ALPHA_MAPPINGS},
    **ASCII_DIGIT_MAPPINGS,
    **dict.fromkeys("-\uFF0D\u2010\u2011\u2012\u2013\u2014\u2015\u2212", "-"),
    **dict.fromkeys("/\uFF0F", "/"),
    **dict.fromkeys(" \u3000\u2060", " "),
    **dict.fromkeys(".\uFF0E", "."),
}

# ---------------------------------------------------------------------------
# Regex fragments
# ---------------------------------------------------------------------------

PLUS_CHARS: Final = "+\uFF0B"
VALID_PUNCTUATION: Final = (
    "-x\u2010-\u2015\u2212\u30FC\uFF0D-\uFF0F \u00A0\u00AD\u200B\u2060\u3000"
    "()\uFF08\uFF09\uFF3B\uFF3D.\\[\\]/~\u2053\u223C\uFF5E"
)
DIGITS: Final = r"\d"
VALID_ALPHA: Final = "A-Za-z"

_CAPTURING_EXTN_DIGITS: Final = "(" + DIGITS + "{1,7})"

# ";ext=", then the free-text labels, then a trailing "-NNN#" group.
KNOWN_EXTN_PATTERNS: Final = (
    re.escape(RFC3966_EXTN_PREFIX) + _CAPTURING_EXTN_DIGITS + "|"
    "[ \u00A0\\t,]*"
    "(?:e?xt(?:ensi(?:o\u0301?|\u00F3))?n?|\uFF45?\uFF58\uFF54\uFF4E?|"
    "[x\uFF58#\uFF03~\uFF5E,]|int|anexo|\uFF49\uFF4E\uFF54)"
    "[:\\.\uFF0E]?[ \u00A0\\t,-]*" + _CAPTURING_EXTN_DIGITS + "#?|"
    "[- ]+(" + DIGITS + "{1,5})#"
)

VALID_PHONE_NUMBER: Final = (
    DIGITS + "{" + str(MIN_LENGTH_FOR_NSN) + "}|"
    "[" + PLUS_CHARS + "]*(?:[" + VALID_PUNCTUATION + STAR_SIGN + "]*" + DIGITS + "){3,}"
    "[" + VALID_PUNCTUATION + STAR_SIGN + VALID_ALPHA + DIGITS + "]*"
)

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

PLUS_CHARS_PATTERN: Final = re.compile("[" + PLUS_CHARS + "]+")
VALID_START_CHAR_PATTERN: Final = re.compile("[" + PLUS_CHARS + DIGITS + "]")
SECOND_NUMBER_START_PATTERN: Final = re.compile(r"[\\/] *x")
# Anything that is neither a letter nor a number, except "#".
UNWANTED_END_CHAR_PATTERN: Final = re.compile(r"(?:[^\w#]|_)+\Z")
VALID_ALPHA_PHONE_PATTERN: Final = re.compile("(?:.*?[" + VALID_ALPHA + "]){3}.*")
VALID_PHONE_NUMBER_PATTERN: Final = re.compile(
    "(?:" + VALID_PHONE_NUMBER + ")(?:" + KNOWN_EXTN_PATTERNS + ")?", re.IGNORECASE
)
EXTN_PATTERN: Final = re.compile("(?:" + KNOWN_EXTN_PATTERNS + ")$", re.IGNORECASE)
CAPTURING_DIGIT_PATTERN: Final = re.compile("(" + DIGITS + ")")
NON_DIGITS_PATTERN: Final = re.compile(r"\D+")
FIRST_GROUP_PATTERN: Final = re.compile(r"(\$\d)")
GROUP_REFERENCE_PATTERN: Final = re.compile(r"\$\{?(\d)\}?")
SEPARATOR_PATTERN: Final = re.compile("[" + VALID_PUNCTUATION + "]+")
LEADING_SEPARATOR_PATTERN: Final = re.compile("^[" + VALID_PUNCTUATION + "]*")
# An international prefix that is a single fixed string (optionally with one
# "wait for tone" marker) rather than a choice between several.
UNIQUE_INTERNATIONAL_PREFIX_PATTERN: Final = re.compile(r"[\d]+(?:[~\u2053\u223C\uFF5E][\d]+)?")
# Stand-in international prefix for regions without metadata.
NON_MATCHING_IDD: Final = "NonMatch"

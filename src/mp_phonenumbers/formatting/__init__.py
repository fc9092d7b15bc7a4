"""Formatting: structured numbers to text in the four supported styles."""

from mp_phonenumbers.formatting.formatter import Formatter
from mp_phonenumbers.formatting.styles import PhoneNumberFormat

__all__ = ["Formatter", "PhoneNumberFormat"]

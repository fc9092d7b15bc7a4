"""Parsing: free-form text to :class:`~mp_phonenumbers.kernel.types.PhoneNumber`."""

from mp_phonenumbers.parsing.parser import Parser, build_national_number_for_parsing

__all__ = ["Parser", "build_national_number_for_parsing"]

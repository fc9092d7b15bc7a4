"""Matching: compare two numbers written in any form."""

from mp_phonenumbers.matching.matcher import MatchType, Matcher

__all__ = ["MatchType", "Matcher"]

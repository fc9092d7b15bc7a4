"""Validation: number categories, validity and length-only possibility checks."""

from mp_phonenumbers.validation.classifier import Classifier, get_number_desc_by_type
from mp_phonenumbers.validation.types import PhoneNumberType, ValidationResult, check_number_length

__all__ = [
    "Classifier",
    "PhoneNumberType",
    "ValidationResult",
    "check_number_length",
    "get_number_desc_by_type",
]

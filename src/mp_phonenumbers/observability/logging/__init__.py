"""Observability - structured logging helpers."""
from mp_phonenumbers.observability.logging.factory import JsonLoggerFactory
from mp_phonenumbers.observability.logging.filters import DEFAULT_NUMBER_FIELDS, PhoneNumberRedactor
from mp_phonenumbers.observability.logging.processors import get_logger

__all__ = ["DEFAULT_NUMBER_FIELDS", "JsonLoggerFactory", "PhoneNumberRedactor", "get_logger"]

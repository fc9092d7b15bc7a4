"""Parse errors: the closed taxonomy of reasons text is not a phone number."""

from __future__ import annotations

import enum
from typing import Any

from mp_phonenumbers.kernel.errors.domain import DomainError


class ErrorType(str, enum.Enum):
    """Why a parse attempt failed."""

    INVALID_COUNTRY_CODE = "INVALID_COUNTRY_CODE"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    TOO_SHORT_AFTER_IDD = "TOO_SHORT_AFTER_IDD"
    TOO_SHORT_NSN = "TOO_SHORT_NSN"
    TOO_LONG = "TOO_LONG"


class NumberParseError(DomainError):
    """Raised by the parser when text cannot become a :class:`PhoneNumber`.

    Args:
        error_type: The :class:`ErrorType` category of the failure.
        message: Human-readable description.
    """

    default_code = "number_parse_error"

    def __init__(self, error_type: ErrorType, message: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.error_type = error_type
        self.detail.setdefault("error_type", error_type.value)

    def __repr__(self) -> str:
        return f"NumberParseError(error_type={self.error_type.name}, message={self.message!r})"


__all__ = ["ErrorType", "NumberParseError"]

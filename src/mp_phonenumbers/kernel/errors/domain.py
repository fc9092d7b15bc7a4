"""Domain errors: numbering-plan rules that input text does not satisfy."""

from __future__ import annotations

from mp_phonenumbers.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when input violates a numbering-plan rule."""

    default_code = "domain_error"


__all__ = ["DomainError"]

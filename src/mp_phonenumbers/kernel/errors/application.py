"""Application errors: misconfiguration and unusable metadata."""

from __future__ import annotations

from typing import Any

from mp_phonenumbers.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Raised when the engine cannot be set up or used as requested."""

    default_code = "application_error"


class MetadataLoadError(ApplicationError):
    """A metadata document is missing, unreadable or malformed."""

    default_code = "metadata_load_error"

    def __init__(self, message: str, *, source: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.source = source
        if source is not None:
            self.detail.setdefault("source", source)


__all__ = ["ApplicationError", "MetadataLoadError"]

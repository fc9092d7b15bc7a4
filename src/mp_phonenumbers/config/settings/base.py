"""Config settings - Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    ``_prefix`` namespaces environment variables: a field ``log_level`` of a
    class with prefix ``PHONENUMBERS`` reads ``PHONENUMBERS_LOG_LEVEL``.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]

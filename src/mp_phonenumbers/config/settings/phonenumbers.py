"""Config settings - PhoneNumberSettings."""
from __future__ import annotations

import dataclasses
import logging
import re
from typing import ClassVar, Final

from mp_phonenumbers.config.settings.base import Settings
from mp_phonenumbers.config.settings.validator import SettingsValidator
from mp_phonenumbers.config.validation.errors import InvalidSettingValueError
from mp_phonenumbers.kernel.types.regions import REGION_CODE_FOR_NON_GEO_ENTITY

_REGION_CODE: Final = re.compile(r"[A-Z]{2}")
_LOG_LEVELS: Final = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


def _check_region(value: str) -> str | None:
    if value == REGION_CODE_FOR_NON_GEO_ENTITY or _REGION_CODE.fullmatch(value):
        return None
    return "expected a two-letter upper-case region code"


def _check_log_level(value: str) -> str | None:
    return None if value.upper() in _LOG_LEVELS else f"expected one of {sorted(_LOG_LEVELS)}"


_VALIDATOR: Final = SettingsValidator({"default_region": _check_region, "log_level": _check_log_level})


@dataclasses.dataclass
class PhoneNumberSettings(Settings):
    """Runtime configuration of :class:`~mp_phonenumbers.util.PhoneNumberUtil`.

    Environment variables: ``PHONENUMBERS_METADATA_PATH`` (JSON metadata
    document, required), ``PHONENUMBERS_DEFAULT_REGION``,
    ``PHONENUMBERS_LOG_LEVEL`` and ``PHONENUMBERS_JSON_LOGS``.
    """

    _prefix: ClassVar[str] = "PHONENUMBERS"

    metadata_path: str
    default_region: str = "ZZ"
    log_level: str = "INFO"
    json_logs: bool = False

    def _validate(self) -> None:
        for field, reason in _VALIDATOR.validate(self):
            raise InvalidSettingValueError(field, getattr(self, field), reason)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["PhoneNumberSettings"]

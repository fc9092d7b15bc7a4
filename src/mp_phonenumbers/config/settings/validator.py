"""Config settings - SettingsValidator."""
from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from typing import Any

from mp_phonenumbers.config.settings.base import Settings

Rule = Callable[[Any], str | None]


class SettingsValidator:
    """Validate a populated settings instance.

    *rules* maps a field name to a callable returning an error reason, or
    ``None`` when the value is acceptable.
    """

    def __init__(self, rules: Mapping[str, Rule] | None = None) -> None:
        self._rules = dict(rules or {})

    def validate(self, settings: Settings) -> list[tuple[str, str]]:
        """Return ``(field, reason)`` pairs for every failing field."""
        errors: list[tuple[str, str]] = []
        for field in dataclasses.fields(settings):
            value = getattr(settings, field.name)
            if value is None and field.default is dataclasses.MISSING:
                errors.append((field.name, "is required but None"))
                continue
            rule = self._rules.get(field.name)
            if rule is None:
                continue
            reason = rule(value)
            if reason is not None:
                errors.append((field.name, reason))
        return errors


__all__ = ["Rule", "SettingsValidator"]

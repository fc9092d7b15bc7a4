"""Observability - PhoneNumberRedactor."""
from __future__ import annotations

import re
from typing import Any, Final

DEFAULT_NUMBER_FIELDS: Final = frozenset({
    "number",
    "phone",
    "phone_number",
    "raw_input",
    "national_number",
    "text",
})

_DIGIT = re.compile(r"\d")


class PhoneNumberRedactor:
    """Mask the digits of phone numbers held under well-known log keys.

    All digits but the last ``keep_last`` become ``*`` so log lines stay
    correlatable without exposing the subscriber.
    """

    MASK = "*"

    def __init__(self, number_fields: frozenset[str] | None = None, keep_last: int = 2) -> None:
        self._fields = number_fields or DEFAULT_NUMBER_FIELDS
        self._keep_last = keep_last

    def mask(self, value: Any) -> str:
        text = str(value)
        digits = len(_DIGIT.findall(text))
        to_mask = max(digits - self._keep_last, 0)
        seen = 0

        def _replace(match: re.Match[str]) -> str:
            nonlocal seen
            seen += 1
            return self.MASK if seen <= to_mask else match.group(0)

        return _DIGIT.sub(_replace, text)

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.mask(v) if k.lower() in self._fields and v is not None else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if isinstance(v, dict):
                result[k] = self.redact_deep(v)
            elif k.lower() in self._fields and v is not None:
                result[k] = self.mask(v)
            else:
                result[k] = v
        return result

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        """structlog processor entry point."""
        return self.redact_deep(event_dict)


__all__ = ["DEFAULT_NUMBER_FIELDS", "PhoneNumberRedactor"]

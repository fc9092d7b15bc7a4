"""Observability - JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from mp_phonenumbers.observability.logging.filters import PhoneNumberRedactor


class JsonLoggerFactory:
    """Configure structlog and the stdlib root logger for JSON output.

    Engine modules log through :func:`logging.getLogger`; the
    ``ProcessorFormatter`` installed here renders those records as JSON
    next to the events of structlog loggers.
    """

    @staticmethod
    def configure(
        level: int | str = logging.INFO,
        number_fields: frozenset[str] | None = None,
        redact_numbers: bool = True,
    ) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        if redact_numbers:
            shared_processors.insert(0, PhoneNumberRedactor(number_fields))

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]

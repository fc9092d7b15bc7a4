"""Unit tests for phone number redaction and structlog configuration."""
from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from mp_phonenumbers.observability.logging import (
    DEFAULT_NUMBER_FIELDS,
    JsonLoggerFactory,
    PhoneNumberRedactor,
    get_logger,
)


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# PhoneNumberRedactor
# ---------------------------------------------------------------------------


class TestPhoneNumberRedactor:
    def test_mask_keeps_last_two_digits(self) -> None:
        assert PhoneNumberRedactor().mask("+64 3-331 6005") == "+** *-*** **05"

    def test_mask_custom_keep_last(self) -> None:
        assert PhoneNumberRedactor(keep_last=4).mask(6502530000) == "******0000"

    def test_mask_short_value(self) -> None:
        assert PhoneNumberRedactor(keep_last=4).mask("12") == "12"

    def test_redact_known_fields_only(self) -> None:
        data = {"raw_input": "03 331 6005", "region": "NZ", "Phone": "0800 12"}
        assert PhoneNumberRedactor().redact(data) == {
            "raw_input": "** *** **05",
            "region": "NZ",
            "Phone": "**** 12",
        }

    def test_none_is_untouched(self) -> None:
        assert PhoneNumberRedactor().redact({"number": None}) == {"number": None}

    def test_custom_fields(self) -> None:
        redactor = PhoneNumberRedactor(frozenset({"msisdn"}))
        assert redactor.redact({"msisdn": "64211234567", "number": "123"}) == {
            "msisdn": "*********67",
            "number": "123",
        }

    def test_redact_deep(self) -> None:
        data = {"event": "parsed", "input": {"text": "+1 650 253 0000", "region": "US"}}
        result = PhoneNumberRedactor().redact_deep(data)
        assert result == {"event": "parsed", "input": {"text": "+* *** *** **00", "region": "US"}}
        assert data["input"]["text"] == "+1 650 253 0000"

    def test_processor_signature(self) -> None:
        event = PhoneNumberRedactor()(None, "info", {"event": "x", "national_number": 33316005})
        assert event == {"event": "x", "national_number": "******05"}

    def test_default_fields(self) -> None:
        assert {"number", "raw_input", "national_number"} <= DEFAULT_NUMBER_FIELDS


# ---------------------------------------------------------------------------
# JsonLoggerFactory and get_logger
# ---------------------------------------------------------------------------


@pytest.mark.usefixtures("restore_logging")
class TestJsonLoggerFactory:
    def test_structlog_events_are_json_and_redacted(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        structlog.get_logger("phone.test").info("number.parsed", number="+64 3 331 6005")
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["event"] == "number.parsed"
        assert record["number"] == "+** * *** **05"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_stdlib_records_are_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level="DEBUG")
        logging.getLogger("phone.stdlib").debug("metadata loaded")
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["event"] == "metadata loaded"
        assert record["logger"] == "phone.stdlib"

    def test_redaction_can_be_disabled(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(redact_numbers=False)
        structlog.get_logger("phone.test").warning("number.rejected", number="0800 12")
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["number"] == "0800 12"

    def test_level_is_applied(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1


@pytest.mark.usefixtures("restore_logging")
class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("phone.test", region="NZ").info("lookup")
        assert logs == [{"region": "NZ", "event": "lookup", "log_level": "info"}]

    def test_without_values(self) -> None:
        with capture_logs() as logs:
            get_logger().info("plain")
        assert logs == [{"event": "plain", "log_level": "info"}]

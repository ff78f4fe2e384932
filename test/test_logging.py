"""
Tests for structured logging.
"""

import json
import logging
import sys

from helpdesk.shared.logging import (
    StructuredFormatter,
    correlation_id_var,
    get_logger,
    log_with_context,
    setup_logging,
)


def _record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("helpdesk.test", logging.INFO, "", 0, message, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_base_fields(self) -> None:
        payload = json.loads(StructuredFormatter().format(_record()))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "helpdesk.test"
        assert payload["message"] == "hello"
        assert "timestamp" in payload

    def test_extra_data_and_extra_fields(self) -> None:
        record = _record(extra_data={"call_id": "CALL-001"}, action="view")

        payload = json.loads(StructuredFormatter().format(record))

        assert payload["call_id"] == "CALL-001"
        assert payload["action"] == "view"

    def test_correlation_id(self) -> None:
        token = correlation_id_var.set("session-42")
        try:
            payload = json.loads(StructuredFormatter().format(_record()))
        finally:
            correlation_id_var.reset(token)

        assert payload["correlation_id"] == "session-42"

    def test_exception_text(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                "helpdesk.test", logging.ERROR, "", 0, "failed", (), sys.exc_info()
            )

        payload = json.loads(StructuredFormatter().format(record))

        assert "RuntimeError: boom" in payload["exception"]


class TestLogWithContext:
    def test_context_reaches_handlers(self, caplog) -> None:
        logger = get_logger("helpdesk.test.context")

        with caplog.at_level(logging.INFO, logger="helpdesk.test.context"):
            log_with_context(logger, logging.INFO, "Call row activated", call_id="CALL-007")

        assert caplog.records[-1].extra_data == {"call_id": "CALL-007"}

    def test_disabled_level_is_skipped(self, caplog) -> None:
        logger = get_logger("helpdesk.test.quiet")

        with caplog.at_level(logging.WARNING, logger="helpdesk.test.quiet"):
            log_with_context(logger, logging.DEBUG, "noise")

        assert not caplog.records


class TestSetupLogging:
    def test_root_logger_gets_json_handler(self, monkeypatch) -> None:
        monkeypatch.setenv("HELPDESK_LOG_LEVEL", "warning")
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging()

            assert root.level == logging.WARNING
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, StructuredFormatter)
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

    def test_module_loggers_follow_root_configuration(self, monkeypatch) -> None:
        logger = get_logger("helpdesk.test.module")
        monkeypatch.setenv("HELPDESK_LOG_LEVEL", "error")
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging()

            assert logger.handlers == []
            assert logger.level == logging.NOTSET
            assert logger.getEffectiveLevel() == logging.ERROR
            assert not logger.isEnabledFor(logging.WARNING)
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_fallback, CorrelationIdFilter,
RedactionFilter e create_json_formatter.
"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    RedactionFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
    redact,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=args or None,
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_has_correlation_and_redaction_filters(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        filters = logging.getLogger().handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, RedactionFilter) for f in filters)

    def test_http_client_loggers_are_silenced_outside_debug(self) -> None:
        configure_logging(level="INFO")
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "cofounder_messaging"


class TestGetLogger:
    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"


class TestLogFallback:
    """Testes para log_fallback."""

    def test_log_fallback_basic(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "telegram_chat_id")
        call_args = logger.info.call_args
        assert call_args[0] == ("Fallback applied for %s", "telegram_chat_id")
        extra = call_args[1]["extra"]
        assert extra["fallback_used"] is True
        assert extra["component"] == "telegram_chat_id"
        assert "reason" not in extra
        assert "elapsed_ms" not in extra

    def test_log_fallback_with_all_params(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "telegram_message_store", reason="persist_failed", elapsed_ms=12.5)
        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "persist_failed"
        assert extra["elapsed_ms"] == 12.5


class TestCorrelationIdFilter:
    def test_filter_adds_correlation_id_from_getter(self) -> None:
        record = _record("message")
        assert CorrelationIdFilter("my_service", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        record = _record("msg")
        record.correlation_id = "explicit-id"
        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        record = _record("msg")
        CorrelationIdFilter("service_name", None).filter(record)
        assert record.correlation_id == ""


class TestRedaction:
    def test_redacts_bot_token_in_url(self) -> None:
        text = redact("POST https://api.telegram.org/bot123456:ABC-def_g/sendMessage")
        assert "ABC-def_g" not in text
        assert "/bot***/sendMessage" in text

    def test_redacts_bearer_token(self) -> None:
        assert redact("Authorization: Bearer EAAG.secret-1") == "Authorization: Bearer ***"

    def test_masks_phone_keeping_last_four_digits(self) -> None:
        assert redact("to=5511999998888") == "to=***8888"

    def test_short_numbers_are_kept(self) -> None:
        assert redact("status_code=401 message_id=4242") == "status_code=401 message_id=4242"

    def test_filter_redacts_formatted_args(self) -> None:
        record = _record('HTTP Request: POST %s "%s"', "https://api.telegram.org/bot1:tok/sendMessage", "200")
        assert RedactionFilter().filter(record) is True
        assert "tok" not in record.getMessage()
        assert record.args is None

    def test_filter_leaves_clean_records_untouched(self) -> None:
        record = _record("telegram_message_sent")
        RedactionFilter().filter(record)
        assert record.msg == "telegram_message_sent"


class TestCreateJsonFormatter:
    def test_required_log_fields_content(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert expected == set(REQUIRED_LOG_FIELDS)

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record(self) -> None:
        from pythonjsonlogger.json import JsonFormatter

        formatter = create_json_formatter()
        assert isinstance(formatter, JsonFormatter)

        record = _record("token_cached")
        record.correlation_id = "abc-123"
        record.service = "test_service"
        output = formatter.format(record)
        assert "token_cached" in output
        assert "abc-123" in output

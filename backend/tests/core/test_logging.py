"""
Tests for structured logging configuration.
"""

import logging

import structlog
from structlog.contextvars import get_contextvars

from apps.core.logging import (
    _round_duration_ms,
    _rename_correlation_id,
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_logging_json_format(self):
        """Test that JSON format configuration installs one root handler."""
        configure_logging(json_format=True, log_level="INFO")

        assert structlog.get_config() is not None
        assert len(logging.getLogger().handlers) == 1
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_console_format(self):
        configure_logging(json_format=False, log_level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_socketio_transport_loggers_quieted(self):
        """Socket.IO packet logs stay at WARNING or above."""
        configure_logging(json_format=True, log_level="DEBUG")

        assert logging.getLogger("engineio").level == logging.WARNING
        assert logging.getLogger("socketio").level == logging.WARNING


class TestProcessors:
    """Tests for the custom structlog processors."""

    def test_correlation_id_renamed_to_trace_id(self):
        event_dict = _rename_correlation_id(None, "info", {"event": "x", "correlation_id": "abc"})

        assert event_dict == {"event": "x", "trace_id": "abc"}

    def test_without_correlation_id_unchanged(self):
        assert _rename_correlation_id(None, "info", {"event": "x"}) == {"event": "x"}

    def test_duration_rounded(self):
        event_dict = _round_duration_ms(None, "info", {"duration_ms": 12.34567})

        assert event_dict["duration_ms"] == 12.35


class TestContextVars:
    """Tests for context variable binding."""

    def setup_method(self):
        clear_contextvars()

    def teardown_method(self):
        clear_contextvars()

    def test_bind_contextvars_with_dotted_keys(self):
        bind_contextvars(**{"usr.id": "user_123", "http.path": "/api/organizations"})

        ctx = get_contextvars()
        assert ctx.get("usr.id") == "user_123"
        assert ctx.get("http.path") == "/api/organizations"

    def test_clear_contextvars_removes_context(self):
        bind_contextvars(correlation_id="abc123")
        clear_contextvars()

        assert get_contextvars().get("correlation_id") is None


class TestLogOutput:
    """Tests for actual log output."""

    def setup_method(self):
        clear_contextvars()
        configure_logging(json_format=True, log_level="DEBUG")

    def teardown_method(self):
        clear_contextvars()

    def test_event_logged_through_stdlib(self, caplog):
        logger = get_logger("test.json_output")

        with caplog.at_level(logging.DEBUG, logger="test.json_output"):
            logger.info("incident_created", incident_id="inc_1")

        assert len(caplog.records) > 0
        assert "incident_created" in caplog.text

"""Tests for the logging utility module."""

import logging

import structlog
from structlog.testing import capture_logs


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_logging_default(self):
        """Test configure_logging with defaults."""
        from dom_transition.utils.logging import configure_logging

        configure_logging()

        assert structlog.is_configured()

    def test_configure_logging_debug_level(self):
        """Test configure_logging with DEBUG level."""
        from dom_transition.utils.logging import configure_logging

        configure_logging(level="debug")

        assert logging.getLogger().getEffectiveLevel() == logging.DEBUG

    def test_configure_logging_warning_level(self):
        """Test configure_logging with WARNING level filters debug records."""
        from dom_transition.utils.logging import configure_logging

        configure_logging(level="WARNING")

        assert logging.getLogger().getEffectiveLevel() == logging.WARNING
        assert not logging.getLogger("dom_transition.transition").isEnabledFor(logging.DEBUG)

    def test_configure_logging_json_format(self):
        """Test configure_logging with JSON output."""
        from dom_transition.utils.logging import configure_logging

        configure_logging(json_format=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_configure_logging_console_format(self):
        """Test configure_logging renders to the console by default."""
        from dom_transition.utils.logging import configure_logging

        configure_logging(json_format=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_logging_no_timestamp(self):
        """Test configure_logging without timestamps."""
        from dom_transition.utils.logging import configure_logging

        configure_logging(include_timestamp=False)

        stampers = [
            processor for processor in structlog.get_config()["processors"]
            if isinstance(processor, structlog.processors.TimeStamper)
        ]
        assert [stamper.fmt for stamper in stampers] == [None]

    def test_configure_logging_iso_timestamp(self):
        """Test configure_logging stamps ISO timestamps by default."""
        from dom_transition.utils.logging import configure_logging

        configure_logging()

        stampers = [
            processor for processor in structlog.get_config()["processors"]
            if isinstance(processor, structlog.processors.TimeStamper)
        ]
        assert [stamper.fmt for stamper in stampers] == ["iso"]


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_with_name(self):
        """Test get_logger with name."""
        from dom_transition.utils.logging import get_logger

        logger = get_logger("test_logger")

        assert logger is not None

    def test_get_logger_with_context(self):
        """Test get_logger binds context."""
        from dom_transition.utils.logging import get_logger

        with capture_logs() as logs:
            get_logger("test_logger", crawl_id="123").info("Crawling")

        assert logs == [{"event": "Crawling", "log_level": "info", "crawl_id": "123"}]


class TestLogContext:
    """Tests for LogContext context manager."""

    def test_binds_and_unbinds(self):
        """Test context vars are bound inside the block only."""
        from dom_transition.utils.logging import LogContext

        with LogContext(crawl_id="crawl-1", page="https://example.com"):
            assert structlog.contextvars.get_contextvars() == {
                "crawl_id": "crawl-1",
                "page": "https://example.com",
            }

        assert structlog.contextvars.get_contextvars() == {}

    def test_restores_outer_context(self):
        """Test nested contexts restore the outer binding."""
        from dom_transition.utils.logging import LogContext

        with LogContext(crawl_id="outer"):
            with LogContext(crawl_id="inner"):
                assert structlog.contextvars.get_contextvars()["crawl_id"] == "inner"
            assert structlog.contextvars.get_contextvars()["crawl_id"] == "outer"

    def test_returns_self(self):
        """Test LogContext can be used with 'as'."""
        from dom_transition.utils.logging import LogContext

        with LogContext(crawl_id="crawl-1") as ctx:
            assert ctx.context == {"crawl_id": "crawl-1"}

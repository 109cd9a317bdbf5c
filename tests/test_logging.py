"""Unit tests for structured logging."""

import io
import json

from internal.logging import LogLevel, StructuredLogger, get_logger


def _records(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines()]


class TestStructuredLogger:
    """Tests for StructuredLogger."""

    def test_emits_json_line(self):
        """Each record is one JSON object."""
        stream = io.StringIO()
        logger = StructuredLogger(LogLevel.INFO, stream=stream)
        logger.info("generator ready", worker_id=3)
        (record,) = _records(stream)
        assert record["level"] == "INFO"
        assert record["msg"] == "generator ready"
        assert record["worker_id"] == 3
        assert record["timestamp"].endswith("Z")

    def test_level_filter(self):
        """Records below the level are dropped."""
        stream = io.StringIO()
        logger = StructuredLogger(LogLevel.WARN, stream=stream)
        logger.debug("hidden")
        logger.info("hidden")
        logger.warn("shown")
        assert [r["msg"] for r in _records(stream)] == ["shown"]

    def test_error_field(self):
        """Errors are rendered into err."""
        stream = io.StringIO()
        logger = StructuredLogger(stream=stream)
        logger.error("failed", error=ValueError("boom"))
        assert _records(stream)[0]["err"] == "boom"

    def test_bind_adds_fields(self):
        """Bound fields appear on every record."""
        stream = io.StringIO()
        logger = StructuredLogger(stream=stream).bind(component="generator")
        logger.info("one")
        logger.info("two", extra=1)
        records = _records(stream)
        assert all(r["component"] == "generator" for r in records)
        assert records[1]["extra"] == 1


class TestLogLevel:
    """Tests for LogLevel parsing."""

    def test_parse_names(self):
        """Names parse case-insensitively."""
        assert LogLevel.parse("debug") == LogLevel.DEBUG
        assert LogLevel.parse("ERROR") == LogLevel.ERROR

    def test_parse_warning_alias(self):
        """WARNING maps to WARN."""
        assert LogLevel.parse("warning") == LogLevel.WARN


class TestGetLogger:
    """Tests for the process-wide logger."""

    def test_configure_updates_shared_logger(self):
        """configure() sets the level on the shared logger."""
        logger = StructuredLogger.configure(min_level="DEBUG")
        assert get_logger() is logger
        assert logger.level == LogLevel.DEBUG

    def test_bound_logger_follows_configure(self):
        """Loggers bound before configure() pick up the new level and stream."""
        stream = io.StringIO()
        StructuredLogger.configure(min_level=LogLevel.INFO, stream=stream)
        child = get_logger().bind(component="generator")
        child.debug("hidden")
        StructuredLogger.configure(min_level=LogLevel.DEBUG, stream=stream)
        child.debug("shown")
        records = _records(stream)
        assert [r["msg"] for r in records] == ["shown"]
        assert records[0]["component"] == "generator"

    def test_get_logger_is_shared(self):
        """get_logger returns the same instance."""
        assert get_logger() is get_logger()

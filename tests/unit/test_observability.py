"""
Unit tests for structured logging configuration.
"""

import json
import logging

import pytest
import structlog
from feedmedia.config import MonitoringConfig
from feedmedia.observability import configure_logging


@pytest.fixture
def restore_logging():
    """Undo the global logging configuration after each test."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


def _read_records(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


@pytest.mark.unit
class TestConfigureLogging:
    """Test structlog setup."""

    def test_file_logging_is_json(self, tmp_path, restore_logging):
        """Test that stdlib records end up as JSON lines in the log file."""
        log_file = tmp_path / "logs" / "feedmedia.log"
        configure_logging(MonitoringConfig(log_level="DEBUG", log_file=log_file))

        logging.getLogger("feedmedia.extensions.decoders").debug("Ignoring non-integer attribute %s=%r", "width", "x")

        records = _read_records(log_file)
        record = records[-1]
        assert record["event"] == "Ignoring non-integer attribute width='x'"
        assert record["level"] == "debug"
        assert record["logger"] == "feedmedia.extensions.decoders"
        assert "timestamp" in record

    def test_structlog_events_carry_context(self, tmp_path, restore_logging):
        """Test that key-value pairs and the correlation id are rendered."""
        log_file = tmp_path / "feedmedia.log"
        configure_logging(MonitoringConfig(log_level="INFO", log_file=log_file))

        structlog.contextvars.bind_contextvars(correlation_id="item-42")
        structlog.get_logger("feedmedia.test").info("Extracted media metadata", trees=3)

        record = _read_records(log_file)[-1]
        assert record["event"] == "Extracted media metadata"
        assert record["trees"] == 3
        assert record["correlation_id"] == "item-42"

    def test_level_filtering(self, tmp_path, restore_logging):
        """Test that records below the configured level are dropped."""
        log_file = tmp_path / "feedmedia.log"
        configure_logging(MonitoringConfig(log_level="WARNING", log_file=log_file))

        logging.getLogger("feedmedia.test").info("hidden")
        logging.getLogger("feedmedia.test").warning("shown")

        events = [r["event"] for r in _read_records(log_file)]
        assert "hidden" not in events
        assert "shown" in events

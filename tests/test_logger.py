"""Tests for jsonresin/logger.py - structured JSON logging."""

import json
import logging

from jsonresin.logger import JsonFormatter, get_logger, set_level


def make_record(**extra):
    record = logging.LogRecord(
        name="jsonresin",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="repair.document",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """Test the JSON log formatter."""

    def test_base_fields(self):
        """Every record carries timestamp, level, component and event."""
        data = json.loads(JsonFormatter().format(make_record(component="cli")))
        assert data["level"] == "INFO"
        assert data["event"] == "repair.document"
        assert data["component"] == "cli"
        assert "timestamp" in data

    def test_component_defaults_to_module(self):
        """Records logged outside ComponentLogger fall back to the module name."""
        data = json.loads(JsonFormatter().format(make_record()))
        assert data["component"] == "test_logger"

    def test_standard_attributes_excluded(self):
        """LogRecord internals are not copied into the output."""
        data = json.loads(JsonFormatter().format(make_record()))
        assert set(data) == {"timestamp", "level", "component", "event"}

    def test_extra_fields_included(self):
        """Extra fields are copied into the output."""
        data = json.loads(
            JsonFormatter().format(make_record(component="cli", repairs=["missing_comma"]))
        )
        assert data["component"] == "cli"
        assert data["repairs"] == ["missing_comma"]

    def test_non_serializable_extra(self):
        """Non-serializable values are converted to strings."""
        data = json.loads(JsonFormatter().format(make_record(error=ValueError("bad"))))
        assert data["error"] == "bad"


class TestComponentLogger:
    """Test the component logger wrapper."""

    def test_fields_passed_as_extra(self, caplog):
        """Keyword fields and the component name reach the record."""
        logger = get_logger("loads")
        with caplog.at_level(logging.INFO, logger="jsonresin"):
            logger.info("repair.applied", input_length=10)

        record = caplog.records[-1]
        assert record.getMessage() == "repair.applied"
        assert record.component == "loads"
        assert record.input_length == 10

    def test_set_level(self):
        """set_level accepts level names in any case."""
        set_level("warning")
        try:
            assert logging.getLogger("jsonresin").level == logging.WARNING
        finally:
            set_level("INFO")

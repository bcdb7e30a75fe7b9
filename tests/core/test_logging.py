"""Tests for structured logging setup."""

import json
import logging
import sys

import pytest

from calc.core.config import Settings
from calc.core.logging import (
    LoggerAdapter,
    StructuredFormatter,
    TextFormatter,
    get_context_logger,
    get_logger,
    setup_logging,
)


def make_record(message: str = "hello", **extra_data) -> logging.LogRecord:
    record = logging.LogRecord(
        name="calc.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    if extra_data:
        record.extra_data = extra_data
    return record


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging's changes to the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestFormatters:
    """Test the JSON and text formatters."""

    def test_structured_formatter(self):
        """Test JSON output includes the record and extra data."""
        output = StructuredFormatter().format(make_record(error_kind="syntax", position=3))
        data = json.loads(output)
        assert data["level"] == "WARNING"
        assert data["logger"] == "calc.test"
        assert data["message"] == "hello"
        assert data["error_kind"] == "syntax"
        assert data["position"] == 3
        assert "timestamp" in data

    def test_structured_formatter_exception(self):
        """Test exception info is rendered."""
        record = make_record()
        try:
            raise ZeroDivisionError("boom")
        except ZeroDivisionError:
            record.exc_info = sys.exc_info()
        data = json.loads(StructuredFormatter().format(record))
        assert "ZeroDivisionError: boom" in data["exception"]

    def test_text_formatter(self):
        """Test text output appends extra data."""
        output = TextFormatter().format(make_record(stage="parse"))
        assert "calc.test - WARNING - hello" in output
        assert "stage='parse'" in output

    def test_text_formatter_without_extra(self):
        """Test text output has no trailing brackets without extra data."""
        assert not TextFormatter().format(make_record()).endswith("]")


class TestContextLogger:
    """Test the context-carrying adapter."""

    def test_context_merged(self, caplog):
        """Test permanent context and per-call data are merged."""
        logger = get_context_logger("calc.test.adapter", source="1+1")
        assert isinstance(logger, LoggerAdapter)

        with caplog.at_level(logging.INFO, logger="calc.test.adapter"):
            logger.info("evaluated", extra_data={"result": 2})

        record = caplog.records[-1]
        assert record.extra_data == {"source": "1+1", "result": 2}

    def test_get_logger(self):
        """Test get_logger returns the named standard logger."""
        assert get_logger("calc.x") is logging.getLogger("calc.x")


class TestSetupLogging:
    """Test handler configuration."""

    def test_json_format(self, restore_root_logger):
        """Test LOG_FORMAT=json installs the structured formatter."""
        setup_logging(Settings(_env_file=None, LOG_FORMAT="json", LOG_LEVEL="debug"))
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)

    def test_log_file(self, restore_root_logger, tmp_path):
        """Test LOG_FILE adds a file handler, creating parent directories."""
        log_file = tmp_path / "logs" / "calc.log"
        setup_logging(Settings(_env_file=None, LOG_FILE=str(log_file)))

        logging.getLogger("calc.test.file").warning("written")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "written" in log_file.read_text()

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        """Test an unrecognized level name defaults to INFO."""
        setup_logging(Settings(_env_file=None, LOG_LEVEL="chatty"))
        assert restore_root_logger.level == logging.INFO

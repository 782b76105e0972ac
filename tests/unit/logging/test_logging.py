"""Tests for the logging package."""

import json
import logging
import sys

import pytest

from bookstore.logging import (
    BookstoreLogger,
    LoggingConfig,
    StructuredFormatter,
    configure_logging,
    create_default_config,
    logging_manager,
)
from bookstore.logging_integration import get_module_logger


@pytest.fixture
def restore_logging():
    yield
    configure_logging(create_default_config())


class TestLoggingConfig:

    def test_string_level_is_resolved(self):
        config = LoggingConfig(level="debug", output="file")
        assert config.level == logging.DEBUG
        assert config.output == ["file"]

    def test_default_is_quiet(self):
        assert create_default_config().level == logging.WARNING


class TestStructuredFormatter:

    def test_formats_json_with_context(self):
        record = logging.LogRecord("bookstore.test", logging.INFO, __file__, 10, "Book added", None, None)
        record.correlation_id = "abc"
        record.extra_context = {"isbn": "978-1"}
        entry = json.loads(StructuredFormatter("bookstore", "1.0").format(record))
        assert entry["message"] == "Book added"
        assert entry["level"] == "INFO"
        assert entry["service"] == "bookstore"
        assert entry["correlation_id"] == "abc"
        assert entry["isbn"] == "978-1"

    def test_exception_is_rendered_as_text(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                "bookstore.test", logging.ERROR, __file__, 10, "failed", None, sys.exc_info()
            )
        entry = json.loads(StructuredFormatter().format(record))
        assert "RuntimeError: boom" in entry["exception"]
        assert "correlation_id" not in entry


class TestBookstoreLogger:

    def test_no_fields_means_no_extra_context(self, caplog):
        with caplog.at_level(logging.INFO, logger="bookstore.test"):
            BookstoreLogger("bookstore.test").info("Shell started")
        assert not hasattr(caplog.records[-1], "extra_context")

    def test_keyword_context_is_attached(self, caplog):
        logger = BookstoreLogger("bookstore.test", correlation_id="cid")
        with caplog.at_level(logging.INFO, logger="bookstore.test"):
            logger.info("Book added", isbn="978-1")
        record = caplog.records[-1]
        assert record.getMessage() == "Book added"
        assert record.correlation_id == "cid"
        assert record.extra_context == {"isbn": "978-1"}

    def test_module_logger_named_after_caller(self):
        assert get_module_logger().logger.name == __name__


class TestLoggingManager:

    def test_file_output(self, tmp_path, restore_logging):
        log_file = tmp_path / "logs" / "bookstore.log"
        configure_logging(LoggingConfig(level="INFO", format_type="json", output="file", file_path=log_file))
        logging_manager.get_logger("bookstore.test").info("Book removed", isbn="978-2")
        for handler in logging_manager.handlers:
            handler.flush()
        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["message"] == "Book removed"
        assert entry["isbn"] == "978-2"

    def test_reconfigure_replaces_own_handlers(self, restore_logging):
        configure_logging(LoggingConfig(output="console"))
        configure_logging(LoggingConfig(output="console", format_type="rich"))
        assert len(logging_manager.handlers) == 1

    def test_file_output_defaults_to_logs_directory(self, tmp_path, restore_logging):
        configure_logging(LoggingConfig(output="file"))
        assert (tmp_path / "logs" / "bookstore.log").exists()

    def test_unknown_output_rejected(self, restore_logging):
        with pytest.raises(ValueError, match="Unknown log output: syslog"):
            configure_logging(LoggingConfig(output="syslog"))

"""Tests for structured logging configuration."""

import json
import logging

import structlog

from cli.logging_config import setup_logging


class TestLoggingConfig:
    """Test structlog setup modes."""

    def test_console_mode(self):
        """Console mode installs a single stderr handler."""
        setup_logging(json_mode=False, level="DEBUG")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        structlog.get_logger().info("test message", key="value")

    def test_level_filtering(self):
        setup_logging(json_mode=False, level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_default_level_is_info(self):
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_processor_chain(self):
        setup_logging(json_mode=True, level="DEBUG")
        config = structlog.get_config()
        assert len(config["processors"]) >= 2

    def test_log_file_receives_json(self, tmp_path):
        log_file = tmp_path / "logs" / "contrario.log"
        setup_logging(level="INFO", log_file=log_file)

        structlog.get_logger("file_test").warning("disk check", disk="sda")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = log_file.read_text().strip().splitlines()
        assert lines
        record = json.loads(lines[-1])
        assert record["event"] == "disk check"
        assert record["level"] == "warning"
        assert record["disk"] == "sda"

    def test_stdlib_records_get_level(self, tmp_path):
        log_file = tmp_path / "contrario.log"
        setup_logging(level="INFO", log_file=log_file)

        logging.getLogger("tenacity_like").warning("retrying")
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["event"] == "retrying"
        assert record["level"] == "warning"
        assert record["logger"] == "tenacity_like"

    def test_http_loggers_quieted(self):
        setup_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
        setup_logging(level="ERROR")
        assert logging.getLogger("httpx").level == logging.ERROR

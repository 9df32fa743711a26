"""
Test suite for logging_config module

Tests the JSON formatter, logger setup and structured action logging.
"""

import json
import logging
import sys

import pytest

from atm_banking.config import AtmConfig
from atm_banking.logging_config import (
    JSONFormatter, setup_logging, setup_logging_from_config, get_logger, log_action
)


class ListHandler(logging.Handler):
    """Collects formatted records"""

    def __init__(self):
        super().__init__()
        self.setFormatter(JSONFormatter())
        self.lines = []

    def emit(self, record):
        self.lines.append(self.format(record))


@pytest.fixture
def captured_logger():
    logger = logging.getLogger("test_atm_banking.structured")
    logger.handlers.clear()
    handler = ListHandler()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger, handler
    logger.handlers.clear()


class TestJSONFormatter:
    """Test JSON formatting of log records"""

    def test_basic_fields(self):
        """Test level, logger and message are present"""
        record = logging.LogRecord("atm_banking.atm", logging.INFO, __file__, 1, "hello %s", ("world",), None)

        entry = json.loads(JSONFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "atm_banking.atm"
        assert entry["message"] == "hello world"
        assert "timestamp" in entry
        assert "action" not in entry

    def test_exception_info(self):
        """Test exceptions are included"""
        try:
            raise RuntimeError("failure")
        except RuntimeError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "oops", (), sys.exc_info())

        entry = json.loads(JSONFormatter().format(record))

        assert "RuntimeError: failure" in entry["exception"]


class TestSetupLogging:
    """Test logger configuration"""

    def test_json_handler(self):
        """Test setup installs a single JSON handler"""
        logger = setup_logging("DEBUG", logger_name="test_atm_banking.setup_json")
        setup_logging("DEBUG", logger_name="test_atm_banking.setup_json")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.level == logging.DEBUG
        assert not logger.propagate

    def test_text_handler(self):
        """Test text format uses a plain formatter"""
        logger = setup_logging("WARNING", logger_name="test_atm_banking.setup_text", log_format="text")

        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.level == logging.WARNING

    def test_file_handler(self, tmp_path):
        """Test logs are written to a file when requested"""
        log_file = tmp_path / "atm.log"
        logger = setup_logging("INFO", logger_name="test_atm_banking.setup_file", log_file=str(log_file))

        logger.info("to file")
        for handler in logger.handlers:
            handler.flush()

        assert json.loads(log_file.read_text().strip())["message"] == "to file"

        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()

    def test_setup_from_config(self):
        """Test setup from an AtmConfig instance"""
        settings = AtmConfig(_env_file=None, log_level="ERROR", log_format="text")

        logger = setup_logging_from_config(settings)

        assert logger.name == "atm_banking"
        assert logger.level == logging.ERROR

        # Hand the package logger back to the root handlers
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    def test_get_logger(self):
        """Test loggers are namespaced"""
        assert get_logger("atm_banking.accounts").name == "atm_banking.accounts"
        assert get_logger().name == "atm_banking"


class TestLogAction:
    """Test structured action logging"""

    def test_structured_fields(self, captured_logger):
        """Test action, resource and data are attached"""
        logger, handler = captured_logger

        log_action(logger, "info", "deposit completed",
                   action="deposit", resource="12345678", data={"amount": 200.0})

        entry = json.loads(handler.lines[0])
        assert entry["message"] == "deposit completed"
        assert entry["action"] == "deposit"
        assert entry["resource"] == "12345678"
        assert entry["data"] == {"amount": 200.0}

    def test_respects_level(self, captured_logger):
        """Test records below the logger level are dropped"""
        logger, handler = captured_logger
        logger.setLevel(logging.WARNING)

        log_action(logger, "debug", "ignored")
        log_action(logger, "warning", "kept")

        assert len(handler.lines) == 1
        assert json.loads(handler.lines[0])["level"] == "WARNING"

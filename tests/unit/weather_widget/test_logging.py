"""Tests for logging helpers."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from weather_widget.logging_config import LOG_FILE_NAME, get_logger, log_with_context, setup_logging
from weather_widget.middleware.logging_middleware import redact_sensitive_data


def test_redacts_appid():
    """Test the provider credential never appears in logged URLs."""
    url = "https://api.openweathermap.org/data/2.5/weather?q=Paris&appid=abc123"

    redacted = redact_sensitive_data(url)

    assert "abc123" not in redacted
    assert "appid=***REDACTED***" in redacted
    assert "q=Paris" in redacted


def test_redaction_leaves_other_params():
    """Test parameters that merely end in a sensitive name are kept."""
    url = "https://example.com/path?monkey=banana&key=secret"

    redacted = redact_sensitive_data(url)

    assert "monkey=banana" in redacted
    assert "key=***REDACTED***" in redacted


def test_log_with_context_adds_extra_fields(caplog):
    """Test structured fields are attached to the record."""
    logger = get_logger("weather_widget.test")

    with caplog.at_level(logging.INFO, logger="weather_widget.test"):
        log_with_context(logger, "info", "Hello", event_type="test_event", city="Paris")

    record = caplog.records[-1]
    assert record.getMessage() == "Hello"
    assert record.event_type == "test_event"
    assert record.city == "Paris"


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_writes_json_file_to_log_dir(tmp_path, restore_root_logger):
    """Test the JSON log file is created inside the configured directory."""
    log_dir = tmp_path / "nested" / "logs"

    root = setup_logging("warning", log_dir)
    logging.getLogger("weather_widget.test").warning("stored", extra={"event_type": "test_event"})
    for handler in root.handlers:
        handler.flush()

    log_file = log_dir / LOG_FILE_NAME
    assert root.level == logging.WARNING
    assert log_file.exists()
    content = log_file.read_text(encoding="utf-8")
    assert '"message": "stored"' in content
    assert '"event_type": "test_event"' in content


def test_setup_logging_without_log_dir_is_console_only(restore_root_logger):
    """Test no file handler is installed when no directory is configured."""
    root = setup_logging("INFO", None)

    assert len(root.handlers) == 1
    assert not any(isinstance(handler, RotatingFileHandler) for handler in root.handlers)

"""Tests for logging setup."""

import json
import logging

import pytest

from weather_lookup.logging_config import LOG_FILE_NAME, get_logger, log_with_context, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger's handlers and level back after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_writes_json_with_context(tmp_path, restore_root_logger):
    """Test structured fields land as keys in the JSON log file."""
    root = setup_logging("warning", tmp_path / "logs")
    logger = get_logger("weather_lookup.test")

    log_with_context(logger, "info", "Weather fetched", city="London", event_type="weather_fetched")
    for handler in root.handlers:
        handler.flush()

    lines = (tmp_path / "logs" / LOG_FILE_NAME).read_text(encoding="utf-8").splitlines()
    record = json.loads(lines[-1])
    assert record["message"] == "Weather fetched"
    assert record["level"] == "INFO"
    assert record["city"] == "London"
    assert record["event_type"] == "weather_fetched"


def test_setup_logging_console_uses_configured_level(tmp_path, restore_root_logger):
    """Test the console handler honours the level while the file keeps DEBUG."""
    root = setup_logging("WARNING", tmp_path)

    levels = sorted(handler.level for handler in root.handlers)
    assert levels == [logging.DEBUG, logging.WARNING]
    assert logging.getLogger("httpx").level == logging.WARNING


def test_setup_logging_rejects_unknown_level(tmp_path, restore_root_logger):
    """Test an unknown level name fails loudly."""
    with pytest.raises(KeyError):
        setup_logging("chatty", tmp_path)

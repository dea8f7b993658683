"""Logging setup: JSON lines to a rotating file, plain text to the console.

Structured fields passed to `log_with_context` end up as top-level keys in
the JSON records, e.g. `{"message": "Weather fetched", "city": "London",
"event_type": "weather_fetched", ...}`.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

LOG_FILE_NAME = "weather_lookup.log"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

# Third-party loggers that are only interesting when something goes wrong
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def _json_file_handler(log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(module)s %(lineno)d",
            rename_fields={"levelname": "level"},
            timestamp=True,
        )
    )
    # The file keeps everything; the console honours the configured level
    handler.setLevel(logging.DEBUG)
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%H:%M:%S"))
    handler.setLevel(level)
    return handler


def setup_logging(log_level: str, log_dir: Path) -> logging.Logger:
    """Replace the root logger's handlers with the file and console handlers.

    Args:
        log_level: Console level name, e.g. "INFO"
        log_dir: Directory for the rotating JSON log; created if missing

    Returns:
        The root logger
    """
    level = logging.getLevelNamesMapping()[log_level.upper()]

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(_json_file_handler(log_dir))
    root_logger.addHandler(_console_handler(level))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Module logger; use with `log_with_context` for structured fields."""
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **fields: Any) -> None:
    """Log `message` at `level` with `fields` attached as structured context."""
    getattr(logger, level.lower())(message, extra=fields)

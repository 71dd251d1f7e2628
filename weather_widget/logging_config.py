"""Structured logging configuration for the Weather Widget.

Console output is human-readable. When a log directory is configured, JSON
records are also written to ``<log_dir>/weather_widget.log`` with rotation.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

LOG_FILE_NAME = "weather_widget.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s %(module)s %(lineno)d"
CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def _json_file_handler(log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(jsonlogger.JsonFormatter(JSON_FORMAT, timestamp=True))
    return handler


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Configure console logging and, optionally, a rotating JSON log file.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the JSON log file, created if missing.
            Relative paths resolve against the working directory.

    Returns:
        Configured root logger instance
    """
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        file_handler = _json_file_handler(Path(log_dir))
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with structured context fields.

    Args:
        logger: Logger instance
        level: Log level name (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Extra record attributes, e.g. event_type or status_code
    """
    getattr(logger, level.lower())(message, extra=extra_fields)

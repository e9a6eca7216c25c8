"""
Promised Cache - Logging Setup

Structured JSON logging for the ``promised_cache`` logger hierarchy.
Every module logs through ``logging.getLogger(__name__)`` and passes
context with ``extra=``; the formatter below folds those extras into
the emitted JSON object.
"""

import json
import logging
from datetime import UTC, datetime
from typing import Any

from ..config.schemas import LogFormat, LoggingConfig, LogLevel

ROOT_LOGGER_NAME = "promised_cache"

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Attributes every LogRecord carries; anything else came in through extra=
_RESERVED_ATTRS = frozenset(
    (
        "args",
        "msg",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "name",
        "message",
        "taskName",
    )
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key, value in record.__dict__.items():
            if key not in log_data and not key.startswith("_") and key not in _RESERVED_ATTRS:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # default=str keeps Path objects and similar extras printable
        return json.dumps(log_data, default=str)


def setup_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """
    Configure the ``promised_cache`` logger.

    Replaces any handlers previously installed on it, so calling this
    twice does not duplicate output.

    Args:
        config: Logging section of the configuration (defaults if omitted)

    Returns:
        The configured package logger
    """
    config = config or LoggingConfig()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()

    handler = logging.StreamHandler()
    if LogFormat(config.format) == LogFormat.JSON:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(LogLevel(config.level).value)
    logger.propagate = False

    return logger

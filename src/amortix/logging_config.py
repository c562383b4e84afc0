"""Centralized logging configuration for amortix.

Logging can be configured through environment variables or programmatically.
Every module logger lives under the ``amortix`` namespace and propagates to the
package logger, which owns the handlers (console, rotating file, JSON).
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

PACKAGE_LOGGER = "amortix"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Environment variable names
ENV_LOG_LEVEL = "AMORTIX_LOG_LEVEL"
ENV_LOG_FILE = "AMORTIX_LOG_FILE"
ENV_LOG_FORMAT = "AMORTIX_LOG_FORMAT"
ENV_STRUCTURED_LOGS = "AMORTIX_STRUCTURED_LOGS"
ENV_PERF_LOG_LEVEL = "AMORTIX_PERF_LOG_LEVEL"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_RECORD_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a single JSON line.

        Args:
            record: The log record to format

        Returns:
            JSON string representation of the log record
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def _resolve_level(level: str | None, env_var: str, default: str) -> int:
    level_str = level or os.getenv(env_var) or default
    return getattr(logging, level_str.upper(), logging.WARNING)


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Get a logger for an amortix module.

    Args:
        name: Name of the logger (typically ``__name__`` of the calling module)
        level: Optional level override for this logger only

    Returns:
        Logger instance. Loggers under the ``amortix`` namespace propagate to
        the package logger configured by :func:`configure_logging`.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Schedule generated", extra={"rows": 12})
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return logger


def configure_logging(
    level: str | None = None,
    log_file: str | None = None,
    console: bool = True,
    structured: bool = False,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 5,
) -> None:
    """Configure logging for the entire amortix package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to ``AMORTIX_LOG_LEVEL`` or WARNING.
        log_file: Path to a log file. Defaults to ``AMORTIX_LOG_FILE``; no
                 file handler is installed when neither is set.
        console: Whether to log to the console (stderr). Default: True
        structured: Whether to emit JSON lines. Can also be switched on with
                   ``AMORTIX_STRUCTURED_LOGS``.
        max_bytes: Maximum size of the log file before rotation (default: 10MB)
        backup_count: Number of rotated log files to keep (default: 5)

    Example:
        >>> configure_logging(level="DEBUG")
        >>> configure_logging(level="INFO", log_file="/tmp/amortix.log", structured=True)
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()

    log_level = _resolve_level(level, ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    logger.setLevel(log_level)

    use_structured = structured or os.getenv(ENV_STRUCTURED_LOGS, "").lower() in (
        "true",
        "1",
        "yes",
    )

    if use_structured:
        formatter: logging.Formatter = StructuredFormatter(datefmt=DEFAULT_DATE_FORMAT)
    else:
        log_format = os.getenv(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT)
        formatter = logging.Formatter(log_format, datefmt=DEFAULT_DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    log_file_path = log_file or os.getenv(ENV_LOG_FILE)
    if log_file_path:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False


def get_performance_logger(name: str) -> logging.Logger:
    """Get a logger for timing information.

    Performance loggers default to DEBUG and are controlled separately through
    ``AMORTIX_PERF_LOG_LEVEL``.

    Example:
        >>> perf_logger = get_performance_logger("engines")
        >>> perf_logger.debug("Batch quoted", extra={"duration_ms": 1.2, "requests": 100})
    """
    logger = logging.getLogger(f"{PACKAGE_LOGGER}.performance.{name}")
    logger.setLevel(_resolve_level(None, ENV_PERF_LOG_LEVEL, "DEBUG"))
    return logger


def disable_logging() -> None:
    """Silence all amortix logging output."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


if not logging.getLogger(PACKAGE_LOGGER).handlers:
    configure_logging()

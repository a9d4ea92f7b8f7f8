"""
Application logging configuration for the UZ train search.

Provides structured logging with support for:
- Console output on stderr
- File output for persistent logs
- Correlation IDs for request tracing

stdout is left to search results and the MCP stdio protocol.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime
from pathlib import Path
from typing import Optional, Any

from uz_trains.config import get_config

ROOT_LOGGER_NAME = "uz_trains"

# Context variable for request correlation ID
correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def set_correlation_id(cid: Optional[str] = None) -> str:
    """Set correlation ID for current context."""
    if cid is None:
        cid = str(uuid.uuid4())[:8]
    correlation_id.set(cid)
    return cid


class CorrelationFilter(logging.Filter):
    """Add correlation ID to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id.get() or "-"
        return True


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """
    Set up application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional)
        console: Whether to log to console

    Returns:
        Root logger for the application
    """
    config = get_config()
    level = level or config.log_level
    if log_file is None and config.log_file is not None:
        log_file = str(config.log_file)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    # The file handler wants everything, the console only the configured level
    logger.setLevel(logging.DEBUG if log_file else getattr(logging, level.upper()))

    # Remove existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    correlation_filter = CorrelationFilter()

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, level.upper()))
        console_handler.addFilter(correlation_filter)

        console_format = "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s"
        console_handler.setFormatter(logging.Formatter(console_format, datefmt="%H:%M:%S"))
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Log everything to file
        file_handler.addFilter(correlation_filter)

        file_format = "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
        file_handler.setFormatter(logging.Formatter(file_format))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


class LogContext:
    """
    Context manager for structured logging with automatic correlation ID.

    Usage:
        with LogContext("search", departure="1902", arrival="1929"):
            # ... code that may log ...
            pass
    """

    def __init__(self, operation: str, **context: Any):
        """
        Initialize log context.

        Args:
            operation: Name of the operation being performed
            **context: Additional context to include in logs
        """
        self.operation = operation
        self.context = context
        self.logger = get_logger("context")
        self.start_time = None
        self.cid = None

    def __enter__(self) -> "LogContext":
        self.cid = set_correlation_id()
        self.start_time = datetime.now()

        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        self.logger.debug(f"Starting {self.operation}: {context_str}")

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000

        if exc_type is None:
            self.logger.debug(f"Completed {self.operation} in {duration_ms:.0f}ms")
        else:
            self.logger.warning(f"Failed {self.operation} after {duration_ms:.0f}ms: {exc_val}")

        # Don't suppress exceptions
        return False

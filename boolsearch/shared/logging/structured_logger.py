"""
Structured logger implementation.

This module provides a structured logging implementation that
formats log messages as JSON lines. Installing it on the package
logger makes every ``logging.getLogger(__name__)`` logger below it
emit the same format.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, TextIO


class LogLevel(Enum):
    """Log levels accepted by ``configure_logging`` and the ``logging.level`` setting."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StructuredFormatter(logging.Formatter):
    """Render log records as single-line JSON entries."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "context": getattr(record, "context", {})
        }

        if record.exc_info and record.exc_info[1] is not None:
            exc_type, exc_value, exc_tb = record.exc_info
            log_entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": traceback.format_exception(exc_type, exc_value, exc_tb)
            }

        return json.dumps(log_entry, default=str)


class StructuredLogger:
    """
    Structured logger implementation.

    Wraps a standard library logger, attaches context data to every
    record and owns the handlers it installs.
    """

    def __init__(
        self,
        name: str,
        level: LogLevel = LogLevel.INFO,
        output: TextIO = sys.stdout,
        json_format: bool = True,
        log_file: Optional[str] = None
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Initial log level
            output: Output stream for logs
            json_format: Emit JSON lines instead of plain text
            log_file: Optional file to log to as well
        """
        self.name = name
        self._level = level
        self._context: Dict[str, Any] = {}

        self._logger = logging.getLogger(name)
        self._logger.setLevel(level.value)

        # Reconfiguring replaces the handlers installed earlier
        for handler in list(self._logger.handlers):
            if getattr(handler, "_structured", False):
                self._logger.removeHandler(handler)

        formatter = StructuredFormatter() if json_format else logging.Formatter(TEXT_FORMAT)
        handlers = [logging.StreamHandler(output)]
        if log_file:
            handlers.append(logging.FileHandler(log_file))

        for handler in handlers:
            handler.setFormatter(formatter)
            handler._structured = True
            self._logger.addHandler(handler)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _log(
        self,
        level: LogLevel,
        message: str,
        exc_info: Optional[BaseException] = None,
        **kwargs: Any
    ) -> None:
        """
        Internal logging method.

        Args:
            level: Log level
            message: Message to log
            exc_info: Optional exception
            **kwargs: Additional context
        """
        self._logger.log(
            getattr(logging, level.value),
            message,
            exc_info=(type(exc_info), exc_info, exc_info.__traceback__) if exc_info else None,
            extra={"context": {**self._context, **kwargs}}
        )

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, **kwargs)

    def exception(self, message: str, exc_info: Optional[BaseException] = None, **kwargs: Any) -> None:
        """Log an exception."""
        self._log(LogLevel.ERROR, message, exc_info=exc_info, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        """Set the logging level."""
        self._level = level
        self._logger.setLevel(level.value)

    def get_level(self) -> LogLevel:
        """Get the current logging level."""
        return self._level

    def add_context(self, **kwargs: Any) -> None:
        """Add context data."""
        self._context.update(kwargs)

    def clear_context(self) -> None:
        """Clear all context data."""
        self._context.clear()

    def get_context(self) -> Dict[str, Any]:
        """Get the current context data."""
        return self._context.copy()


def configure_logging(
    name: str = "boolsearch",
    level: LogLevel = LogLevel.INFO,
    output: TextIO = sys.stdout,
    json_format: bool = True,
    log_file: Optional[str] = None
) -> StructuredLogger:
    """
    Configure and return a StructuredLogger instance.

    Args:
        name: Logger name
        level: Logging level
        output: Output stream for logs
        json_format: Emit JSON lines instead of plain text
        log_file: Optional file to log to as well

    Returns:
        StructuredLogger: Configured logger instance
    """
    return StructuredLogger(
        name=name,
        level=level,
        output=output,
        json_format=json_format,
        log_file=log_file
    )

"""Logging infrastructure for htmlform.

This module provides structured logging for errors, debugging, and events.
All logging functions use the standard library logging module for flexibility.
"""

import logging
import sys
from typing import Any

# Error ID constants for tracking
class ErrorIds:
    """Constants for error IDs used in logging and error tracking."""

    # Dispatcher errors
    UNKNOWN_OPERATION = "ERR_UNKNOWN_OPERATION"

    # Configuration / definition errors
    INVALID_CONFIGURATION = "ERR_INVALID_CONFIG"
    INVALID_ELEMENT_ARGS = "ERR_INVALID_ELEMENT_ARGS"
    DEFINITION_LOAD_FAILED = "ERR_DEFINITION_LOAD"

    # General errors
    UNEXPECTED_ERROR = "ERR_UNEXPECTED"
    KEYBOARD_INTERRUPT = "KEYBOARD_INTERRUPT"


_logger: logging.Logger | None = None

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _get_logger() -> logging.Logger:
    """Get or create the logger instance."""
    global _logger
    if _logger is None:
        _logger = logging.getLogger("htmlform")
        _logger.setLevel(logging.DEBUG)

        # stdout is reserved for rendered HTML
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        _logger.addHandler(console_handler)

    return _logger


def _with_extra(message: str, extra: dict[str, Any] | None) -> str:
    if not extra:
        return message
    extra_str = ", ".join(f"{k}={v}" for k, v in extra.items())
    return f"{message} | {extra_str}"


def logError(
    error_id: str,
    message: str,
    exc_info: bool = False,
    extra: dict[str, Any] | None = None,
) -> None:
    """Log an error for error tracking.

    Args:
        error_id: The error ID constant from ErrorIds.
        message: Human-readable error message.
        exc_info: If True, include exception info in the log.
        extra: Optional additional context as key-value pairs.
    """
    logger = _get_logger()
    logger.error(_with_extra(f"[{error_id}] {message}", extra), exc_info=exc_info)


def logForDebugging(
    message: str,
    level: str = "debug",
    extra: dict[str, Any] | None = None,
) -> None:
    """Log a developer-facing debug message.

    Args:
        message: The message to log.
        level: Log level - "debug", "info", "warning", or "error".
        extra: Optional additional context as key-value pairs.
    """
    logger = _get_logger()
    log_level = getattr(logging, level.upper(), logging.DEBUG)
    logger.log(log_level, _with_extra(message, extra))


def logEvent(
    event_name: str,
    properties: dict[str, Any] | None = None,
) -> None:
    """Log a form lifecycle event.

    Args:
        event_name: The name of the event (e.g., "form_validated", "honeypot_triggered").
        properties: Optional event properties as key-value pairs.
    """
    logger = _get_logger()
    logger.info(_with_extra(f"[EVENT] {event_name}", properties))


def set_log_level(level: str | int) -> None:
    """Set the console logging level for htmlform.

    Args:
        level: Log level as string ("debug", "info", "warning", "error")
               or int (logging.DEBUG, logging.INFO, etc.).
    """
    logger = _get_logger()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logger.handlers[0].setLevel(level)


def enable_file_logging(filepath: str) -> None:
    """Enable file logging to a specific file.

    Args:
        filepath: Path to the log file.
    """
    logger = _get_logger()
    file_handler = logging.FileHandler(filepath)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(file_handler)

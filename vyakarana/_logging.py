"""
Structured logging utilities for Vyakarana library.

Provides a configured logger and helper functions for consistent logging.
The library itself installs only a NullHandler; applications opt in with
configure_logging().
"""

import logging
import sys
from typing import Optional


# Default format for Vyakarana logs
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = "vyakarana") -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (default: "vyakarana")

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: int | str | None = None,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    Configure logging for the Vyakarana library.

    Args:
        level: Logging level (default: the ``log_level`` setting)
        format_string: Log format string (default: DEFAULT_FORMAT)
        date_format: Date format string (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        Configured root logger for vyakarana
    """
    if level is None:
        from vyakarana.config import get_settings

        level = get_settings().log_level

    logger = logging.getLogger("vyakarana")
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger


def enable_debug_logging() -> None:
    """Enable debug-level logging for the Vyakarana library."""
    configure_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Disable all Vyakarana logging."""
    logger = logging.getLogger("vyakarana")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())


# Create default logger
_logger = get_logger()
_logger.addHandler(logging.NullHandler())


def log_unresolved_units(word: str, script: str, positions: list[int]) -> None:
    """Log code points the tokenizer could not resolve."""
    _logger.debug(
        f"Unresolved units in {word!r} ({script}): positions={positions}"
    )


def log_ambiguous_affix(affix: str, candidates: list[str]) -> None:
    """Log an affix found in more than one pada table."""
    _logger.debug(f"Ambiguous affix {affix!r}: candidates={', '.join(candidates)}")


def log_unknown_affix(affix: str, script: str) -> None:
    """Log an affix missing from both pada tables."""
    _logger.debug(f"Unknown affix {affix!r} ({script})")


def log_reference_data_loaded(table: str, entries: int) -> None:
    """Log reference data load event."""
    _logger.debug(f"Loaded reference table {table}: {entries} entries")


def log_warning(message: str, **context) -> None:
    """Log a warning with optional context."""
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        _logger.warning(f"{message} ({ctx_str})")
    else:
        _logger.warning(message)


def log_error(message: str, exc_info: bool = False, **context) -> None:
    """Log an error with optional context and exception info."""
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        _logger.error(f"{message} ({ctx_str})", exc_info=exc_info)
    else:
        _logger.error(message, exc_info=exc_info)

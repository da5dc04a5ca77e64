"""
Diagnostic logging for the log helper itself.

Failures inside sinks and backends are never raised to the caller; they are
reported here instead, on a regular stdlib logger writing to stderr.
"""

import logging
import sys
from typing import Optional

from loghelper.config.base import LogHelperSettings

# Type alias for Python's standard logger
Logger = logging.Logger


def setup_logger(
    name: str,
    level: str = "INFO",
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    debug: bool = False,
) -> logging.Logger:
    """
    Create and configure a diagnostic logger instance.

    Args:
        name: Logger name (usually __name__)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Log message format
        debug: If True, sets level to DEBUG regardless of level parameter

    Returns:
        Configured logger instance
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper(), logging.INFO)
    if debug:
        log_level = logging.DEBUG

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(format))
    logger.addHandler(handler)

    return logger


def get_logger(
    name: str, settings: Optional[LogHelperSettings] = None
) -> logging.Logger:
    """
    Get a configured diagnostic logger.

    Args:
        name: Logger name (usually __name__)
        settings: Optional settings; DEBUG switches the level to DEBUG

    Returns:
        Configured logger instance
    """
    debug = False
    if settings and hasattr(settings, "DEBUG"):
        debug = bool(settings.DEBUG)

    return setup_logger(name, debug=debug)


def ensure_logger(
    logger: Optional[logging.Logger] = None,
    name: Optional[str] = None,
    settings: Optional[LogHelperSettings] = None,
) -> logging.Logger:
    """
    Return the given logger, or create a diagnostic logger named `name`.

    Args:
        logger: An existing logger instance to use if provided
        name: Module name (usually __name__) for creating a new logger if needed
        settings: Optional settings

    Returns:
        Either the provided logger or a newly created one
    """
    if logger:
        return logger

    if not name:
        raise ValueError("Module name must be provided when logger is not specified")

    return get_logger(name, settings)

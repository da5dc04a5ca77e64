"""
Diagnostic logging for the log helper.

This is the secondary channel that sinks and backends report their own
failures on. It is plain stdlib logging, separate from the log files the
helper writes.
"""

from loghelper.logging.manager import Logger, ensure_logger, get_logger, setup_logger

__all__ = ["Logger", "get_logger", "ensure_logger", "setup_logger"]

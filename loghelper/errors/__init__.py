"""
Error types for the log helper.

Limitations:
- Sink errors never reach callers; they only appear in diagnostic logs and
  as the `failure` field of an AppendResult.
"""

from loghelper.errors.exceptions import (
    BackendUnavailableError,
    DeleteFailedError,
    DirectoryCreateFailedError,
    FailureKind,
    LockFailedError,
    LogHelperError,
    OpenFailedError,
    SinkError,
    WriteFailedError,
)

__all__ = [
    "FailureKind",
    # Exception classes
    "LogHelperError",
    "SinkError",
    "DeleteFailedError",
    "DirectoryCreateFailedError",
    "OpenFailedError",
    "LockFailedError",
    "WriteFailedError",
    "BackendUnavailableError",
]

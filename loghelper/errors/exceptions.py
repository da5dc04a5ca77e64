"""
Exception classes for the log helper.

Sink and backend failures are modelled as exceptions internally so every
step can bail out the same way, but they are caught at the sink/backend
boundary and turned into a failed result. Only BackendUnavailableError is
ever raised to the caller.
"""

from enum import Enum
from typing import Any, Dict, Optional


class FailureKind(str, Enum):
    """Reason an append or backend call failed."""

    DELETE_FAILED = "DELETE_FAILED"
    DIRECTORY_CREATE_FAILED = "DIRECTORY_CREATE_FAILED"
    OPEN_FAILED = "OPEN_FAILED"
    LOCK_FAILED = "LOCK_FAILED"
    WRITE_FAILED = "WRITE_FAILED"
    BACKEND_FAILED = "BACKEND_FAILED"
    BACKEND_UNAVAILABLE = "BACKEND_UNAVAILABLE"


class LogHelperError(Exception):
    """
    Base exception for all log helper errors.

    Attributes:
        message: Human-readable error message
        code: Error code identifier (default: ERROR)
        details: Additional error details
    """

    def __init__(
        self,
        message: str = "An unexpected logging error occurred",
        code: str = "ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class SinkError(LogHelperError):
    """
    Failure of one step of the file append protocol.

    Attributes:
        kind: Which step failed
        path: File or directory the step was operating on
    """

    kind: FailureKind = FailureKind.OPEN_FAILED

    def __init__(
        self,
        path: str,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.path = path
        details = details or {}
        details["path"] = path
        super().__init__(
            message=message or f"{self.kind.value} for {path}",
            code=self.kind.value,
            details=details,
        )


class DeleteFailedError(SinkError):
    """Raised when the log file cannot be removed before a clearing write."""

    kind = FailureKind.DELETE_FAILED

    def __init__(self, path: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(path, f"Failed to clear log file: {path}", details)


class DirectoryCreateFailedError(SinkError):
    """Raised when the log directory cannot be created."""

    kind = FailureKind.DIRECTORY_CREATE_FAILED

    def __init__(self, path: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(path, f"Failed to create log directory: {path}", details)


class OpenFailedError(SinkError):
    """Raised when the log file cannot be opened for appending."""

    kind = FailureKind.OPEN_FAILED

    def __init__(self, path: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(path, f"Failed to open log file: {path}", details)


class LockFailedError(SinkError):
    """Raised when the exclusive lock on the log file cannot be acquired."""

    kind = FailureKind.LOCK_FAILED

    def __init__(self, path: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(path, f"Failed to lock log file: {path}", details)


class WriteFailedError(SinkError):
    """Raised when writing or syncing the locked log file fails."""

    kind = FailureKind.WRITE_FAILED

    def __init__(self, path: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(path, f"Failed to write log file: {path}", details)


class BackendUnavailableError(LogHelperError):
    """
    Raised when logging is attempted without a configured backend.

    This is a configuration error, so unlike I/O failures it is surfaced to
    the caller immediately.
    """

    def __init__(
        self,
        message: str = "Logging backend is not set.",
        code: str = FailureKind.BACKEND_UNAVAILABLE.value,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)

"""
Unit tests for the errors module.

Covers:
- Instantiation and attributes of all exception classes (parametrized)
- Failure kinds carried by sink errors
- Custom messages, codes and details
"""
import pytest

from loghelper.errors import (
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


@pytest.mark.parametrize(
    "exc_cls,kwargs,expected",
    [
        (
            LogHelperError,
            {},
            {"message": "An unexpected logging error occurred", "code": "ERROR"},
        ),
        (
            LogHelperError,
            {"message": "Custom", "code": "CUSTOM", "details": {"foo": "bar"}},
            {"message": "Custom", "code": "CUSTOM", "details": {"foo": "bar"}},
        ),
        (
            BackendUnavailableError,
            {},
            {"message": "Logging backend is not set.", "code": "BACKEND_UNAVAILABLE"},
        ),
        (
            BackendUnavailableError,
            {"message": "Log helper is not initialized"},
            {"message": "Log helper is not initialized", "code": "BACKEND_UNAVAILABLE"},
        ),
    ],
)
def test_exception_attributes(exc_cls, kwargs, expected):
    err = exc_cls(**kwargs)
    for key, value in expected.items():
        assert getattr(err, key) == value


@pytest.mark.parametrize(
    "exc_cls,kind,message",
    [
        (DeleteFailedError, FailureKind.DELETE_FAILED, "Failed to clear log file"),
        (
            DirectoryCreateFailedError,
            FailureKind.DIRECTORY_CREATE_FAILED,
            "Failed to create log directory",
        ),
        (OpenFailedError, FailureKind.OPEN_FAILED, "Failed to open log file"),
        (LockFailedError, FailureKind.LOCK_FAILED, "Failed to lock log file"),
        (WriteFailedError, FailureKind.WRITE_FAILED, "Failed to write log file"),
    ],
)
def test_sink_errors(exc_cls, kind, message):
    err = exc_cls("/var/log/log_x.txt", {"reason": "denied"})
    assert isinstance(err, SinkError)
    assert isinstance(err, LogHelperError)
    assert err.kind is kind
    assert err.code == kind.value
    assert err.message == f"{message}: /var/log/log_x.txt"
    assert err.path == "/var/log/log_x.txt"
    assert err.details == {"reason": "denied", "path": "/var/log/log_x.txt"}
    assert str(err) == err.message


def test_sink_error_default_message():
    err = SinkError("/tmp/x")
    assert err.message == "OPEN_FAILED for /tmp/x"
    assert err.details == {"path": "/tmp/x"}


def test_details_default_to_empty_dict():
    assert LogHelperError().details == {}
    assert BackendUnavailableError().details == {}


def test_failure_kind_is_str():
    assert FailureKind.LOCK_FAILED == "LOCK_FAILED"

"""
Unit tests for the diagnostic logging module.

Covers:
- Logger creation and retrieval (get_logger, ensure_logger)
- Logger configuration (setup_logger)
- Edge cases and error handling

Fixtures are used for common setup to avoid duplication.
"""
import logging
import sys

import pytest

from loghelper.config import LogHelperSettings
from loghelper.logging import ensure_logger, get_logger, setup_logger


@pytest.fixture
def debug_settings():
    return LogHelperSettings(DEBUG=True)


def test_get_logger_returns_logger(debug_settings):
    logger = get_logger("test.module", debug_settings)
    assert isinstance(logger, logging.Logger)
    assert logger.name == "test.module"


def test_get_logger_debug_setting(debug_settings):
    assert get_logger("test.debug", debug_settings).level == logging.DEBUG
    assert get_logger("test.nodebug", LogHelperSettings()).level == logging.INFO


def test_get_logger_without_settings():
    assert get_logger("test.plain").level == logging.INFO


def test_ensure_logger_returns_existing_logger(debug_settings):
    logger = get_logger("test.ensure", debug_settings)
    ensured = ensure_logger(logger, "test.ensure", debug_settings)
    assert ensured is logger


def test_ensure_logger_creates_new_logger(debug_settings):
    ensured = ensure_logger(None, "test.ensure2", debug_settings)
    assert isinstance(ensured, logging.Logger)
    assert ensured.name == "test.ensure2"


def test_ensure_logger_raises_without_name():
    with pytest.raises(ValueError):
        ensure_logger()


def test_setup_logger_sets_level_and_format():
    logger = setup_logger("test.setup", level="WARNING", format="%(message)s")
    assert logger.level == logging.WARNING
    [handler] = logger.handlers
    assert handler.formatter._fmt == "%(message)s"


def test_setup_logger_writes_to_stderr():
    [handler] = setup_logger("test.stderr").handlers
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr


def test_setup_logger_debug_overrides_level():
    assert setup_logger("test.override", level="ERROR", debug=True).level == logging.DEBUG


def test_setup_logger_removes_existing_handlers():
    logger = logging.getLogger("test.handler")
    logger.handlers.clear()
    handler = logging.StreamHandler()
    logger.addHandler(handler)
    assert len(logger.handlers) == 1
    setup_logger("test.handler")
    assert len(logger.handlers) == 1  # Only the new handler remains


def test_setup_logger_invalid_level():
    logger = setup_logger("test.invalid", level="NOTALEVEL")
    assert logger.level == logging.INFO

"""
FastAPI integration module.

This module attaches a log helper to a FastAPI application at configuration
time and exposes it to route handlers as a dependency.
"""

from typing import Optional

from fastapi import FastAPI, Request

from loghelper.config import LogHelperSettings, get_settings
from loghelper.errors import BackendUnavailableError
from loghelper.helper import LogHelper
from loghelper.logging import Logger, ensure_logger


def setup_log_helper(
    app: FastAPI,
    settings: Optional[LogHelperSettings] = None,
    logger: Optional[Logger] = None,
) -> LogHelper:
    """
    Create the application's log helper and store it on `app.state`.

    Args:
        app: FastAPI application instance
        settings: Optional settings, loaded from the environment if omitted
        logger: Optional diagnostic logger

    Returns:
        The configured helper
    """
    app_settings = settings or get_settings()
    log = ensure_logger(logger, __name__, app_settings)

    helper = LogHelper.from_settings(app_settings, log)
    app.state.log_helper = helper
    log.info(
        f"Log helper configured (backend={app_settings.LOG_BACKEND.value}, "
        f"target={helper.target.path})"
    )
    return helper


def get_log_helper(request: Request) -> LogHelper:
    """
    FastAPI dependency for retrieving the application's log helper.

    Raises BackendUnavailableError if setup_log_helper was not called.

    Example:
        ```python
        @app.post("/orders")
        def create_order(helper: LogHelper = Depends(get_log_helper)):
            helper.log("created #42")
        ```
    """
    helper = getattr(request.app.state, "log_helper", None)
    if helper is None:
        raise BackendUnavailableError("Log helper is not configured for this app")
    return helper


def configure_app(app: FastAPI, settings: Optional[LogHelperSettings] = None) -> None:
    """
    Configure a FastAPI application with a log helper.

    Args:
        app: The FastAPI application to configure
        settings: Optional settings, if not provided will be loaded from
                 environment
    """
    app_settings = settings or get_settings()
    logger = ensure_logger(None, __name__, app_settings)

    # Configure title and version if not already set
    if not app.title:
        app.title = app_settings.APP_NAME
    if not app.version:
        app.version = app_settings.VERSION

    app.debug = app_settings.DEBUG

    setup_log_helper(app, app_settings, logger)

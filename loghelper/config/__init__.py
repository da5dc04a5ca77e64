"""
Configuration module for the log helper.

This module provides:
- LogHelperSettings: The base settings class, loaded from environment variables.
- Environment-specific settings (development, testing, production).
- get_settings: Factory for loading the correct settings class based on APP_ENV.

Example environment variables:

APP_ENV=development
LOG_TOPIC=orders
LOG_MODULE=OrderModule
LOG_DIRECTORY=/var/www/logs
DOCUMENT_ROOT=/var/www
LOG_RENDER_MODE=pretty_exported
LOG_BACKEND=file
LOG_STRUCTLOG_CHANNEL=app
LOG_HOST_LOGGER=uvicorn.error
"""

from .base import BackendKind, LogHelperSettings
from .settings import get_settings

__all__ = [
    "BackendKind",
    "LogHelperSettings",
    "get_settings",
]

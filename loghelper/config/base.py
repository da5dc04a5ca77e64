"""
Base configuration module for the log helper.

This module provides the settings class every environment-specific settings
class inherits from. Values are read from environment variables and `.env`.
"""

import os
from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

from loghelper.formatting.modes import RenderMode


class BackendKind(str, Enum):
    """Where rendered log lines are sent."""

    FILE = "file"
    STRUCTLOG = "structlog"
    HOST = "host"


class LogHelperSettings(BaseSettings):
    """
    Base settings class for log helper configuration.

    Attributes:
        APP_NAME: The name of the application
        DEBUG: Flag to enable debug output on the diagnostic logger
        VERSION: Application version string
        LOG_TOPIC: Topic selecting the log file (log_<topic>.txt) or channel
        LOG_MODULE: Fixed trace label; when empty the caller location is used
        LOG_DIRECTORY: Directory for log files, overrides DOCUMENT_ROOT/logs
        DOCUMENT_ROOT: Base directory used when LOG_DIRECTORY is not set
        LOG_RENDER_MODE: How values are rendered (plain, exported, pretty_exported)
        LOG_BACKEND: Backend receiving log lines (file, structlog, host)
        LOG_STRUCTLOG_CHANNEL: Channel bound on the structlog backend
        LOG_HOST_LOGGER: Name of the host application's stdlib logger
    """

    APP_NAME: str = Field(default="LogHelper")
    DEBUG: bool = Field(default=False)
    VERSION: str = Field(default="0.1.0")

    # Log target configuration
    LOG_TOPIC: str = Field(default="", description="Topic selecting the log file")
    LOG_MODULE: str = Field(default="", description="Fixed trace label")
    LOG_DIRECTORY: Optional[str] = Field(
        default=None, description="Directory for log files"
    )
    DOCUMENT_ROOT: Optional[str] = Field(
        default=None, description="Base directory for the default log directory"
    )

    # Rendering and dispatch
    LOG_RENDER_MODE: RenderMode = Field(
        default=RenderMode.PLAIN, description="How values are rendered"
    )
    LOG_BACKEND: BackendKind = Field(
        default=BackendKind.FILE, description="Backend receiving log lines"
    )
    LOG_STRUCTLOG_CHANNEL: str = Field(
        default="app", description="Channel bound on the structlog backend"
    )
    LOG_HOST_LOGGER: str = Field(
        default="uvicorn.error",
        description="Name of the host application's stdlib logger",
    )

    @field_validator("LOG_TOPIC", mode="before")
    def validate_topic(cls, value):
        """
        Ensure the topic can be embedded in a file name.
        """
        if value is None:
            return ""
        value = str(value)
        if "/" in value or "\\" in value or ".." in value:
            raise ValueError(
                "LOG_TOPIC must not contain path separators or '..'. "
                f"You provided: {value}"
            )
        return value

    @field_validator("LOG_RENDER_MODE", mode="before")
    def parse_render_mode(cls, value):
        """Accept mode names in any case and the legacy codes 0, 1 and 2."""
        if value is None:
            return RenderMode.PLAIN
        return RenderMode.parse(value)

    @field_validator("LOG_BACKEND", mode="before")
    def parse_backend(cls, value):
        """Accept backend names in any case."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def log_directory(self) -> str:
        """
        Resolve the directory log files are written to.

        LOG_DIRECTORY wins; otherwise `<DOCUMENT_ROOT>/logs`, where the document
        root falls back to the current working directory.
        """
        if self.LOG_DIRECTORY:
            return self.LOG_DIRECTORY
        root = self.DOCUMENT_ROOT or os.getcwd()
        return os.path.join(root, "logs")

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

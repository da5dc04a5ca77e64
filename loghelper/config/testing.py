"""
Testing environment specific settings.
"""

from .base import LogHelperSettings


class TestingSettings(LogHelperSettings):
    """
    Settings class for testing environment.

    Uses debug output and a dedicated topic so test runs never write into
    application log files.
    """

    DEBUG: bool = True
    LOG_TOPIC: str = "test"

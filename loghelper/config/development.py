"""
Development environment specific settings.
"""

from .base import LogHelperSettings


class DevelopmentSettings(LogHelperSettings):
    """
    Settings class for development environment.

    Enables debug output on the diagnostic logger.
    """

    DEBUG: bool = True

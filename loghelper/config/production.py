"""
Production environment specific settings.
"""

from .base import LogHelperSettings


class ProductionSettings(LogHelperSettings):
    """
    Settings class for production environment.

    Attributes:
        DEBUG: Always False in production
    """

    DEBUG: bool = False

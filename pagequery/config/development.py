"""
Development environment specific settings.
"""

from .base import BaseAppSettings


class DevelopmentSettings(BaseAppSettings):
    """
    Settings class for development environment.

    Attributes:
        DEBUG: Always True in development
    """

    DEBUG: bool = True

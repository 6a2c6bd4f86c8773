"""
Production environment specific settings.
"""

from .base import BaseAppSettings


class ProductionSettings(BaseAppSettings):
    """
    Settings class for production environment.

    Attributes:
        DEBUG: Always False in production
        LOG_LEVEL: Only warnings and above
    """

    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"

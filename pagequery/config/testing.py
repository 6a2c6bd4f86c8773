"""
Testing environment specific settings.

This module contains settings that are specific to the testing environment.
"""

from .base import BaseAppSettings


class TestingSettings(BaseAppSettings):
    """
    Settings class for testing environment.

    Attributes:
        DEBUG: Set to True for detailed test output
        STRICT_COLUMNS: Always strict so invalid paths fail loudly in tests
    """

    __test__ = False

    DEBUG: bool = True
    STRICT_COLUMNS: bool = True

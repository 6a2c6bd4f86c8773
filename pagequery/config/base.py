"""
Base configuration module for pagequery.

This module provides the base settings class that other settings classes inherit from.
It handles logging options and the defaults used by column-path validation.
"""

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class BaseAppSettings(BaseSettings):
    """
    Base settings class for library configuration.

    Attributes:
        APP_NAME: Name used as the root logger namespace
        DEBUG: Flag to enable/disable debug logging
        VERSION: Library version string
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON_FORMAT: Emit log records as JSON
        COLUMN_MAX_DEPTH: Number of relation hops followed when resolving column paths
        STRICT_COLUMNS: Raise on unknown column paths instead of logging a warning
    """

    APP_NAME: str = Field(default="pagequery")
    DEBUG: bool = Field(default=False)
    VERSION: str = Field(default="0.1.0")

    # Logging configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_JSON_FORMAT: bool = Field(
        default=False, description="Emit log records as JSON"
    )

    # Column path configuration
    COLUMN_MAX_DEPTH: int = Field(
        default=2,
        ge=0,
        description="Number of relation hops followed when resolving column paths",
    )
    STRICT_COLUMNS: bool = Field(
        default=True,
        description="Raise on unknown column paths instead of logging a warning",
    )

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, value):
        """Normalize the log level and reject unknown names."""
        level = str(value).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}. "
                f"You provided: {value}"
            )
        return level

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

"""
Logging module for pagequery.

This module provides a simple logging interface
that integrates with the library settings.
"""

from pagequery.logging.formatters import JsonFormatter
from pagequery.logging.manager import Logger, ensure_logger, get_logger, setup_logger

__all__ = ["Logger", "get_logger", "ensure_logger", "setup_logger", "JsonFormatter"]

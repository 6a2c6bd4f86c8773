"""
Error handling module for pagequery.

This module provides the exceptions raised by the builder and the filter
token codec. Parsing a query string never raises; malformed fragments are
skipped instead.
"""

from pagequery.errors.exceptions import (
    AppError,
    InvalidColumnPathError,
    InvalidFilterTokenError,
    ValidationError,
)

__all__ = [
    "AppError",
    "ValidationError",
    "InvalidColumnPathError",
    "InvalidFilterTokenError",
]

"""
Base exception classes for pagequery.

This module provides a small exception hierarchy for failures raised while
building paginate parameters. All errors are raised synchronously at the
call that introduced the invalid input.
"""

from typing import Any, Dict, Iterable, List, Optional


class AppError(Exception):
    """
    Base exception for all pagequery errors.

    Attributes:
        message: Human-readable error message
        code: Error code identifier (default: ERROR)
        details: Additional error details
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        code: str = "ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """
    Exception raised when a builder argument is invalid.

    Attributes:
        fields: List of field-specific validation errors
    """

    def __init__(
        self,
        message: str = "Validation error",
        fields: Optional[List[Dict[str, Any]]] = None,
        code: str = "VALIDATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.fields = fields or []
        if fields:
            details = details or {}
            details["fields"] = fields

        super().__init__(message=message, code=code, details=details)


class InvalidColumnPathError(AppError):
    """
    Exception raised when a column path is not part of the resolved entity shape.

    Attributes:
        path: The rejected column path
        allowed: Sorted list of allowed column paths
    """

    def __init__(
        self,
        path: Any,
        allowed: Optional[Iterable[str]] = None,
        message: Optional[str] = None,
        code: str = "INVALID_COLUMN_PATH",
    ):
        self.path = path
        self.allowed = sorted(allowed or [])
        if message is None:
            message = f"Invalid column path: {path!r}."
            if self.allowed:
                message += f" Allowed paths are: {', '.join(self.allowed)}"

        super().__init__(
            message=message,
            code=code,
            details={"path": path, "allowed": self.allowed},
        )


class InvalidFilterTokenError(AppError):
    """Exception raised when a filter token cannot be built."""

    def __init__(
        self,
        message: str = "Invalid filter token",
        operator: Optional[str] = None,
        code: str = "INVALID_FILTER_TOKEN",
    ):
        self.operator = operator
        details = {"operator": operator} if operator is not None else None
        super().__init__(message=message, code=code, details=details)

"""
Domain exceptions for the Blog application.

Expected validation failures travel as DomainResult values, never as
exceptions. The exceptions here cover the cases where an invalid value is
forced through a constructor directly, and provide the common base class
for the other layers.
"""

from typing import Any


class BlogException(Exception):
    """
    Base exception for all Blog application errors.

    All custom exceptions should inherit from this class to allow
    for consistent error handling and logging.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error code for API responses
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class DomainValidationError(BlogException, ValueError):
    """Raised when a value object is constructed directly with invalid data."""

    def __init__(self, message: str, value_type: str | None = None):
        details = {"value_type": value_type} if value_type else {}
        super().__init__(message, "DOMAIN_VALIDATION_ERROR", details)


class InvalidResultAccessError(BlogException):
    """Raised when reading the value of a failed result or the error of a successful one."""

    def __init__(self, message: str):
        super().__init__(message, "INVALID_RESULT_ACCESS")

"""
Infrastructure exceptions for the Blog application.

This module defines infrastructure-level exceptions related to
database operations.
"""

from typing import Any

from src.domain.exceptions import BlogException


class DatabaseException(BlogException):
    """Base exception for database operations."""

    pass


class DataIntegrityError(DatabaseException):
    """
    A stored value no longer satisfies its domain rules.

    Raised while rebuilding a value object from a database column. This is
    data corruption, not a user error, so it is never turned into a result.
    """

    def __init__(self, value_type: str, value: Any, reason: str):
        super().__init__(
            f"Invalid {value_type} in database: {reason}",
            "DATA_INTEGRITY_ERROR",
            {"value_type": value_type, "value": repr(value), "reason": reason},
        )
        self.value_type = value_type
        self.reason = reason

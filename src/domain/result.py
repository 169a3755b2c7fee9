"""
Result type for domain operations.

Used to avoid exceptions for expected validation and business rule failures.
The domain layer uses plain string error messages; the application layer
translates them into typed errors.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from src.domain.exceptions import InvalidResultAccessError

T = TypeVar("T")


@dataclass(frozen=True)
class DomainResult(Generic[T]):
    """Outcome of a domain operation: a value on success, a message on failure."""

    is_success: bool
    _value: T | None = None
    error_message: str = ""

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def value(self) -> T:
        """The value returned on success. Only valid when is_success is True."""
        if not self.is_success:
            raise InvalidResultAccessError(
                f"Cannot access the value of a failed result: {self.error_message}"
            )
        return self._value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T | None = None) -> "DomainResult[T]":
        return cls(is_success=True, _value=value)

    @classmethod
    def failure(cls, error_message: str) -> "DomainResult[T]":
        if not error_message:
            raise ValueError("A failed result must have an error message")
        return cls(is_success=False, error_message=error_message)

"""
Application result model.

Handlers never raise for expected failures: they return an
ApplicationResult carrying a typed Error, and the presentation layer maps
the error type to an HTTP status.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Generic, TypeVar

from src.domain.exceptions import InvalidResultAccessError

T = TypeVar("T")


class ErrorType(str, Enum):
    """Category of an application error"""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Error:
    """Typed application error with a human-readable message"""

    type: ErrorType
    message: str

    NONE: ClassVar["Error"]

    @classmethod
    def validation(cls, message: str) -> "Error":
        return cls(ErrorType.VALIDATION, message)

    @classmethod
    def not_found(cls, message: str) -> "Error":
        return cls(ErrorType.NOT_FOUND, message)

    @classmethod
    def conflict(cls, message: str) -> "Error":
        return cls(ErrorType.CONFLICT, message)

    @classmethod
    def unauthorized(cls, message: str) -> "Error":
        return cls(ErrorType.UNAUTHORIZED, message)

    @classmethod
    def forbidden(cls, message: str) -> "Error":
        return cls(ErrorType.FORBIDDEN, message)

    @classmethod
    def internal(cls, message: str) -> "Error":
        return cls(ErrorType.INTERNAL, message)


Error.NONE = Error(ErrorType.VALIDATION, "")


@dataclass(frozen=True)
class ApplicationResult(Generic[T]):
    """
    Success-with-value or failure-with-error.

    Invariants (checked on construction):
        - a successful result has Error.NONE
        - a failed result has a real error
    """

    is_success: bool
    _value: T | None = None
    error: Error = Error.NONE

    def __post_init__(self):
        if self.is_success and self.error != Error.NONE:
            raise ValueError("A successful result cannot have an error.")
        if not self.is_success and self.error == Error.NONE:
            raise ValueError("A failed result must have an error.")

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def value(self) -> T:
        if not self.is_success:
            raise InvalidResultAccessError(
                f"Cannot access the value of a failed result: {self.error.message}"
            )
        return self._value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T | None = None) -> "ApplicationResult[T]":
        return cls(is_success=True, _value=value)

    @classmethod
    def failure(cls, error: Error) -> "ApplicationResult[T]":
        return cls(is_success=False, error=error)

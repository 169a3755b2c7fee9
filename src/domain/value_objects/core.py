"""
Core value objects for the Blog domain.

Every value object is immutable, compares by value, and is created through
a `create` factory that returns a DomainResult. Direct construction runs the
same rules and raises DomainValidationError, so an invalid instance can
never exist.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar
from uuid import UUID, uuid4

from src.domain.exceptions import DomainValidationError
from src.domain.result import DomainResult

EMPTY_ID = UUID(int=0)

IdT = TypeVar("IdT", bound="StronglyTypedId")
StrT = TypeVar("StrT", bound="StringValueObject")


def validate_string(value: Any, field_name: str, min_length: int, max_length: int) -> str | None:
    """Return the first violated rule for a bounded, non-blank string, or None"""
    if not isinstance(value, str) or not value.strip():
        return f"{field_name} cannot be empty or whitespace."

    if len(value) < min_length:
        return f"{field_name} must be at least {min_length} characters."

    if len(value) > max_length:
        return f"{field_name} cannot exceed {max_length} characters."

    return None


@dataclass(frozen=True)
class StronglyTypedId:
    """
    Base class for UUID-based identifiers.

    Keeps an AuthorId from being passed where a PostId is expected:
    ids of different types never compare equal, even with the same UUID.
    """

    value: UUID

    LABEL: ClassVar[str] = "ID"

    def __post_init__(self):
        error = self.validate(self.value)
        if error:
            raise DomainValidationError(error, type(self).__name__)

    @classmethod
    def validate(cls, value: Any) -> str | None:
        if value is None or value == EMPTY_ID:
            return f"{cls.LABEL} cannot be empty."
        if not isinstance(value, UUID):
            return f"{cls.LABEL} must be a valid UUID."
        return None

    @classmethod
    def create(cls: type[IdT], value: UUID | None) -> DomainResult[IdT]:
        error = cls.validate(value)
        if error:
            return DomainResult.failure(error)
        return DomainResult.success(cls(value))  # type: ignore[arg-type]

    @classmethod
    def new(cls: type[IdT]) -> IdT:
        """Create an identifier with a freshly generated UUID"""
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class AuthorId(StronglyTypedId):
    """Identifier for Author aggregates"""

    LABEL: ClassVar[str] = "Author ID"


@dataclass(frozen=True)
class PostId(StronglyTypedId):
    """Identifier for Post aggregates"""

    LABEL: ClassVar[str] = "Post ID"


@dataclass(frozen=True)
class StringValueObject:
    """
    Base class for single-string value objects.

    Subclasses define FIELD_NAME (used in error messages) and the length
    bounds; validation itself is shared.
    """

    value: str

    FIELD_NAME: ClassVar[str] = "Value"
    MIN_LENGTH: ClassVar[int] = 1
    MAX_LENGTH: ClassVar[int] = 255

    def __post_init__(self):
        error = self.validate(self.value)
        if error:
            raise DomainValidationError(error, type(self).__name__)

    @classmethod
    def validate(cls, value: Any) -> str | None:
        return validate_string(value, cls.FIELD_NAME, cls.MIN_LENGTH, cls.MAX_LENGTH)

    @classmethod
    def create(cls: type[StrT], value: str | None) -> DomainResult[StrT]:
        error = cls.validate(value)
        if error:
            return DomainResult.failure(error)
        return DomainResult.success(cls(value))  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PostTitle(StringValueObject):
    """Title of a blog post"""

    FIELD_NAME: ClassVar[str] = "Post title"
    MAX_LENGTH: ClassVar[int] = 200


@dataclass(frozen=True)
class PostDescription(StringValueObject):
    """Short description of a blog post"""

    FIELD_NAME: ClassVar[str] = "Post description"
    MAX_LENGTH: ClassVar[int] = 500


@dataclass(frozen=True)
class PostContent(StringValueObject):
    """Body of a blog post"""

    FIELD_NAME: ClassVar[str] = "Post content"
    MAX_LENGTH: ClassVar[int] = 50000


@dataclass(frozen=True)
class AuthorName:
    """
    Value object for an author's name (first name + last name).

    Both parts must be non-blank and at most MAX_LENGTH characters.
    The first name is validated completely before the last name.
    """

    first_name: str
    last_name: str

    MIN_LENGTH: ClassVar[int] = 1
    MAX_LENGTH: ClassVar[int] = 100

    def __post_init__(self):
        error = self.validate(self.first_name, self.last_name)
        if error:
            raise DomainValidationError(error, type(self).__name__)

    @classmethod
    def validate(cls, first_name: Any, last_name: Any) -> str | None:
        return validate_string(
            first_name, "First name", cls.MIN_LENGTH, cls.MAX_LENGTH
        ) or validate_string(last_name, "Last name", cls.MIN_LENGTH, cls.MAX_LENGTH)

    @classmethod
    def create(cls, first_name: str | None, last_name: str | None) -> DomainResult["AuthorName"]:
        error = cls.validate(first_name, last_name)
        if error:
            return DomainResult.failure(error)
        return DomainResult.success(cls(first_name, last_name))  # type: ignore[arg-type]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name

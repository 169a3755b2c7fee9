"""
Column types mapping value objects to primitive database columns.

Values are rebuilt through the value object's factory when loaded. A
stored value that fails validation raises DataIntegrityError: the row was
corrupted outside the application and cannot be represented in the domain.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.types import TypeDecorator

from src.domain.value_objects import (
    AuthorId,
    PostContent,
    PostDescription,
    PostId,
    PostTitle,
    StringValueObject,
    StronglyTypedId,
)
from src.infrastructure.exceptions import DataIntegrityError


class StronglyTypedIdType(TypeDecorator):
    """Stores a StronglyTypedId subclass as a native UUID column"""

    impl = Uuid
    cache_ok = True

    value_object: type[StronglyTypedId] = StronglyTypedId

    def process_bind_param(self, value: Any, dialect) -> Any:
        if value is None:
            return None
        if isinstance(value, StronglyTypedId):
            return value.value
        # Raw UUIDs are accepted for query parameters
        return value

    def process_result_value(self, value: Any, dialect) -> Any:
        if value is None:
            return None
        result = self.value_object.create(value)
        if result.is_failure:
            raise DataIntegrityError(self.value_object.__name__, value, result.error_message)
        return result.value


class AuthorIdType(StronglyTypedIdType):
    cache_ok = True
    value_object = AuthorId


class PostIdType(StronglyTypedIdType):
    cache_ok = True
    value_object = PostId


class StringValueObjectType(TypeDecorator):
    """Stores a StringValueObject subclass as a bounded string column"""

    impl = String
    cache_ok = True

    value_object: type[StringValueObject] = StringValueObject

    def __init__(self, *args: Any, **kwargs: Any):
        if not args and "length" not in kwargs:
            kwargs["length"] = self.value_object.MAX_LENGTH
        super().__init__(*args, **kwargs)

    def process_bind_param(self, value: Any, dialect) -> Any:
        if value is None:
            return None
        if isinstance(value, StringValueObject):
            return value.value
        return value

    def process_result_value(self, value: Any, dialect) -> Any:
        if value is None:
            return None
        result = self.value_object.create(value)
        if result.is_failure:
            raise DataIntegrityError(self.value_object.__name__, value, result.error_message)
        return result.value


class PostTitleType(StringValueObjectType):
    cache_ok = True
    value_object = PostTitle


class PostDescriptionType(StringValueObjectType):
    cache_ok = True
    value_object = PostDescription


class PostContentType(StringValueObjectType):
    cache_ok = True
    value_object = PostContent


class UtcDateTime(TypeDecorator):
    """Timezone-aware timestamp that always loads as UTC (SQLite drops tzinfo)"""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value

"""Domain value objects."""

from src.domain.value_objects.core import (
    EMPTY_ID,
    AuthorId,
    AuthorName,
    PostContent,
    PostDescription,
    PostId,
    PostTitle,
    StringValueObject,
    StronglyTypedId,
)

__all__ = [
    "EMPTY_ID",
    "StronglyTypedId",
    "StringValueObject",
    "AuthorId",
    "PostId",
    "AuthorName",
    "PostTitle",
    "PostDescription",
    "PostContent",
]

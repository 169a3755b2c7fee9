"""
Domain layer - Enterprise Business Rules.

This is the innermost layer containing business entities, value objects,
domain events and the result type. It has no dependencies on other layers.
"""

from src.domain.entities import AggregateRoot, Author, Entity, Post
from src.domain.events import AuthorCreatedEvent, DomainEvent, PostCreatedEvent
from src.domain.exceptions import (
    BlogException,
    DomainValidationError,
    InvalidResultAccessError,
)
from src.domain.result import DomainResult
from src.domain.value_objects import (
    AuthorId,
    AuthorName,
    PostContent,
    PostDescription,
    PostId,
    PostTitle,
)

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "Author",
    "Post",
    # Value Objects
    "AuthorId",
    "PostId",
    "AuthorName",
    "PostTitle",
    "PostDescription",
    "PostContent",
    # Events
    "DomainEvent",
    "PostCreatedEvent",
    "AuthorCreatedEvent",
    # Results
    "DomainResult",
    # Exceptions
    "BlogException",
    "DomainValidationError",
    "InvalidResultAccessError",
]

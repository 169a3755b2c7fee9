"""
Domain events - things that happened in the domain.

Events are immutable records queued on the aggregate that raised them and
dispatched by the unit of work once the change has been committed.
"""

from dataclasses import dataclass
from datetime import datetime

from src.domain.value_objects.core import AuthorId, PostId


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events."""

    occurred_on: datetime

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__


@dataclass(frozen=True)
class PostCreatedEvent(DomainEvent):
    """Event: a new post was created."""

    post_id: PostId
    author_id: AuthorId
    title: str


@dataclass(frozen=True)
class AuthorCreatedEvent(DomainEvent):
    """Event: a new author was created."""

    author_id: AuthorId
    full_name: str

"""
Repository interfaces (ports) for the application layer.

Write-side repositories work with domain aggregates. Read-only
repositories return flat read models projected straight from storage, so
queries never rebuild aggregates they do not modify.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from src.domain.entities import Author, Post
    from src.domain.value_objects import AuthorId, PostId


@dataclass(frozen=True)
class AuthorReadDto:
    """Read model for an author"""

    id: UUID
    name: str
    surname: str

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}".strip()


@dataclass(frozen=True)
class PostReadDto:
    """Read model for a post (author summary is composed separately)"""

    id: UUID
    author_id: UUID
    title: str
    description: str
    content: str
    created_at: datetime
    updated_at: datetime | None = None
    author: AuthorReadDto | None = None


class IPostRepository(Protocol):
    """Protocol for post aggregate persistence (DIP)"""

    async def get_by_id(self, id: PostId) -> Post | None:
        ...

    async def add(self, post: Post) -> None:
        ...

    async def update(self, post: Post) -> None:
        ...

    async def remove(self, post: Post) -> None:
        ...

    async def exists(self, id: PostId) -> bool:
        ...


class IAuthorRepository(Protocol):
    """Protocol for author aggregate persistence (DIP)"""

    async def get_by_id(self, id: AuthorId) -> Author | None:
        ...

    async def add(self, author: Author) -> None:
        ...

    async def update(self, author: Author) -> None:
        ...

    async def remove(self, author: Author) -> None:
        ...

    async def exists(self, id: AuthorId) -> bool:
        ...


class IPostReadOnlyRepository(Protocol):
    """Protocol for post queries"""

    async def get_by_id(self, id: UUID) -> PostReadDto | None:
        ...


class IAuthorReadOnlyRepository(Protocol):
    """Protocol for author queries"""

    async def get_by_id(self, id: UUID) -> AuthorReadDto | None:
        ...

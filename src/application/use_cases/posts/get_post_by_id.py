"""Get post by id use case (read side)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from src.application.common.models import ApplicationResult, Error

if TYPE_CHECKING:
    from src.application.interfaces.repositories import (
        AuthorReadDto,
        IAuthorReadOnlyRepository,
        IPostReadOnlyRepository,
        PostReadDto,
    )

AUTHOR_INCLUDE = "author"


@dataclass(frozen=True)
class GetPostByIdQuery:
    post_id: UUID
    includes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def include_author(self) -> bool:
        return any(include.lower() == AUTHOR_INCLUDE for include in self.includes)


@dataclass(frozen=True)
class AuthorResponse:
    id: UUID
    name: str
    surname: str

    @classmethod
    def from_read_model(cls, author: "AuthorReadDto") -> "AuthorResponse":
        return cls(id=author.id, name=author.name, surname=author.surname)


@dataclass(frozen=True)
class GetPostResponse:
    id: UUID
    author_id: UUID
    title: str
    description: str
    content: str
    created_at: datetime
    updated_at: datetime | None = None
    author: AuthorResponse | None = None

    @classmethod
    def from_read_model(
        cls, post: "PostReadDto", author: AuthorResponse | None = None
    ) -> "GetPostResponse":
        return cls(
            id=post.id,
            author_id=post.author_id,
            title=post.title,
            description=post.description,
            content=post.content,
            created_at=post.created_at,
            updated_at=post.updated_at,
            author=author,
        )


class GetPostByIdQueryHandler:
    """Loads a post read model, optionally with its author summary"""

    def __init__(
        self,
        post_reader: "IPostReadOnlyRepository",
        author_reader: "IAuthorReadOnlyRepository",
    ) -> None:
        self.post_reader = post_reader
        self.author_reader = author_reader

    async def handle(self, query: GetPostByIdQuery) -> ApplicationResult[GetPostResponse]:
        post = await self.post_reader.get_by_id(query.post_id)
        if post is None:
            return ApplicationResult.failure(
                Error.not_found(f"Post with ID '{query.post_id}' was not found.")
            )

        author = None
        if query.include_author:
            author_dto = await self.author_reader.get_by_id(post.author_id)
            if author_dto is not None:
                author = AuthorResponse.from_read_model(author_dto)

        return ApplicationResult.success(GetPostResponse.from_read_model(post, author))

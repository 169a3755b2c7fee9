"""
Create post use case.

Validates the command, checks that the author exists, builds the Post
aggregate and commits it through the unit of work, which then dispatches
the PostCreatedEvent.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from src.application.common.models import ApplicationResult, Error
from src.domain.entities import Post
from src.domain.value_objects import (
    AuthorId,
    PostContent,
    PostDescription,
    PostTitle,
)
from src.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from src.application.interfaces.repositories import IAuthorRepository, IPostRepository
    from src.application.interfaces.services import IDateTime, IUnitOfWork

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreatePostCommand:
    author_id: UUID | None
    title: str | None
    description: str | None
    content: str | None


@dataclass(frozen=True)
class CreatePostResponse:
    id: UUID
    author_id: UUID
    title: str
    description: str
    content: str
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_post(cls, post: Post) -> "CreatePostResponse":
        return cls(
            id=post.id.value,
            author_id=post.author_id.value,
            title=post.title.value,
            description=post.description.value,
            content=post.content.value,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class CreatePostCommandValidator:
    """Input checks run by the validation behavior before the handler"""

    def validate(self, command: CreatePostCommand) -> list[str]:
        failures: list[str] = []

        if command.author_id is None or command.author_id == UUID(int=0):
            failures.append("Author ID is required.")

        failures.extend(self._check_text("Title", command.title, PostTitle.MAX_LENGTH))
        failures.extend(
            self._check_text("Description", command.description, PostDescription.MAX_LENGTH)
        )
        failures.extend(self._check_text("Content", command.content, PostContent.MAX_LENGTH))
        return failures

    @staticmethod
    def _check_text(label: str, value: str | None, max_length: int) -> list[str]:
        if value is None or not value.strip():
            return [f"{label} is required."]
        if len(value) > max_length:
            return [f"{label} cannot exceed {max_length} characters."]
        return []


class CreatePostCommandHandler:
    """Handler for CreatePostCommand following DIP"""

    def __init__(
        self,
        post_repo: "IPostRepository",
        author_repo: "IAuthorRepository",
        unit_of_work: "IUnitOfWork",
        clock: "IDateTime",
    ) -> None:
        self.post_repo = post_repo
        self.author_repo = author_repo
        self.unit_of_work = unit_of_work
        self.clock = clock

    async def handle(self, command: CreatePostCommand) -> ApplicationResult[CreatePostResponse]:
        # 1. Author id must be a valid identifier
        author_id_result = AuthorId.create(command.author_id)
        if author_id_result.is_failure:
            return ApplicationResult.failure(Error.validation(author_id_result.error_message))
        author_id = author_id_result.value

        # 2. Author must exist
        if await self.author_repo.get_by_id(author_id) is None:
            return ApplicationResult.failure(
                Error.not_found(f"Author with ID '{author_id}' was not found.")
            )

        # 3. Build the aggregate (queues PostCreatedEvent)
        post_result = Post.create(
            author_id,
            command.title,  # type: ignore[arg-type]
            command.description,  # type: ignore[arg-type]
            command.content,  # type: ignore[arg-type]
            self.clock.utc_now,
        )
        if post_result.is_failure:
            return ApplicationResult.failure(Error.validation(post_result.error_message))
        post = post_result.value

        # 4. Persist and dispatch events
        await self.post_repo.add(post)
        self.unit_of_work.track(post)
        await self.unit_of_work.save_changes()

        logger.info("Created post %s for author %s", post.id, author_id)
        return ApplicationResult.success(CreatePostResponse.from_post(post))

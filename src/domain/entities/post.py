"""
Post domain entity.

This represents the business concept of a blog post, independent of
how it's stored in the database.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.base import AggregateRoot
from src.domain.events import PostCreatedEvent
from src.domain.result import DomainResult
from src.domain.value_objects.core import (
    AuthorId,
    PostContent,
    PostDescription,
    PostId,
    PostTitle,
)


@dataclass(eq=False)
class Post(AggregateRoot):
    """
    Aggregate root for blog posts.

    References its author by AuthorId only; the author is a separate
    aggregate. updated_at stays None until the first successful edit.
    """

    id: PostId
    author_id: AuthorId
    title: PostTitle
    description: PostDescription
    content: PostContent
    created_at: datetime
    updated_at: datetime | None = None

    @staticmethod
    def _validate_post_data(
        author_id: AuthorId | None, title: str, description: str, content: str
    ) -> DomainResult[tuple[PostTitle, PostDescription, PostContent]]:
        """Validate in order: author, title, description, content. First failure wins."""
        if author_id is None:
            return DomainResult.failure("Author ID cannot be null.")

        title_result = PostTitle.create(title)
        if title_result.is_failure:
            return DomainResult.failure(title_result.error_message)

        description_result = PostDescription.create(description)
        if description_result.is_failure:
            return DomainResult.failure(description_result.error_message)

        content_result = PostContent.create(content)
        if content_result.is_failure:
            return DomainResult.failure(content_result.error_message)

        return DomainResult.success(
            (title_result.value, description_result.value, content_result.value)
        )

    @classmethod
    def create(
        cls,
        author_id: AuthorId | None,
        title: str,
        description: str,
        content: str,
        created_at: datetime,
    ) -> DomainResult["Post"]:
        """Create a new post with a freshly generated identifier"""
        validation = cls._validate_post_data(author_id, title, description, content)
        if validation.is_failure:
            return DomainResult.failure(validation.error_message)

        return DomainResult.success(
            cls._build(PostId.new(), author_id, *validation.value, created_at)  # type: ignore[arg-type]
        )

    @classmethod
    def create_with_id(
        cls,
        id: UUID,
        author_id: AuthorId | None,
        title: str,
        description: str,
        content: str,
        created_at: datetime,
    ) -> DomainResult["Post"]:
        """Create a post with a known identifier"""
        validation = cls._validate_post_data(author_id, title, description, content)
        if validation.is_failure:
            return DomainResult.failure(validation.error_message)

        id_result = PostId.create(id)
        if id_result.is_failure:
            return DomainResult.failure(id_result.error_message)

        return DomainResult.success(
            cls._build(id_result.value, author_id, *validation.value, created_at)  # type: ignore[arg-type]
        )

    @classmethod
    def _build(
        cls,
        post_id: PostId,
        author_id: AuthorId,
        title: PostTitle,
        description: PostDescription,
        content: PostContent,
        created_at: datetime,
    ) -> "Post":
        post = cls(
            id=post_id,
            author_id=author_id,
            title=title,
            description=description,
            content=content,
            created_at=created_at,
        )
        post.raise_domain_event(
            PostCreatedEvent(
                occurred_on=created_at,
                post_id=post_id,
                author_id=author_id,
                title=title.value,
            )
        )
        return post

    def update_content(self, new_content: str, updated_at: datetime) -> DomainResult[None]:
        """Replace the body. Leaves the post unchanged on failure."""
        content_result = PostContent.create(new_content)
        if content_result.is_failure:
            return DomainResult.failure(content_result.error_message)

        self.content = content_result.value
        self.updated_at = updated_at
        return DomainResult.success()

    def update_title_and_description(
        self, new_title: str, new_description: str, updated_at: datetime
    ) -> DomainResult[None]:
        """Replace title and description together. Leaves the post unchanged on failure."""
        title_result = PostTitle.create(new_title)
        if title_result.is_failure:
            return DomainResult.failure(title_result.error_message)

        description_result = PostDescription.create(new_description)
        if description_result.is_failure:
            return DomainResult.failure(description_result.error_message)

        self.title = title_result.value
        self.description = description_result.value
        self.updated_at = updated_at
        return DomainResult.success()

"""Application use cases."""

from src.application.use_cases.authors.event_handlers import LogAuthorCreatedHandler
from src.application.use_cases.posts.create_post import (
    CreatePostCommand,
    CreatePostCommandHandler,
    CreatePostCommandValidator,
    CreatePostResponse,
)
from src.application.use_cases.posts.event_handlers import (
    AuditPostCreatedHandler,
    LogPostCreatedHandler,
    UpdateAuthorStatsHandler,
)
from src.application.use_cases.posts.get_post_by_id import (
    AuthorResponse,
    GetPostByIdQuery,
    GetPostByIdQueryHandler,
    GetPostResponse,
)

__all__ = [
    # Commands
    "CreatePostCommand",
    "CreatePostCommandHandler",
    "CreatePostCommandValidator",
    "CreatePostResponse",
    # Queries
    "GetPostByIdQuery",
    "GetPostByIdQueryHandler",
    "GetPostResponse",
    "AuthorResponse",
    # Domain event handlers
    "LogPostCreatedHandler",
    "AuditPostCreatedHandler",
    "UpdateAuthorStatsHandler",
    "LogAuthorCreatedHandler",
]

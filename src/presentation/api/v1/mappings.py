"""Translation between wire contracts and application requests/responses"""

from uuid import UUID

from src.application.use_cases.posts.create_post import CreatePostCommand, CreatePostResponse
from src.application.use_cases.posts.get_post_by_id import (
    GetPostByIdQuery,
    GetPostResponse as GetPostResult,
)
from src.presentation.api.v1.schemas.post import (
    AuthorSummaryResponse,
    CreatePostRequest,
    GetPostResponse,
    PostResponse,
)


def parse_includes(raw: str | None) -> tuple[str, ...]:
    """Split ?include=a,b into trimmed, non-empty entries"""
    if raw is None or not raw.strip():
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def to_command(request: CreatePostRequest) -> CreatePostCommand:
    return CreatePostCommand(
        author_id=request.author_id,
        title=request.title,
        description=request.description,
        content=request.content,
    )


def to_query(post_id: UUID, include: str | None) -> GetPostByIdQuery:
    return GetPostByIdQuery(post_id=post_id, includes=parse_includes(include))


def to_post_response(result: CreatePostResponse) -> PostResponse:
    return PostResponse.model_validate(result)


def to_get_post_response(result: GetPostResult) -> GetPostResponse:
    author = AuthorSummaryResponse.model_validate(result.author) if result.author else None
    return GetPostResponse(
        id=result.id,
        author_id=result.author_id,
        title=result.title,
        description=result.description,
        content=result.content,
        created_at=result.created_at,
        updated_at=result.updated_at,
        author=author,
    )

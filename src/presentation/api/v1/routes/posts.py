"""Post API endpoints"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from src.application.common.mediator import Mediator
from src.infrastructure.config.settings import get_settings
from src.presentation.api.dependencies import get_mediator
from src.presentation.api.rate_limit import limiter
from src.presentation.api.v1.mappings import (
    to_command,
    to_get_post_response,
    to_post_response,
    to_query,
)
from src.presentation.api.v1.result_mapper import to_problem_response
from src.presentation.api.v1.schemas.post import CreatePostRequest, GetPostResponse, PostResponse
from src.presentation.api.v1.schemas.problem import ProblemDetails
from src.shared.telemetry.logging import get_logger

router = APIRouter()
settings = get_settings()
logger = get_logger(__name__)

PROBLEM_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ProblemDetails},
    status.HTTP_404_NOT_FOUND: {"model": ProblemDetails},
}


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**PROBLEM_RESPONSES, status.HTTP_429_TOO_MANY_REQUESTS: {"model": ProblemDetails}},
)
@limiter.limit(settings.rate_limit_create_post)
async def create_post(
    request: Request,  # Required by slowapi for rate limiting (extracts remote address)
    data: CreatePostRequest,
    mediator: Annotated[Mediator, Depends(get_mediator)],
):
    """
    Create a new post for an existing author.

    Rate limited per client IP. Returns the post with a Location header
    pointing at GET /api/posts/{id}.
    """
    logger.info("Creating new post with title: %s", data.title)

    result = await mediator.send(to_command(data))
    if result.is_failure:
        logger.warning("Failed to create post: %s", result.error.message)
        return to_problem_response(result.error)

    body = to_post_response(result.value)
    logger.info("Successfully created post with ID: %s", body.id)

    location = request.url_for("get_post_by_id", id=str(body.id)).path
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=body.model_dump(mode="json"),
        headers={"Location": location},
    )


@router.get(
    "/{id}",
    response_model=GetPostResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ProblemDetails}},
)
async def get_post_by_id(
    id: UUID,
    mediator: Annotated[Mediator, Depends(get_mediator)],
    include: Annotated[
        str | None, Query(description="Comma-separated related resources, e.g. 'author'")
    ] = None,
):
    """Get a post by ID, optionally embedding its author with ?include=author"""
    query = to_query(id, include)
    logger.info("Retrieving post with ID: %s, Includes: %s", id, ", ".join(query.includes))

    result = await mediator.send(query)
    if result.is_failure:
        logger.warning("Post not found with ID: %s", id)
        return to_problem_response(result.error)

    return to_get_post_response(result.value)

"""
Async HTTP client for the Blog API.

Usage:
    async with BlogClient(BlogClientOptions(base_url="http://localhost:8000")) as client:
        created = await client.create_post(
            CreatePostRequest(author_id=author_id, title="...", description="...", content="...")
        )
        post = await client.get_post_by_id(created.id, include_author=True)

Requests are sent once; nothing is retried.
"""

import logging
from datetime import timedelta
from typing import TypeVar
from uuid import UUID

import httpx
from pydantic import BaseModel, ValidationError

from src.sdk.config import BlogClientOptions
from src.sdk.exceptions import (
    BadRequestException,
    BlogApiException,
    NotFoundException,
    RateLimitException,
)
from src.sdk.models import CreatePostRequest, CreatePostResponse, GetPostResponse


logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

API_VERSION_HEADER = "X-API-Version"


def parse_retry_after(value: str | None) -> timedelta | None:
    """Retry-After as delta-seconds; HTTP-date values are ignored"""
    if not value:
        return None
    try:
        seconds = int(value.strip())
    except ValueError:
        return None
    return timedelta(seconds=seconds) if seconds >= 0 else None


def raise_for_status(response: httpx.Response) -> None:
    """Translate a non-2xx response into the matching BlogApiException"""
    if response.is_success:
        return

    content = response.text
    status_code = response.status_code

    if status_code == 404:
        raise NotFoundException()
    if status_code == 400:
        raise BadRequestException(response_content=content)
    if status_code == 429:
        raise RateLimitException(retry_after=parse_retry_after(response.headers.get("Retry-After")))
    if status_code == 401:
        raise BlogApiException("Authentication failed. Check your API key.", status_code, content)
    if status_code == 403:
        raise BlogApiException(
            "Access forbidden. You don't have permission to access this resource.",
            status_code,
            content,
        )
    if status_code == 500:
        raise BlogApiException("An internal server error occurred", status_code, content)
    raise BlogApiException(
        f"API request failed with status code {status_code}", status_code, content
    )


class BlogClient:
    """Thin wrapper over httpx.AsyncClient"""

    def __init__(self, options: BlogClientOptions, http_client: httpx.AsyncClient | None = None):
        self.options = options
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=options.base_url, timeout=options.timeout_seconds
        )

    async def __aenter__(self) -> "BlogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def create_post(self, request: CreatePostRequest) -> CreatePostResponse:
        """POST /api/posts"""
        if request is None:
            raise ValueError("request is required")

        return await self._send(
            "POST",
            "/api/posts",
            CreatePostResponse,
            error_message="An error occurred while creating the post",
            json=request.model_dump(mode="json"),
        )

    async def get_post_by_id(self, id: UUID, include_author: bool = False) -> GetPostResponse:
        """GET /api/posts/{id}, optionally with ?include=author"""
        params = {"include": "author"} if include_author else None
        return await self._send(
            "GET",
            f"/api/posts/{id}",
            GetPostResponse,
            error_message=f"An error occurred while retrieving post with ID '{id}'",
            params=params,
        )

    async def _send(
        self,
        method: str,
        url: str,
        response_model: type[ResponseT],
        *,
        error_message: str,
        **kwargs,
    ) -> ResponseT:
        # Set per request: the http client may be shared with the caller
        headers = None
        if self.options.api_version:
            headers = {API_VERSION_HEADER: self.options.api_version}
        try:
            response = await self._client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise BlogApiException(error_message) from e

        raise_for_status(response)

        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as e:
            raise BlogApiException(
                "Failed to deserialize response", response.status_code, response.text
            ) from e

"""Client SDK for the Blog API."""

from src.sdk.client import BlogClient
from src.sdk.config import BlogClientOptions
from src.sdk.exceptions import (
    BadRequestException,
    BlogApiException,
    NotFoundException,
    RateLimitException,
)
from src.sdk.models import AuthorResponse, CreatePostRequest, CreatePostResponse, GetPostResponse

__all__ = [
    "BlogClient",
    "BlogClientOptions",
    # Exceptions
    "BlogApiException",
    "NotFoundException",
    "BadRequestException",
    "RateLimitException",
    # Models
    "CreatePostRequest",
    "CreatePostResponse",
    "GetPostResponse",
    "AuthorResponse",
]

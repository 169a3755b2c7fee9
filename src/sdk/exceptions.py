"""Exceptions raised by BlogClient, keyed by HTTP status"""

from datetime import timedelta


class BlogApiException(Exception):
    """
    Base exception for Blog API failures.

    Attributes:
        message: Human-readable error description
        status_code: HTTP status of the failed response (None for transport errors)
        response_content: Raw response body, when there was one
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_content: str | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.response_content = response_content
        super().__init__(message)


class NotFoundException(BlogApiException):
    def __init__(self, message: str = "The requested resource was not found"):
        super().__init__(message, 404)


class BadRequestException(BlogApiException):
    def __init__(self, message: str = "The request was invalid", response_content: str | None = None):
        super().__init__(message, 400, response_content)


class RateLimitException(BlogApiException):
    def __init__(
        self,
        message: str = "Rate limit exceeded. Please try again later.",
        retry_after: timedelta | None = None,
    ):
        super().__init__(message, 429)
        self.retry_after = retry_after

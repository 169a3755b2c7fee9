"""Turns unexpected exceptions into JSON problem responses"""
import logging
from collections.abc import Callable

from fastapi import Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from src.domain.exceptions import BlogException
from src.infrastructure.config.settings import get_settings
from src.presentation.api.v1.result_mapper import problem_type
from src.shared.context import get_correlation_id

logger = logging.getLogger(__name__)

GENERIC_DETAIL = (
    "An internal server error occurred. Please contact support if the problem persists."
)


def classify_exception(exc: Exception) -> tuple[int, str, str]:
    """Return (status code, title, error code) for an unhandled exception"""
    if isinstance(exc, TimeoutError):
        return 504, "Gateway Timeout", "Error.Timeout"
    if isinstance(exc, PermissionError):
        return 403, "Forbidden", "Error.Forbidden"
    if isinstance(exc, BlogException):
        return 500, "Internal Server Error", exc.error_code
    return 500, "Internal Server Error", "Error.Internal"


class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    """
    Last line of defence for errors that escaped the handlers.

    Expected failures never get here: handlers return ApplicationResults.
    The exception message is only exposed when debug is enabled.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return self._to_response(request, exc)

    def _to_response(self, request: Request, exc: Exception) -> JSONResponse:
        status_code, title, error_code = classify_exception(exc)
        correlation_id = get_correlation_id() or getattr(request.state, "correlation_id", None)

        logger.exception(
            "Unexpected exception. Path: %s, Method: %s", request.url.path, request.method
        )

        debug = get_settings().debug
        content = {
            "type": problem_type(status_code),
            "title": title,
            "status": status_code,
            "detail": str(exc) if debug else GENERIC_DETAIL,
            "error_code": error_code,
            "correlation_id": correlation_id,
        }
        if debug and isinstance(exc, BlogException) and exc.details:
            content["details"] = exc.details

        return JSONResponse(
            status_code=status_code, content=content, media_type="application/problem+json"
        )

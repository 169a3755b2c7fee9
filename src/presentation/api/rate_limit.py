"""slowapi rate limiter shared by the routers"""

from fastapi import status
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from src.infrastructure.config.settings import get_settings
from src.presentation.api.v1.result_mapper import problem_response
from src.shared.telemetry.logging import get_logger

settings = get_settings()
logger = get_logger(__name__)

# Fixed window per client IP
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """429 problem response with a Retry-After hint (the length of the window)"""
    retry_after = exc.limit.limit.get_expiry()
    logger.warning(
        "Rate limit exceeded for %s on %s: %s",
        get_remote_address(request),
        request.url.path,
        exc.detail,
    )
    return problem_response(
        status.HTTP_429_TOO_MANY_REQUESTS,
        "Too Many Requests",
        f"Rate limit exceeded: {exc.detail}",
        headers={"Retry-After": str(retry_after)},
    )

"""Correlation ID middleware for request tracing"""
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from src.shared.context import reset_correlation_id, set_correlation_id
from src.shared.telemetry.tracing import get_trace_id

CORRELATION_ID_HEADER = "X-Correlation-ID"


def trace_id_from_traceparent(traceparent: str | None) -> str | None:
    """Extract the trace id from a W3C traceparent header ("00-{trace}-{span}-{flags}")"""
    if not traceparent:
        return None
    parts = traceparent.strip().split("-")
    if len(parts) >= 2 and len(parts[1]) == 32:
        return parts[1]
    return None


def resolve_correlation_id(request: Request) -> str:
    """
    Pick the correlation id for a request, in priority order:
    X-Correlation-ID header, traceparent trace id, current span trace id,
    then a fresh 32-char hex id.
    """
    header_value = request.headers.get(CORRELATION_ID_HEADER)
    if header_value and header_value.strip():
        return header_value.strip()

    trace_id = trace_id_from_traceparent(request.headers.get("traceparent"))
    if trace_id:
        return trace_id

    return get_trace_id() or uuid.uuid4().hex


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """
    Add correlation IDs to all requests for distributed tracing.

    Features:
    - Accepts X-Correlation-ID header from clients
    - Falls back to the W3C trace id, then generates one
    - Adds correlation ID to response headers
    - Makes correlation ID available to logging system
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = resolve_correlation_id(request)

        # Store in context variable (accessible throughout request lifecycle)
        token = set_correlation_id(correlation_id)
        request.state.correlation_id = correlation_id

        try:
            response = await call_next(request)
        finally:
            reset_correlation_id(token)

        # Add correlation ID to response headers
        if CORRELATION_ID_HEADER not in response.headers:
            response.headers[CORRELATION_ID_HEADER] = correlation_id

        return response

"""Span helpers used by repositories, the mediator and the correlation middleware"""
import asyncio
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps

from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode

TRACER_NAME = "blog"

# Keyword arguments never copied onto spans
REDACTED_ARGS = frozenset({"password", "token", "secret", "content"})


def get_tracer() -> trace.Tracer:
    return trace.get_tracer(TRACER_NAME)


@contextmanager
def operation_span(name: str, attributes: dict | None = None) -> Iterator[Span]:
    """
    Run a block inside a span that records its outcome.

    The span ends with status OK, or ERROR with the exception recorded
    when the block raises. The exception is always re-raised.
    """
    with get_tracer().start_as_current_span(name, record_exception=False) as span:
        for key, value in (attributes or {}).items():
            span.set_attribute(key, value)
        try:
            yield span
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, str(e)))
            span.record_exception(e)
            raise
        span.set_status(Status(StatusCode.OK))


def _call_attributes(attributes: dict | None, kwargs: dict) -> dict:
    merged = dict(attributes or {})
    for key, value in kwargs.items():
        if not key.startswith("_") and key not in REDACTED_ARGS:
            merged[f"arg.{key}"] = str(value)
    return merged


def traced(operation_name: str | None = None, attributes: dict | None = None):
    """
    Wrap a function (sync or async) in an operation span.

    Usage:
        @traced("post_repository.add", attributes={"db.table": "posts"})
        async def add(self, post: Post): ...

    The span name defaults to module.function. Keyword arguments are added
    as arg.* attributes unless they look sensitive.
    """

    def decorator(func: Callable) -> Callable:
        span_name = operation_name or f"{func.__module__}.{func.__name__}"

        if asyncio.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                with operation_span(span_name, _call_attributes(attributes, kwargs)):
                    return await func(*args, **kwargs)

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            with operation_span(span_name, _call_attributes(attributes, kwargs)):
                return func(*args, **kwargs)

        return sync_wrapper

    return decorator


def get_trace_id() -> str | None:
    """Trace id of the current span as 32 hex chars, or None outside a valid span"""
    span_context = trace.get_current_span().get_span_context()
    if not span_context.is_valid:
        return None
    return format(span_context.trace_id, "032x")

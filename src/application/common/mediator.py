"""
In-process mediator for commands, queries and domain events.

Requests (commands and queries) have exactly one handler and pass through
the pipeline behaviors in registration order, the first registered being
the outermost. Domain events fan out to every subscribed handler.
"""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Protocol

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from src.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

NextHandler = Callable[[], Awaitable[Any]]


class RequestHandler(Protocol):
    """Handles one command or query type"""

    async def handle(self, request: Any) -> Any:
        ...


class NotificationHandler(Protocol):
    """Reacts to one domain event type"""

    async def handle(self, event: Any) -> None:
        ...


class PipelineBehavior(Protocol):
    """Wraps request handling (validation, logging, ...)"""

    async def handle(self, request: Any, next_handler: NextHandler) -> Any:
        ...


class HandlerNotFoundError(LookupError):
    """Raised when a request is sent without a registered handler."""


class Mediator:
    """Routes requests to their handler and events to their subscribers"""

    def __init__(self, behaviors: Sequence[PipelineBehavior] = ()) -> None:
        self._behaviors = list(behaviors)
        self._handlers: dict[type, RequestHandler] = {}
        self._subscribers: dict[type, list[NotificationHandler]] = {}

    def register(self, request_type: type, handler: RequestHandler) -> None:
        """Register the single handler for a request type"""
        if request_type in self._handlers:
            raise ValueError(f"A handler is already registered for {request_type.__name__}")
        self._handlers[request_type] = handler

    def subscribe(self, event_type: type, handler: NotificationHandler) -> None:
        """Subscribe a handler to a domain event type"""
        self._subscribers.setdefault(event_type, []).append(handler)

    def handlers_for(self, event_type: type) -> list[NotificationHandler]:
        return list(self._subscribers.get(event_type, []))

    async def send(self, request: Any) -> Any:
        """Dispatch a command or query through the pipeline to its handler"""
        handler = self._handlers.get(type(request))
        if handler is None:
            raise HandlerNotFoundError(f"No handler registered for {type(request).__name__}")

        async def invoke_handler() -> Any:
            return await handler.handle(request)

        pipeline: NextHandler = invoke_handler
        for behavior in reversed(self._behaviors):
            pipeline = self._wrap(behavior, request, pipeline)

        return await pipeline()

    @staticmethod
    def _wrap(behavior: PipelineBehavior, request: Any, next_handler: NextHandler) -> NextHandler:
        async def step() -> Any:
            return await behavior.handle(request, next_handler)

        return step

    async def publish(self, event: Any) -> None:
        """
        Run every handler subscribed to the event's type, in subscription order.

        Each handler runs in its own span. A failing handler is logged and
        its exception propagates to the caller.
        """
        event_name = type(event).__name__
        tracer = trace.get_tracer(__name__)

        for handler in self.handlers_for(type(event)):
            handler_name = type(handler).__name__

            with tracer.start_as_current_span(f"DomainEvent.{event_name}.{handler_name}") as span:
                span.set_attribute("domain_event.type", event_name)
                span.set_attribute("domain_event.handler", handler_name)
                started = time.perf_counter()

                try:
                    await handler.handle(event)
                except Exception as e:
                    elapsed_ms = (time.perf_counter() - started) * 1000
                    span.set_attribute("domain_event.success", False)
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    span.record_exception(e)
                    logger.exception(
                        "Domain event handler %s failed processing %s after %.0fms",
                        handler_name,
                        event_name,
                        elapsed_ms,
                    )
                    raise

                elapsed_ms = (time.perf_counter() - started) * 1000
                span.set_attribute("domain_event.success", True)
                span.set_attribute("domain_event.duration_ms", elapsed_ms)
                span.set_status(Status(StatusCode.OK))
                logger.debug(
                    "Domain event handler %s processed %s in %.0fms",
                    handler_name,
                    event_name,
                    elapsed_ms,
                )

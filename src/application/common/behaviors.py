"""Pipeline behaviors applied to every request sent through the mediator"""

from __future__ import annotations

import time
from collections.abc import Iterable
from typing import Any, Protocol

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from src.application.common.mediator import NextHandler
from src.application.common.models import ApplicationResult, Error
from src.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class RequestValidator(Protocol):
    """Validates a request before it reaches its handler"""

    def validate(self, request: Any) -> list[str]:
        """Return the list of failure messages (empty when valid)"""
        ...


class ValidationBehavior:
    """
    Short-circuits invalid requests.

    Runs every validator registered for the request type. If any fails the
    handler is skipped and a validation failure is returned, with all
    messages joined by "; ".
    """

    def __init__(self, validators: dict[type, Iterable[RequestValidator]] | None = None) -> None:
        self._validators: dict[type, list[RequestValidator]] = {
            request_type: list(items) for request_type, items in (validators or {}).items()
        }

    def add(self, request_type: type, validator: RequestValidator) -> None:
        self._validators.setdefault(request_type, []).append(validator)

    async def handle(self, request: Any, next_handler: NextHandler) -> Any:
        validators = self._validators.get(type(request), [])
        if not validators:
            return await next_handler()

        failures = [message for validator in validators for message in validator.validate(request)]
        if failures:
            return ApplicationResult.failure(Error.validation("; ".join(failures)))

        return await next_handler()


class LoggingBehavior:
    """Logs and traces every request with its duration"""

    async def handle(self, request: Any, next_handler: NextHandler) -> Any:
        request_name = type(request).__name__
        tracer = trace.get_tracer(__name__)

        with tracer.start_as_current_span(f"Mediator.{request_name}") as span:
            span.set_attribute("mediator.request.type", request_name)
            logger.info("Handling %s", request_name)
            started = time.perf_counter()

            try:
                response = await next_handler()
            except Exception as e:
                elapsed_ms = (time.perf_counter() - started) * 1000
                span.set_attribute("mediator.request.success", False)
                span.set_attribute("mediator.request.duration_ms", elapsed_ms)
                span.set_status(Status(StatusCode.ERROR, str(e)))
                span.record_exception(e)
                logger.exception("Request %s failed after %.0fms", request_name, elapsed_ms)
                raise

            elapsed_ms = (time.perf_counter() - started) * 1000
            span.set_attribute("mediator.request.success", True)
            span.set_attribute("mediator.request.duration_ms", elapsed_ms)
            span.set_status(Status(StatusCode.OK))
            logger.info("Handled %s in %.0fms", request_name, elapsed_ms)
            return response

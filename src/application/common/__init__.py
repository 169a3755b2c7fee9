"""Mediator, pipeline behaviors and the application result model."""

from src.application.common.behaviors import LoggingBehavior, RequestValidator, ValidationBehavior
from src.application.common.mediator import HandlerNotFoundError, Mediator
from src.application.common.models import ApplicationResult, Error, ErrorType

__all__ = [
    "Mediator",
    "HandlerNotFoundError",
    "ValidationBehavior",
    "LoggingBehavior",
    "RequestValidator",
    "ApplicationResult",
    "Error",
    "ErrorType",
]

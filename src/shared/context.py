"""
Request context management using contextvars.

Provides async-safe storage for request-scoped data such as the
correlation id. The correlation middleware sets it at the start of each
request; logging and error handling read it.

Usage:
    # In middleware:
    token = set_correlation_id("4bf92f3577b34da6a3ce929d0e0e4736")
    ...
    reset_correlation_id(token)

    # Anywhere during the request:
    correlation_id = get_correlation_id()  # Returns the id or None
"""

from contextvars import ContextVar, Token

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def set_correlation_id(correlation_id: str | None) -> Token:
    """Set the correlation id for the current request and return the reset token"""
    return _correlation_id.set(correlation_id)


def reset_correlation_id(token: Token) -> None:
    _correlation_id.reset(token)


def get_correlation_id() -> str | None:
    """Get the correlation id of the current request, if any"""
    return _correlation_id.get()

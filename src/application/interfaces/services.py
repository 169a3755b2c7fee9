"""
Service interfaces (ports) for the application layer.

These protocols define the contracts for infrastructure services.
Following Dependency Inversion Principle (DIP).
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from src.domain.entities import AggregateRoot
    from src.domain.events import DomainEvent


class IDateTime(Protocol):
    """Protocol for the clock used to timestamp entities"""

    @property
    def utc_now(self) -> datetime:
        ...


class IEventPublisher(Protocol):
    """Protocol for publishing domain events to their handlers"""

    async def publish(self, event: DomainEvent) -> None:
        ...


class IUnitOfWork(Protocol):
    """Protocol for committing tracked changes and dispatching their events"""

    def track(self, aggregate: AggregateRoot) -> None:
        ...

    async def save_changes(self) -> None:
        ...

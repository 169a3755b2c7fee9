"""
SQLAlchemy unit of work.

Commits the session, then dispatches the domain events raised by the
aggregates tracked during the request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from src.application.interfaces.services import IEventPublisher
    from src.domain.entities import AggregateRoot
    from src.domain.events import DomainEvent

logger = get_logger(__name__)


class SqlAlchemyUnitOfWork:
    def __init__(self, db: AsyncSession, publisher: "IEventPublisher"):
        self.db = db
        self.publisher = publisher
        self._tracked: list["AggregateRoot"] = []

    def track(self, aggregate: "AggregateRoot") -> None:
        """Register an aggregate whose events should be dispatched on save"""
        if not any(tracked is aggregate for tracked in self._tracked):
            self._tracked.append(aggregate)

    def _collect_events(self) -> list["DomainEvent"]:
        events: list["DomainEvent"] = []
        for aggregate in self._tracked:
            events.extend(aggregate.domain_events)
            aggregate.clear_domain_events()
        self._tracked.clear()
        return events

    async def save_changes(self) -> None:
        """
        Commit pending changes and publish the collected events.

        Events are collected and cleared before the commit so they are
        dispatched at most once. A failing commit rolls back and re-raises;
        no events are published. A failing event handler is logged and does
        not undo the committed change.
        """
        events = self._collect_events()

        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        for event in events:
            try:
                await self.publisher.publish(event)
            except Exception:
                logger.exception("Failed to publish domain event %s", event.event_type)

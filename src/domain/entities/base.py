"""
Base classes for identity-bearing domain objects.

Entities compare by identity rather than by attributes. Aggregate roots
additionally queue the domain events they raise until the unit of work
publishes them.
"""

from dataclasses import dataclass, field
from typing import Any

from src.domain.events import DomainEvent


@dataclass(eq=False)
class Entity:
    """Base entity: equality and hashing follow the identifier"""

    id: Any

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity) or type(other) is not type(self):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))


@dataclass(eq=False)
class AggregateRoot(Entity):
    """
    Entry point to an aggregate.

    Domain events are held in raise order and are never persisted. The
    aggregate itself never dispatches them; the unit of work collects and
    clears them after a successful commit.
    """

    _domain_events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False
    )

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Read-only view of the queued domain events"""
        return tuple(self._domain_events)

    def raise_domain_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def clear_domain_events(self) -> None:
        """Clear queued events. Called once they have been published."""
        self._domain_events.clear()

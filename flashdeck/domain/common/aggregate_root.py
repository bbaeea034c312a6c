"""Aggregates buffer domain events until the application layer drains them."""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Consistency boundary for a cluster of domain objects.

    Events may be recorded outside a request (e.g. by a timer callback), so
    callers drain them lazily with ``collect_events`` on their next access.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """Return the events recorded since the last call and forget them."""
        events, self._events = self._events, []
        return events

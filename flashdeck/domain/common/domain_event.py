"""Facts recorded by aggregates while they handle an intent."""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """
    Something that already happened, named in the past tense.

    The application layer drains events after each intent to log progress
    and persist results; the domain never reacts to its own events.
    """

    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

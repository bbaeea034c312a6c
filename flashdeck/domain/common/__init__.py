"""
Building blocks shared by the learning domain.

- ValueObject / EntityId / StoredId: immutable values and typed ids
- Entity / AggregateRoot: identity and event-recording consistency boundaries
- DomainEvent: facts drained by the application layer
"""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent
from .entity import Entity, EntityId, StoredId
from .exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    InvariantViolationError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "BusinessRuleViolationError",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "InvariantViolationError",
    "StoredId",
    "ValidationError",
    "ValueObject",
]

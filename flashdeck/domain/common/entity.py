"""Identity-bearing domain objects and the typed ids they carry."""

from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """Typed identifier; subclasses narrow ``value`` to an int or a UUID."""

    value: int | UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StoredId(EntityId):
    """Id of a database row. ``0`` marks an entity that has not been saved yet."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{type(self).__name__} must be non-negative")

    @classmethod
    def generate(cls) -> Self:
        return cls(0)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(Generic[IdType]):
    """Domain object compared by ``id`` alone; decorate subclasses with ``eq=False``."""

    id: IdType

    def __eq__(self, other: object) -> bool:
        return isinstance(other, type(self)) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

from dataclasses import dataclass
from typing import Self
from uuid import UUID, uuid4

from ..entity import EntityId, StoredId
from ..exceptions import ValidationError
from ..value_object import ValueObject


@dataclass(frozen=True)
class OwnerId(ValueObject):
    """
    Opaque owner identifier supplied by the auth collaborator.

    Only used to scope storage queries; never inspected.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError("Owner id cannot be empty", field="owner_id")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LessonId(StoredId):
    pass


@dataclass(frozen=True)
class FlashcardId(StoredId):
    pass


@dataclass(frozen=True)
class QuizSessionRecordId(StoredId):
    """Id of a persisted quiz result."""


@dataclass(frozen=True)
class LiveSessionId(EntityId):
    """Id of an in-memory quiz or study session; never stored as a row key."""

    value: UUID

    @classmethod
    def generate(cls) -> Self:
        return cls(uuid4())

"""
Flashcard entity: a front/back vocabulary pair inside a lesson.
"""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import DomainError, InvariantViolationError
from flashdeck.domain.common.value_objects import FlashcardId, LessonId, OwnerId
from flashdeck.domain.learning.entities.lesson import Lesson
from flashdeck.domain.learning.value_objects import Visibility


@dataclass(frozen=True, eq=False)
class Flashcard(Entity[FlashcardId]):
    """
    Flashcard for vocabulary review.

    Business Rules:
    - Front and back cannot be empty
    - A flashcard belongs to exactly one lesson and carries its visibility
    - Flashcards are immutable once created; they can only be deleted
    """

    id: FlashcardId
    owner_id: OwnerId
    lesson_id: LessonId
    front: str
    back: str
    visibility: Visibility = Visibility.PRIVATE
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.front or not self.front.strip():
            raise DomainError("Front cannot be empty")
        if not self.back or not self.back.strip():
            raise DomainError("Back cannot be empty")

    def belongs_to(self, lesson: Lesson) -> bool:
        return self.lesson_id == lesson.id and self.visibility is lesson.visibility

    @classmethod
    def create(cls, lesson: Lesson, front: str, back: str) -> "Flashcard":
        """
        Create a new flashcard in a lesson (ID will be 0 until persisted).

        The flashcard takes the owner and visibility of its lesson.

        Raises:
            InvariantViolationError: If the lesson has not been persisted yet
            DomainError: If front or back is empty
        """
        if lesson.id.value == 0:
            raise InvariantViolationError("Flashcard", "lesson must exist before adding cards")
        return cls(
            id=FlashcardId.generate(),
            owner_id=lesson.owner_id,
            lesson_id=lesson.id,
            front=front.strip(),
            back=back.strip(),
            visibility=lesson.visibility,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        owner_id: OwnerId,
        lesson_id: LessonId,
        front: str,
        back: str,
        visibility: Visibility,
        created_at: datetime,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            lesson_id=lesson_id,
            front=front,
            back=back,
            visibility=visibility,
            created_at=created_at,
        )

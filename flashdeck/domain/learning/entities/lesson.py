"""
Lesson entity: a named, owned group of flashcards.
"""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.common.value_objects import LessonId, OwnerId
from flashdeck.domain.learning.value_objects import Visibility

MAX_LESSON_NAME_LENGTH = 200


def _clean_name(name: str) -> str:
    if not name or not name.strip():
        raise DomainError("Lesson name cannot be empty")
    cleaned = name.strip()
    if len(cleaned) > MAX_LESSON_NAME_LENGTH:
        raise DomainError(f"Lesson name cannot exceed {MAX_LESSON_NAME_LENGTH} characters")
    return cleaned


@dataclass(eq=False)
class Lesson(Entity[LessonId]):
    """
    Lesson grouping flashcards by topic.

    Business Rules:
    - Name cannot be empty
    - Only the owner may rename, reshare or delete a lesson
    - Flashcards share the visibility of their lesson
    """

    id: LessonId
    owner_id: OwnerId
    name: str
    visibility: Visibility = Visibility.PRIVATE
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        self.name = _clean_name(self.name)

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC

    def is_owned_by(self, owner_id: OwnerId) -> bool:
        return self.owner_id == owner_id

    def is_visible_to(self, owner_id: OwnerId) -> bool:
        return self.is_public or self.is_owned_by(owner_id)

    def rename(self, name: str) -> None:
        """
        Rename the lesson.

        Raises:
            DomainError: If name is empty or too long
        """
        self.name = _clean_name(name)

    def change_visibility(self, visibility: Visibility) -> bool:
        """Change visibility. Returns True if it actually changed."""
        if self.visibility is visibility:
            return False
        self.visibility = visibility
        return True

    @classmethod
    def create(
        cls,
        owner_id: OwnerId,
        name: str,
        visibility: Visibility = Visibility.PRIVATE,
    ) -> "Lesson":
        """Create a new lesson (ID will be 0 until persisted)."""
        return cls(
            id=LessonId.generate(),
            owner_id=owner_id,
            name=name,
            visibility=visibility,
        )

    @classmethod
    def create_with_id(
        cls,
        id: LessonId,
        owner_id: OwnerId,
        name: str,
        visibility: Visibility,
        created_at: datetime,
    ) -> "Lesson":
        """Reconstitute a lesson from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            name=name,
            visibility=visibility,
            created_at=created_at,
        )

"""Protocol for Lesson repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects import LessonId, OwnerId
from flashdeck.domain.learning.entities.lesson import Lesson


class LessonRepositoryProtocol(Protocol):
    """Protocol for Lesson repository operations in learning context."""

    def find_by_id(self, lesson_id: LessonId) -> Lesson | None:
        """
        Find a lesson by ID regardless of owner.

        Callers decide whether the lesson is visible to them.
        """
        ...

    def find_for_owner(self, owner_id: OwnerId) -> list[Lesson]:
        """
        Get every lesson created by an owner, private or public.

        Returns:
            List of lesson entities ordered by created_at DESC
        """
        ...

    def find_shared(self) -> list[Lesson]:
        """Get every public lesson of any owner, ordered by created_at DESC."""
        ...

    def count_flashcards(self, lesson_ids: list[LessonId]) -> dict[int, int]:
        """
        Count flashcards per lesson.

        Returns:
            Mapping of lesson id value to flashcard count (missing means 0)
        """
        ...

    def save(self, lesson: Lesson) -> Lesson:
        """
        Save a lesson entity (create or update).

        Returns:
            Saved lesson entity with database-generated values
        """
        ...

    def delete(self, lesson_id: LessonId, owner_id: OwnerId) -> bool:
        """
        Delete a lesson and all of its flashcards.

        Returns:
            True if deleted, False if not found or not owned
        """
        ...

"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects import FlashcardId, LessonId, OwnerId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.value_objects import Visibility


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def find_by_id(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> Flashcard | None:
        """
        Find a flashcard by ID with owner check.

        Returns:
            Flashcard entity if found and owned by owner, None otherwise
        """
        ...

    def find_by_lesson(self, lesson_id: LessonId) -> list[Flashcard]:
        """Get all flashcards of a lesson ordered by created_at ASC."""
        ...

    def find_for_owner(self, owner_id: OwnerId) -> list[Flashcard]:
        """Get every flashcard created by an owner."""
        ...

    def find_shared(self) -> list[Flashcard]:
        """Get every public flashcard of any owner."""
        ...

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Persist a new flashcard.

        Returns:
            Saved flashcard entity with database-generated values
        """
        ...

    def save_all(self, flashcards: list[Flashcard]) -> list[Flashcard]:
        """Persist new flashcards in one transaction, preserving order."""
        ...

    def update_visibility_for_lesson(
        self, lesson_id: LessonId, visibility: Visibility, *, commit: bool = True
    ) -> int:
        """
        Align the visibility of a lesson's flashcards with the lesson.

        With ``commit=False`` the UPDATE joins the caller's transaction and is
        committed by the next repository write (or discarded with the session).

        Returns:
            Number of flashcards updated
        """
        ...

    def delete(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found or not owned
        """
        ...

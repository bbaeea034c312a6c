"""Use case for retrieving flashcards."""

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.lesson_repository import LessonRepositoryProtocol
from flashdeck.application.learning.services.flashcard_pool_service import FlashcardPoolService
from flashdeck.domain.common.value_objects import LessonId, OwnerId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.value_objects import OwnerScope
from flashdeck.exceptions import LessonNotFoundError


class GetFlashcardsUseCase:
    """Use case for retrieving flashcards by lesson or by scope."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        lesson_repository: LessonRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.lesson_repository = lesson_repository
        self.pool_service = FlashcardPoolService(flashcard_repository)

    def get_flashcards_for_lesson(self, lesson_id: int, owner_id: str) -> list[Flashcard]:
        """
        Get all flashcards of a lesson visible to the owner.

        Raises:
            LessonNotFoundError: If the lesson is not found or not visible
        """
        lesson_id_vo = LessonId(lesson_id)
        lesson = self.lesson_repository.find_by_id(lesson_id_vo)
        if not lesson or not lesson.is_visible_to(OwnerId(owner_id)):
            raise LessonNotFoundError(lesson_id)

        return self.flashcard_repository.find_by_lesson(lesson_id_vo)

    def get_flashcards(self, owner_id: str, scope: OwnerScope = OwnerScope.MINE) -> list[Flashcard]:
        """Get every flashcard in scope."""
        return self.pool_service.load(OwnerId(owner_id), scope)

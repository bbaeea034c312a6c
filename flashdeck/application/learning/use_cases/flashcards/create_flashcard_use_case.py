"""Use case for creating single flashcards in a lesson."""

import structlog

from flashdeck.application.learning.protocols.change_notifier import (
    ChangeKind,
    ChangeNotifierProtocol,
    LearningDataChanged,
)
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.lesson_repository import LessonRepositoryProtocol
from flashdeck.domain.common.value_objects import LessonId, OwnerId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.entities.lesson import Lesson
from flashdeck.exceptions import LessonNotFoundError

logger = structlog.get_logger(__name__)


def load_owned_lesson(
    lesson_repository: LessonRepositoryProtocol, lesson_id: int, owner_id: OwnerId
) -> Lesson:
    """
    Load a lesson the owner may add cards to.

    Raises:
        LessonNotFoundError: If the lesson is not found or owned by someone else
    """
    lesson = lesson_repository.find_by_id(LessonId(lesson_id))
    if not lesson or not lesson.is_owned_by(owner_id):
        raise LessonNotFoundError(lesson_id)
    return lesson


class CreateFlashcardUseCase:
    """Use case for creating a flashcard in a lesson."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        lesson_repository: LessonRepositoryProtocol,
        change_notifier: ChangeNotifierProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.lesson_repository = lesson_repository
        self.change_notifier = change_notifier

    def create_flashcard(self, lesson_id: int, owner_id: str, front: str, back: str) -> Flashcard:
        """
        Create a new flashcard.

        The flashcard inherits owner and visibility from its lesson.

        Args:
            lesson_id: ID of the lesson
            owner_id: Opaque owner identifier
            front: Front term
            back: Back term

        Returns:
            Created flashcard domain entity

        Raises:
            LessonNotFoundError: If lesson is not found or not owned
            DomainError: If front or back is empty
        """
        owner_id_vo = OwnerId(owner_id)
        lesson = load_owned_lesson(self.lesson_repository, lesson_id, owner_id_vo)

        flashcard = Flashcard.create(lesson=lesson, front=front, back=back)
        flashcard = self.flashcard_repository.save(flashcard)

        self.change_notifier.publish(
            LearningDataChanged(
                owner_id=owner_id_vo,
                kind=ChangeKind.FLASHCARDS,
                lesson_id=lesson.id,
                shared=lesson.is_public,
            )
        )
        logger.info(
            "flashcard_created",
            flashcard_id=flashcard.id.value,
            lesson_id=lesson_id,
        )
        return flashcard

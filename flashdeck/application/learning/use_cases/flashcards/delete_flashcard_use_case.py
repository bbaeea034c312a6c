"""Use case for deleting flashcards."""

import structlog

from flashdeck.application.learning.protocols.change_notifier import (
    ChangeKind,
    ChangeNotifierProtocol,
    LearningDataChanged,
)
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.domain.common.value_objects import FlashcardId, OwnerId
from flashdeck.domain.learning.value_objects import Visibility
from flashdeck.exceptions import FlashcardNotFoundError

logger = structlog.get_logger(__name__)


class DeleteFlashcardUseCase:
    """Use case for deleting flashcards."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        change_notifier: ChangeNotifierProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.change_notifier = change_notifier

    def delete_flashcard(self, flashcard_id: int, owner_id: str) -> None:
        """
        Delete a flashcard.

        Args:
            flashcard_id: ID of the flashcard to delete
            owner_id: Opaque owner identifier

        Raises:
            FlashcardNotFoundError: If flashcard is not found or not owned
        """
        flashcard_id_vo = FlashcardId(flashcard_id)
        owner_id_vo = OwnerId(owner_id)

        flashcard = self.flashcard_repository.find_by_id(flashcard_id_vo, owner_id_vo)
        if not flashcard or not self.flashcard_repository.delete(flashcard_id_vo, owner_id_vo):
            raise FlashcardNotFoundError(flashcard_id)

        self.change_notifier.publish(
            LearningDataChanged(
                owner_id=owner_id_vo,
                kind=ChangeKind.FLASHCARDS,
                lesson_id=flashcard.lesson_id,
                shared=flashcard.visibility is Visibility.PUBLIC,
            )
        )
        logger.info("flashcard_deleted", flashcard_id=flashcard_id)

"""Use case for importing many flashcards from pasted text."""

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
from flashdeck.application.learning.use_cases.dtos import BulkImportSummary
from flashdeck.application.learning.use_cases.flashcards.create_flashcard_use_case import (
    load_owned_lesson,
)
from flashdeck.domain.common.value_objects import OwnerId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.services.flashcard_text_parser import FlashcardTextParser

logger = structlog.get_logger(__name__)


class BulkImportFlashcardsUseCase:
    """
    Use case for bulk flashcard entry.

    One ``front - back`` or ``front: back`` pair per line. Malformed lines
    are reported back, never fatal.
    """

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        lesson_repository: LessonRepositoryProtocol,
        change_notifier: ChangeNotifierProtocol,
        parser: FlashcardTextParser | None = None,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.lesson_repository = lesson_repository
        self.change_notifier = change_notifier
        self.parser = parser or FlashcardTextParser()

    def import_text(self, lesson_id: int, owner_id: str, text: str) -> BulkImportSummary:
        """
        Parse text and create one flashcard per well-formed line.

        Args:
            lesson_id: ID of the lesson receiving the cards
            owner_id: Opaque owner identifier
            text: Raw text, one pair per line

        Returns:
            Summary with created flashcards and rejected lines

        Raises:
            LessonNotFoundError: If lesson is not found or not owned
        """
        owner_id_vo = OwnerId(owner_id)
        lesson = load_owned_lesson(self.lesson_repository, lesson_id, owner_id_vo)

        parsed = self.parser.parse(text)
        flashcards = [
            Flashcard.create(lesson=lesson, front=pair.front, back=pair.back)
            for pair in parsed.pairs
        ]
        if flashcards:
            flashcards = self.flashcard_repository.save_all(flashcards)
            self.change_notifier.publish(
                LearningDataChanged(
                    owner_id=owner_id_vo,
                    kind=ChangeKind.FLASHCARDS,
                    lesson_id=lesson.id,
                    shared=lesson.is_public,
                )
            )

        summary = BulkImportSummary(flashcards=flashcards, failed_lines=parsed.failed_lines)
        logger.info(
            "flashcards_bulk_imported",
            lesson_id=lesson_id,
            imported=summary.imported_count,
            failed=summary.failed_count,
        )
        return summary

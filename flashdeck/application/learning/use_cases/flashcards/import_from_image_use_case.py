"""Use case for importing flashcards from a photo of a vocabulary list."""

import structlog

from flashdeck.application.learning.protocols.lesson_repository import LessonRepositoryProtocol
from flashdeck.application.learning.protocols.text_extraction_service import (
    TextExtractionServiceProtocol,
)
from flashdeck.application.learning.use_cases.dtos import BulkImportSummary
from flashdeck.application.learning.use_cases.flashcards.bulk_import_flashcards_use_case import (
    BulkImportFlashcardsUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.create_flashcard_use_case import (
    load_owned_lesson,
)
from flashdeck.domain.common.value_objects import OwnerId

logger = structlog.get_logger(__name__)


class ImportFlashcardsFromImageUseCase:
    """Use case chaining OCR text extraction into the bulk text import."""

    def __init__(
        self,
        lesson_repository: LessonRepositoryProtocol,
        text_extraction_service: TextExtractionServiceProtocol,
        bulk_import_use_case: BulkImportFlashcardsUseCase,
    ) -> None:
        self.lesson_repository = lesson_repository
        self.text_extraction_service = text_extraction_service
        self.bulk_import_use_case = bulk_import_use_case

    async def import_image(
        self,
        lesson_id: int,
        owner_id: str,
        image: bytes,
        filename: str,
        content_type: str,
    ) -> BulkImportSummary:
        """
        Extract text from an image and import the pairs it contains.

        The lesson is checked before the image is sent anywhere, so a bad
        lesson id never costs an OCR call.

        Args:
            lesson_id: ID of the lesson receiving the cards
            owner_id: Opaque owner identifier
            image: Raw image bytes
            filename: Original file name
            content_type: MIME type of the image

        Returns:
            Import summary including the extracted text

        Raises:
            LessonNotFoundError: If lesson is not found or not owned
            TextExtractionError: If the OCR collaborator fails
        """
        load_owned_lesson(self.lesson_repository, lesson_id, OwnerId(owner_id))

        text = await self.text_extraction_service.extract_text(image, filename, content_type)
        logger.info(
            "image_text_extracted",
            lesson_id=lesson_id,
            characters=len(text),
        )

        summary = self.bulk_import_use_case.import_text(lesson_id, owner_id, text)
        summary.extracted_text = text
        return summary

"""API routes for the flashcards of one lesson, including bulk imports."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status

from flashdeck.application.learning.use_cases.dtos import BulkImportSummary
from flashdeck.application.learning.use_cases.flashcards.bulk_import_flashcards_use_case import (
    BulkImportFlashcardsUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.create_flashcard_use_case import (
    CreateFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.get_flashcards_use_case import (
    GetFlashcardsUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.import_from_image_use_case import (
    ImportFlashcardsFromImageUseCase,
)
from flashdeck.config import Settings, get_settings
from flashdeck.constants import MAX_IMAGE_UPLOAD_BYTES
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError, ValidationError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.rate_limit import limiter, ocr_rate_limit
from flashdeck.infrastructure.identity.dependencies import get_current_owner
from flashdeck.infrastructure.learning.routers.flashcards import flashcard_to_schema
from flashdeck.infrastructure.learning.schemas import (
    BulkImportRequest,
    BulkImportResponse,
    FlashcardCreateRequest,
    FlashcardCreateResponse,
    FlashcardsListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lessons", tags=["flashcards"])


def _summary_to_schema(summary: BulkImportSummary) -> BulkImportResponse:
    return BulkImportResponse(
        success=summary.imported_count > 0,
        message=summary.message,
        imported_count=summary.imported_count,
        failed_count=summary.failed_count,
        failed_lines=summary.failed_lines,
        flashcards=[flashcard_to_schema(f) for f in summary.flashcards],
        extracted_text=summary.extracted_text,
    )


@router.get(
    "/{lesson_id}/flashcards",
    response_model=FlashcardsListResponse,
    status_code=status.HTTP_200_OK,
)
def get_lesson_flashcards(
    lesson_id: int,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: GetFlashcardsUseCase = Depends(inject_use_case(container.get_flashcards_use_case)),
) -> FlashcardsListResponse:
    """
    Get all flashcards of a lesson.

    Raises:
        HTTPException: If the lesson is not found or not visible to the caller
    """
    try:
        flashcards = use_case.get_flashcards_for_lesson(lesson_id, owner_id)
        return FlashcardsListResponse(flashcards=[flashcard_to_schema(f) for f in flashcards])
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get flashcards for lesson {lesson_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{lesson_id}/flashcards",
    response_model=FlashcardCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_flashcard(
    lesson_id: int,
    request: FlashcardCreateRequest,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: CreateFlashcardUseCase = Depends(
        inject_use_case(container.create_flashcard_use_case)
    ),
) -> FlashcardCreateResponse:
    """
    Create a flashcard in a lesson.

    Args:
        lesson_id: ID of the lesson
        request: Front and back of the flashcard

    Returns:
        Created flashcard
    """
    try:
        flashcard = use_case.create_flashcard(
            lesson_id=lesson_id,
            owner_id=owner_id,
            front=request.front,
            back=request.back,
        )
        return FlashcardCreateResponse(
            success=True,
            message="Flashcard created successfully",
            flashcard=flashcard_to_schema(flashcard),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create flashcard in lesson {lesson_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{lesson_id}/flashcards/import",
    response_model=BulkImportResponse,
    status_code=status.HTTP_200_OK,
)
def import_flashcards_from_text(
    lesson_id: int,
    request: BulkImportRequest,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: BulkImportFlashcardsUseCase = Depends(
        inject_use_case(container.bulk_import_flashcards_use_case)
    ),
) -> BulkImportResponse:
    """
    Bulk-create flashcards from pasted text, one ``front - back`` pair per line.

    Malformed lines are reported in ``failed_lines`` rather than failing the request.
    """
    try:
        summary = use_case.import_text(lesson_id, owner_id, request.text)
        return _summary_to_schema(summary)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to import flashcards into lesson {lesson_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{lesson_id}/flashcards/import-image",
    response_model=BulkImportResponse,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(ocr_rate_limit)  # type: ignore[misc]
async def import_flashcards_from_image(
    request: Request,
    lesson_id: int,
    owner_id: Annotated[str, Depends(get_current_owner)],
    settings: Annotated[Settings, Depends(get_settings)],
    file: Annotated[UploadFile, File(description="Photo or scan of a vocabulary list")],
    use_case: ImportFlashcardsFromImageUseCase = Depends(
        inject_use_case(container.import_flashcards_from_image_use_case)
    ),
) -> BulkImportResponse:
    """
    Extract text from an uploaded image and bulk-import the pairs it contains.

    Raises:
        HTTPException: 410 when OCR is not configured, 413 for oversized images,
            502 when the OCR service fails
    """
    if not settings.ocr_enabled:
        raise FlashdeckError("Image import is not available", status_code=status.HTTP_410_GONE)

    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        raise ValidationError("Uploaded file must be an image")

    image = await file.read()
    if len(image) > MAX_IMAGE_UPLOAD_BYTES:
        raise ValidationError(
            f"Image exceeds {MAX_IMAGE_UPLOAD_BYTES // (1024 * 1024)} MB",
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
        )

    try:
        summary = await use_case.import_image(
            lesson_id=lesson_id,
            owner_id=owner_id,
            image=image,
            filename=file.filename or "upload",
            content_type=content_type,
        )
        return _summary_to_schema(summary)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to import image into lesson {lesson_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

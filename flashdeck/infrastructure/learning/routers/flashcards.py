"""API routes for flashcard listing and deletion."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from flashdeck.application.learning.use_cases.flashcards.delete_flashcard_use_case import (
    DeleteFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.get_flashcards_use_case import (
    GetFlashcardsUseCase,
)
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.learning.entities.flashcard import Flashcard as FlashcardEntity
from flashdeck.domain.learning.value_objects import OwnerScope
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import get_current_owner
from flashdeck.infrastructure.learning.schemas import (
    Flashcard,
    FlashcardDeleteResponse,
    FlashcardsListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


def flashcard_to_schema(flashcard: FlashcardEntity) -> Flashcard:
    return Flashcard(
        id=flashcard.id.value,
        owner_id=flashcard.owner_id.value,
        lesson_id=flashcard.lesson_id.value,
        front=flashcard.front,
        back=flashcard.back,
        visibility=flashcard.visibility,
        created_at=flashcard.created_at,
    )


@router.get("", response_model=FlashcardsListResponse, status_code=status.HTTP_200_OK)
def get_flashcards(
    owner_id: Annotated[str, Depends(get_current_owner)],
    scope: Annotated[OwnerScope, Query(description="Own flashcards or shared flashcards")] = (
        OwnerScope.MINE
    ),
    use_case: GetFlashcardsUseCase = Depends(inject_use_case(container.get_flashcards_use_case)),
) -> FlashcardsListResponse:
    """List every flashcard in scope, across lessons."""
    try:
        flashcards = use_case.get_flashcards(owner_id, scope)
        return FlashcardsListResponse(flashcards=[flashcard_to_schema(f) for f in flashcards])
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list flashcards for {owner_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{flashcard_id}",
    response_model=FlashcardDeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_flashcard(
    flashcard_id: int,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: DeleteFlashcardUseCase = Depends(
        inject_use_case(container.delete_flashcard_use_case)
    ),
) -> FlashcardDeleteResponse:
    """
    Delete a flashcard.

    Args:
        flashcard_id: ID of the flashcard to delete

    Returns:
        Deletion confirmation

    Raises:
        HTTPException: If flashcard not found or deletion fails
    """
    try:
        use_case.delete_flashcard(flashcard_id=flashcard_id, owner_id=owner_id)
        return FlashcardDeleteResponse(
            success=True,
            message="Flashcard deleted successfully",
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

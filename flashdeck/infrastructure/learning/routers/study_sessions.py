"""API routes for flip-card study sessions."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.learning.use_cases.dtos import LiveStudy
from flashdeck.application.learning.use_cases.sessions.study_session_use_case import (
    StudySessionUseCase,
)
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import get_current_owner
from flashdeck.infrastructure.learning.schemas import (
    StudyCard,
    StudySessionState,
    StudyStartRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/study-sessions", tags=["study-sessions"])


def study_to_schema(study: LiveStudy) -> StudySessionState:
    cycler = study.cycler
    card = cycler.current
    return StudySessionState(
        session_id=study.session_id.value,
        index=cycler.index,
        total=len(cycler),
        wrap=cycler.wrap,
        completed_cycles=cycler.completed_cycles,
        showing_back=study.showing_back,
        visible_text=card.back if study.showing_back else card.front,
        card=StudyCard(
            flashcard_id=card.id.value,
            lesson_id=card.lesson_id.value,
            front=card.front,
            back=card.back,
        ),
        last_step=study.last_step,
    )


@router.post("", response_model=StudySessionState, status_code=status.HTTP_201_CREATED)
async def start_study(
    request: StudyStartRequest,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: StudySessionUseCase = Depends(inject_use_case(container.study_session_use_case)),
) -> StudySessionState:
    """Start a study session; the deck is shuffled once."""
    try:
        study = use_case.start_study(
            owner_id=owner_id,
            scope=request.scope,
            lesson_ids=None if request.lesson_ids == "all" else request.lesson_ids,
            wrap=request.wrap,
        )
        return study_to_schema(study)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to start study session: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{session_id}", response_model=StudySessionState, status_code=status.HTTP_200_OK)
async def get_study(
    session_id: UUID,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: StudySessionUseCase = Depends(inject_use_case(container.study_session_use_case)),
) -> StudySessionState:
    return study_to_schema(use_case.get_study(session_id, owner_id))


@router.post(
    "/{session_id}/next",
    response_model=StudySessionState,
    status_code=status.HTTP_200_OK,
)
async def next_card(
    session_id: UUID,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: StudySessionUseCase = Depends(inject_use_case(container.study_session_use_case)),
) -> StudySessionState:
    """Move forward; ``last_step`` is ``cycle_complete`` on the last card."""
    return study_to_schema(use_case.next_card(session_id, owner_id))


@router.post(
    "/{session_id}/prev",
    response_model=StudySessionState,
    status_code=status.HTTP_200_OK,
)
async def prev_card(
    session_id: UUID,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: StudySessionUseCase = Depends(inject_use_case(container.study_session_use_case)),
) -> StudySessionState:
    """Move back; ``last_step`` is ``at_first_card`` when already on the first card."""
    return study_to_schema(use_case.prev_card(session_id, owner_id))


@router.post(
    "/{session_id}/flip",
    response_model=StudySessionState,
    status_code=status.HTTP_200_OK,
)
async def flip_card(
    session_id: UUID,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: StudySessionUseCase = Depends(inject_use_case(container.study_session_use_case)),
) -> StudySessionState:
    return study_to_schema(use_case.flip_card(session_id, owner_id))

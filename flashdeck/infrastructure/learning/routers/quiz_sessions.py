"""
API routes for live quiz sessions and quiz history.

Session endpoints are async so that they share the event loop with the
question and feedback timers of the running quizzes.
"""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from flashdeck.application.learning.use_cases.dtos import LiveQuiz
from flashdeck.application.learning.use_cases.sessions.get_quiz_history_use_case import (
    GetQuizHistoryUseCase,
)
from flashdeck.application.learning.use_cases.sessions.quiz_session_use_case import (
    QuizSessionUseCase,
)
from flashdeck.application.learning.use_cases.sessions.start_quiz_use_case import (
    StartQuizUseCase,
)
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.learning.entities.quiz_session_record import (
    AnsweredQuestion,
    QuizSessionRecord,
)
from flashdeck.domain.learning.entities.session_question import SessionQuestion
from flashdeck.domain.learning.services.quiz_runner import QuizPhase
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import get_current_owner
from flashdeck.infrastructure.learning.schemas import (
    QuizAnswerRequest,
    QuizAnswerResponse,
    QuizHistoryItem,
    QuizHistoryResponse,
    QuizQuestion,
    QuizSessionState,
    QuizStartRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quiz-sessions", tags=["quiz-sessions"])


def _question_to_schema(question: SessionQuestion | AnsweredQuestion) -> QuizQuestion:
    flashcard_id = question.flashcard_id
    return QuizQuestion(
        flashcard_id=flashcard_id if isinstance(flashcard_id, int) else flashcard_id.value,
        prompt=question.prompt,
        expected_answer=question.expected_answer,
        submitted_answer=question.submitted_answer,
        is_correct=question.is_correct,
    )


def quiz_to_schema(quiz: LiveQuiz) -> QuizSessionState:
    runner = quiz.runner
    current = runner.current_question
    showing_feedback = runner.phase is QuizPhase.SHOWING_FEEDBACK
    return QuizSessionState(
        session_id=quiz.session_id.value,
        phase=runner.phase,
        index=runner.index,
        total=runner.total,
        score=runner.score,
        aborted=runner.aborted,
        direction=quiz.direction,
        time_limit_seconds=runner.time_limit,
        seconds_remaining=runner.seconds_remaining,
        prompt=current.prompt if current else None,
        feedback=_question_to_schema(current) if current and showing_feedback else None,
        questions=(
            [_question_to_schema(q) for q in runner.questions] if runner.is_finished else None
        ),
        record_id=quiz.record.id.value if quiz.record else None,
    )


def _record_to_schema(record: QuizSessionRecord) -> QuizHistoryItem:
    return QuizHistoryItem(
        id=record.id.value,
        direction=record.direction,
        lesson_ids=record.selection.to_primitive(),
        score=record.score,
        total=record.total,
        percentage=record.percentage,
        aborted=record.aborted,
        created_at=record.created_at,
        answers=[_question_to_schema(answer) for answer in record.answers],
    )


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post("", response_model=QuizSessionState, status_code=status.HTTP_201_CREATED)
async def start_quiz(
    request: QuizStartRequest,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: StartQuizUseCase = Depends(inject_use_case(container.start_quiz_use_case)),
) -> QuizSessionState:
    """
    Start a quiz over the selected lessons.

    Answers 422 when the selection holds no flashcards.
    """
    try:
        quiz = use_case.start_quiz(
            owner_id=owner_id,
            scope=request.scope,
            lesson_ids=None if request.lesson_ids == "all" else request.lesson_ids,
            question_count=request.question_count,
            direction=request.direction,
            time_limit=request.time_limit_seconds,
        )
        return quiz_to_schema(quiz)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("start quiz", e) from e


@router.get("/history", response_model=QuizHistoryResponse, status_code=status.HTTP_200_OK)
def get_quiz_history(
    owner_id: Annotated[str, Depends(get_current_owner)],
    limit: Annotated[int, Query(ge=1, le=100)] = 30,
    offset: Annotated[int, Query(ge=0)] = 0,
    use_case: GetQuizHistoryUseCase = Depends(
        inject_use_case(container.get_quiz_history_use_case)
    ),
) -> QuizHistoryResponse:
    """Get finished and abandoned quizzes, newest first."""
    try:
        records, total = use_case.get_history(owner_id, limit=limit, offset=offset)
        return QuizHistoryResponse(
            records=[_record_to_schema(record) for record in records],
            total=total,
            limit=limit,
            offset=offset,
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("load quiz history", e) from e


@router.get("/{session_id}", response_model=QuizSessionState, status_code=status.HTTP_200_OK)
async def get_quiz(
    session_id: UUID,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: QuizSessionUseCase = Depends(inject_use_case(container.quiz_session_use_case)),
) -> QuizSessionState:
    """Get the current state of a quiz, including the countdown."""
    try:
        return quiz_to_schema(use_case.get_quiz(session_id, owner_id))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get quiz {session_id}", e) from e


@router.post(
    "/{session_id}/answers",
    response_model=QuizAnswerResponse,
    status_code=status.HTTP_200_OK,
)
async def submit_answer(
    session_id: UUID,
    request: QuizAnswerRequest,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: QuizSessionUseCase = Depends(inject_use_case(container.quiz_session_use_case)),
) -> QuizAnswerResponse:
    """
    Answer the current question.

    Answers 409 while feedback for the previous answer is showing or once the
    quiz has finished.
    """
    try:
        quiz, question = use_case.submit_answer(session_id, owner_id, request.answer)
        return QuizAnswerResponse(
            is_correct=bool(question.is_correct),
            expected_answer=question.expected_answer,
            session=quiz_to_schema(quiz),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"submit answer to quiz {session_id}", e) from e


@router.post(
    "/{session_id}/skip",
    response_model=QuizSessionState,
    status_code=status.HTTP_200_OK,
)
async def skip_question(
    session_id: UUID,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: QuizSessionUseCase = Depends(inject_use_case(container.quiz_session_use_case)),
) -> QuizSessionState:
    try:
        return quiz_to_schema(use_case.skip_question(session_id, owner_id))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"skip question in quiz {session_id}", e) from e


@router.post(
    "/{session_id}/continue",
    response_model=QuizSessionState,
    status_code=status.HTTP_200_OK,
)
async def continue_quiz(
    session_id: UUID,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: QuizSessionUseCase = Depends(inject_use_case(container.quiz_session_use_case)),
) -> QuizSessionState:
    """Dismiss the feedback for the last answer without waiting."""
    try:
        return quiz_to_schema(use_case.advance_quiz(session_id, owner_id))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"continue quiz {session_id}", e) from e


@router.post(
    "/{session_id}/abandon",
    response_model=QuizSessionState,
    status_code=status.HTTP_200_OK,
)
async def abandon_quiz(
    session_id: UUID,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: QuizSessionUseCase = Depends(inject_use_case(container.quiz_session_use_case)),
) -> QuizSessionState:
    """End the quiz now; it is recorded as aborted."""
    try:
        return quiz_to_schema(use_case.abandon_quiz(session_id, owner_id))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"abandon quiz {session_id}", e) from e


@router.post(
    "/{session_id}/replay",
    response_model=QuizSessionState,
    status_code=status.HTTP_201_CREATED,
)
async def replay_quiz(
    session_id: UUID,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: StartQuizUseCase = Depends(inject_use_case(container.start_quiz_use_case)),
) -> QuizSessionState:
    """Start a new quiz with the same questions as a finished one, reshuffled."""
    try:
        return quiz_to_schema(use_case.replay_quiz(session_id, owner_id))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"replay quiz {session_id}", e) from e

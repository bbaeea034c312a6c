"""API routes for lesson management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from flashdeck.application.learning.use_cases.dtos import LessonWithCount
from flashdeck.application.learning.use_cases.lessons.create_lesson_use_case import (
    CreateLessonUseCase,
)
from flashdeck.application.learning.use_cases.lessons.delete_lesson_use_case import (
    DeleteLessonUseCase,
)
from flashdeck.application.learning.use_cases.lessons.get_lessons_use_case import (
    GetLessonsUseCase,
)
from flashdeck.application.learning.use_cases.lessons.update_lesson_use_case import (
    UpdateLessonUseCase,
)
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.learning.entities.lesson import Lesson as LessonEntity
from flashdeck.domain.learning.value_objects import OwnerScope
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import get_current_owner
from flashdeck.infrastructure.learning.schemas import (
    Lesson,
    LessonCreateRequest,
    LessonDeleteResponse,
    LessonResponse,
    LessonsListResponse,
    LessonUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lessons", tags=["lessons"])


def _to_schema(lesson: LessonEntity, flashcard_count: int | None = None) -> Lesson:
    return Lesson(
        id=lesson.id.value,
        owner_id=lesson.owner_id.value,
        name=lesson.name,
        visibility=lesson.visibility,
        created_at=lesson.created_at,
        flashcard_count=flashcard_count,
    )


def _with_count(item: LessonWithCount) -> Lesson:
    return _to_schema(item.lesson, item.flashcard_count)


@router.get("", response_model=LessonsListResponse, status_code=status.HTTP_200_OK)
def get_lessons(
    owner_id: Annotated[str, Depends(get_current_owner)],
    scope: Annotated[OwnerScope, Query(description="Own lessons or shared lessons")] = (
        OwnerScope.MINE
    ),
    use_case: GetLessonsUseCase = Depends(inject_use_case(container.get_lessons_use_case)),
) -> LessonsListResponse:
    """
    List lessons with their flashcard counts.

    Args:
        scope: ``mine`` for the caller's lessons, ``shared`` for every public lesson

    Returns:
        Lessons ordered by creation date, newest first
    """
    try:
        lessons = use_case.get_lessons(owner_id, scope)
        return LessonsListResponse(lessons=[_with_count(item) for item in lessons])
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list lessons for {owner_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=LessonResponse, status_code=status.HTTP_201_CREATED)
def create_lesson(
    request: LessonCreateRequest,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: CreateLessonUseCase = Depends(inject_use_case(container.create_lesson_use_case)),
) -> LessonResponse:
    """Create a lesson."""
    try:
        lesson = use_case.create_lesson(owner_id, request.name, request.visibility)
        return LessonResponse(
            success=True,
            message="Lesson created successfully",
            lesson=_to_schema(lesson, 0),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create lesson: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{lesson_id}", response_model=Lesson, status_code=status.HTTP_200_OK)
def get_lesson(
    lesson_id: int,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: GetLessonsUseCase = Depends(inject_use_case(container.get_lessons_use_case)),
) -> Lesson:
    """Get a lesson owned by the caller or shared publicly."""
    try:
        return _with_count(use_case.get_lesson(lesson_id, owner_id))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get lesson {lesson_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.patch("/{lesson_id}", response_model=LessonResponse, status_code=status.HTTP_200_OK)
def update_lesson(
    lesson_id: int,
    request: LessonUpdateRequest,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: UpdateLessonUseCase = Depends(inject_use_case(container.update_lesson_use_case)),
) -> LessonResponse:
    """
    Rename a lesson and/or change its visibility.

    A visibility change is applied to every flashcard of the lesson.

    Raises:
        HTTPException: If lesson not found or update fails
    """
    try:
        lesson = use_case.update_lesson(
            lesson_id=lesson_id,
            owner_id=owner_id,
            name=request.name,
            visibility=request.visibility,
        )
        return LessonResponse(
            success=True,
            message="Lesson updated successfully",
            lesson=_to_schema(lesson),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update lesson {lesson_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{lesson_id}",
    response_model=LessonDeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_lesson(
    lesson_id: int,
    owner_id: Annotated[str, Depends(get_current_owner)],
    use_case: DeleteLessonUseCase = Depends(inject_use_case(container.delete_lesson_use_case)),
) -> LessonDeleteResponse:
    """Delete a lesson together with all of its flashcards."""
    try:
        use_case.delete_lesson(lesson_id, owner_id)
        return LessonDeleteResponse(success=True, message="Lesson deleted successfully")
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete lesson {lesson_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

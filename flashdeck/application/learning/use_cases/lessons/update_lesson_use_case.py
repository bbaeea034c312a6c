"""Use case for renaming lessons and changing their visibility."""

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
from flashdeck.domain.learning.entities.lesson import Lesson
from flashdeck.domain.learning.value_objects import Visibility
from flashdeck.exceptions import LessonNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class UpdateLessonUseCase:
    """Use case for updating lessons."""

    def __init__(
        self,
        lesson_repository: LessonRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        change_notifier: ChangeNotifierProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.lesson_repository = lesson_repository
        self.flashcard_repository = flashcard_repository
        self.change_notifier = change_notifier

    def update_lesson(
        self,
        lesson_id: int,
        owner_id: str,
        name: str | None = None,
        visibility: Visibility | None = None,
    ) -> Lesson:
        """
        Rename a lesson and/or change its visibility.

        A visibility change is applied to every flashcard of the lesson in the
        same transaction as the lesson itself.

        Args:
            lesson_id: ID of the lesson to update
            owner_id: Opaque owner identifier
            name: New name (optional)
            visibility: New visibility (optional)

        Returns:
            Updated lesson domain entity

        Raises:
            LessonNotFoundError: If the lesson is not found or not owned
            ValidationError: If neither name nor visibility is provided
        """
        if name is None and visibility is None:
            raise ValidationError("At least one of name or visibility must be provided")

        owner_id_vo = OwnerId(owner_id)
        lesson = self.lesson_repository.find_by_id(LessonId(lesson_id))
        if not lesson or not lesson.is_owned_by(owner_id_vo):
            raise LessonNotFoundError(lesson_id)

        was_public = lesson.is_public
        if name is not None:
            lesson.rename(name)
        visibility_changed = visibility is not None and lesson.change_visibility(visibility)

        updated = 0
        if visibility_changed:
            # Committed together with the lesson by save() below
            updated = self.flashcard_repository.update_visibility_for_lesson(
                lesson.id, lesson.visibility, commit=False
            )
        lesson = self.lesson_repository.save(lesson)
        if visibility_changed:
            logger.info(
                "lesson_visibility_changed",
                lesson_id=lesson_id,
                visibility=lesson.visibility.value,
                flashcards_updated=updated,
            )

        self.change_notifier.publish(
            LearningDataChanged(
                owner_id=owner_id_vo,
                kind=ChangeKind.LESSONS,
                lesson_id=lesson.id,
                shared=was_public or lesson.is_public,
            )
        )
        logger.info("lesson_updated", lesson_id=lesson_id)
        return lesson

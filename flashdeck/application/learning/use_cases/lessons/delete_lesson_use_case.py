"""Use case for deleting lessons."""

import structlog

from flashdeck.application.learning.protocols.change_notifier import (
    ChangeKind,
    ChangeNotifierProtocol,
    LearningDataChanged,
)
from flashdeck.application.learning.protocols.lesson_repository import LessonRepositoryProtocol
from flashdeck.domain.common.value_objects import LessonId, OwnerId
from flashdeck.exceptions import LessonNotFoundError

logger = structlog.get_logger(__name__)


class DeleteLessonUseCase:
    """Use case for deleting lessons together with their flashcards."""

    def __init__(
        self,
        lesson_repository: LessonRepositoryProtocol,
        change_notifier: ChangeNotifierProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.lesson_repository = lesson_repository
        self.change_notifier = change_notifier

    def delete_lesson(self, lesson_id: int, owner_id: str) -> None:
        """
        Delete a lesson and cascade to its flashcards.

        Args:
            lesson_id: ID of the lesson to delete
            owner_id: Opaque owner identifier

        Raises:
            LessonNotFoundError: If the lesson is not found or not owned
        """
        lesson_id_vo = LessonId(lesson_id)
        owner_id_vo = OwnerId(owner_id)

        lesson = self.lesson_repository.find_by_id(lesson_id_vo)
        if not lesson or not lesson.is_owned_by(owner_id_vo):
            raise LessonNotFoundError(lesson_id)

        if not self.lesson_repository.delete(lesson_id_vo, owner_id_vo):
            raise LessonNotFoundError(lesson_id)

        for kind in (ChangeKind.LESSONS, ChangeKind.FLASHCARDS):
            self.change_notifier.publish(
                LearningDataChanged(
                    owner_id=owner_id_vo,
                    kind=kind,
                    lesson_id=lesson_id_vo,
                    shared=lesson.is_public,
                )
            )
        logger.info("lesson_deleted", lesson_id=lesson_id)

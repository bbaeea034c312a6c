"""Use case for creating lessons."""

import structlog

from flashdeck.application.learning.protocols.change_notifier import (
    ChangeKind,
    ChangeNotifierProtocol,
    LearningDataChanged,
)
from flashdeck.application.learning.protocols.lesson_repository import LessonRepositoryProtocol
from flashdeck.domain.common.value_objects import OwnerId
from flashdeck.domain.learning.entities.lesson import Lesson
from flashdeck.domain.learning.value_objects import Visibility

logger = structlog.get_logger(__name__)


class CreateLessonUseCase:
    """Use case for creating lessons."""

    def __init__(
        self,
        lesson_repository: LessonRepositoryProtocol,
        change_notifier: ChangeNotifierProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.lesson_repository = lesson_repository
        self.change_notifier = change_notifier

    def create_lesson(
        self,
        owner_id: str,
        name: str,
        visibility: Visibility = Visibility.PRIVATE,
    ) -> Lesson:
        """
        Create a new lesson.

        Args:
            owner_id: Opaque owner identifier
            name: Display name of the lesson
            visibility: Private, or public to share with every owner

        Returns:
            Created lesson domain entity

        Raises:
            DomainError: If the name is empty or too long
        """
        owner_id_vo = OwnerId(owner_id)

        lesson = Lesson.create(owner_id=owner_id_vo, name=name, visibility=visibility)
        lesson = self.lesson_repository.save(lesson)

        self.change_notifier.publish(
            LearningDataChanged(
                owner_id=owner_id_vo,
                kind=ChangeKind.LESSONS,
                lesson_id=lesson.id,
                shared=lesson.is_public,
            )
        )
        logger.info(
            "lesson_created",
            lesson_id=lesson.id.value,
            visibility=lesson.visibility.value,
        )
        return lesson

"""Use case for retrieving lessons."""

from flashdeck.application.learning.protocols.lesson_repository import LessonRepositoryProtocol
from flashdeck.application.learning.use_cases.dtos import LessonWithCount
from flashdeck.domain.common.value_objects import LessonId, OwnerId
from flashdeck.domain.learning.value_objects import OwnerScope
from flashdeck.exceptions import LessonNotFoundError


class GetLessonsUseCase:
    """Use case for retrieving lessons."""

    def __init__(self, lesson_repository: LessonRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.lesson_repository = lesson_repository

    def get_lessons(
        self, owner_id: str, scope: OwnerScope = OwnerScope.MINE
    ) -> list[LessonWithCount]:
        """
        List lessons in scope with their flashcard counts.

        Args:
            owner_id: Opaque owner identifier
            scope: ``mine`` or ``shared``

        Returns:
            Lessons ordered by creation date, newest first
        """
        owner_id_vo = OwnerId(owner_id)

        if scope is OwnerScope.SHARED:
            lessons = self.lesson_repository.find_shared()
        else:
            lessons = self.lesson_repository.find_for_owner(owner_id_vo)

        counts = self.lesson_repository.count_flashcards([lesson.id for lesson in lessons])
        return [
            LessonWithCount(lesson=lesson, flashcard_count=counts.get(lesson.id.value, 0))
            for lesson in lessons
        ]

    def get_lesson(self, lesson_id: int, owner_id: str) -> LessonWithCount:
        """
        Get one lesson the owner may see (their own, or any public lesson).

        Raises:
            LessonNotFoundError: If the lesson does not exist or is not visible
        """
        lesson = self.lesson_repository.find_by_id(LessonId(lesson_id))
        if not lesson or not lesson.is_visible_to(OwnerId(owner_id)):
            raise LessonNotFoundError(lesson_id)
        counts = self.lesson_repository.count_flashcards([lesson.id])
        return LessonWithCount(lesson=lesson, flashcard_count=counts.get(lesson_id, 0))

"""DTOs for lesson use cases."""

from dataclasses import dataclass

from flashdeck.domain.learning.entities.lesson import Lesson


@dataclass
class LessonWithCount:
    """Lesson together with the number of flashcards it holds."""

    lesson: Lesson
    flashcard_count: int

from flashdeck.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)
from flashdeck.infrastructure.learning.repositories.lesson_repository import LessonRepository
from flashdeck.infrastructure.learning.repositories.quiz_session_record_repository import (
    QuizSessionRecordRepository,
)

__all__ = ["FlashcardRepository", "LessonRepository", "QuizSessionRecordRepository"]

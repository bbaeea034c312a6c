from flashdeck.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from flashdeck.infrastructure.learning.mappers.lesson_mapper import LessonMapper
from flashdeck.infrastructure.learning.mappers.quiz_session_record_mapper import (
    QuizSessionRecordMapper,
)

__all__ = ["FlashcardMapper", "LessonMapper", "QuizSessionRecordMapper"]

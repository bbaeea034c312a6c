"""Common value objects shared across all domain modules."""

from .ids import FlashcardId, LessonId, LiveSessionId, OwnerId, QuizSessionRecordId

__all__ = [
    "FlashcardId",
    "LessonId",
    "LiveSessionId",
    "OwnerId",
    "QuizSessionRecordId",
]

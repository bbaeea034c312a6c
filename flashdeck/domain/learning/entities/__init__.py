from .flashcard import Flashcard
from .lesson import Lesson
from .quiz_session_record import AnsweredQuestion, QuizSessionRecord
from .session_question import SessionQuestion

__all__ = [
    "AnsweredQuestion",
    "Flashcard",
    "Lesson",
    "QuizSessionRecord",
    "SessionQuestion",
]

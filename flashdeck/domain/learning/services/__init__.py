"""Pure domain services of the learning context."""

from .flashcard_text_parser import FlashcardTextParser, ParsedFlashcardText, ParsedPair
from .quiz_runner import (
    DEFAULT_FEEDBACK_DELAY,
    QuizOutcome,
    QuizPhase,
    QuizRunner,
    QuizState,
    answers_match,
    normalize_answer,
)
from .session_builder import SessionBuilder
from .shuffling import shuffled
from .study_cycler import StudyCycler, StudyStep
from .timers import TimerHandle, TimerScheduler

__all__ = [
    "DEFAULT_FEEDBACK_DELAY",
    "FlashcardTextParser",
    "ParsedFlashcardText",
    "ParsedPair",
    "QuizOutcome",
    "QuizPhase",
    "QuizRunner",
    "QuizState",
    "SessionBuilder",
    "StudyCycler",
    "StudyStep",
    "TimerHandle",
    "TimerScheduler",
    "answers_match",
    "normalize_answer",
    "shuffled",
]

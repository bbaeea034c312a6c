"""Domain events raised by live learning sessions."""

from dataclasses import dataclass

from flashdeck.domain.common.domain_event import DomainEvent
from flashdeck.domain.common.value_objects import FlashcardId, LiveSessionId


@dataclass(frozen=True, kw_only=True)
class QuestionAnswered(DomainEvent):
    """A quiz question received an answer, a skip, or a timeout."""

    session_id: LiveSessionId
    index: int
    flashcard_id: FlashcardId
    is_correct: bool
    skipped: bool = False
    timed_out: bool = False


@dataclass(frozen=True, kw_only=True)
class QuizFinished(DomainEvent):
    """A quiz reached its terminal state."""

    session_id: LiveSessionId
    score: int
    total: int
    aborted: bool

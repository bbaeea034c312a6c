"""Records quizzes the live session registry evicts outside any request."""

from collections.abc import Callable

from sqlalchemy.orm import Session

from flashdeck.application.learning.services.quiz_history_recorder import QuizHistoryRecorder
from flashdeck.application.learning.use_cases.dtos import LiveQuiz
from flashdeck.infrastructure.learning.repositories import QuizSessionRecordRepository


class EvictedQuizRecorder:
    """
    ``on_quiz_evicted`` hook of the live session registry.

    Eviction can run on behalf of another owner's request, so the record is
    written on a session of its own that is closed right away.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self.session_factory = session_factory

    def __call__(self, quiz: LiveQuiz) -> None:
        with self.session_factory() as db:
            QuizHistoryRecorder(QuizSessionRecordRepository(db)).record_finished(quiz)

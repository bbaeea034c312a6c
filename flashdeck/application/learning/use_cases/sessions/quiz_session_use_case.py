"""Use case for driving a live quiz: answers, skips, abandonment."""

from uuid import UUID

import structlog

from flashdeck.application.learning.protocols.live_session_store import LiveSessionStoreProtocol
from flashdeck.application.learning.protocols.quiz_session_record_repository import (
    QuizSessionRecordRepositoryProtocol,
)
from flashdeck.application.learning.services.quiz_history_recorder import QuizHistoryRecorder
from flashdeck.application.learning.use_cases.dtos import LiveQuiz
from flashdeck.domain.common.value_objects import LiveSessionId, OwnerId
from flashdeck.domain.learning.entities.session_question import SessionQuestion
from flashdeck.domain.learning.events import QuestionAnswered, QuizFinished
from flashdeck.exceptions import SessionNotFoundError

logger = structlog.get_logger(__name__)


class QuizSessionUseCase:
    """
    Forwards presentation intents to a live QuizRunner.

    Every call ends by draining the runner's events. Timer callbacks fire
    between requests, so the first call that sees a finished runner is the
    one that persists its history record; a quiz nobody looks at again is
    recorded by the live session registry when it is evicted.
    """

    def __init__(
        self,
        session_store: LiveSessionStoreProtocol,
        record_repository: QuizSessionRecordRepositoryProtocol,
    ) -> None:
        self.session_store = session_store
        self.history_recorder = QuizHistoryRecorder(record_repository)

    def get_quiz(self, session_id: UUID, owner_id: str) -> LiveQuiz:
        """
        Get the current state of a quiz.

        Raises:
            SessionNotFoundError: If the session is unknown to this owner
        """
        quiz = self._load(session_id, owner_id)
        return self._sync(quiz)

    def submit_answer(
        self, session_id: UUID, owner_id: str, answer: str
    ) -> tuple[LiveQuiz, SessionQuestion]:
        """
        Submit an answer to the current question.

        Returns:
            The quiz and the answered question, graded

        Raises:
            SessionNotFoundError: If the session is unknown to this owner
            QuizFinishedError: If the quiz has already finished
            AnswerNotExpectedError: If feedback is still showing
        """
        quiz = self._sync(self._load(session_id, owner_id))
        index = quiz.runner.index
        try:
            quiz.runner.submit(answer)
        finally:
            self._sync(quiz)
        return quiz, quiz.runner.questions[index]

    def skip_question(self, session_id: UUID, owner_id: str) -> LiveQuiz:
        """Skip the current question. Same errors as ``submit_answer``."""
        quiz = self._sync(self._load(session_id, owner_id))
        try:
            quiz.runner.skip()
        finally:
            self._sync(quiz)
        return quiz

    def advance_quiz(self, session_id: UUID, owner_id: str) -> LiveQuiz:
        """Leave the feedback step without waiting for the delay."""
        quiz = self._sync(self._load(session_id, owner_id))
        quiz.runner.advance()
        return self._sync(quiz)

    def abandon_quiz(self, session_id: UUID, owner_id: str) -> LiveQuiz:
        """End the quiz as aborted. Abandoning a finished quiz changes nothing."""
        quiz = self._sync(self._load(session_id, owner_id))
        quiz.runner.abandon()
        return self._sync(quiz)

    def _load(self, session_id: UUID, owner_id: str) -> LiveQuiz:
        quiz = self.session_store.get_quiz(LiveSessionId(session_id), OwnerId(owner_id))
        if quiz is None:
            raise SessionNotFoundError(session_id)
        return quiz

    def _sync(self, quiz: LiveQuiz) -> LiveQuiz:
        session_id = str(quiz.session_id)
        for event in quiz.runner.collect_events():
            if isinstance(event, QuestionAnswered):
                logger.debug(
                    "quiz_question_answered",
                    session_id=session_id,
                    index=event.index,
                    is_correct=event.is_correct,
                    skipped=event.skipped,
                    timed_out=event.timed_out,
                )
            elif isinstance(event, QuizFinished):
                logger.info(
                    "quiz_session_finished",
                    session_id=session_id,
                    score=event.score,
                    total=event.total,
                    aborted=event.aborted,
                )

        self.history_recorder.record_finished(quiz)
        return quiz

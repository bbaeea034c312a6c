"""Application service turning a finished live quiz into a history record."""

import structlog

from flashdeck.application.learning.protocols.quiz_session_record_repository import (
    QuizSessionRecordRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.dtos import LiveQuiz
from flashdeck.domain.learning.entities.quiz_session_record import QuizSessionRecord

logger = structlog.get_logger(__name__)


class QuizHistoryRecorder:
    """Persists each finished quiz exactly once, whoever notices the finish first."""

    def __init__(self, record_repository: QuizSessionRecordRepositoryProtocol) -> None:
        self.record_repository = record_repository

    def record_finished(self, quiz: LiveQuiz) -> QuizSessionRecord | None:
        """
        Save the outcome of ``quiz`` if it finished and has no record yet.

        Returns:
            The new record, or None when there was nothing to save
        """
        if not quiz.runner.is_finished or quiz.is_recorded:
            return None
        outcome = quiz.runner.outcome
        record = QuizSessionRecord.create(
            owner_id=quiz.owner_id,
            direction=quiz.direction,
            selection=quiz.selection,
            score=outcome.score,
            aborted=outcome.aborted,
            questions=outcome.questions,
        )
        quiz.record = self.record_repository.save(record)
        logger.info(
            "quiz_session_recorded",
            session_id=str(quiz.session_id),
            record_id=quiz.record.id.value,
        )
        return quiz.record

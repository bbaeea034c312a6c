"""Use case for listing persisted quiz results."""

from flashdeck.application.learning.protocols.quiz_session_record_repository import (
    QuizSessionRecordRepositoryProtocol,
)
from flashdeck.domain.common.value_objects import OwnerId
from flashdeck.domain.learning.entities.quiz_session_record import QuizSessionRecord


class GetQuizHistoryUseCase:
    def __init__(self, record_repository: QuizSessionRecordRepositoryProtocol) -> None:
        self.record_repository = record_repository

    def get_history(
        self, owner_id: str, limit: int = 30, offset: int = 0
    ) -> tuple[list[QuizSessionRecord], int]:
        """
        Get one page of an owner's quiz history, newest first.

        Returns:
            Tuple of (records, total number of records for the owner)
        """
        owner_id_vo = OwnerId(owner_id)
        records = self.record_repository.find_for_owner(owner_id_vo, limit=limit, offset=offset)
        return records, self.record_repository.count_for_owner(owner_id_vo)

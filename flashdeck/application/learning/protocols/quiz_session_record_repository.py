"""Protocol for the quiz history repository."""

from typing import Protocol

from flashdeck.domain.common.value_objects import OwnerId
from flashdeck.domain.learning.entities.quiz_session_record import QuizSessionRecord


class QuizSessionRecordRepositoryProtocol(Protocol):
    def save(self, record: QuizSessionRecord) -> QuizSessionRecord: ...

    def find_for_owner(
        self, owner_id: OwnerId, limit: int = 30, offset: int = 0
    ) -> list[QuizSessionRecord]:
        """Newest first."""
        ...

    def count_for_owner(self, owner_id: OwnerId) -> int: ...

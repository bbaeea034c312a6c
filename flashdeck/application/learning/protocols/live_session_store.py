"""Protocol for the store that keeps live quiz and study sessions."""

from typing import Protocol

from flashdeck.application.learning.use_cases.dtos.session_dtos import LiveQuiz, LiveStudy
from flashdeck.domain.common.value_objects import LiveSessionId, OwnerId


class LiveSessionStoreProtocol(Protocol):
    """Sessions are only returned to the owner that started them."""

    def add_quiz(self, quiz: LiveQuiz) -> None: ...

    def get_quiz(self, session_id: LiveSessionId, owner_id: OwnerId) -> LiveQuiz | None: ...

    def add_study(self, study: LiveStudy) -> None: ...

    def get_study(self, session_id: LiveSessionId, owner_id: OwnerId) -> LiveStudy | None: ...

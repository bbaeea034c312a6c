"""Use case for unscored flip-card study sessions."""

import random
from uuid import UUID

import structlog

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.live_session_store import LiveSessionStoreProtocol
from flashdeck.application.learning.services.flashcard_pool_service import FlashcardPoolService
from flashdeck.application.learning.use_cases.dtos import LiveStudy
from flashdeck.application.learning.use_cases.sessions.start_quiz_use_case import (
    selection_from_ids,
)
from flashdeck.domain.common.value_objects import LiveSessionId, OwnerId
from flashdeck.domain.learning.services.session_builder import SessionBuilder
from flashdeck.domain.learning.services.study_cycler import StudyCycler, StudyStep
from flashdeck.domain.learning.value_objects import OwnerScope
from flashdeck.exceptions import SessionNotFoundError

logger = structlog.get_logger(__name__)


class StudySessionUseCase:
    """Starts study sessions and moves their cursor."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        session_store: LiveSessionStoreProtocol,
        default_wrap: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.pool_service = FlashcardPoolService(flashcard_repository)
        self.session_store = session_store
        self.default_wrap = default_wrap
        self.rng = rng
        self.session_builder = SessionBuilder(rng)

    def start_study(
        self,
        owner_id: str,
        scope: OwnerScope = OwnerScope.MINE,
        lesson_ids: list[int] | None = None,
        wrap: bool | None = None,
    ) -> LiveStudy:
        """
        Start a study session over the selected lessons.

        Raises:
            NoEligibleCardsError: If the selection matches no card
        """
        owner_id_vo = OwnerId(owner_id)
        pool = self.pool_service.load(owner_id_vo, scope)
        cards = self.session_builder.eligible(pool, selection_from_ids(lesson_ids))

        cycler = StudyCycler(
            cards, wrap=self.default_wrap if wrap is None else wrap, rng=self.rng
        )
        study = LiveStudy(
            session_id=LiveSessionId.generate(),
            owner_id=owner_id_vo,
            cycler=cycler,
        )
        self.session_store.add_study(study)

        logger.info(
            "study_session_started",
            session_id=str(study.session_id),
            owner_id=owner_id,
            cards=len(cycler),
            wrap=cycler.wrap,
        )
        return study

    def get_study(self, session_id: UUID, owner_id: str) -> LiveStudy:
        """
        Raises:
            SessionNotFoundError: If the session is unknown to this owner
        """
        study = self.session_store.get_study(LiveSessionId(session_id), OwnerId(owner_id))
        if study is None:
            raise SessionNotFoundError(session_id)
        return study

    def next_card(self, session_id: UUID, owner_id: str) -> LiveStudy:
        study = self.get_study(session_id, owner_id)
        return self._moved(study, study.cycler.index, study.cycler.next())

    def prev_card(self, session_id: UUID, owner_id: str) -> LiveStudy:
        study = self.get_study(session_id, owner_id)
        return self._moved(study, study.cycler.index, study.cycler.prev())

    def flip_card(self, session_id: UUID, owner_id: str) -> LiveStudy:
        study = self.get_study(session_id, owner_id)
        study.showing_back = not study.showing_back
        return study

    def _moved(self, study: LiveStudy, previous_index: int, step: StudyStep) -> LiveStudy:
        study.last_step = step
        if study.cycler.index != previous_index:
            study.showing_back = False
        if step is StudyStep.CYCLE_COMPLETE:
            logger.info(
                "study_cycle_completed",
                session_id=str(study.session_id),
                completed_cycles=study.cycler.completed_cycles,
            )
        return study

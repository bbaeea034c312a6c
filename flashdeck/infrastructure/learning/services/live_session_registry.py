"""In-process store for live quiz and study sessions."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

import structlog

from flashdeck.application.learning.use_cases.dtos import LiveQuiz, LiveStudy
from flashdeck.domain.common.value_objects import LiveSessionId, OwnerId

logger = structlog.get_logger(__name__)


SessionT = TypeVar("SessionT", LiveQuiz, LiveStudy)


@dataclass
class _Entry(Generic[SessionT]):
    session: SessionT
    touched_at: float


class LiveSessionRegistry:
    """
    Keeps live sessions keyed by session id.

    Lookups are owner-scoped: another owner's session looks exactly like a
    missing one. Sessions untouched for ``ttl_seconds`` are evicted lazily on
    every access. Evicting a running quiz abandons it so its timer is
    cancelled; a quiz that finished between requests and was never recorded
    is handed to ``on_quiz_evicted`` first.
    """

    def __init__(
        self,
        ttl_seconds: float = 3600,
        clock: Callable[[], float] = time.monotonic,
        on_quiz_evicted: Callable[[LiveQuiz], object] | None = None,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._on_quiz_evicted = on_quiz_evicted
        self._quizzes: dict[LiveSessionId, _Entry[LiveQuiz]] = {}
        self._studies: dict[LiveSessionId, _Entry[LiveStudy]] = {}

    def __len__(self) -> int:
        return len(self._quizzes) + len(self._studies)

    def add_quiz(self, quiz: LiveQuiz) -> None:
        self._evict_expired()
        self._quizzes[quiz.session_id] = _Entry(quiz, self._clock())

    def get_quiz(self, session_id: LiveSessionId, owner_id: OwnerId) -> LiveQuiz | None:
        return self._get(self._quizzes, session_id, owner_id)

    def add_study(self, study: LiveStudy) -> None:
        self._evict_expired()
        self._studies[study.session_id] = _Entry(study, self._clock())

    def get_study(self, session_id: LiveSessionId, owner_id: OwnerId) -> LiveStudy | None:
        return self._get(self._studies, session_id, owner_id)

    def _get(
        self,
        entries: dict[LiveSessionId, _Entry[SessionT]],
        session_id: LiveSessionId,
        owner_id: OwnerId,
    ) -> SessionT | None:
        self._evict_expired()
        entry = entries.get(session_id)
        if entry is None or entry.session.owner_id != owner_id:
            return None
        entry.touched_at = self._clock()
        return entry.session

    def _evict_expired(self) -> None:
        cutoff = self._clock() - self.ttl_seconds
        for key in [key for key, entry in self._quizzes.items() if entry.touched_at < cutoff]:
            quiz = self._quizzes.pop(key).session
            if quiz.runner.is_finished:
                self._hand_off(quiz)
            else:
                quiz.runner.abandon()
            quiz.runner.collect_events()
            logger.info("live_session_evicted", session_id=str(key), kind="quiz")
        for key in [key for key, entry in self._studies.items() if entry.touched_at < cutoff]:
            del self._studies[key]
            logger.info("live_session_evicted", session_id=str(key), kind="study")

    def _hand_off(self, quiz: LiveQuiz) -> None:
        if self._on_quiz_evicted is None or quiz.is_recorded:
            return
        try:
            self._on_quiz_evicted(quiz)
        except Exception:
            logger.exception("evicted_quiz_not_recorded", session_id=str(quiz.session_id))

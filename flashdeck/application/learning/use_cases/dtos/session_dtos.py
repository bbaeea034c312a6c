"""DTOs for live quiz and study sessions."""

from dataclasses import dataclass, field

from flashdeck.domain.common.value_objects import LiveSessionId, OwnerId
from flashdeck.domain.learning.entities.quiz_session_record import QuizSessionRecord
from flashdeck.domain.learning.services.quiz_runner import QuizRunner
from flashdeck.domain.learning.services.study_cycler import StudyCycler, StudyStep
from flashdeck.domain.learning.value_objects import LessonSelection, QuizDirection


@dataclass
class LiveQuiz:
    """A running (or finished, not yet evicted) quiz and its context."""

    runner: QuizRunner
    owner_id: OwnerId
    direction: QuizDirection
    selection: LessonSelection
    record: QuizSessionRecord | None = None

    @property
    def session_id(self) -> LiveSessionId:
        return self.runner.id

    @property
    def is_recorded(self) -> bool:
        return self.record is not None


@dataclass
class LiveStudy:
    """
    A flip-card study session.

    ``showing_back`` is the presentation flip state; it resets to the front
    whenever the cursor moves.
    """

    session_id: LiveSessionId
    owner_id: OwnerId
    cycler: StudyCycler
    showing_back: bool = False
    last_step: StudyStep | None = field(default=None)

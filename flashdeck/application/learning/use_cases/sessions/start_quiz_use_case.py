"""Use case for starting and replaying live quizzes."""

from uuid import UUID

import structlog

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.live_session_store import LiveSessionStoreProtocol
from flashdeck.application.learning.services.flashcard_pool_service import FlashcardPoolService
from flashdeck.application.learning.use_cases.dtos import LiveQuiz
from flashdeck.domain.common.exceptions import BusinessRuleViolationError
from flashdeck.domain.common.value_objects import LessonId, LiveSessionId, OwnerId
from flashdeck.domain.learning.entities.session_question import SessionQuestion
from flashdeck.domain.learning.services.quiz_runner import DEFAULT_FEEDBACK_DELAY, QuizRunner
from flashdeck.domain.learning.services.session_builder import SessionBuilder
from flashdeck.domain.learning.services.timers import TimerScheduler
from flashdeck.domain.learning.value_objects import LessonSelection, OwnerScope, QuizDirection
from flashdeck.exceptions import SessionNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


def selection_from_ids(lesson_ids: list[int] | None) -> LessonSelection:
    """``None`` selects every lesson; a list (even empty) selects exactly those."""
    if lesson_ids is None:
        return LessonSelection.all_lessons()
    return LessonSelection.of(LessonId(lesson_id) for lesson_id in lesson_ids)


class StartQuizUseCase:
    """Builds question sets and launches quiz runners into the session store."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        session_store: LiveSessionStoreProtocol,
        scheduler: TimerScheduler | None = None,
        feedback_delay: float = DEFAULT_FEEDBACK_DELAY,
        default_question_count: int = 10,
        max_time_limit: float = 600,
        session_builder: SessionBuilder | None = None,
    ) -> None:
        self.pool_service = FlashcardPoolService(flashcard_repository)
        self.session_store = session_store
        self.scheduler = scheduler
        self.feedback_delay = feedback_delay
        self.default_question_count = default_question_count
        self.max_time_limit = max_time_limit
        self.session_builder = session_builder or SessionBuilder()

    def start_quiz(
        self,
        owner_id: str,
        scope: OwnerScope = OwnerScope.MINE,
        lesson_ids: list[int] | None = None,
        question_count: int | None = None,
        direction: QuizDirection = QuizDirection.FRONT_TO_BACK,
        time_limit: float | None = None,
    ) -> LiveQuiz:
        """
        Start a new quiz.

        Args:
            owner_id: Opaque owner identifier
            scope: Draw from the owner's cards or from all public cards
            lesson_ids: Lessons to draw from, or None for every lesson
            question_count: Desired number of questions (defaults from settings)
            direction: Which face is the prompt
            time_limit: Seconds per question, None or 0 for untimed

        Returns:
            The live quiz, already awaiting the first answer

        Raises:
            ValidationError: If the time limit is out of range
            NoEligibleCardsError: If the selection matches no card
            InsufficientCardsError: If the session would be empty
        """
        if time_limit is not None and not 0 <= time_limit <= self.max_time_limit:
            raise ValidationError(
                f"Time limit must be between 0 and {self.max_time_limit} seconds"
            )

        owner_id_vo = OwnerId(owner_id)
        selection = selection_from_ids(lesson_ids)
        pool = self.pool_service.load(owner_id_vo, scope)
        count = self.default_question_count if question_count is None else question_count

        questions = self.session_builder.build(pool, selection, count, direction)
        quiz = self._launch(owner_id_vo, direction, selection, questions, time_limit)

        logger.info(
            "quiz_session_started",
            session_id=str(quiz.session_id),
            owner_id=owner_id,
            scope=scope.value,
            lesson_ids=selection.to_primitive(),
            total=quiz.runner.total,
            time_limit=quiz.runner.time_limit,
        )
        return quiz

    def replay_quiz(self, session_id: UUID, owner_id: str) -> LiveQuiz:
        """
        Replay a finished quiz with the same questions in a new random order.

        Raises:
            SessionNotFoundError: If the session is unknown to this owner
            BusinessRuleViolationError: If the quiz is still running
        """
        owner_id_vo = OwnerId(owner_id)
        previous = self.session_store.get_quiz(LiveSessionId(session_id), owner_id_vo)
        if previous is None:
            raise SessionNotFoundError(session_id)
        if not previous.runner.is_finished:
            raise BusinessRuleViolationError(
                "quiz_not_finished", "Finish or abandon the quiz before replaying it."
            )

        questions = self.session_builder.rebuild(previous.runner.questions)
        quiz = self._launch(
            owner_id_vo,
            previous.direction,
            previous.selection,
            questions,
            previous.runner.time_limit,
        )
        logger.info(
            "quiz_session_replayed",
            session_id=str(quiz.session_id),
            replay_of=str(session_id),
            total=quiz.runner.total,
        )
        return quiz

    def _launch(
        self,
        owner_id: OwnerId,
        direction: QuizDirection,
        selection: LessonSelection,
        questions: list[SessionQuestion],
        time_limit: float | None,
    ) -> LiveQuiz:
        runner = QuizRunner(
            id=LiveSessionId.generate(),
            questions=questions,
            time_limit=time_limit or None,
            scheduler=self.scheduler,
            feedback_delay=self.feedback_delay,
        )
        quiz = LiveQuiz(
            runner=runner,
            owner_id=owner_id,
            direction=direction,
            selection=selection,
        )
        self.session_store.add_quiz(quiz)
        return quiz

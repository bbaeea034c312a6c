"""
QuizRunner aggregate: drives one scored, optionally timed quiz.

States:
    AWAITING_ANSWER(index) -> SHOWING_FEEDBACK(index) -> AWAITING_ANSWER(index + 1)
                                                      -> FINISHED(aborted=False)
    any non-finished state -> FINISHED(aborted=True) on abandon()

At most one timer is pending at any time: the question countdown while
awaiting an answer, or the feedback delay while showing feedback. Every
transition cancels it before scheduling the next one.
"""

from dataclasses import dataclass, field
from enum import StrEnum

from flashdeck.domain.common.aggregate_root import AggregateRoot
from flashdeck.domain.common.exceptions import BusinessRuleViolationError, ValidationError
from flashdeck.domain.common.value_objects import LiveSessionId
from flashdeck.domain.learning.entities.session_question import SessionQuestion
from flashdeck.domain.learning.events import QuestionAnswered, QuizFinished
from flashdeck.domain.learning.exceptions import (
    AnswerNotExpectedError,
    InsufficientCardsError,
    QuizFinishedError,
)
from flashdeck.domain.learning.services.timers import TimerHandle, TimerScheduler

DEFAULT_FEEDBACK_DELAY = 1.2


def normalize_answer(text: str) -> str:
    """Trim surrounding whitespace and case-fold. Punctuation is kept."""
    return text.strip().casefold()


def answers_match(submitted: str, expected: str) -> bool:
    return normalize_answer(submitted) == normalize_answer(expected)


class QuizPhase(StrEnum):
    AWAITING_ANSWER = "awaiting_answer"
    SHOWING_FEEDBACK = "showing_feedback"
    FINISHED = "finished"


@dataclass(frozen=True)
class QuizState:
    phase: QuizPhase
    index: int
    aborted: bool = False


@dataclass(frozen=True)
class QuizOutcome:
    """Final result of a finished quiz."""

    score: int
    total: int
    aborted: bool
    questions: list[SessionQuestion]


@dataclass(eq=False)
class QuizRunner(AggregateRoot[LiveSessionId]):
    """
    Scored quiz over a fixed question list.

    Without a scheduler the feedback step is skipped and the runner advances
    synchronously, which is how tests and other non-interactive callers
    drive it. A time limit requires a scheduler.
    """

    id: LiveSessionId
    questions: list[SessionQuestion]
    time_limit: float | None = None
    scheduler: TimerScheduler | None = field(default=None, repr=False)
    feedback_delay: float = DEFAULT_FEEDBACK_DELAY
    score: int = field(default=0, init=False)
    _phase: QuizPhase = field(default=QuizPhase.AWAITING_ANSWER, init=False, repr=False)
    _index: int = field(default=0, init=False, repr=False)
    _aborted: bool = field(default=False, init=False, repr=False)
    _timer: TimerHandle | None = field(default=None, init=False, repr=False)
    _deadline: float | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.questions:
            raise InsufficientCardsError()
        if self.time_limit is not None and self.time_limit < 0:
            raise ValidationError(
                "Time limit cannot be negative", field="time_limit", value=self.time_limit
            )
        if self.feedback_delay < 0:
            raise ValidationError(
                "Feedback delay cannot be negative",
                field="feedback_delay",
                value=self.feedback_delay,
            )
        if self.time_limit == 0:
            self.time_limit = None
        if self.time_limit is not None and self.scheduler is None:
            raise ValidationError("A timed quiz needs a scheduler", field="time_limit")
        self._enter_question(0)

    # --- State ---

    @property
    def state(self) -> QuizState:
        return QuizState(phase=self._phase, index=self._index, aborted=self._aborted)

    @property
    def phase(self) -> QuizPhase:
        return self._phase

    @property
    def index(self) -> int:
        return self._index

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def is_finished(self) -> bool:
        return self._phase is QuizPhase.FINISHED

    @property
    def aborted(self) -> bool:
        return self._aborted

    @property
    def current_question(self) -> SessionQuestion | None:
        """The question being asked or whose feedback is shown."""
        if self.is_finished:
            return None
        return self.questions[self._index]

    @property
    def seconds_remaining(self) -> float | None:
        """Countdown for the current question, or None when untimed or not awaiting."""
        if self._deadline is None or self.scheduler is None:
            return None
        return max(0.0, self._deadline - self.scheduler.now())

    @property
    def outcome(self) -> QuizOutcome:
        """
        Final score and per-question record.

        Raises:
            BusinessRuleViolationError: If the quiz is still running
        """
        if not self.is_finished:
            raise BusinessRuleViolationError("quiz_not_finished", "The quiz is still running.")
        return QuizOutcome(
            score=self.score,
            total=self.total,
            aborted=self._aborted,
            questions=list(self.questions),
        )

    # --- Intents ---

    def submit(self, raw_answer: str) -> bool:
        """
        Answer the current question.

        Returns:
            Whether the answer was correct

        Raises:
            QuizFinishedError: If the quiz has finished
            AnswerNotExpectedError: If feedback for the current question is showing
        """
        question = self._require_awaiting()
        is_correct = answers_match(raw_answer, question.expected_answer)
        self._record(question, raw_answer, is_correct)
        self._show_feedback()
        return is_correct

    def skip(self) -> None:
        """Give up on the current question. Never scores."""
        question = self._require_awaiting()
        self._record(question, "", False, skipped=True)
        self._show_feedback()

    def abandon(self) -> None:
        """
        End the quiz immediately, e.g. when the player leaves the page.

        The current question is not scored. A no-op once finished.
        """
        if self.is_finished:
            return
        self._finish(aborted=True)

    def advance(self) -> None:
        """Leave the feedback step early. Ignored in any other phase."""
        if self._phase is QuizPhase.SHOWING_FEEDBACK:
            self._advance()

    # --- Transitions ---

    def _require_awaiting(self) -> SessionQuestion:
        if self._phase is QuizPhase.FINISHED:
            raise QuizFinishedError()
        if self._phase is QuizPhase.SHOWING_FEEDBACK:
            raise AnswerNotExpectedError(self._index)
        return self.questions[self._index]

    def _record(
        self,
        question: SessionQuestion,
        submitted: str,
        is_correct: bool,
        *,
        skipped: bool = False,
        timed_out: bool = False,
    ) -> None:
        question.submitted_answer = submitted
        question.is_correct = is_correct
        if is_correct:
            self.score += 1
        self._record_event(
            QuestionAnswered(
                session_id=self.id,
                index=self._index,
                flashcard_id=question.flashcard_id,
                is_correct=is_correct,
                skipped=skipped,
                timed_out=timed_out,
            )
        )

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._deadline = None

    def _enter_question(self, index: int) -> None:
        self._cancel_timer()
        self._phase = QuizPhase.AWAITING_ANSWER
        self._index = index
        if self.time_limit is not None and self.scheduler is not None:
            self._deadline = self.scheduler.now() + self.time_limit
            self._timer = self.scheduler.call_later(
                self.time_limit, lambda: self._on_time_expired(index)
            )

    def _on_time_expired(self, index: int) -> None:
        if self._phase is not QuizPhase.AWAITING_ANSWER or self._index != index:
            return
        self._timer = None
        self._record(self.questions[index], "", False, timed_out=True)
        self._show_feedback()

    def _show_feedback(self) -> None:
        self._cancel_timer()
        self._phase = QuizPhase.SHOWING_FEEDBACK
        if self.scheduler is None or self.feedback_delay == 0:
            self._advance()
            return
        index = self._index
        self._timer = self.scheduler.call_later(
            self.feedback_delay, lambda: self._on_feedback_elapsed(index)
        )

    def _on_feedback_elapsed(self, index: int) -> None:
        if self._phase is not QuizPhase.SHOWING_FEEDBACK or self._index != index:
            return
        self._timer = None
        self._advance()

    def _advance(self) -> None:
        next_index = self._index + 1
        if next_index < self.total:
            self._enter_question(next_index)
        else:
            self._finish(aborted=False)

    def _finish(self, aborted: bool) -> None:
        self._cancel_timer()
        self._phase = QuizPhase.FINISHED
        self._aborted = aborted
        self._record_event(
            QuizFinished(
                session_id=self.id,
                score=self.score,
                total=self.total,
                aborted=aborted,
            )
        )

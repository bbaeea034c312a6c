"""Tests for the QuizRunner aggregate."""

import random
from typing import TYPE_CHECKING

import pytest

from flashdeck.domain.common.exceptions import BusinessRuleViolationError, ValidationError
from flashdeck.domain.common.value_objects import FlashcardId, LessonId, LiveSessionId
from flashdeck.domain.learning.entities.session_question import SessionQuestion
from flashdeck.domain.learning.events import QuestionAnswered, QuizFinished
from flashdeck.domain.learning.exceptions import (
    AnswerNotExpectedError,
    InsufficientCardsError,
    QuizFinishedError,
)
from flashdeck.domain.learning.services.quiz_runner import (
    QuizPhase,
    QuizRunner,
    answers_match,
    normalize_answer,
)

if TYPE_CHECKING:
    from conftest import FakeScheduler


def _questions(*expected: str) -> list[SessionQuestion]:
    return [
        SessionQuestion(
            flashcard_id=FlashcardId(i + 1),
            lesson_id=LessonId(1),
            prompt=f"prompt {i + 1}",
            expected_answer=answer,
        )
        for i, answer in enumerate(expected)
    ]


def _runner(*expected: str, **kwargs: object) -> QuizRunner:
    return QuizRunner(LiveSessionId.generate(), _questions(*expected), **kwargs)  # type: ignore[arg-type]


class TestAnswerNormalization:
    def test_trims_and_casefolds(self) -> None:
        assert normalize_answer("  Hello\t") == "hello"
        assert normalize_answer("STRASSE") == normalize_answer("strasse")

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert answers_match(" Hello ", "hello")

    def test_punctuation_is_significant(self) -> None:
        assert not answers_match("Hello!", "hello")

    def test_inner_whitespace_is_significant(self) -> None:
        assert not answers_match("ice  cream", "ice cream")


class TestQuizRunnerScoring:
    def test_cat_dog_bird(self) -> None:
        runner = _runner("cat", "dog", "bird")

        results = [runner.submit(answer) for answer in ["CAT", "dog ", "fish"]]

        assert results == [True, True, False]
        assert runner.is_finished
        assert runner.score == 2
        assert runner.aborted is False
        assert [q.is_correct for q in runner.questions] == [True, True, False]
        assert [q.submitted_answer for q in runner.questions] == ["CAT", "dog ", "fish"]

    def test_skip_never_scores(self) -> None:
        runner = _runner("cat", "dog")

        runner.skip()

        assert runner.score == 0
        assert runner.questions[0].is_correct is False
        assert runner.questions[0].submitted_answer == ""
        assert runner.index == 1

    def test_score_counts_correct_submits_only(self) -> None:
        rng = random.Random(1234)
        for _ in range(50):
            total = rng.randint(1, 8)
            runner = _runner(*[f"word{i}" for i in range(total)])
            expected_score = 0
            for i in range(total):
                action = rng.choice(["right", "wrong", "skip"])
                if action == "right":
                    runner.submit(f"  WORD{i} ")
                    expected_score += 1
                elif action == "wrong":
                    runner.submit(f"word{i}.")
                else:
                    runner.skip()
                assert runner.score <= runner.total
            assert runner.is_finished
            assert runner.score == expected_score

    def test_outcome_of_finished_quiz(self) -> None:
        runner = _runner("cat", "dog")
        runner.submit("cat")
        runner.submit("cow")

        outcome = runner.outcome

        assert outcome.score == 1
        assert outcome.total == 2
        assert outcome.aborted is False
        assert [q.is_correct for q in outcome.questions] == [True, False]

    def test_outcome_of_running_quiz_is_rejected(self) -> None:
        runner = _runner("cat")
        with pytest.raises(BusinessRuleViolationError):
            _ = runner.outcome

    def test_events(self) -> None:
        runner = _runner("cat", "dog")
        runner.submit("cat")
        runner.skip()

        events = runner.collect_events()

        answered = [e for e in events if isinstance(e, QuestionAnswered)]
        finished = [e for e in events if isinstance(e, QuizFinished)]
        assert [(e.index, e.is_correct, e.skipped) for e in answered] == [
            (0, True, False),
            (1, False, True),
        ]
        assert len(finished) == 1
        assert finished[0].score == 1
        assert runner.collect_events() == []


class TestQuizRunnerValidation:
    def test_empty_question_list_is_rejected(self) -> None:
        with pytest.raises(InsufficientCardsError):
            QuizRunner(LiveSessionId.generate(), [])

    def test_negative_time_limit_is_rejected(self, fake_scheduler: "FakeScheduler") -> None:
        with pytest.raises(ValidationError):
            _runner("cat", time_limit=-1, scheduler=fake_scheduler)

    def test_time_limit_needs_scheduler(self) -> None:
        with pytest.raises(ValidationError):
            _runner("cat", time_limit=10)

    def test_zero_time_limit_is_untimed(self, fake_scheduler: "FakeScheduler") -> None:
        runner = _runner("cat", time_limit=0, scheduler=fake_scheduler)
        assert runner.time_limit is None
        assert runner.seconds_remaining is None
        assert fake_scheduler.pending == []


class TestQuizRunnerFeedback:
    def test_submit_shows_feedback_until_delay_elapses(
        self, fake_scheduler: "FakeScheduler"
    ) -> None:
        runner = _runner("cat", "dog", scheduler=fake_scheduler, feedback_delay=1.0)

        runner.submit("cat")
        assert runner.phase is QuizPhase.SHOWING_FEEDBACK
        assert runner.index == 0

        fake_scheduler.advance(0.5)
        assert runner.phase is QuizPhase.SHOWING_FEEDBACK

        fake_scheduler.advance(0.5)
        assert runner.phase is QuizPhase.AWAITING_ANSWER
        assert runner.index == 1

    def test_answer_during_feedback_is_rejected(self, fake_scheduler: "FakeScheduler") -> None:
        runner = _runner("cat", "dog", scheduler=fake_scheduler)
        runner.submit("cat")

        with pytest.raises(AnswerNotExpectedError):
            runner.submit("dog")
        with pytest.raises(AnswerNotExpectedError):
            runner.skip()
        assert runner.score == 1

    def test_advance_leaves_feedback_early(self, fake_scheduler: "FakeScheduler") -> None:
        runner = _runner("cat", "dog", scheduler=fake_scheduler)
        runner.submit("cat")

        runner.advance()

        assert runner.phase is QuizPhase.AWAITING_ANSWER
        assert runner.index == 1
        assert fake_scheduler.pending == []

    def test_advance_while_awaiting_is_ignored(self) -> None:
        runner = _runner("cat", "dog")
        runner.advance()
        assert runner.index == 0
        assert runner.phase is QuizPhase.AWAITING_ANSWER

    def test_feedback_on_last_question_then_finishes(
        self, fake_scheduler: "FakeScheduler"
    ) -> None:
        runner = _runner("cat", scheduler=fake_scheduler, feedback_delay=1.2)
        runner.submit("cat")
        assert not runner.is_finished

        fake_scheduler.advance(1.2)

        assert runner.is_finished
        assert runner.aborted is False


class TestQuizRunnerTimer:
    def test_countdown(self, fake_scheduler: "FakeScheduler") -> None:
        runner = _runner("cat", "dog", time_limit=10, scheduler=fake_scheduler)
        fake_scheduler.advance(4)
        assert runner.seconds_remaining == pytest.approx(6.0)

    def test_expiry_behaves_like_skip(self, fake_scheduler: "FakeScheduler") -> None:
        timed = _runner("cat", "dog", time_limit=10, scheduler=fake_scheduler, feedback_delay=1)
        skipped = _runner("cat", "dog")

        fake_scheduler.advance(10)
        skipped.skip()

        assert timed.phase is QuizPhase.SHOWING_FEEDBACK
        assert timed.score == skipped.score == 0
        assert timed.questions[0].is_correct is skipped.questions[0].is_correct is False
        events = [e for e in timed.collect_events() if isinstance(e, QuestionAnswered)]
        assert events[0].timed_out is True

        fake_scheduler.advance(1)
        assert timed.index == skipped.index == 1
        assert timed.phase is skipped.phase is QuizPhase.AWAITING_ANSWER

    def test_each_question_gets_a_fresh_countdown(self, fake_scheduler: "FakeScheduler") -> None:
        runner = _runner("cat", "dog", time_limit=10, scheduler=fake_scheduler, feedback_delay=1)
        fake_scheduler.advance(7)
        runner.submit("cat")
        fake_scheduler.advance(1)

        assert runner.index == 1
        assert runner.seconds_remaining == pytest.approx(10.0)

    def test_answer_cancels_question_timer(self, fake_scheduler: "FakeScheduler") -> None:
        runner = _runner("cat", "dog", time_limit=10, scheduler=fake_scheduler, feedback_delay=1)
        runner.submit("cat")

        assert len(fake_scheduler.pending) == 1
        assert runner.seconds_remaining is None

    def test_unanswered_quiz_times_out_to_the_end(self, fake_scheduler: "FakeScheduler") -> None:
        runner = _runner("cat", "dog", "bird", time_limit=5, scheduler=fake_scheduler)

        fake_scheduler.advance(1000)

        assert runner.is_finished
        assert runner.aborted is False
        assert runner.score == 0
        assert [q.is_correct for q in runner.questions] == [False, False, False]
        assert fake_scheduler.pending == []

    def test_stale_expiry_is_ignored(self, fake_scheduler: "FakeScheduler") -> None:
        runner = _runner("cat", "dog", time_limit=10, scheduler=fake_scheduler, feedback_delay=1)
        runner.submit("cat")
        runner.advance()

        # A callback for question 0 arriving late must not touch question 1
        runner._on_time_expired(0)

        assert runner.phase is QuizPhase.AWAITING_ANSWER
        assert runner.index == 1
        assert runner.questions[1].is_correct is None


class TestQuizRunnerAbandon:
    def test_abandon_mid_question(self, fake_scheduler: "FakeScheduler") -> None:
        runner = _runner("cat", "dog", "bird", time_limit=10, scheduler=fake_scheduler)
        runner.submit("cat")
        runner.advance()

        runner.abandon()

        assert runner.is_finished
        assert runner.aborted is True
        assert runner.score == 1
        assert runner.questions[1].is_correct is None
        assert fake_scheduler.pending == []

    def test_abandon_during_feedback(self, fake_scheduler: "FakeScheduler") -> None:
        runner = _runner("cat", "dog", scheduler=fake_scheduler)
        runner.submit("cat")

        runner.abandon()

        assert runner.is_finished
        assert runner.aborted is True

    def test_intents_after_finish_are_rejected(self) -> None:
        runner = _runner("cat", "dog")
        runner.abandon()

        with pytest.raises(QuizFinishedError):
            runner.submit("dog")
        with pytest.raises(QuizFinishedError):
            runner.skip()
        assert runner.score == 0

    def test_abandon_after_finish_is_noop(self) -> None:
        runner = _runner("cat")
        runner.submit("cat")
        runner.collect_events()

        runner.abandon()

        assert runner.aborted is False
        assert runner.collect_events() == []

"""Tests for SessionBuilder domain service."""

import random
from datetime import UTC, datetime

import pytest

from flashdeck.domain.common.value_objects import FlashcardId, LessonId, OwnerId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.exceptions import InsufficientCardsError, NoEligibleCardsError
from flashdeck.domain.learning.services.session_builder import SessionBuilder
from flashdeck.domain.learning.value_objects import LessonSelection, QuizDirection, Visibility

LESSON_A = LessonId(1)
LESSON_B = LessonId(2)


def _make_card(id: int, lesson_id: LessonId) -> Flashcard:
    return Flashcard.create_with_id(
        id=FlashcardId(id),
        owner_id=OwnerId("local"),
        lesson_id=lesson_id,
        front=f"front {id}",
        back=f"back {id}",
        visibility=Visibility.PRIVATE,
        created_at=datetime.now(UTC),
    )


@pytest.fixture
def pool() -> list[Flashcard]:
    """Twelve cards, six in each of two lessons."""
    return [_make_card(i, LESSON_A) for i in range(1, 7)] + [
        _make_card(i, LESSON_B) for i in range(7, 13)
    ]


class TestBuild:
    def test_capped_by_selected_lesson(self, pool: list[Flashcard]) -> None:
        builder = SessionBuilder(random.Random(3))

        questions = builder.build(pool, LessonSelection.of([LESSON_A]), 10)

        assert len(questions) == 6
        assert all(q.lesson_id == LESSON_A for q in questions)
        assert {q.flashcard_id.value for q in questions} == {1, 2, 3, 4, 5, 6}

    def test_size_is_min_of_requested_and_eligible(self, pool: list[Flashcard]) -> None:
        builder = SessionBuilder(random.Random(5))
        for requested in range(1, 16):
            questions = builder.build(pool, LessonSelection.all_lessons(), requested)
            ids = [q.flashcard_id for q in questions]
            assert len(questions) == min(requested, 12)
            assert len(set(ids)) == len(ids)

    def test_all_lessons_draws_from_every_lesson(self, pool: list[Flashcard]) -> None:
        questions = SessionBuilder().build(pool, LessonSelection.all_lessons(), 12)
        assert {q.lesson_id for q in questions} == {LESSON_A, LESSON_B}

    def test_explicit_empty_selection_has_no_eligible_cards(self, pool: list[Flashcard]) -> None:
        with pytest.raises(NoEligibleCardsError):
            SessionBuilder().build(pool, LessonSelection.of([]), 10)

    def test_unknown_lesson_has_no_eligible_cards(self, pool: list[Flashcard]) -> None:
        with pytest.raises(NoEligibleCardsError):
            SessionBuilder().build(pool, LessonSelection.of([LessonId(99)]), 10)

    def test_empty_pool_has_no_eligible_cards(self) -> None:
        with pytest.raises(NoEligibleCardsError):
            SessionBuilder().build([], LessonSelection.all_lessons(), 10)

    def test_zero_requested_is_insufficient(self, pool: list[Flashcard]) -> None:
        with pytest.raises(InsufficientCardsError):
            SessionBuilder().build(pool, LessonSelection.all_lessons(), 0)

    def test_front_to_back_prompts_with_front(self, pool: list[Flashcard]) -> None:
        questions = SessionBuilder().build(pool, LessonSelection.of([LESSON_A]), 6)
        for question in questions:
            assert question.prompt == f"front {question.flashcard_id.value}"
            assert question.expected_answer == f"back {question.flashcard_id.value}"

    def test_back_to_front_prompts_with_back(self, pool: list[Flashcard]) -> None:
        questions = SessionBuilder().build(
            pool, LessonSelection.of([LESSON_A]), 6, QuizDirection.BACK_TO_FRONT
        )
        for question in questions:
            assert question.prompt == f"back {question.flashcard_id.value}"
            assert question.expected_answer == f"front {question.flashcard_id.value}"

    def test_questions_start_unanswered(self, pool: list[Flashcard]) -> None:
        questions = SessionBuilder().build(pool, LessonSelection.all_lessons(), 5)
        assert not any(q.is_answered for q in questions)


class TestRebuild:
    def test_rebuild_keeps_exact_question_set(self, pool: list[Flashcard]) -> None:
        builder = SessionBuilder(random.Random(11))
        previous = builder.build(pool, LessonSelection.of([LESSON_A]), 10)

        for _ in range(20):
            replay = builder.rebuild(previous)
            assert len(replay) == 6
            assert sorted(q.flashcard_id.value for q in replay) == sorted(
                q.flashcard_id.value for q in previous
            )

    def test_rebuild_clears_attempts_without_touching_previous(
        self, pool: list[Flashcard]
    ) -> None:
        builder = SessionBuilder(random.Random(2))
        previous = builder.build(pool, LessonSelection.all_lessons(), 4)
        for question in previous:
            question.submitted_answer = "guess"
            question.is_correct = False

        replay = builder.rebuild(previous)

        assert all(q.submitted_answer is None and q.is_correct is None for q in replay)
        assert all(q.submitted_answer == "guess" for q in previous)

    def test_rebuild_reorders(self, pool: list[Flashcard]) -> None:
        builder = SessionBuilder(random.Random(8))
        previous = builder.build(pool, LessonSelection.all_lessons(), 12)
        orders = {tuple(q.flashcard_id.value for q in builder.rebuild(previous)) for _ in range(5)}
        assert len(orders) > 1

    def test_rebuild_empty_is_insufficient(self) -> None:
        with pytest.raises(InsufficientCardsError):
            SessionBuilder().rebuild([])

"""
Domain service for building quiz question sets.

This is a pure domain service with no infrastructure dependencies.
"""

import random
from collections.abc import Sequence

from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.entities.session_question import SessionQuestion
from flashdeck.domain.learning.exceptions import InsufficientCardsError, NoEligibleCardsError
from flashdeck.domain.learning.services.shuffling import shuffled
from flashdeck.domain.learning.value_objects import LessonSelection, QuizDirection


class SessionBuilder:
    """
    Builds the ordered question list of a session.

    Stateless apart from its random source: the caller keeps the built
    question set if it wants to replay it later.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng

    def eligible(self, pool: Sequence[Flashcard], selection: LessonSelection) -> list[Flashcard]:
        """
        Filter the pool down to the selected lessons.

        Raises:
            NoEligibleCardsError: If no card matches the selection
        """
        cards = [card for card in pool if selection.includes(card.lesson_id)]
        if not cards:
            raise NoEligibleCardsError()
        return cards

    def build(
        self,
        pool: Sequence[Flashcard],
        selection: LessonSelection,
        requested_count: int,
        direction: QuizDirection = QuizDirection.FRONT_TO_BACK,
    ) -> list[SessionQuestion]:
        """
        Build a fresh question list from a flashcard pool.

        Args:
            pool: Every flashcard the owner may review
            selection: Lessons to draw from
            requested_count: Desired number of questions
            direction: Which face is the prompt

        Returns:
            ``min(requested_count, eligible)`` questions in uniformly random order

        Raises:
            NoEligibleCardsError: If the selection matches no card
            InsufficientCardsError: If the capped size is zero
        """
        cards = shuffled(self.eligible(pool, selection), self.rng)
        picked = cards[: max(0, min(requested_count, len(cards)))]
        if not picked:
            raise InsufficientCardsError()
        return [SessionQuestion.from_flashcard(card, direction) for card in picked]

    def rebuild(self, previous: Sequence[SessionQuestion]) -> list[SessionQuestion]:
        """
        Reshuffle a previous question set for replay.

        The set is kept exactly; only the order changes and the attempt
        fields are cleared.

        Raises:
            InsufficientCardsError: If the previous set is empty
        """
        if not previous:
            raise InsufficientCardsError()
        return [question.fresh_copy() for question in shuffled(previous, self.rng)]

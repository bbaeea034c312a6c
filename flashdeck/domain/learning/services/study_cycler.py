"""
StudyCycler: an unscored cursor over a shuffled deck for flip-card study.
"""

import random
from collections.abc import Sequence
from enum import StrEnum

from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.exceptions import InsufficientCardsError
from flashdeck.domain.learning.services.shuffling import shuffled


class StudyStep(StrEnum):
    MOVED = "moved"
    CYCLE_COMPLETE = "cycle_complete"
    AT_FIRST_CARD = "at_first_card"


class StudyCycler:
    """
    Forward/backward navigation over a deck shuffled once at construction.

    ``wrap`` decides what ``next()`` does on the last card: go back to the
    first card, or stay put. Either way the caller is told the cycle is
    complete.
    """

    def __init__(
        self,
        cards: Sequence[Flashcard],
        wrap: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        if not cards:
            raise InsufficientCardsError()
        self.cards = shuffled(cards, rng)
        self.wrap = wrap
        self.index = 0
        self.completed_cycles = 0

    def __len__(self) -> int:
        return len(self.cards)

    @property
    def current(self) -> Flashcard:
        return self.cards[self.index]

    @property
    def is_last(self) -> bool:
        return self.index == len(self.cards) - 1

    def next(self) -> StudyStep:
        if self.index < len(self.cards) - 1:
            self.index += 1
            return StudyStep.MOVED
        self.completed_cycles += 1
        if self.wrap:
            self.index = 0
        return StudyStep.CYCLE_COMPLETE

    def prev(self) -> StudyStep:
        if self.index > 0:
            self.index -= 1
            return StudyStep.MOVED
        return StudyStep.AT_FIRST_CARD

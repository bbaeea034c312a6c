"""Value types of the learning context."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from flashdeck.domain.common.value_object import ValueObject
from flashdeck.domain.common.value_objects import LessonId


class Visibility(StrEnum):
    """Whether a lesson (and its flashcards) is visible to other owners."""

    PRIVATE = "private"
    PUBLIC = "public"


class QuizDirection(StrEnum):
    """Which face of a flashcard is shown as the prompt."""

    FRONT_TO_BACK = "front_to_back"
    BACK_TO_FRONT = "back_to_front"


class OwnerScope(StrEnum):
    """Which flashcards a listing or a session pool draws from."""

    MINE = "mine"
    SHARED = "shared"


@dataclass(frozen=True)
class LessonSelection(ValueObject):
    """
    The lessons a session draws its cards from.

    ``lesson_ids`` of ``None`` selects every lesson. An explicit empty set
    selects nothing, so building a session from it fails with
    ``NoEligibleCardsError``.
    """

    lesson_ids: frozenset[LessonId] | None = None

    @classmethod
    def all_lessons(cls) -> "LessonSelection":
        return cls(None)

    @classmethod
    def of(cls, lesson_ids: Iterable[LessonId]) -> "LessonSelection":
        return cls(frozenset(lesson_ids))

    @property
    def is_all(self) -> bool:
        return self.lesson_ids is None

    def includes(self, lesson_id: LessonId) -> bool:
        return self.lesson_ids is None or lesson_id in self.lesson_ids

    def to_primitive(self) -> list[int] | None:
        if self.lesson_ids is None:
            return None
        return sorted(lesson_id.value for lesson_id in self.lesson_ids)

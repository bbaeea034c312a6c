"""
SessionQuestion: a flashcard resolved into a prompt and an expected answer.
"""

from dataclasses import dataclass, replace

from flashdeck.domain.common.value_objects import FlashcardId, LessonId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.value_objects import QuizDirection


@dataclass
class SessionQuestion:
    """
    One question of a quiz or study session.

    ``submitted_answer`` and ``is_correct`` stay ``None`` until the question
    is answered, skipped or timed out.
    """

    flashcard_id: FlashcardId
    lesson_id: LessonId
    prompt: str
    expected_answer: str
    submitted_answer: str | None = None
    is_correct: bool | None = None

    @property
    def is_answered(self) -> bool:
        return self.is_correct is not None

    def fresh_copy(self) -> "SessionQuestion":
        """Copy of this question with the attempt fields cleared."""
        return replace(self, submitted_answer=None, is_correct=None)

    @classmethod
    def from_flashcard(
        cls,
        flashcard: Flashcard,
        direction: QuizDirection = QuizDirection.FRONT_TO_BACK,
    ) -> "SessionQuestion":
        if direction is QuizDirection.FRONT_TO_BACK:
            prompt, expected = flashcard.front, flashcard.back
        else:
            prompt, expected = flashcard.back, flashcard.front
        return cls(
            flashcard_id=flashcard.id,
            lesson_id=flashcard.lesson_id,
            prompt=prompt,
            expected_answer=expected,
        )

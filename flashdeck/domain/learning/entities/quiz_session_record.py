"""
QuizSessionRecord entity: the persisted history entry of a finished quiz.
"""

from dataclasses import dataclass, field
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import InvariantViolationError
from flashdeck.domain.common.value_objects import OwnerId, QuizSessionRecordId
from flashdeck.domain.learning.entities.session_question import SessionQuestion
from flashdeck.domain.learning.value_objects import LessonSelection, QuizDirection


@dataclass(frozen=True)
class AnsweredQuestion:
    """Snapshot of one question as it stood when the quiz finished."""

    flashcard_id: int
    prompt: str
    expected_answer: str
    submitted_answer: str | None
    is_correct: bool | None

    @classmethod
    def from_question(cls, question: SessionQuestion) -> "AnsweredQuestion":
        return cls(
            flashcard_id=question.flashcard_id.value,
            prompt=question.prompt,
            expected_answer=question.expected_answer,
            submitted_answer=question.submitted_answer,
            is_correct=question.is_correct,
        )


@dataclass(eq=False)
class QuizSessionRecord(Entity[QuizSessionRecordId]):
    """
    History entry for a completed or abandoned quiz.

    Business Rules:
    - Score is between 0 and the number of questions
    - There is one answer snapshot per question
    - Aborted sessions stay distinguishable from completed ones
    """

    id: QuizSessionRecordId
    owner_id: OwnerId
    direction: QuizDirection
    selection: LessonSelection
    score: int
    total: int
    aborted: bool
    answers: list[AnsweredQuestion] = field(default_factory=list)
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.total <= 0:
            raise InvariantViolationError("QuizSessionRecord", "total must be positive")
        if not 0 <= self.score <= self.total:
            raise InvariantViolationError("QuizSessionRecord", "score must be within 0..total")
        if len(self.answers) != self.total:
            raise InvariantViolationError(
                "QuizSessionRecord", "one answer snapshot is required per question"
            )

    @property
    def percentage(self) -> float:
        return round(self.score * 100 / self.total, 1)

    @classmethod
    def create(
        cls,
        owner_id: OwnerId,
        direction: QuizDirection,
        selection: LessonSelection,
        score: int,
        aborted: bool,
        questions: list[SessionQuestion],
    ) -> "QuizSessionRecord":
        return cls(
            id=QuizSessionRecordId.generate(),
            owner_id=owner_id,
            direction=direction,
            selection=selection,
            score=score,
            total=len(questions),
            aborted=aborted,
            answers=[AnsweredQuestion.from_question(q) for q in questions],
        )

"""Mapper for QuizSessionRecord ORM ↔ Domain conversion."""

from typing import Any

from flashdeck.domain.common.value_objects import LessonId, OwnerId, QuizSessionRecordId
from flashdeck.domain.learning.entities.quiz_session_record import (
    AnsweredQuestion,
    QuizSessionRecord,
)
from flashdeck.domain.learning.value_objects import LessonSelection, QuizDirection
from flashdeck.models import QuizSessionRecord as QuizSessionRecordORM


class QuizSessionRecordMapper:
    """Answers are stored as a JSON list of plain dicts."""

    def to_domain(self, orm_model: QuizSessionRecordORM) -> QuizSessionRecord:
        if orm_model.lesson_ids is None:
            selection = LessonSelection.all_lessons()
        else:
            selection = LessonSelection.of(LessonId(value) for value in orm_model.lesson_ids)

        return QuizSessionRecord(
            id=QuizSessionRecordId(orm_model.id),
            owner_id=OwnerId(orm_model.owner_id),
            direction=QuizDirection(orm_model.direction),
            selection=selection,
            score=orm_model.score,
            total=orm_model.total,
            aborted=orm_model.aborted,
            answers=[self._answer_to_domain(answer) for answer in orm_model.answers],
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: QuizSessionRecord) -> QuizSessionRecordORM:
        return QuizSessionRecordORM(
            owner_id=domain_entity.owner_id.value,
            direction=domain_entity.direction.value,
            lesson_ids=domain_entity.selection.to_primitive(),
            score=domain_entity.score,
            total=domain_entity.total,
            aborted=domain_entity.aborted,
            answers=[self._answer_to_orm(answer) for answer in domain_entity.answers],
        )

    @staticmethod
    def _answer_to_domain(data: dict[str, Any]) -> AnsweredQuestion:
        return AnsweredQuestion(
            flashcard_id=data["flashcard_id"],
            prompt=data["prompt"],
            expected_answer=data["expected_answer"],
            submitted_answer=data.get("submitted_answer"),
            is_correct=data.get("is_correct"),
        )

    @staticmethod
    def _answer_to_orm(answer: AnsweredQuestion) -> dict[str, Any]:
        return {
            "flashcard_id": answer.flashcard_id,
            "prompt": answer.prompt,
            "expected_answer": answer.expected_answer,
            "submitted_answer": answer.submitted_answer,
            "is_correct": answer.is_correct,
        }

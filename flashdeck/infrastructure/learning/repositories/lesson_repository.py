"""Repository for Lesson domain entities."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import LessonId, OwnerId
from flashdeck.domain.learning.entities.lesson import Lesson
from flashdeck.domain.learning.value_objects import Visibility
from flashdeck.infrastructure.learning.mappers.lesson_mapper import LessonMapper
from flashdeck.models import Flashcard as FlashcardORM
from flashdeck.models import Lesson as LessonORM


class LessonRepository:
    """Repository for Lesson domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LessonMapper()

    def find_by_id(self, lesson_id: LessonId) -> Lesson | None:
        orm_model = self.db.get(LessonORM, lesson_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_for_owner(self, owner_id: OwnerId) -> list[Lesson]:
        """
        Get all lessons of an owner.

        Args:
            owner_id: The owner identifier

        Returns:
            List of lesson entities ordered by created_at DESC
        """
        stmt = (
            select(LessonORM)
            .where(LessonORM.owner_id == owner_id.value)
            .order_by(LessonORM.created_at.desc(), LessonORM.id.desc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_shared(self) -> list[Lesson]:
        stmt = (
            select(LessonORM)
            .where(LessonORM.visibility == Visibility.PUBLIC.value)
            .order_by(LessonORM.created_at.desc(), LessonORM.id.desc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count_flashcards(self, lesson_ids: list[LessonId]) -> dict[int, int]:
        """
        Count flashcards per lesson in a single query.

        Returns:
            Mapping of lesson id value to count; lessons without cards are absent
        """
        if not lesson_ids:
            return {}
        stmt = (
            select(FlashcardORM.lesson_id, func.count(FlashcardORM.id))
            .where(FlashcardORM.lesson_id.in_([lesson_id.value for lesson_id in lesson_ids]))
            .group_by(FlashcardORM.lesson_id)
        )
        return {lesson_id: count for lesson_id, count in self.db.execute(stmt).all()}

    def save(self, lesson: Lesson) -> Lesson:
        """
        Save a lesson entity (create or update).

        Returns:
            Saved lesson entity with database-generated values
        """
        if lesson.id.value == 0:
            orm_model = self.mapper.to_orm(lesson)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(LessonORM, lesson.id.value)
        if not orm_model:
            raise ValueError(f"Lesson {lesson.id.value} not found")
        self.mapper.to_orm(lesson, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, lesson_id: LessonId, owner_id: OwnerId) -> bool:
        """
        Delete a lesson; its flashcards go with it.

        Returns:
            True if deleted, False if not found or not owned
        """
        stmt = select(LessonORM).where(
            LessonORM.id == lesson_id.value,
            LessonORM.owner_id == owner_id.value,
        )
        lesson_orm = self.db.execute(stmt).scalar_one_or_none()

        if not lesson_orm:
            return False

        self.db.delete(lesson_orm)
        self.db.commit()
        return True

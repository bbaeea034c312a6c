"""Repository for Flashcard domain entities."""

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import FlashcardId, LessonId, OwnerId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.value_objects import Visibility
from flashdeck.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from flashdeck.models import Flashcard as FlashcardORM


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def find_by_id(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> Flashcard | None:
        """
        Find a flashcard by ID with ownership check.

        Args:
            flashcard_id: The flashcard ID
            owner_id: The owner identifier for ownership verification

        Returns:
            Flashcard entity if found and owned, None otherwise
        """
        stmt = select(FlashcardORM).where(
            FlashcardORM.id == flashcard_id.value,
            FlashcardORM.owner_id == owner_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_lesson(self, lesson_id: LessonId) -> list[Flashcard]:
        stmt = (
            select(FlashcardORM)
            .where(FlashcardORM.lesson_id == lesson_id.value)
            .order_by(FlashcardORM.created_at.asc(), FlashcardORM.id.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_for_owner(self, owner_id: OwnerId) -> list[Flashcard]:
        stmt = (
            select(FlashcardORM)
            .where(FlashcardORM.owner_id == owner_id.value)
            .order_by(FlashcardORM.id.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_shared(self) -> list[Flashcard]:
        stmt = (
            select(FlashcardORM)
            .where(FlashcardORM.visibility == Visibility.PUBLIC.value)
            .order_by(FlashcardORM.id.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Persist a new flashcard.

        Raises:
            ValueError: If the flashcard already has an ID
        """
        if flashcard.id.value != 0:
            raise ValueError(f"Flashcard {flashcard.id.value} is already persisted")
        orm_model = self.mapper.to_orm(flashcard)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def save_all(self, flashcards: list[Flashcard]) -> list[Flashcard]:
        """Persist new flashcards in one commit, preserving order."""
        orm_models = [self.mapper.to_orm(flashcard) for flashcard in flashcards]
        self.db.add_all(orm_models)
        self.db.commit()
        for orm_model in orm_models:
            self.db.refresh(orm_model)
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def update_visibility_for_lesson(
        self, lesson_id: LessonId, visibility: Visibility, *, commit: bool = True
    ) -> int:
        stmt = (
            update(FlashcardORM)
            .where(FlashcardORM.lesson_id == lesson_id.value)
            .values(visibility=visibility.value)
        )
        result = self.db.execute(stmt)
        if commit:
            self.db.commit()
        return result.rowcount or 0

    def delete(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found or not owned
        """
        stmt = select(FlashcardORM).where(
            FlashcardORM.id == flashcard_id.value,
            FlashcardORM.owner_id == owner_id.value,
        )
        flashcard_orm = self.db.execute(stmt).scalar_one_or_none()

        if not flashcard_orm:
            return False

        self.db.delete(flashcard_orm)
        self.db.commit()
        return True

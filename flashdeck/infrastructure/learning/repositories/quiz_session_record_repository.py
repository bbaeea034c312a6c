"""Repository for persisted quiz results."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import OwnerId
from flashdeck.domain.learning.entities.quiz_session_record import QuizSessionRecord
from flashdeck.infrastructure.learning.mappers.quiz_session_record_mapper import (
    QuizSessionRecordMapper,
)
from flashdeck.models import QuizSessionRecord as QuizSessionRecordORM


class QuizSessionRecordRepository:
    """Records are append-only."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = QuizSessionRecordMapper()

    def save(self, record: QuizSessionRecord) -> QuizSessionRecord:
        orm_model = self.mapper.to_orm(record)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def find_for_owner(
        self, owner_id: OwnerId, limit: int = 30, offset: int = 0
    ) -> list[QuizSessionRecord]:
        """
        Get an owner's quiz records, newest first.

        Args:
            owner_id: The owner identifier
            limit: Maximum number of records
            offset: Number of records to skip
        """
        stmt = (
            select(QuizSessionRecordORM)
            .where(QuizSessionRecordORM.owner_id == owner_id.value)
            .order_by(QuizSessionRecordORM.created_at.desc(), QuizSessionRecordORM.id.desc())
            .offset(offset)
            .limit(limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count_for_owner(self, owner_id: OwnerId) -> int:
        stmt = select(func.count(QuizSessionRecordORM.id)).where(
            QuizSessionRecordORM.owner_id == owner_id.value
        )
        return self.db.execute(stmt).scalar() or 0

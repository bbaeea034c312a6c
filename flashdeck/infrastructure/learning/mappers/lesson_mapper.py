"""Mapper for Lesson ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import LessonId, OwnerId
from flashdeck.domain.learning.entities.lesson import Lesson
from flashdeck.domain.learning.value_objects import Visibility
from flashdeck.models import Lesson as LessonORM


class LessonMapper:
    """Mapper for Lesson ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LessonORM) -> Lesson:
        """Convert ORM model to domain entity."""
        return Lesson.create_with_id(
            id=LessonId(orm_model.id),
            owner_id=OwnerId(orm_model.owner_id),
            name=orm_model.name,
            visibility=Visibility(orm_model.visibility),
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Lesson, orm_model: LessonORM | None = None) -> LessonORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.visibility = domain_entity.visibility.value
            return orm_model

        return LessonORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            owner_id=domain_entity.owner_id.value,
            name=domain_entity.name,
            visibility=domain_entity.visibility.value,
        )

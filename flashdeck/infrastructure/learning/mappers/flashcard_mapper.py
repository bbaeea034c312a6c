"""Mapper for Flashcard ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import FlashcardId, LessonId, OwnerId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.value_objects import Visibility
from flashdeck.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """
    Mapper for Flashcard ORM ↔ Domain conversion.

    Flashcards are never updated through the mapper; only visibility changes,
    and that goes through a bulk statement in the repository.
    """

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            owner_id=OwnerId(orm_model.owner_id),
            lesson_id=LessonId(orm_model.lesson_id),
            front=orm_model.front,
            back=orm_model.back,
            visibility=Visibility(orm_model.visibility),
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Flashcard) -> FlashcardORM:
        return FlashcardORM(
            owner_id=domain_entity.owner_id.value,
            lesson_id=domain_entity.lesson_id.value,
            front=domain_entity.front,
            back=domain_entity.back,
            visibility=domain_entity.visibility.value,
        )

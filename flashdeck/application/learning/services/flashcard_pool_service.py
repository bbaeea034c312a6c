"""Application service resolving an owner scope into a flashcard snapshot."""

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.domain.common.value_objects import OwnerId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.value_objects import OwnerScope


class FlashcardPoolService:
    """Loads the in-memory pool that session builders work on."""

    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        self.flashcard_repository = flashcard_repository

    def load(self, owner_id: OwnerId, scope: OwnerScope) -> list[Flashcard]:
        """
        Load every flashcard in scope.

        Args:
            owner_id: Owner asking for the pool
            scope: ``mine`` for the owner's own cards, ``shared`` for all public cards

        Returns:
            Snapshot list of flashcard entities
        """
        if scope is OwnerScope.SHARED:
            return self.flashcard_repository.find_shared()
        return self.flashcard_repository.find_for_owner(owner_id)

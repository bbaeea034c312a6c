"""Protocol for pushing storage change notifications to subscribers."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from flashdeck.domain.common.value_objects import LessonId, OwnerId


class ChangeKind(StrEnum):
    LESSONS = "lessons"
    FLASHCARDS = "flashcards"


@dataclass(frozen=True)
class LearningDataChanged:
    """
    Something an owner can see has changed.

    Subscribers re-read their snapshot; the payload only says where to look.
    ``shared`` is True when the change touches public data, which every
    owner can see.
    """

    owner_id: OwnerId
    kind: ChangeKind
    lesson_id: LessonId | None = None
    shared: bool = False


class ChangeNotifierProtocol(Protocol):
    def publish(self, change: LearningDataChanged) -> None: ...

    def subscribe(
        self, owner_id: OwnerId, on_change: Callable[[LearningDataChanged], None]
    ) -> Callable[[], None]:
        """
        Register a callback for changes visible to an owner.

        Returns:
            Callable that removes the subscription
        """
        ...

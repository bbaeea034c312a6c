"""Change notifications for lessons and flashcards over blinker signals."""

from collections.abc import Callable
from typing import Any

import structlog
from blinker import Namespace

from flashdeck.application.learning.protocols.change_notifier import (
    ChangeKind,
    LearningDataChanged,
)
from flashdeck.domain.common.value_objects import OwnerId

logger = structlog.get_logger(__name__)


class BlinkerChangeNotifier:
    """
    Publishes ``LearningDataChanged`` on one signal per change kind.

    Subscribers see changes to their own data and any change to shared data.
    Each notifier owns its namespace, so separate instances never cross-talk.
    """

    def __init__(self) -> None:
        self._signals = Namespace()
        self.lessons_changed = self._signals.signal("lessons-changed")
        self.flashcards_changed = self._signals.signal("flashcards-changed")

    def _signal_for(self, kind: ChangeKind) -> Any:
        if kind is ChangeKind.LESSONS:
            return self.lessons_changed
        return self.flashcards_changed

    def publish(self, change: LearningDataChanged) -> None:
        self._signal_for(change.kind).send(change.owner_id.value, change=change)
        logger.debug(
            "learning_data_changed",
            owner_id=change.owner_id.value,
            kind=change.kind.value,
            shared=change.shared,
        )

    def subscribe(
        self, owner_id: OwnerId, on_change: Callable[[LearningDataChanged], None]
    ) -> Callable[[], None]:
        """
        Register a callback for every change the owner can see.

        Returns:
            Callable that disconnects the callback from both signals
        """

        def receiver(_sender: Any, *, change: LearningDataChanged, **_kwargs: Any) -> None:
            if change.owner_id == owner_id or change.shared:
                on_change(change)

        self.lessons_changed.connect(receiver, weak=False)
        self.flashcards_changed.connect(receiver, weak=False)

        def unsubscribe() -> None:
            self.lessons_changed.disconnect(receiver)
            self.flashcards_changed.disconnect(receiver)

        return unsubscribe

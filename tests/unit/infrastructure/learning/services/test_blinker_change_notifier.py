"""Tests for BlinkerChangeNotifier."""

from flashdeck.application.learning.protocols.change_notifier import (
    ChangeKind,
    LearningDataChanged,
)
from flashdeck.domain.common.value_objects import LessonId, OwnerId
from flashdeck.infrastructure.learning.services import BlinkerChangeNotifier

ALICE = OwnerId("alice")
BOB = OwnerId("bob")


def _change(owner_id: OwnerId, kind: ChangeKind, shared: bool = False) -> LearningDataChanged:
    return LearningDataChanged(owner_id=owner_id, kind=kind, lesson_id=LessonId(1), shared=shared)


class TestBlinkerChangeNotifier:
    def test_subscriber_receives_own_changes_of_every_kind(self) -> None:
        notifier = BlinkerChangeNotifier()
        received: list[LearningDataChanged] = []
        notifier.subscribe(ALICE, received.append)

        lessons = _change(ALICE, ChangeKind.LESSONS)
        flashcards = _change(ALICE, ChangeKind.FLASHCARDS)
        notifier.publish(lessons)
        notifier.publish(flashcards)

        assert received == [lessons, flashcards]

    def test_private_changes_of_other_owners_are_filtered(self) -> None:
        notifier = BlinkerChangeNotifier()
        received: list[LearningDataChanged] = []
        notifier.subscribe(ALICE, received.append)

        notifier.publish(_change(BOB, ChangeKind.FLASHCARDS))

        assert received == []

    def test_shared_changes_reach_everyone(self) -> None:
        notifier = BlinkerChangeNotifier()
        received: list[LearningDataChanged] = []
        notifier.subscribe(ALICE, received.append)

        change = _change(BOB, ChangeKind.LESSONS, shared=True)
        notifier.publish(change)

        assert received == [change]

    def test_unsubscribe(self) -> None:
        notifier = BlinkerChangeNotifier()
        received: list[LearningDataChanged] = []
        unsubscribe = notifier.subscribe(ALICE, received.append)

        unsubscribe()
        notifier.publish(_change(ALICE, ChangeKind.LESSONS))

        assert received == []

    def test_instances_do_not_share_signals(self) -> None:
        first = BlinkerChangeNotifier()
        second = BlinkerChangeNotifier()
        received: list[LearningDataChanged] = []
        first.subscribe(ALICE, received.append)

        second.publish(_change(ALICE, ChangeKind.LESSONS))

        assert received == []

    def test_publish_without_subscribers(self) -> None:
        BlinkerChangeNotifier().publish(_change(ALICE, ChangeKind.FLASHCARDS))

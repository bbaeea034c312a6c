"""Pytest configuration and fixtures."""

import os

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.pop("OCR_API_KEY", None)

from collections.abc import Callable, Generator, Iterable  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from flashdeck import models  # noqa: E402
from flashdeck.constants import DEFAULT_OWNER_ID  # noqa: E402
from flashdeck.core import container  # noqa: E402
from flashdeck.database import Base, create_db_engine, get_db  # noqa: E402
from flashdeck.infrastructure.common.rate_limit import limiter  # noqa: E402
from flashdeck.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_db_engine(TEST_DATABASE_URL)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

FRENCH_VOCABULARY = [
    ("cat", "chat"),
    ("dog", "chien"),
    ("bird", "oiseau"),
    ("house", "maison"),
    ("water", "eau"),
    ("bread", "pain"),
]

SPANISH_VOCABULARY = [
    ("red", "rojo"),
    ("blue", "azul"),
    ("green", "verde"),
    ("black", "negro"),
    ("white", "blanco"),
    ("yellow", "amarillo"),
]


class FakeTimer:
    def __init__(self, when: float, callback: Callable[[], None]) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Timer scheduler driven by hand: time only moves on ``advance``."""

    def __init__(self) -> None:
        self.current = 0.0
        self.timers: list[FakeTimer] = []

    def now(self) -> float:
        return self.current

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.current + delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[FakeTimer]:
        return [timer for timer in self.timers if not timer.cancelled]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due timers in order."""
        target = self.current + seconds
        while True:
            due = [timer for timer in self.pending if timer.when <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.when)
            self.timers.remove(timer)
            self.current = timer.when
            timer.callback()
        self.current = target


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session, fake_scheduler: FakeScheduler) -> Generator[TestClient, Any, None]:
    """Create a test client with database session and a hand-driven timer scheduler."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    container.timer_scheduler.override(providers.Object(fake_scheduler))
    container.live_session_registry.reset()
    container.change_notifier.reset()
    limiter.reset()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    container.timer_scheduler.reset_override()
    container.live_session_registry.reset()


@pytest.fixture
def make_lesson(db_session: Session) -> Callable[..., models.Lesson]:
    """Factory creating a lesson with flashcards directly in the database."""

    def _make(
        name: str = "French basics",
        owner_id: str = DEFAULT_OWNER_ID,
        visibility: str = "private",
        cards: Iterable[tuple[str, str]] = (),
    ) -> models.Lesson:
        lesson = models.Lesson(owner_id=owner_id, name=name, visibility=visibility)
        db_session.add(lesson)
        db_session.flush()
        for front, back in cards:
            db_session.add(
                models.Flashcard(
                    owner_id=owner_id,
                    lesson_id=lesson.id,
                    front=front,
                    back=back,
                    visibility=visibility,
                )
            )
        db_session.commit()
        db_session.refresh(lesson)
        return lesson

    return _make


@pytest.fixture
def test_lesson(make_lesson: Callable[..., models.Lesson]) -> models.Lesson:
    """Create an empty lesson owned by the default owner."""
    return make_lesson(name="Empty lesson")


@pytest.fixture
def french_lesson(make_lesson: Callable[..., models.Lesson]) -> models.Lesson:
    """Create a lesson with six French flashcards."""
    return make_lesson(name="French basics", cards=FRENCH_VOCABULARY)


@pytest.fixture
def spanish_lesson(make_lesson: Callable[..., models.Lesson]) -> models.Lesson:
    """Create a lesson with six Spanish flashcards."""
    return make_lesson(name="Spanish colours", cards=SPANISH_VOCABULARY)


@pytest.fixture
def shared_lesson(make_lesson: Callable[..., models.Lesson]) -> models.Lesson:
    """Create a public lesson owned by another owner."""
    return make_lesson(
        name="Shared German",
        owner_id="bob",
        visibility="public",
        cards=[("one", "eins"), ("two", "zwei"), ("three", "drei")],
    )

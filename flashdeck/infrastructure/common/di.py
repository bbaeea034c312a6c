"""FastAPI bridge into the dependency-injector container."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashdeck.core import container
from flashdeck.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Build a use case from ``provider`` bound to the request's session.

    Repositories and use cases are factories, so every request gets its own
    set on its own session. Singletons (live session registry, notifier,
    scheduler) are shared across requests.
    """

    def dependency(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return dependency

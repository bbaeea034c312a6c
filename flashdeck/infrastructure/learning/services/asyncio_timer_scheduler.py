"""Timer scheduler backed by the running asyncio event loop."""

import asyncio
from collections.abc import Callable

from flashdeck.domain.learning.services.timers import TimerHandle


class AsyncioTimerScheduler:
    """
    Schedules quiz timers with ``loop.call_later``.

    Callbacks run on the event loop thread, the same thread that serves the
    async session endpoints, so runners are never touched concurrently.
    Must be used from within a running loop.
    """

    def now(self) -> float:
        return asyncio.get_running_loop().time()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        return asyncio.get_running_loop().call_later(delay, callback)

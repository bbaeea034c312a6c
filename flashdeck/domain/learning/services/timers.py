"""Ports for the cooperative timers used by live sessions."""

from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """A pending callback that can be cancelled before it fires."""

    def cancel(self) -> None: ...


class TimerScheduler(Protocol):
    """Schedules callbacks on the single event loop that drives sessions."""

    def now(self) -> float:
        """Monotonic time in seconds."""
        ...

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once after ``delay`` seconds unless cancelled."""
        ...

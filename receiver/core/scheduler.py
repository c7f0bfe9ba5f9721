"""Delayed callbacks on the display thread.

Animations in the receiver are chains of fire-and-forget callbacks. The
core never calls the Kivy clock directly; it goes through a ``Scheduler``
so tests can drive time by hand.
"""

from __future__ import annotations

from typing import Callable, Protocol

from kivy.clock import Clock


class TimerHandle(Protocol):
    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""


class Scheduler(Protocol):
    def schedule(self, callback: Callable[[], None], delay_ms: float) -> TimerHandle:
        """Run ``callback`` once on the display thread after ``delay_ms``."""


class KivyScheduler:
    """Production scheduler backed by ``Clock.schedule_once``.

    A cancelled ``ClockEvent`` is dropped by the clock even when it is
    already due in the current frame.
    """

    def schedule(self, callback, delay_ms):
        return Clock.schedule_once(lambda dt: callback(), delay_ms / 1000.0)


class TimerGroup:
    """Outstanding timers of one animation run.

    Handles drop out of the group when their callback fires, so ``pending``
    is the number of callbacks that can still run.
    """

    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self._handles: list[TimerHandle] = []

    @property
    def pending(self) -> int:
        return len(self._handles)

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> TimerHandle:
        handle = None

        def fire():
            if handle in self._handles:
                self._handles.remove(handle)
            callback()

        handle = self._scheduler.schedule(fire, delay_ms)
        self._handles.append(handle)
        return handle

    def cancel_all(self) -> None:
        handles, self._handles = self._handles, []
        for handle in handles:
            handle.cancel()

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable


@dataclass
class FakeHandle:
    due: float
    seq: int
    callback: Callable[[], None] = field(repr=False)
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Virtual-millisecond stand-in for the Kivy clock.

    Callbacks due at the same time run in the order they were scheduled.
    Callbacks scheduled while advancing run in the same ``advance`` call if
    they fall due before it ends.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._seq = 0
        self._queue: list[FakeHandle] = []

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> FakeHandle:
        handle = FakeHandle(self.now + delay_ms, self._seq, callback)
        self._seq += 1
        self._queue.append(handle)
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for h in self._queue if not h.cancelled)

    def advance(self, ms: float) -> None:
        end = self.now + ms
        while True:
            due = [h for h in self._queue if not h.cancelled and h.due <= end]
            if not due:
                break
            handle = min(due, key=lambda h: (h.due, h.seq))
            self._queue.remove(handle)
            self.now = handle.due
            handle.callback()
        self.now = end

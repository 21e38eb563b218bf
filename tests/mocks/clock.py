"""
Manual Clock
============

A call_later-compatible scheduler driven by the test. Time only moves
when advance() is called, so phase timelines are exact.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Tuple


@dataclass
class ManualTimerHandle:
    """Handle returned by ManualClock.call_later."""
    when: float
    seq: int
    callback: Callable[..., None]
    args: Tuple[Any, ...] = field(default_factory=tuple)
    cancelled: bool = False

    def cancel(self):
        self.cancelled = True


class ManualClock:
    """
    Deterministic timer scheduler.

    Features:
        - call_later(delay, callback, *args) like asyncio loops
        - advance(seconds) fires due timers in time order
        - Timers scheduled by callbacks fire in the same advance() if due
    """

    def __init__(self):
        self.now = 0.0
        self._seq = 0
        self.timers: List[ManualTimerHandle] = []

    def call_later(self, delay: float, callback: Callable[..., None], *args) -> ManualTimerHandle:
        self._seq += 1
        handle = ManualTimerHandle(self.now + delay, self._seq, callback, args)
        self.timers.append(handle)
        return handle

    @property
    def pending(self) -> List[ManualTimerHandle]:
        return [t for t in self.timers if not t.cancelled]

    def advance(self, seconds: float):
        target = self.now + seconds
        while True:
            due = [t for t in self.pending if t.when <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.when, t.seq))
            self.timers.remove(timer)
            self.now = timer.when
            timer.callback(*timer.args)
        self.now = target

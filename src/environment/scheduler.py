"""
Cooperative timer scheduler.

Timers never fire on their own: the owner advances time with `run_due()` or
`advance()`, and every due callback runs to completion, one at a time, in due
order. Callbacks see `scheduler.time()` equal to their due time, so claims and
holds get deterministic timestamps even when the scheduler catches up on
several missed ticks at once.
"""

import heapq
import itertools
import time
from typing import Callable, List, Optional, Tuple


class TimerHandle:
    """A scheduled callback that can be cancelled before it fires."""

    def __init__(self, due: float, callback: Callable[[], None], interval: Optional[float] = None):
        self.due = due
        self.callback = callback
        self.interval = interval
        self.cancelled = False

    @property
    def repeating(self) -> bool:
        return self.interval is not None

    def cancel(self) -> None:
        """Prevent any further firing of this timer."""
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else f"due={self.due:.3f}"
        return f"<TimerHandle {state} interval={self.interval}>"


class Scheduler:
    """
    Single-threaded scheduler of one-shot and repeating timers.

    Args:
        clock: Source of the current time in seconds (time.monotonic by default)
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._now = clock()
        self._queue: List[Tuple[float, int, TimerHandle]] = []
        self._counter = itertools.count()

    def time(self) -> float:
        """Logical time: the clock reading of the last run, or the due time of the running timer."""
        return self._now

    def _push(self, handle: TimerHandle) -> None:
        heapq.heappush(self._queue, (handle.due, next(self._counter), handle))

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run `callback` once, `delay` seconds from now."""
        if delay < 0:
            raise ValueError(f"Delay must not be negative, got {delay}")
        handle = TimerHandle(self._now + delay, callback)
        self._push(handle)
        return handle

    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        """Run `callback` every `interval` seconds, first after one interval."""
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")
        handle = TimerHandle(self._now + interval, callback, interval=interval)
        self._push(handle)
        return handle

    @property
    def pending(self) -> int:
        """Number of timers that are still armed."""
        return sum(1 for _, _, handle in self._queue if not handle.cancelled)

    def run_due(self, now: Optional[float] = None) -> int:
        """
        Fire every timer due at or before `now`.

        Args:
            now: Time to run up to (defaults to the clock)

        Returns:
            Number of callbacks fired
        """
        if now is None:
            now = self.clock()

        fired = 0
        while self._queue and self._queue[0][0] <= now:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue

            self._now = max(self._now, due)
            if handle.repeating:
                handle.due = due + handle.interval
                self._push(handle)
            else:
                handle.cancelled = True

            handle.callback()
            fired += 1

        self._now = max(self._now, now)
        return fired

    def advance(self, seconds: float) -> int:
        """Move logical time forward by `seconds`, firing whatever falls due."""
        return self.run_due(self._now + seconds)

    def cancel_all(self) -> None:
        for _, _, handle in self._queue:
            handle.cancel()
        self._queue.clear()

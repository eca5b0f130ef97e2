"""Timer scheduling for the game engine.

The engine needs two kinds of timers: a periodic tick for the elapsed-time
counter and a one-shot delay before a mismatched pair flips back. Both are
created through a scheduler so the engine can run on real threads or on a
manually advanced clock.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """Cancellable timer returned by a scheduler."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Creates timers that invoke callbacks later."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...

    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle: ...


class PeriodicTimer(threading.Thread):
    """Daemon thread that calls a function every ``interval`` seconds until cancelled."""

    def __init__(self, interval: float, callback: Callable[[], None]):
        super().__init__(daemon=True)
        self.interval = interval
        self.callback = callback
        self._stopped = threading.Event()

    def run(self) -> None:
        while not self._stopped.wait(self.interval):
            self.callback()

    def cancel(self) -> None:
        """Stop the timer. A callback already running is not interrupted."""
        self._stopped.set()

    @property
    def cancelled(self) -> bool:
        return self._stopped.is_set()


class ThreadingScheduler:
    """Real-time scheduler backed by timer threads.

    Callbacks run on background threads, so whatever they touch must be
    guarded by the caller's own lock.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer

    def call_every(self, interval: float, callback: Callable[[], None]) -> PeriodicTimer:
        timer = PeriodicTimer(interval, callback)
        timer.start()
        return timer


class ManualTimer:
    """Timer entry owned by a ManualScheduler."""

    def __init__(
        self,
        due: float,
        callback: Callable[[], None],
        interval: float | None,
        seq: int,
    ):
        self.due = due
        self.callback = callback
        self.interval = interval
        self.seq = seq
        self.cancelled = False

    @property
    def is_periodic(self) -> bool:
        return self.interval is not None

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        kind = f"every {self.interval}s" if self.is_periodic else "once"
        return f"ManualTimer(due={self.due}, {kind}, cancelled={self.cancelled})"


class ManualScheduler:
    """Scheduler driven by an explicit clock.

    Nothing fires until advance() is called, which runs every due callback
    in time order on the calling thread.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._timers: list[ManualTimer] = []
        self._seq = 0

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        return self._add(self.now + delay, callback, None)

    def call_every(self, interval: float, callback: Callable[[], None]) -> ManualTimer:
        if interval <= 0:
            raise ValueError("interval must be positive")
        return self._add(self.now + interval, callback, interval)

    @property
    def pending(self) -> list[ManualTimer]:
        """Get timers that have not been cancelled or fired."""
        return [t for t in self._timers if not t.cancelled]

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing due callbacks in order.

        Args:
            seconds: Amount of time to advance.

        Returns:
            Number of callbacks fired.
        """
        target = self.now + seconds
        fired = 0

        while True:
            due = [t for t in self.pending if t.due <= target]
            if not due:
                break

            timer = min(due, key=lambda t: (t.due, t.seq))
            self.now = timer.due
            if timer.is_periodic:
                timer.due += timer.interval
            else:
                self._timers.remove(timer)

            timer.callback()
            fired += 1

        self.now = target
        # Drop cancelled entries so long-running games don't accumulate them
        self._timers = self.pending
        return fired

    def _add(
        self,
        due: float,
        callback: Callable[[], None],
        interval: float | None,
    ) -> ManualTimer:
        self._seq += 1
        timer = ManualTimer(due, callback, interval, self._seq)
        self._timers.append(timer)
        logger.debug(f"Scheduled {timer!r}")
        return timer

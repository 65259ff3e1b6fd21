"""
Delayed callbacks for the automated player.

Scheduling returns a Canceller. Once cancelled, the callback never runs, even if its timer already fired.
"""

import logging
import threading
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class Canceller:
    """Single-use cancellation token. Cancelling twice is harmless."""

    def __init__(self, on_cancel: Optional[Callable[[], None]] = None) -> None:
        self._on_cancel = on_cancel
        self._cancelled = False
        self._lock = threading.Lock()

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()

    def run(self, callback: Callable[[], None]) -> None:
        """Invoke the callback unless cancelled"""
        if self._cancelled:
            return
        callback()


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> Canceller:
        """Run `callback` after `delay` seconds unless the returned Canceller is cancelled first."""
        ...


class ThreadingScheduler:
    """One daemon timer thread per scheduled callback"""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Canceller:
        canceller: Canceller

        def _fire() -> None:
            canceller.run(callback)

        timer = threading.Timer(delay, _fire)
        timer.daemon = True
        canceller = Canceller(timer.cancel)
        timer.start()
        logger.debug("Scheduled callback in %.2fs", delay)
        return canceller


class ManualScheduler:
    """
    Nothing runs by itself: time only moves when `advance` is called.
    Used by tests, and by callers that drive the game from their own event loop.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._pending: list[tuple[float, int, Canceller, Callable[[], None]]] = []
        self._counter = 0

    def call_later(self, delay: float, callback: Callable[[], None]) -> Canceller:
        canceller = Canceller()
        self._pending.append((self.now + delay, self._counter, canceller, callback))
        self._counter += 1
        return canceller

    @property
    def pending_count(self) -> int:
        return sum(1 for _, _, canceller, _ in self._pending if not canceller.is_cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward and run everything that became due (in order). Returns how many callbacks ran."""
        self.now += seconds
        ran = 0
        while True:
            due = sorted(
                (entry for entry in self._pending if entry[0] <= self.now),
                key=lambda entry: (entry[0], entry[1]),
            )
            if not due:
                return ran
            entry = due[0]
            self._pending.remove(entry)
            _, _, canceller, callback = entry
            if not canceller.is_cancelled:
                canceller.run(callback)
                ran += 1

"""
Debounced invocation with explicit scheduling.

Typing in the search box fires on every keystroke; the query should run
once input has been quiet for a fixed window. A Debouncer wraps a callback
and, on each call, cancels any pending invocation and schedules a new one.

Scheduling goes through a Scheduler so tests can drive time by hand:
- ManualScheduler: time advances only when ``advance()`` is called
- TimerScheduler: real wall-clock delays on ``threading.Timer``
"""

import heapq
import itertools
import threading
from collections.abc import Callable
from typing import Any, Protocol

DEFAULT_DEBOUNCE_MS = 300


class ScheduledCall(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """Run ``callback`` after ``delay`` seconds unless cancelled."""
        ...


class _ManualHandle:
    __slots__ = ("cancelled",)

    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Deterministic scheduler for tests.

    Calls fire in due-time order (ties in scheduling order) when
    ``advance()`` moves the clock past their due time.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, _ManualHandle, Callable[[], None]]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> _ManualHandle:
        handle = _ManualHandle()
        heapq.heappush(self._queue, (self.now + delay, next(self._counter), handle, callback))
        return handle

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and run everything that became due.

        Returns:
            Number of callbacks run.
        """
        target = self.now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle, callback = heapq.heappop(self._queue)
            self.now = due
            if handle.cancelled:
                continue
            callback()
            ran += 1
        self.now = target
        return ran

    @property
    def pending(self) -> int:
        return sum(1 for _, _, handle, _ in self._queue if not handle.cancelled)


class TimerScheduler:
    """Wall-clock scheduler backed by daemon ``threading.Timer`` threads."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class Debouncer:
    """
    Delay a callback until calls stop arriving for ``wait_ms``.

    Only the arguments of the most recent call are delivered.
    """

    def __init__(
        self,
        callback: Callable[..., Any],
        wait_ms: int = DEFAULT_DEBOUNCE_MS,
        scheduler: Scheduler | None = None,
    ):
        self.callback = callback
        self.wait_ms = wait_ms
        self.scheduler: Scheduler = scheduler or TimerScheduler()
        self._handle: ScheduledCall | None = None
        self._args: tuple[Any, ...] = ()
        self._kwargs: dict[str, Any] = {}
        self._generation = 0
        self._lock = threading.Lock()

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
            self._args = args
            self._kwargs = kwargs
            self._generation += 1
            generation = self._generation
            self._handle = self.scheduler.call_later(
                self.wait_ms / 1000, lambda: self._fire(generation)
            )

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def cancel(self) -> None:
        """Drop the pending invocation, if any."""
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                self._handle = None

    def flush(self) -> bool:
        """
        Run the pending invocation now instead of waiting.

        Returns:
            True if a pending call was run.
        """
        with self._lock:
            if self._handle is None:
                return False
            self._handle.cancel()
            self._handle = None
        self.callback(*self._args, **self._kwargs)
        return True

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A timer cancelled after it started running must not fire
            if generation != self._generation or self._handle is None:
                return
            self._handle = None
            args, kwargs = self._args, self._kwargs
        self.callback(*args, **kwargs)

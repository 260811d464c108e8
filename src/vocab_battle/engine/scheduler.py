"""Cancellable timer scheduling for phase transitions.

The battle engine never sleeps or polls. It asks a ``Scheduler`` to call
it back after a delay and keeps the returned handle so it can cancel the
callback when the phase changes first. Two schedulers are provided:

- ``ManualScheduler`` runs on a virtual clock that only moves when
  ``advance`` is called. Tests and step-driven frontends use it.
- ``AsyncioScheduler`` runs on an asyncio event loop for real-time play.

Both are single-threaded: callbacks run one at a time on the caller's
thread (or the loop's thread).
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Protocol, runtime_checkable

from vocab_battle.core.logging import get_logger


logger = get_logger(__name__)

Callback = Callable[[], None]


@runtime_checkable
class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled."""

    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""
        ...

    def cancelled(self) -> bool:
        """Whether ``cancel`` has been called."""
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Clock plus delayed-callback source used by the battle engine."""

    def now(self) -> float:
        """Current time in seconds on this scheduler's clock."""
        ...

    def call_later(self, delay: float, callback: Callback) -> TimerHandle:
        """Run ``callback`` once after ``delay`` seconds."""
        ...


# =============================================================================
# Manual (virtual clock)
# =============================================================================


@dataclass(order=True)
class _ManualTimer:
    due: float
    seq: int
    callback: Callback = field(compare=False)
    _cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self._cancelled = True

    def cancelled(self) -> bool:
        return self._cancelled


class ManualScheduler:
    """Deterministic scheduler driven by explicit clock advances.

    Example:
        >>> scheduler = ManualScheduler()
        >>> fired = []
        >>> _ = scheduler.call_later(1.0, lambda: fired.append(scheduler.now()))
        >>> scheduler.advance(1.5)
        >>> fired
        [1.0]
    """

    def __init__(self, start: float = 0.0) -> None:
        """Initialize the virtual clock.

        Args:
            start: Initial clock value in seconds.
        """
        self._now = start
        self._queue: list[_ManualTimer] = []
        self._counter = itertools.count()

    def now(self) -> float:
        """Current virtual time."""
        return self._now

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks that have not been cancelled."""
        return sum(1 for t in self._queue if not t.cancelled())

    def call_later(self, delay: float, callback: Callback) -> _ManualTimer:
        """Schedule ``callback`` at ``now() + delay``."""
        timer = _ManualTimer(
            due=self._now + max(0.0, delay),
            seq=next(self._counter),
            callback=callback,
        )
        heapq.heappush(self._queue, timer)
        return timer

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing every callback that falls due.

        Callbacks fire in due-time order with the clock set to their due
        time. Callbacks scheduled while advancing also fire if they fall
        inside the window.

        Args:
            seconds: How far to move the clock.
        """
        target = self._now + max(0.0, seconds)
        while self._queue and self._queue[0].due <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled():
                continue
            self._now = timer.due
            timer.callback()
        self._now = target

    def run_until_idle(self, *, max_steps: int = 10_000) -> None:
        """Fire callbacks in order until nothing is pending.

        Args:
            max_steps: Safety bound on the number of callbacks fired.
        """
        for _ in range(max_steps):
            while self._queue and self._queue[0].cancelled():
                heapq.heappop(self._queue)
            if not self._queue:
                return
            self.advance(self._queue[0].due - self._now)
        logger.warning("ManualScheduler stopped before going idle", max_steps=max_steps)


# =============================================================================
# Asyncio
# =============================================================================


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Bind to an event loop.

        Args:
            loop: Loop to schedule on, defaults to the running loop.
        """
        self._loop = loop or asyncio.get_running_loop()

    def now(self) -> float:
        """The loop's monotonic time."""
        return self._loop.time()

    def call_later(self, delay: float, callback: Callback) -> asyncio.TimerHandle:
        """Schedule ``callback`` on the loop."""
        return self._loop.call_later(max(0.0, delay), callback)


__all__ = [
    "Callback",
    "TimerHandle",
    "Scheduler",
    "ManualScheduler",
    "AsyncioScheduler",
]

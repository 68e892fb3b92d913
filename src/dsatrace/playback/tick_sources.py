"""TickSource implementations.

ManualTickSource delivers ticks only when told to, for tests and UIs that
step explicitly. AsyncioTickSource schedules ticks on an asyncio event loop
with loop.call_later.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable


class ManualTickSource:
    """Tick source driven by explicit tick() calls."""

    def __init__(self) -> None:
        self._callback: Callable[[], None] | None = None
        self.period_s: float | None = None
        self.starts = 0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None], period_s: float) -> None:
        self._callback = callback
        self.period_s = period_s
        self.starts += 1

    def cancel(self) -> None:
        self._callback = None

    def tick(self, count: int = 1) -> int:
        """Deliver up to count ticks, stopping early if the source is cancelled.

        Returns:
            Number of ticks actually delivered.
        """
        delivered = 0
        while delivered < count and self._callback is not None:
            self._callback()
            delivered += 1
        return delivered


class AsyncioTickSource:
    """Tick source backed by an asyncio event loop.

    Args:
        loop: Loop to schedule on. Defaults to the running loop at start().
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._callback: Callable[[], None] | None = None
        self._period_s = 0.0
        self._run = 0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None], period_s: float) -> None:
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._loop = loop
        self._callback = callback
        self._period_s = period_s
        self._handle = loop.call_later(period_s, self._fire, self._run)

    def cancel(self) -> None:
        self._run += 1
        self._callback = None
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, run: int) -> None:
        if run != self._run or self._callback is None:
            return
        self._callback()
        # callback may have cancelled or restarted this source
        if run == self._run and self._callback is not None and self._loop is not None:
            self._handle = self._loop.call_later(self._period_s, self._fire, run)

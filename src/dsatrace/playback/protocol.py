"""Protocol for tick sources driving automatic playback."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class TickSource(Protocol):
    """Repeating timer the playback controller starts and cancels.

    A source delivers callback() every period_s seconds after start() until
    cancel() is called. Starting an active source replaces its callback.
    Cancel must take effect synchronously: once cancel() returns, the
    cancelled callback is never invoked again by this source.

    Usage:
        source = AsyncioTickSource()
        source.start(controller_callback, period_s=0.8)
        ...
        source.cancel()
    """

    def start(self, callback: Callable[[], None], period_s: float) -> None:
        """Begin delivering ticks to callback.

        Args:
            callback: Invoked once per tick.
            period_s: Seconds between ticks.
        """
        ...

    def cancel(self) -> None:
        """Stop delivering ticks. Safe to call when not started."""
        ...

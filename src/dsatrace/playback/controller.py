"""Playback controller: moves a cursor over a Trace's frames.

Usage:
    controller = PlaybackController(AsyncioTickSource())
    controller.load_trace(run_algorithm(AlgorithmId.BUBBLE_SORT, [5, 1, 4]))
    controller.play()
    ...
    frame = controller.current_frame
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from dsatrace.config import PlaybackSettings
from dsatrace.playback.models import PlaybackMode, PlaybackState
from dsatrace.playback.protocol import TickSource
from dsatrace.playback.tick_sources import ManualTickSource
from dsatrace.tracing import Frame, Trace

logger = logging.getLogger(__name__)

type Listener = Callable[[PlaybackState], None]


class PlaybackController:
    """Cursor over a loaded trace with play/pause and manual stepping.

    Every manual control cancels the tick source before touching the
    position. Each play() hands the tick source a callback bound to a fresh
    generation number; callbacks from an older generation are ignored, so a
    tick already in flight when the user pauses or steps cannot move the
    cursor.

    Args:
        tick_source: Timer driving automatic playback. Defaults to a
            ManualTickSource.
        settings: Playback settings (tick period).
    """

    def __init__(
        self,
        tick_source: TickSource | None = None,
        settings: PlaybackSettings | None = None,
    ) -> None:
        self._tick_source = tick_source or ManualTickSource()
        self._settings = settings or PlaybackSettings()
        self._trace: Trace | None = None
        self._position = 0
        self._mode = PlaybackMode.STOPPED
        self._generation = 0
        self._listeners: list[Listener] = []

    @property
    def trace(self) -> Trace | None:
        return self._trace

    @property
    def tick_source(self) -> TickSource:
        return self._tick_source

    @property
    def position(self) -> int:
        return self._position

    @property
    def mode(self) -> PlaybackMode:
        return self._mode

    @property
    def state(self) -> PlaybackState:
        length = len(self._trace) if self._trace is not None else 0
        return PlaybackState(self._mode, self._position, length)

    @property
    def current_frame(self) -> Frame | None:
        """Frame at the cursor, or None before any trace is loaded."""
        if self._trace is None:
            return None
        return self._trace[self._position]

    def get_current_frame(self) -> Frame | None:
        return self.current_frame

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener with the new state after every position or mode change.

        Returns:
            Function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Controls

    def load_trace(self, trace: Trace) -> None:
        """Replace the trace, rewinding to its first frame and stopping."""
        before = self.state
        self._halt()
        self._trace = trace
        self._position = 0
        logger.debug("Loaded %s trace with %d frames", trace.algorithm.name, len(trace))
        self._notify(before, force=True)

    def play(self) -> bool:
        """Start automatic playback.

        Returns:
            False if there is nothing to play, True otherwise.
        """
        if self._trace is None:
            logger.debug("play() ignored: no trace loaded")
            return False
        before = self.state
        self._halt()
        if self._position >= self._last:
            self._position = 0
        self._mode = PlaybackMode.PLAYING
        generation = self._generation
        self._tick_source.start(lambda: self._on_tick(generation), self._settings.tick_period_s)
        logger.debug("Playing from frame %d (generation %d)", self._position, generation)
        self._notify(before)
        return True

    def pause(self) -> None:
        before = self.state
        self._halt()
        self._notify(before)

    def step_forward(self) -> int:
        """Stop and advance one frame, clamped at the last frame."""
        return self.seek(self._position + 1)

    def step_back(self) -> int:
        """Stop and go back one frame, clamped at the first frame."""
        return self.seek(self._position - 1)

    def seek(self, position: int) -> int:
        """Stop and jump to position, clamped to the trace bounds.

        Returns:
            The position actually reached.
        """
        before = self.state
        self._halt()
        if self._trace is not None:
            self._position = min(max(position, 0), self._last)
        self._notify(before)
        return self._position

    # Internals

    @property
    def _last(self) -> int:
        return len(self._trace) - 1 if self._trace is not None else 0

    def _halt(self) -> None:
        """Cancel pending ticks and invalidate any already scheduled."""
        self._generation += 1
        self._tick_source.cancel()
        self._mode = PlaybackMode.STOPPED

    def _on_tick(self, generation: int) -> None:
        if generation != self._generation or self._mode is not PlaybackMode.PLAYING:
            logger.debug("Ignoring stale tick (generation %d, current %d)", generation, self._generation)
            return
        before = self.state
        if self._position < self._last:
            self._position += 1
        if self._position >= self._last:
            self._halt()
            logger.debug("Reached last frame %d", self._position)
        self._notify(before)

    def _notify(self, before: PlaybackState, force: bool = False) -> None:
        after = self.state
        if not force and after == before:
            return
        for listener in list(self._listeners):
            listener(after)

"""Playback of recorded traces.

The controller owns a cursor over a Trace and a TickSource; it never runs
algorithms itself. Automatic playback is the only asynchronous part of the
engine.
"""

from dsatrace.playback.controller import PlaybackController
from dsatrace.playback.models import PlaybackMode, PlaybackState
from dsatrace.playback.protocol import TickSource
from dsatrace.playback.tick_sources import AsyncioTickSource, ManualTickSource

__all__ = [
    "AsyncioTickSource",
    "ManualTickSource",
    "PlaybackController",
    "PlaybackMode",
    "PlaybackState",
    "TickSource",
]

"""Playback state types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class PlaybackMode(Enum):
    STOPPED = auto()
    PLAYING = auto()


@dataclass(frozen=True, slots=True)
class PlaybackState:
    """Immutable view of a controller at one moment.

    Attributes:
        mode: Whether automatic ticks are advancing the position.
        position: Index of the current frame (0 when no trace is loaded).
        length: Number of frames in the loaded trace (0 when none).
    """

    mode: PlaybackMode
    position: int
    length: int

    @property
    def is_playing(self) -> bool:
        return self.mode is PlaybackMode.PLAYING

    @property
    def at_end(self) -> bool:
        return self.length == 0 or self.position >= self.length - 1

"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the trace
engine and the playback controller.

Usage:
    from dsatrace.config import EngineSettings, PlaybackSettings

    # Load from environment variables (DSATRACE_*, DSATRACE_PLAYBACK_*)
    engine = EngineSettings()
    playback = PlaybackSettings()

    # Or override with explicit values
    engine = EngineSettings(array_capacity=8)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):  # type: ignore[misc]
    """Capacity limits and guards applied while building traces.

    Attributes:
        array_capacity: Maximum number of elements in an array.
        stack_capacity: Maximum number of elements on a stack.
        queue_capacity: Slot count for linear, circular and double-ended queues.
        string_max_length: Maximum length of a string, including concatenations.
        max_frames: Upper bound on frames per trace; exceeding it is a bug.

    Environment Variables:
        DSATRACE_ARRAY_CAPACITY
        DSATRACE_STACK_CAPACITY
        DSATRACE_QUEUE_CAPACITY
        DSATRACE_STRING_MAX_LENGTH
        DSATRACE_MAX_FRAMES
    """

    model_config = SettingsConfigDict(
        env_prefix="DSATRACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    array_capacity: int = Field(default=20, ge=1)
    stack_capacity: int = Field(default=10, ge=1)
    queue_capacity: int = Field(default=10, ge=2)
    string_max_length: int = Field(default=20, ge=1)
    max_frames: int = Field(default=5000, ge=1)


class PlaybackSettings(BaseSettings):  # type: ignore[misc]
    """Timing for automatic playback.

    Attributes:
        tick_period_ms: Delay between automatic steps, in milliseconds.

    Environment Variables:
        DSATRACE_PLAYBACK_TICK_PERIOD_MS
    """

    model_config = SettingsConfigDict(
        env_prefix="DSATRACE_PLAYBACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    tick_period_ms: int = Field(default=800, gt=0)

    @property
    def tick_period_s(self) -> float:
        """Tick period in seconds, as tick sources expect it."""
        return self.tick_period_ms / 1000.0

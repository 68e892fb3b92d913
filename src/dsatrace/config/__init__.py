"""Configuration module using Pydantic Settings.

Provides typed configuration for the trace engine and playback with
environment variable support.

Usage:
    from dsatrace.config import EngineSettings, PlaybackSettings

    settings = EngineSettings(stack_capacity=5)
    playback = PlaybackSettings(tick_period_ms=650)
"""

from dsatrace.config.settings import EngineSettings, PlaybackSettings

__all__ = [
    "EngineSettings",
    "PlaybackSettings",
]

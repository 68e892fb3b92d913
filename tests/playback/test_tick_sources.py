"""Tests for tick sources."""

import asyncio

import pytest

from dsatrace import (
    AlgorithmId,
    AsyncioTickSource,
    ManualTickSource,
    PlaybackController,
    PlaybackSettings,
    run_algorithm,
)


def test_manual_tick_source_counts_starts():
    source = ManualTickSource()
    calls = []
    source.start(lambda: calls.append(1), 0.5)
    assert source.active
    assert source.tick(3) == 3
    source.cancel()
    assert source.tick() == 0
    assert source.starts == 1
    assert calls == [1, 1, 1]


def test_manual_tick_stops_when_callback_cancels():
    source = ManualTickSource()
    calls = []

    def callback():
        calls.append(1)
        if len(calls) == 2:
            source.cancel()

    source.start(callback, 0.1)
    assert source.tick(10) == 2


@pytest.mark.asyncio
async def test_asyncio_source_repeats_until_cancelled():
    source = AsyncioTickSource()
    calls = []
    source.start(lambda: calls.append(1), 0.001)
    await asyncio.sleep(0.05)
    source.cancel()
    seen = len(calls)
    await asyncio.sleep(0.02)

    assert seen > 1
    assert len(calls) == seen
    assert not source.active


@pytest.mark.asyncio
async def test_asyncio_restart_drops_old_schedule():
    source = AsyncioTickSource()
    old, new = [], []
    source.start(lambda: old.append(1), 0.001)
    source.start(lambda: new.append(1), 0.001)
    await asyncio.sleep(0.02)
    source.cancel()

    assert old == []
    assert new


@pytest.mark.asyncio
async def test_asyncio_playback_reaches_last_frame():
    trace = run_algorithm(AlgorithmId.BUBBLE_SORT, [4, 3, 2, 1])
    controller = PlaybackController(AsyncioTickSource(), PlaybackSettings(_env_file=None, tick_period_ms=1))
    controller.load_trace(trace)
    finished = asyncio.Event()
    controller.subscribe(lambda state: finished.set() if state.at_end and not state.is_playing else None)

    controller.play()
    await asyncio.wait_for(finished.wait(), timeout=5)

    assert controller.position == len(trace) - 1
    assert not controller.tick_source.active

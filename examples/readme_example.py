import asyncio

from dsatrace import (
    AlgorithmId,
    AsyncioTickSource,
    PlaybackController,
    PlaybackSettings,
    PlaybackState,
    make_graph,
    make_tree,
    run_algorithm,
)


def describe(trace) -> None:
    """Print every frame of a trace, one line each."""
    print(f"{trace.algorithm.name}: {len(trace)} frames")
    for position, frame in enumerate(trace):
        marks = ", ".join(sorted(map(str, frame.highlight)))
        print(f"  {position:3d} [{marks}] {frame.message}")
    if trace.is_rejected:
        print(f"  rejected ({trace.rejection.kind.name})")
    else:
        print(f"  outcome: {dict(trace.outcome)}")


async def play(trace) -> None:
    """Replay a trace on the event loop until the last frame."""
    controller = PlaybackController(AsyncioTickSource(), PlaybackSettings(tick_period_ms=50))
    done = asyncio.Event()

    def on_change(state: PlaybackState) -> None:
        frame = controller.current_frame
        print(f"  [{state.mode.name}] {state.position + 1}/{state.length} {frame.message}")
        if state.at_end and not state.is_playing:
            done.set()

    controller.subscribe(on_change)
    controller.load_trace(trace)
    controller.play()
    await done.wait()


def main() -> None:
    describe(run_algorithm(AlgorithmId.BUBBLE_SORT, [5, 1, 4, 2]))

    # Each run leaves the input untouched; chain runs through final snapshots
    tree = make_tree()
    deleted = run_algorithm(AlgorithmId.TREE_DELETE, tree, {"value": 50})
    describe(run_algorithm(AlgorithmId.TREE_LEVEL_ORDER, deleted.final_snapshot))

    graph = make_graph([("A", "B", 4), ("A", "C", 1), ("C", "B", 1), ("B", "D", 2)])
    describe(run_algorithm(AlgorithmId.DIJKSTRA, graph, {"start": "A", "goal": "D"}))

    # Bad input becomes a one-frame rejected trace, not an exception
    describe(run_algorithm(AlgorithmId.BFS, graph, {"start": "Z"}))

    print("Playback:")
    asyncio.run(play(run_algorithm(AlgorithmId.KMP_SEARCH, "abababc", {"pattern": "abc"})))


if __name__ == "__main__":
    main()

"""dsatrace: step-by-step execution traces for data-structure algorithms.

Usage:
    from dsatrace import AlgorithmId, PlaybackController, run_algorithm

    trace = run_algorithm(AlgorithmId.BUBBLE_SORT, [5, 1, 4, 2])
    for frame in trace:
        print(frame.snapshot, sorted(frame.highlight), frame.message)

    controller = PlaybackController()
    controller.load_trace(trace)
    controller.step_forward()

Architecture:
    core/       identifiers, catalog of algorithms, immutable snapshot values
    working/    mutable structures an algorithm run owns (real pointers)
    snapshot/   codec turning working structures into values and back
    tracing/    Frame, Trace and the TraceBuilder handlers append to
    algorithms/ @algorithm handlers per structure family plus run_algorithm
    playback/   controller moving a cursor over a finished trace
    config/     pydantic-settings for capacities and tick period
"""

__version__ = "0.1.0"

# Algorithms
from dsatrace.algorithms import AlgorithmRun, algorithm, missing_handlers, run_algorithm

# Configuration
from dsatrace.config import EngineSettings, PlaybackSettings

# Core primitives
from dsatrace.core import (
    AlgorithmId,
    EdgeRef,
    EngineError,
    EngineInvariantError,
    Family,
    InvalidStateError,
    ListKind,
    MalformedStructureError,
    NodeId,
    QueueKind,
    UnknownAlgorithmError,
)

# Playback
from dsatrace.playback import (
    AsyncioTickSource,
    ManualTickSource,
    PlaybackController,
    PlaybackMode,
    PlaybackState,
    TickSource,
)

# Snapshots
from dsatrace.snapshot import snapshot, thaw, working_copy

# Tracing
from dsatrace.tracing import Frame, Rejection, RejectionKind, Trace, TraceBuilder

# Working structures
from dsatrace.working import (
    BinaryTree,
    LinkedList,
    WorkingGraph,
    WorkingQueue,
    make_graph,
    make_list,
    make_queue,
    make_tree,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "AlgorithmId",
    "EdgeRef",
    "Family",
    "ListKind",
    "NodeId",
    "QueueKind",
    # Errors
    "EngineError",
    "EngineInvariantError",
    "InvalidStateError",
    "MalformedStructureError",
    "UnknownAlgorithmError",
    # Algorithms
    "AlgorithmRun",
    "algorithm",
    "missing_handlers",
    "run_algorithm",
    # Tracing
    "Frame",
    "Rejection",
    "RejectionKind",
    "Trace",
    "TraceBuilder",
    # Snapshots
    "snapshot",
    "thaw",
    "working_copy",
    # Working structures
    "BinaryTree",
    "LinkedList",
    "WorkingGraph",
    "WorkingQueue",
    "make_graph",
    "make_list",
    "make_queue",
    "make_tree",
    # Playback
    "AsyncioTickSource",
    "ManualTickSource",
    "PlaybackController",
    "PlaybackMode",
    "PlaybackState",
    "TickSource",
    # Config
    "EngineSettings",
    "PlaybackSettings",
]

"""Data models for traces.

A Trace is the complete, immutable record of one algorithm run: an ordered,
non-empty sequence of Frames plus the run's computed outcome. Traces export to
JSON-serializable dicts for presentation layers.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Any

from dsatrace.core.catalog import AlgorithmId
from dsatrace.core.identity import EdgeRef, NodeId
from dsatrace.core.types import ElementRef


class RejectionKind(Enum):
    """Why a run was rejected before doing any work.

    PRECONDITION: bad or missing params, or input the algorithm cannot accept
    (unsorted binary search input, wrong graph orientation, unknown vertex...).
    STRUCTURAL: the structure itself forbids the operation (empty, full,
    index out of range).
    """

    PRECONDITION = auto()
    STRUCTURAL = auto()


@dataclass(frozen=True, slots=True)
class Rejection:
    """Rejection recorded on a single-frame trace."""

    kind: RejectionKind
    message: str


def encode(value: Any) -> Any:
    """Convert snapshots, refs and outcome values to JSON-serializable data."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, NodeId):
        return value.index
    if isinstance(value, EdgeRef):
        return [value.u, value.v]
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, Mapping):
        return {str(encode(k)): encode(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted((encode(v) for v in value), key=repr)
    if isinstance(value, float) and value == float("inf"):
        return None
    return value


@dataclass(frozen=True, slots=True)
class Frame:
    """One step of a trace.

    Attributes:
        snapshot: Immutable value of the structure at this step.
        highlight: Elements the presentation layer should emphasize.
        pseudocode_line: Index into the algorithm's pseudocode table, -1 for none.
        message: Human-readable description of the step.
    """

    snapshot: Any
    highlight: frozenset[ElementRef] = frozenset()
    pseudocode_line: int = -1
    message: str = ""

    def is_highlighted(self, ref: ElementRef) -> bool:
        return ref in self.highlight

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "snapshot": encode(self.snapshot),
            "highlight": encode(self.highlight),
            "line": self.pseudocode_line,
            "message": self.message,
        }


@dataclass(frozen=True, slots=True)
class Trace:
    """Finished, immutable trace of one algorithm run.

    Attributes:
        algorithm: Which operation produced the trace.
        frames: Frames in execution order; never empty.
        rejection: Set when the run was rejected (the trace then has one frame).
        outcome: Computed answer (path, order, found index...), keyed by name.

    Example:
        trace = run_algorithm(AlgorithmId.BFS, graph, {"start": "A"})
        trace.outcome["order"]  # ['A', 'B', 'C', 'D']
    """

    algorithm: AlgorithmId
    frames: tuple[Frame, ...]
    rejection: Rejection | None = None
    outcome: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError("A trace must contain at least one frame")
        object.__setattr__(self, "outcome", MappingProxyType(dict(self.outcome)))

    @property
    def is_rejected(self) -> bool:
        return self.rejection is not None

    @property
    def final_snapshot(self) -> Any:
        """Snapshot of the last frame (the resulting structure for mutations)."""
        return self.frames[-1].snapshot

    def __len__(self) -> int:
        return len(self.frames)

    def __getitem__(self, position: int) -> Frame:
        return self.frames[position]

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "algorithm": self.algorithm.name,
            "frames": [frame.to_dict() for frame in self.frames],
            "outcome": encode(self.outcome),
        }
        if self.rejection is not None:
            result["rejection"] = {
                "kind": self.rejection.kind.name,
                "message": self.rejection.message,
            }
        return result

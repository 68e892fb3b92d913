"""Core dsatrace primitives.

core/ contains pure, stateless definitions: identifiers, the algorithm
catalog, snapshot value types and error classes. Stateful services (node
allocation, working structures, playback) live in their own packages.
"""

from dsatrace.core.catalog import AlgorithmId, Family
from dsatrace.core.errors import (
    EngineError,
    EngineInvariantError,
    InvalidStateError,
    MalformedStructureError,
    UnknownAlgorithmError,
)
from dsatrace.core.identity import EdgeRef, NodeId
from dsatrace.core.types import Copy, ElementRef
from dsatrace.core.values import (
    Edge,
    GraphValue,
    ListKind,
    ListNodeValue,
    ListValue,
    PriorityItem,
    QueueKind,
    QueueValue,
    TreeNodeValue,
    TreeValue,
    Vertex,
    adjacency_list,
    adjacency_matrix,
    edge_list,
)

__all__ = [
    "AlgorithmId",
    "Copy",
    "Edge",
    "EdgeRef",
    "ElementRef",
    "EngineError",
    "EngineInvariantError",
    "Family",
    "GraphValue",
    "InvalidStateError",
    "ListKind",
    "ListNodeValue",
    "ListValue",
    "MalformedStructureError",
    "NodeId",
    "PriorityItem",
    "QueueKind",
    "QueueValue",
    "TreeNodeValue",
    "TreeValue",
    "UnknownAlgorithmError",
    "Vertex",
    "adjacency_list",
    "adjacency_matrix",
    "edge_list",
]

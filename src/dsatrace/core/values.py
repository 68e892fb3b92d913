"""Snapshot value types.

Every value here is immutable and shares nothing with any working structure.
Pointers between nodes are NodeIds rather than object references, so cycles
and shared nodes are representable without aliasing.

Usage:
    value = snapshot(linked_list)
    for node in value.walk():
        print(node.node_id, node.value)
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Any

from dsatrace.core.identity import EdgeRef, NodeId

type Weight = int | float


class ListKind(Enum):
    """Linked list variants."""

    SINGLY = auto()
    DOUBLY = auto()
    CIRCULAR = auto()


class QueueKind(Enum):
    """Queue variants."""

    LINEAR = auto()
    CIRCULAR = auto()
    DEQUE = auto()
    PRIORITY = auto()


def _freeze[K, V](mapping: Mapping[K, V]) -> Mapping[K, V]:
    return MappingProxyType(dict(mapping))


# Queues


@dataclass(frozen=True, slots=True)
class PriorityItem:
    """Element of a priority queue."""

    value: int
    priority: int

    def to_dict(self) -> dict[str, int]:
        return {"value": self.value, "priority": self.priority}


@dataclass(frozen=True, slots=True)
class QueueValue:
    """Queue at one instant.

    For CIRCULAR queues `items` is the whole slot array (empty slots are None)
    and `front`/`rear` index into it. For the other kinds `items` holds the
    elements front to back, `front` is 0 and `rear` is len(items).

    Attributes:
        kind: Queue variant.
        items: Slots or elements, see above.
        front: Index of the front element.
        rear: Index one past the back element.
        capacity: Slot count (ignored for PRIORITY queues).
    """

    kind: QueueKind
    items: tuple[Any, ...]
    front: int = 0
    rear: int = 0
    capacity: int = 0

    def elements(self) -> list[Any]:
        """Elements in dequeue order."""
        if self.kind is not QueueKind.CIRCULAR:
            return list(self.items)
        result = []
        i = self.front
        while i != self.rear:
            result.append(self.items[i])
            i = (i + 1) % len(self.items)
        return result

    def __len__(self) -> int:
        if self.kind is QueueKind.CIRCULAR:
            return (self.rear - self.front) % len(self.items) if self.items else 0
        return len(self.items)

    def __contains__(self, ref: object) -> bool:
        return isinstance(ref, int) and 0 <= ref < len(self.items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.name,
            "items": [i.to_dict() if isinstance(i, PriorityItem) else i for i in self.items],
            "front": self.front,
            "rear": self.rear,
            "capacity": self.capacity,
        }


# Linked lists


@dataclass(frozen=True, slots=True)
class ListNodeValue:
    """One linked-list node; `next`/`prev` are ids of other nodes or None."""

    node_id: NodeId
    value: int
    next: NodeId | None = None
    prev: NodeId | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.node_id.index,
            "value": self.value,
            "next": None if self.next is None else self.next.index,
            "prev": None if self.prev is None else self.prev.index,
        }


@dataclass(frozen=True, slots=True)
class ListValue:
    """Linked list at one instant.

    Attributes:
        kind: List variant.
        head: Id of the head node, None when empty.
        nodes: Every node reachable from head, keyed by id.
        next_index: Allocator high-water mark, so thawed copies keep ids fresh.
    """

    kind: ListKind
    head: NodeId | None
    nodes: Mapping[NodeId, ListNodeValue] = field(default_factory=dict)
    next_index: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", _freeze(self.nodes))

    def walk(self) -> Iterator[ListNodeValue]:
        """Yield nodes from head following `next` until None or a revisit."""
        seen: set[NodeId] = set()
        current = self.head
        while current is not None and current not in seen:
            seen.add(current)
            node = self.nodes[current]
            yield node
            current = node.next

    def values(self) -> list[int]:
        return [node.value for node in self.walk()]

    def ids(self) -> list[NodeId]:
        return [node.node_id for node in self.walk()]

    def node(self, node_id: NodeId) -> ListNodeValue:
        return self.nodes[node_id]

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, ref: object) -> bool:
        return ref in self.nodes

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.name,
            "head": None if self.head is None else self.head.index,
            "nodes": [n.to_dict() for n in sorted(self.nodes.values(), key=lambda n: n.node_id)],
        }


# Trees


@dataclass(frozen=True, slots=True)
class TreeNodeValue:
    """One binary tree node; children are node ids or None."""

    node_id: NodeId
    value: int
    left: NodeId | None = None
    right: NodeId | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.node_id.index,
            "value": self.value,
            "left": None if self.left is None else self.left.index,
            "right": None if self.right is None else self.right.index,
        }


@dataclass(frozen=True, slots=True)
class TreeValue:
    """Binary tree at one instant.

    Attributes:
        root: Id of the root node, None when empty.
        nodes: Every node reachable from root, keyed by id.
        next_index: Allocator high-water mark.
    """

    root: NodeId | None
    nodes: Mapping[NodeId, TreeNodeValue] = field(default_factory=dict)
    next_index: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", _freeze(self.nodes))

    def node(self, node_id: NodeId) -> TreeNodeValue:
        return self.nodes[node_id]

    def inorder(self) -> list[TreeNodeValue]:
        """Nodes in left-root-right order."""
        result: list[TreeNodeValue] = []
        stack: list[TreeNodeValue] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                node = self.nodes[current]
                stack.append(node)
                current = node.left
            node = stack.pop()
            result.append(node)
            current = node.right
        return result

    def values(self) -> list[int]:
        """Values in in-order sequence (sorted for a valid BST)."""
        return [node.value for node in self.inorder()]

    def height(self, node_id: NodeId | None = None) -> int:
        """Height in nodes of the subtree at node_id (the whole tree by default)."""
        start = self.root if node_id is None else node_id
        if start is None:
            return 0
        node = self.nodes[start]
        return 1 + max(
            self.height(node.left) if node.left is not None else 0,
            self.height(node.right) if node.right is not None else 0,
        )

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, ref: object) -> bool:
        return ref in self.nodes

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": None if self.root is None else self.root.index,
            "nodes": [n.to_dict() for n in sorted(self.nodes.values(), key=lambda n: n.node_id)],
        }


# Graphs


@dataclass(frozen=True, slots=True)
class Vertex:
    """Graph vertex with planar layout coordinates."""

    vertex_id: str
    x: float = 0.0
    y: float = 0.0

    def distance_to(self, other: Vertex) -> float:
        """Euclidean distance between stored coordinates."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.vertex_id, "x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class Edge:
    """Graph edge; orientation matters only in directed graphs."""

    u: str
    v: str
    weight: Weight = 1

    @property
    def ref(self) -> EdgeRef:
        return EdgeRef(self.u, self.v)

    def to_dict(self) -> dict[str, Any]:
        return {"u": self.u, "v": self.v, "weight": self.weight}


@dataclass(frozen=True, slots=True)
class GraphValue:
    """Graph at one instant.

    Attributes:
        vertices: Vertices in insertion order.
        edges: Edges in insertion order.
        directed: Whether edges are one-way.
        weighted: Whether weights are meaningful to the presentation layer.
    """

    vertices: tuple[Vertex, ...] = ()
    edges: tuple[Edge, ...] = ()
    directed: bool = False
    weighted: bool = True

    def vertex_ids(self) -> list[str]:
        return [v.vertex_id for v in self.vertices]

    def has_vertex(self, vertex_id: str) -> bool:
        return any(v.vertex_id == vertex_id for v in self.vertices)

    def vertex(self, vertex_id: str) -> Vertex:
        for v in self.vertices:
            if v.vertex_id == vertex_id:
                return v
        raise KeyError(vertex_id)

    def __contains__(self, ref: object) -> bool:
        if isinstance(ref, str):
            return self.has_vertex(ref)
        if isinstance(ref, EdgeRef):
            return any(ref.matches(e.u, e.v, self.directed) for e in self.edges)
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "vertices": [v.to_dict() for v in self.vertices],
            "edges": [e.to_dict() for e in self.edges],
            "directed": self.directed,
            "weighted": self.weighted,
        }


def adjacency_list(graph: GraphValue) -> dict[str, list[tuple[str, Weight]]]:
    """Project a graph onto its adjacency list.

    Neighbor order is edge insertion order; undirected edges appear under both
    endpoints.

    Args:
        graph: Graph snapshot.

    Returns:
        Mapping from every vertex id (in vertex order) to (neighbor, weight) pairs.
    """
    adjacency: dict[str, list[tuple[str, Weight]]] = {v.vertex_id: [] for v in graph.vertices}
    for edge in graph.edges:
        adjacency[edge.u].append((edge.v, edge.weight))
        if not graph.directed:
            adjacency[edge.v].append((edge.u, edge.weight))
    return adjacency


def adjacency_matrix(graph: GraphValue) -> tuple[list[str], list[list[Weight | None]]]:
    """Project a graph onto its adjacency matrix.

    Args:
        graph: Graph snapshot.

    Returns:
        (vertex ids, matrix) where matrix[i][j] is the weight of the edge i->j,
        or None when there is no such edge. Later parallel edges win.
    """
    ids = graph.vertex_ids()
    index = {vid: i for i, vid in enumerate(ids)}
    matrix: list[list[Weight | None]] = [[None] * len(ids) for _ in ids]
    for edge in graph.edges:
        matrix[index[edge.u]][index[edge.v]] = edge.weight
        if not graph.directed:
            matrix[index[edge.v]][index[edge.u]] = edge.weight
    return ids, matrix


def edge_list(graph: GraphValue) -> list[tuple[str, str, Weight]]:
    """Project a graph onto (u, v, weight) triples in insertion order."""
    return [(e.u, e.v, e.weight) for e in graph.edges]

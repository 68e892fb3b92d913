"""Mutable graph used while an algorithm runs."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from dsatrace.core.values import Edge, Vertex, Weight

# Ring layout used when a vertex is added without coordinates.
_CENTER = (350.0, 250.0)
_RADIUS = 200.0
_RING_SLOTS = 12


def ring_position(slot: int, slots: int = _RING_SLOTS) -> tuple[float, float]:
    """Coordinates of the given slot on the default layout ring."""
    angle = 2 * math.pi * slot / max(slots, 1) - math.pi / 2
    return (
        round(_CENTER[0] + _RADIUS * math.cos(angle), 2),
        round(_CENTER[1] + _RADIUS * math.sin(angle), 2),
    )


class WorkingGraph:
    """Graph held as ordered vertex and edge lists.

    Neighbor order is edge insertion order; undirected edges contribute both
    directions.

    Args:
        directed: Whether edges are one-way.
        weighted: Whether weights are shown by the presentation layer.
    """

    def __init__(self, directed: bool = False, weighted: bool = True):
        self.directed = directed
        self.weighted = weighted
        self.vertices: list[Vertex] = []
        self.edges: list[Edge] = []

    def vertex_ids(self) -> list[str]:
        return [v.vertex_id for v in self.vertices]

    def has_vertex(self, vertex_id: str) -> bool:
        return any(v.vertex_id == vertex_id for v in self.vertices)

    def vertex(self, vertex_id: str) -> Vertex:
        for v in self.vertices:
            if v.vertex_id == vertex_id:
                return v
        raise KeyError(vertex_id)

    def add_vertex(self, vertex_id: str, x: float | None = None, y: float | None = None) -> Vertex:
        if x is None or y is None:
            default_x, default_y = ring_position(len(self.vertices))
            x = default_x if x is None else x
            y = default_y if y is None else y
        vertex = Vertex(vertex_id, float(x), float(y))
        self.vertices.append(vertex)
        return vertex

    def remove_vertex(self, vertex_id: str) -> None:
        """Remove a vertex and every edge touching it."""
        self.vertices = [v for v in self.vertices if v.vertex_id != vertex_id]
        self.edges = [e for e in self.edges if vertex_id not in (e.u, e.v)]

    def find_edge(self, u: str, v: str) -> int:
        """Index of the first edge u-v (either orientation if undirected), or -1."""
        for i, edge in enumerate(self.edges):
            if edge.u == u and edge.v == v:
                return i
            if not self.directed and edge.u == v and edge.v == u:
                return i
        return -1

    def add_edge(self, u: str, v: str, weight: Weight = 1) -> Edge:
        edge = Edge(u, v, weight)
        self.edges.append(edge)
        return edge

    def remove_edge(self, u: str, v: str) -> Edge | None:
        index = self.find_edge(u, v)
        if index == -1:
            return None
        return self.edges.pop(index)

    def neighbors(self, vertex_id: str) -> list[tuple[str, Weight]]:
        """(neighbor, weight) pairs in adjacency-list order."""
        result: list[tuple[str, Weight]] = []
        for edge in self.edges:
            if edge.u == vertex_id:
                result.append((edge.v, edge.weight))
            elif not self.directed and edge.v == vertex_id:
                result.append((edge.u, edge.weight))
        return result

    def arcs(self) -> list[tuple[str, str, Weight]]:
        """Directed arcs in edge order; an undirected edge yields u->v then v->u."""
        result: list[tuple[str, str, Weight]] = []
        for edge in self.edges:
            result.append((edge.u, edge.v, edge.weight))
            if not self.directed:
                result.append((edge.v, edge.u, edge.weight))
        return result


def make_graph(
    edges: Iterable[Sequence[str | Weight]] = (),
    directed: bool = False,
    vertices: Iterable[str] | None = None,
    weighted: bool = True,
) -> WorkingGraph:
    """Build a graph from (u, v) or (u, v, weight) tuples.

    Vertices are created in first-mention order (after any listed explicitly)
    and laid out on a ring.

    Args:
        edges: Edge tuples.
        directed: Whether edges are one-way.
        vertices: Explicit vertex ids, e.g. to include isolated vertices.
        weighted: Whether weights are shown by the presentation layer.

    Returns:
        New WorkingGraph.
    """
    edge_specs = [tuple(spec) for spec in edges]
    ids: list[str] = list(vertices or [])
    for spec in edge_specs:
        for endpoint in spec[:2]:
            if endpoint not in ids:
                ids.append(str(endpoint))
    graph = WorkingGraph(directed=directed, weighted=weighted)
    for slot, vertex_id in enumerate(ids):
        x, y = ring_position(slot, len(ids))
        graph.add_vertex(vertex_id, x, y)
    for spec in edge_specs:
        weight = spec[2] if len(spec) > 2 else 1
        graph.add_edge(str(spec[0]), str(spec[1]), weight)  # type: ignore[arg-type]
    return graph

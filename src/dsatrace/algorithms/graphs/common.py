"""Helpers shared by the graph algorithms."""

from __future__ import annotations

import math

from dsatrace.algorithms.registry import AlgorithmRun
from dsatrace.core.identity import EdgeRef
from dsatrace.core.values import Weight
from dsatrace.tracing import Trace
from dsatrace.working import WorkingGraph

INFINITY = math.inf


def missing_vertex(run: AlgorithmRun, graph: WorkingGraph, *vertex_ids: str) -> Trace | None:
    """Reject the run if any vertex id is unknown; None when all exist."""
    for vertex_id in vertex_ids:
        if not graph.has_vertex(vertex_id):
            return run.precondition(graph, f"Vertex {vertex_id} not found.")
    return None


def negative_weight(run: AlgorithmRun, graph: WorkingGraph, name: str) -> Trace | None:
    """Reject the run if any edge has a negative weight; None otherwise."""
    for edge in graph.edges:
        if edge.weight < 0:
            return run.precondition(
                graph, f"{name} requires non-negative edge weights ({edge.u}-{edge.v} is {edge.weight})."
            )
    return None


def walk_back(previous: dict[str, str | None], goal: str) -> list[str]:
    """Path from the search root to goal following `previous` links."""
    path = [goal]
    while previous.get(path[-1]) is not None:
        path.append(previous[path[-1]])  # type: ignore[arg-type]
    path.reverse()
    return path


def path_edges(path: list[str]) -> list[EdgeRef]:
    return [EdgeRef(u, v) for u, v in zip(path, path[1:])]


def show(value: Weight) -> str:
    """Compact number formatting: 3, 2.5, inf."""
    if value == INFINITY:
        return "inf"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return f"{value:g}" if isinstance(value, float) else str(value)

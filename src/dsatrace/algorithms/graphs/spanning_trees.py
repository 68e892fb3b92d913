"""Minimum spanning trees over undirected graphs."""

from __future__ import annotations

from dsatrace.algorithms.graphs.common import INFINITY, show
from dsatrace.algorithms.registry import AlgorithmRun, algorithm
from dsatrace.core.catalog import AlgorithmId
from dsatrace.core.identity import EdgeRef
from dsatrace.core.values import Weight
from dsatrace.tracing import Trace
from dsatrace.working import WorkingGraph


def _summary(trees: int) -> str:
    if trees <= 1:
        return "MST complete"
    return f"Graph is disconnected: spanning forest with {trees} trees"


@algorithm(AlgorithmId.PRIM)
def prim(run: AlgorithmRun[None], graph: WorkingGraph) -> Trace:
    if graph.directed:
        return run.precondition(graph, "Prim's algorithm requires an undirected graph.")
    ids = graph.vertex_ids()
    if not ids:
        return run.structural(graph, "Graph has no vertices.")

    key: dict[str, Weight] = dict.fromkeys(ids, INFINITY)
    parent: dict[str, str | None] = dict.fromkeys(ids)
    included: list[str] = []
    trees = 0
    run.step(graph, line=0, message="Prim's MST")

    while len(included) < len(ids):
        candidates = [v for v in ids if v not in included]
        u = min(candidates, key=key.__getitem__)
        if key[u] == INFINITY:
            key[u] = 0
            trees += 1
        included.append(u)
        tree_edges = [EdgeRef(parent[v], v) for v in included if parent[v] is not None]  # type: ignore[arg-type]
        run.step(graph, [*included, *tree_edges], 2, f"Added {u} to MST")
        for v, weight in graph.neighbors(u):
            if v not in included and weight < key[v]:
                key[v] = weight
                parent[v] = u
                run.step(graph, [v, EdgeRef(u, v)], 4, f"Updated key for {v} = {show(weight)}")

    mst = [(parent[v], v, key[v]) for v in ids if parent[v] is not None]
    run.step(graph, [EdgeRef(u, v) for u, v, _ in mst], 5, _summary(trees))  # type: ignore[arg-type]
    return run.finish(mst=mst, total=sum(w for *_, w in mst), trees=trees)


@algorithm(AlgorithmId.KRUSKAL)
def kruskal(run: AlgorithmRun[None], graph: WorkingGraph) -> Trace:
    if graph.directed:
        return run.precondition(graph, "Kruskal's algorithm requires an undirected graph.")

    leader = {v: v for v in graph.vertex_ids()}

    def find(v: str) -> str:
        while leader[v] != v:
            v = leader[v]
        return v

    mst: list[tuple[str, str, Weight]] = []
    rejected: list[tuple[str, str, Weight]] = []
    run.step(graph, line=0, message="Kruskal's MST")
    for edge in sorted(graph.edges, key=lambda e: e.weight):
        chosen = [EdgeRef(u, v) for u, v, _ in mst]
        run.step(graph, [*chosen, edge.ref], 1, f"Considering {edge.u}-{edge.v} ({show(edge.weight)})")
        root_u, root_v = find(edge.u), find(edge.v)
        if root_u != root_v:
            leader[root_u] = root_v
            mst.append((edge.u, edge.v, edge.weight))
            run.step(graph, [*chosen, edge.ref], 2, f"Added edge {edge.u}-{edge.v}")
        else:
            rejected.append((edge.u, edge.v, edge.weight))
            run.step(graph, [*chosen, edge.u, edge.v], 3, f"Skipped {edge.u}-{edge.v}: would form a cycle")

    trees = len({find(v) for v in leader})
    run.step(graph, [EdgeRef(u, v) for u, v, _ in mst], 4, _summary(trees))
    return run.finish(mst=mst, rejected=rejected, total=sum(w for *_, w in mst), trees=trees)

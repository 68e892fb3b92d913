"""Graph traversals: BFS, DFS, cycle detection and bipartiteness."""

from __future__ import annotations

from collections import deque
from enum import Enum, auto

from dsatrace.algorithms.graphs.common import missing_vertex
from dsatrace.algorithms.params import StartParams
from dsatrace.algorithms.registry import AlgorithmRun, algorithm
from dsatrace.core.catalog import AlgorithmId
from dsatrace.core.identity import EdgeRef
from dsatrace.tracing import Trace
from dsatrace.working import WorkingGraph


@algorithm(AlgorithmId.BFS, params=StartParams)
def bfs(run: AlgorithmRun[StartParams], graph: WorkingGraph) -> Trace:
    start = run.params.start
    if (rejected := missing_vertex(run, graph, start)) is not None:
        return rejected
    visited = {start}
    pending = deque([start])
    order: list[str] = []
    run.step(graph, [start], 0, f"BFS from {start}")
    while pending:
        u = pending.popleft()
        order.append(u)
        run.step(graph, [*order], 2, f"Dequeued {u}")
        for v, _ in graph.neighbors(u):
            if v not in visited:
                visited.add(v)
                pending.append(v)
                run.step(graph, [*order, v, EdgeRef(u, v)], 4, f"Enqueued {v}")
    run.step(graph, order, -1, f"BFS order: {', '.join(order)}")
    return run.finish(order=order)


@algorithm(AlgorithmId.DFS, params=StartParams)
def dfs(run: AlgorithmRun[StartParams], graph: WorkingGraph) -> Trace:
    start = run.params.start
    if (rejected := missing_vertex(run, graph, start)) is not None:
        return rejected
    visited = {start}
    stack = [start]
    order: list[str] = []
    run.step(graph, [start], 0, f"DFS from {start}")
    while stack:
        u = stack.pop()
        order.append(u)
        run.step(graph, [*order], 2, f"Popped {u}")
        for v, _ in graph.neighbors(u):
            if v not in visited:
                visited.add(v)
                stack.append(v)
                run.step(graph, [*order, v, EdgeRef(u, v)], 4, f"Pushed {v}")
    run.step(graph, order, -1, f"DFS order: {', '.join(order)}")
    return run.finish(order=order)


class _Colour(Enum):
    WHITE = auto()
    GREY = auto()
    BLACK = auto()


@algorithm(AlgorithmId.CYCLE_DETECTION)
def cycle_detection(run: AlgorithmRun[None], graph: WorkingGraph) -> Trace:
    colour = dict.fromkeys(graph.vertex_ids(), _Colour.WHITE)
    back_edge: EdgeRef | None = None

    def visit(u: str, parent: str | None) -> bool:
        nonlocal back_edge
        colour[u] = _Colour.GREY
        run.step(graph, [u], 1, f"Visiting {u}")
        skipped_parent = False
        for v, _ in graph.neighbors(u):
            if not graph.directed and v == parent and not skipped_parent:
                skipped_parent = True
                continue
            if colour[v] is _Colour.GREY:
                back_edge = EdgeRef(u, v)
                run.step(graph, [u, v, back_edge], 3, "Back edge found")
                return True
            if colour[v] is _Colour.WHITE and visit(v, u):
                return True
        colour[u] = _Colour.BLACK
        return False

    run.step(graph, line=0, message="Cycle Detection")
    found = any(colour[u] is _Colour.WHITE and visit(u, None) for u in graph.vertex_ids())
    if found:
        run.step(graph, [back_edge], 4, "Cycle detected")
    else:
        run.step(graph, line=5, message="No cycle")
    return run.finish(cycle=found, back_edge=back_edge)


@algorithm(AlgorithmId.BIPARTITE)
def bipartite(run: AlgorithmRun[None], graph: WorkingGraph) -> Trace:
    undirected: dict[str, list[str]] = {u: [] for u in graph.vertex_ids()}
    for edge in graph.edges:
        undirected[edge.u].append(edge.v)
        undirected[edge.v].append(edge.u)

    colours: dict[str, int] = {}
    run.step(graph, line=0, message="Bipartite Check")
    for source in graph.vertex_ids():
        if source in colours:
            continue
        colours[source] = 0
        run.step(graph, [source], 1, f"Colored {source} as 0")
        pending = deque([source])
        while pending:
            u = pending.popleft()
            for v in undirected[u]:
                if v not in colours:
                    colours[v] = 1 - colours[u]
                    pending.append(v)
                    run.step(graph, [v, EdgeRef(u, v)], 2, f"Colored {v} as {colours[v]}")
                elif colours[v] == colours[u]:
                    run.step(graph, [u, v, EdgeRef(u, v)], 3, "Same color conflict")
                    run.step(graph, [u, v], 4, "Not bipartite")
                    return run.finish(bipartite=False, colors=colours, conflict=EdgeRef(u, v))
    run.step(graph, line=5, message="Bipartite")
    return run.finish(bipartite=True, colors=colours, conflict=None)

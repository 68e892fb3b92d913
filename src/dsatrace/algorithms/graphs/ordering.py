"""Directed graph orderings: topological sort and strongly connected components."""

from __future__ import annotations

from collections import deque

from dsatrace.algorithms.registry import AlgorithmRun, algorithm
from dsatrace.core.catalog import AlgorithmId
from dsatrace.core.identity import EdgeRef
from dsatrace.tracing import Trace
from dsatrace.working import WorkingGraph


@algorithm(AlgorithmId.TOPOLOGICAL_SORT)
def topological_sort(run: AlgorithmRun[None], graph: WorkingGraph) -> Trace:
    if not graph.directed:
        return run.precondition(graph, "Graph must be directed.")

    in_degree = dict.fromkeys(graph.vertex_ids(), 0)
    for edge in graph.edges:
        in_degree[edge.v] += 1
    pending = deque(v for v in graph.vertex_ids() if in_degree[v] == 0)
    order: list[str] = []
    run.step(graph, [*pending], 0, "Topological Sort")

    while pending:
        u = pending.popleft()
        order.append(u)
        run.step(graph, [*order], 2, f"Processed {u}")
        for v, _ in graph.neighbors(u):
            in_degree[v] -= 1
            if in_degree[v] == 0:
                pending.append(v)
                run.step(graph, [*order, v, EdgeRef(u, v)], 4, f"Enqueued {v}")

    if len(order) < len(graph.vertices):
        stuck = [v for v in graph.vertex_ids() if v not in order]
        run.step(graph, stuck, 5, "Cycle detected")
        return run.finish(order=order, cycle=True)
    run.step(graph, order, 6, f"Order: {', '.join(order)}")
    return run.finish(order=order, cycle=False)


@algorithm(AlgorithmId.SCC)
def strongly_connected(run: AlgorithmRun[None], graph: WorkingGraph) -> Trace:
    """Kosaraju: finish order on the graph, then collect on the transpose."""
    if not graph.directed:
        return run.precondition(graph, "Graph must be directed.")

    ids = graph.vertex_ids()
    transpose: dict[str, list[str]] = {v: [] for v in ids}
    for edge in graph.edges:
        transpose[edge.v].append(edge.u)

    finished: list[str] = []
    seen: set[str] = set()

    def first_pass(u: str) -> None:
        seen.add(u)
        for v, _ in graph.neighbors(u):
            if v not in seen:
                first_pass(v)
        finished.append(u)
        run.step(graph, [u], 1, f"Finished {u}")

    def second_pass(u: str, component: list[str]) -> None:
        seen.add(u)
        component.append(u)
        for v in transpose[u]:
            if v not in seen:
                second_pass(v, component)

    run.step(graph, line=0, message="Strongly Connected Components")
    for u in ids:
        if u not in seen:
            first_pass(u)

    seen.clear()
    components: list[list[str]] = []
    for u in reversed(finished):
        if u in seen:
            continue
        component: list[str] = []
        second_pass(u, component)
        components.append(component)
        run.step(graph, component, 3, f"SCC: {', '.join(component)}")

    run.step(graph, line=4, message=f"{len(components)} strongly connected components")
    return run.finish(components=components)

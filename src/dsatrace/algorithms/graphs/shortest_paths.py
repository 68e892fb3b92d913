"""Shortest path algorithms: Dijkstra, Bellman-Ford, Floyd-Warshall and A*."""

from __future__ import annotations

from dsatrace.algorithms.graphs.common import (
    INFINITY,
    missing_vertex,
    negative_weight,
    path_edges,
    show,
    walk_back,
)
from dsatrace.algorithms.params import RouteParams, StartParams
from dsatrace.algorithms.registry import AlgorithmRun, algorithm
from dsatrace.core.catalog import AlgorithmId
from dsatrace.core.identity import EdgeRef
from dsatrace.core.values import Weight
from dsatrace.tracing import Trace
from dsatrace.working import WorkingGraph


def _reached(run: AlgorithmRun, graph: WorkingGraph, path: list[str], line: int, message: str) -> None:
    run.step(graph, [*path, *path_edges(path)], line, message)


@algorithm(AlgorithmId.DIJKSTRA, params=RouteParams)
def dijkstra(run: AlgorithmRun[RouteParams], graph: WorkingGraph) -> Trace:
    start, goal = run.params.start, run.params.goal
    if (rejected := missing_vertex(run, graph, start, goal)) is not None:
        return rejected
    if (rejected := negative_weight(run, graph, "Dijkstra")) is not None:
        return rejected

    dist: dict[str, Weight] = dict.fromkeys(graph.vertex_ids(), INFINITY)
    previous: dict[str, str | None] = dict.fromkeys(graph.vertex_ids())
    dist[start] = 0
    frontier: list[tuple[str, Weight]] = [(start, 0)]
    settled: set[str] = set()
    run.step(graph, [start], 0, f"Dijkstra from {start} to {goal}")

    while frontier:
        u, d = frontier.pop(0)
        if u in settled:
            continue
        settled.add(u)
        run.step(graph, [u], 2, f"Extracted {u}, dist={show(d)}")
        if u == goal:
            break
        for v, weight in graph.neighbors(u):
            alt = dist[u] + weight
            if alt < dist[v]:
                dist[v] = alt
                previous[v] = u
                frontier.append((v, alt))
                frontier.sort(key=lambda entry: entry[1])
                run.step(graph, [v, EdgeRef(u, v)], 5, f"Updated {v}, dist={show(alt)}")

    if dist[goal] == INFINITY:
        run.step(graph, [start, goal], 6, f"No path from {start} to {goal}")
        return run.finish(path=[], distance=None, distances=dist)
    path = walk_back(previous, goal)
    _reached(run, graph, path, 6, f"Path: {' -> '.join(path)}")
    return run.finish(path=path, distance=dist[goal], distances=dist)


@algorithm(AlgorithmId.BELLMAN_FORD, params=StartParams)
def bellman_ford(run: AlgorithmRun[StartParams], graph: WorkingGraph) -> Trace:
    start = run.params.start
    if (rejected := missing_vertex(run, graph, start)) is not None:
        return rejected

    dist: dict[str, Weight] = dict.fromkeys(graph.vertex_ids(), INFINITY)
    dist[start] = 0
    arcs = graph.arcs()
    run.step(graph, [start], 0, f"Bellman-Ford from {start}")
    for _ in range(len(graph.vertices) - 1):
        for u, v, weight in arcs:
            if dist[u] != INFINITY and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                run.step(graph, [v, EdgeRef(u, v)], 3, f"Relaxed {u}-{v}, dist[{v}]={show(dist[v])}")

    for u, v, weight in arcs:
        if dist[u] != INFINITY and dist[u] + weight < dist[v]:
            run.step(graph, [u, v, EdgeRef(u, v)], 5, "Negative cycle detected")
            return run.finish(negative_cycle=True, distances=dist)
    run.step(graph, line=6, message="No negative cycle")
    return run.finish(negative_cycle=False, distances=dist)


@algorithm(AlgorithmId.FLOYD_WARSHALL)
def floyd_warshall(run: AlgorithmRun[None], graph: WorkingGraph) -> Trace:
    ids = graph.vertex_ids()
    dist: dict[str, dict[str, Weight]] = {
        i: {j: 0 if i == j else INFINITY for j in ids} for i in ids
    }
    for u, v, weight in graph.arcs():
        dist[u][v] = min(dist[u][v], weight)

    run.step(graph, line=0, message="Floyd-Warshall all-pairs shortest paths")
    for k in ids:
        for i in ids:
            if dist[i][k] == INFINITY:
                continue
            for j in ids:
                through = dist[i][k] + dist[k][j]
                if through < dist[i][j]:
                    dist[i][j] = through
                    run.step(graph, [i, j, k], 4, f"Updated dist[{i}][{j}] via {k} = {show(through)}")

    negative_cycle = any(dist[i][i] < 0 for i in ids)
    if negative_cycle:
        run.step(graph, [i for i in ids if dist[i][i] < 0], 5, "Negative cycle detected")
    else:
        run.step(graph, line=5, message="All-pairs shortest paths computed")
    return run.finish(distances=dist, negative_cycle=negative_cycle)


@algorithm(AlgorithmId.A_STAR, params=RouteParams)
def a_star(run: AlgorithmRun[RouteParams], graph: WorkingGraph) -> Trace:
    start, goal = run.params.start, run.params.goal
    if (rejected := missing_vertex(run, graph, start, goal)) is not None:
        return rejected
    if (rejected := negative_weight(run, graph, "A*")) is not None:
        return rejected

    target = graph.vertex(goal)

    def heuristic(vertex_id: str) -> float:
        return graph.vertex(vertex_id).distance_to(target)

    g: dict[str, Weight] = dict.fromkeys(graph.vertex_ids(), INFINITY)
    f: dict[str, float] = dict.fromkeys(graph.vertex_ids(), INFINITY)
    came_from: dict[str, str | None] = dict.fromkeys(graph.vertex_ids())
    g[start] = 0
    f[start] = heuristic(start)
    open_list = [start]
    run.step(graph, [start, goal], 0, f"A* from {start} to {goal}")

    while open_list:
        # ties go to the most recently opened vertex
        current = min(reversed(open_list), key=f.__getitem__)
        if current == goal:
            path = walk_back(came_from, goal)
            _reached(run, graph, path, 3, f"Path found: {' -> '.join(path)}")
            return run.finish(path=path, distance=g[goal])
        open_list.remove(current)
        run.step(graph, [current], 2, f"Exploring {current}")
        for v, weight in graph.neighbors(current):
            tentative = g[current] + weight
            if tentative < g[v]:
                came_from[v] = current
                g[v] = tentative
                f[v] = tentative + heuristic(v)
                if v not in open_list:
                    open_list.append(v)
                run.step(graph, [v, EdgeRef(current, v)], 5, f"Updated {v}, f={f[v]:.2f}")

    run.step(graph, [start, goal], 6, "No path found")
    return run.finish(path=[], distance=None)

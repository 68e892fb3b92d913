"""Tests for graph edits, traversals, shortest paths, spanning trees and orderings."""

import math

import pytest

from dsatrace import AlgorithmId, EdgeRef, RejectionKind, WorkingGraph, make_graph, run_algorithm
from dsatrace.core.values import edge_list


@pytest.fixture
def line_graph():
    """Vertices laid out so Euclidean distance never overestimates path cost."""
    graph = WorkingGraph()
    graph.add_vertex("A", 0, 0)
    graph.add_vertex("B", 100, 0)
    graph.add_vertex("C", 200, 0)
    graph.add_vertex("D", 100, 100)
    graph.add_edge("A", "B", 100)
    graph.add_edge("B", "C", 100)
    graph.add_edge("A", "D", 150)
    graph.add_edge("D", "C", 150)
    return graph


# Edits


def test_add_vertex(triangle):
    trace = run_algorithm(AlgorithmId.GRAPH_ADD_VERTEX, triangle, {"vertex": "D", "x": 10, "y": 20})
    value = trace.final_snapshot
    assert value.vertex_ids() == ["A", "B", "C", "D"]
    assert (value.vertex("D").x, value.vertex("D").y) == (10.0, 20.0)
    assert trace[-1].highlight == frozenset({"D"})


def test_add_vertex_without_coordinates_uses_layout(triangle):
    trace = run_algorithm(AlgorithmId.GRAPH_ADD_VERTEX, triangle, {"vertex": "D"})
    assert trace.outcome["x"] is not None
    assert trace.outcome["y"] is not None


def test_add_existing_vertex_rejected(triangle):
    trace = run_algorithm(AlgorithmId.GRAPH_ADD_VERTEX, triangle, {"vertex": "A"})
    assert trace.rejection.kind is RejectionKind.PRECONDITION
    assert trace.rejection.message == "Vertex already exists."


def test_remove_vertex_drops_incident_edges(triangle):
    trace = run_algorithm(AlgorithmId.GRAPH_REMOVE_VERTEX, triangle, {"vertex": "A"})
    assert trace.outcome["removed_edges"] == 2
    assert edge_list(trace.final_snapshot) == [("B", "C", 1)]
    assert EdgeRef("A", "B") in trace[0].highlight
    assert len(trace) == 2


def test_add_edge():
    graph = make_graph(vertices=["A", "B"])
    trace = run_algorithm(AlgorithmId.GRAPH_ADD_EDGE, graph, {"u": "A", "v": "B", "weight": "3"})
    assert edge_list(trace.final_snapshot) == [("A", "B", 3)]
    assert graph.edges == []


@pytest.mark.parametrize(
    "params, message",
    [
        ({"u": "B", "v": "A"}, "Edge already exists."),
        ({"u": "A", "v": "Z"}, "Vertex Z not found."),
    ],
)
def test_add_edge_rejected(triangle, params, message):
    trace = run_algorithm(AlgorithmId.GRAPH_ADD_EDGE, triangle, params)
    assert trace.rejection.kind is RejectionKind.PRECONDITION
    assert trace.rejection.message == message


def test_remove_edge_either_orientation(triangle):
    trace = run_algorithm(AlgorithmId.GRAPH_REMOVE_EDGE, triangle, {"u": "B", "v": "A"})
    assert trace.outcome["edge"] == ("A", "B", 1)
    assert edge_list(trace.final_snapshot) == [("B", "C", 1), ("A", "C", 5)]


def test_remove_directed_edge_respects_orientation(dag):
    trace = run_algorithm(AlgorithmId.GRAPH_REMOVE_EDGE, dag, {"u": "B", "v": "A"})
    assert trace.rejection.message == "Edge not found."


# Traversals


def test_bfs_order(triangle):
    trace = run_algorithm(AlgorithmId.BFS, triangle, {"start": "A"})
    assert trace.outcome["order"] == ["A", "B", "C"]
    assert trace[-1].message == "BFS order: A, B, C"


def test_dfs_pops_last_pushed(triangle):
    trace = run_algorithm(AlgorithmId.DFS, triangle, {"start": "A"})
    assert trace.outcome["order"] == ["A", "C", "B"]


def test_traversal_reaches_only_component():
    graph = make_graph([("A", "B")], vertices=["A", "B", "C"])
    assert run_algorithm(AlgorithmId.BFS, graph, {"start": "A"}).outcome["order"] == ["A", "B"]


def test_traversal_unknown_start(triangle):
    trace = run_algorithm(AlgorithmId.BFS, triangle, {"start": "Z"})
    assert trace.rejection.kind is RejectionKind.PRECONDITION
    assert trace.rejection.message == "Vertex Z not found."


@pytest.mark.parametrize(
    "edges, directed, cycle",
    [
        ([("A", "B"), ("B", "C"), ("C", "A")], False, True),
        ([("A", "B"), ("B", "C")], False, False),
        ([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")], True, False),
        ([("A", "B"), ("B", "A")], True, True),
        ([("A", "B"), ("A", "B")], False, True),
    ],
)
def test_cycle_detection(edges, directed, cycle):
    trace = run_algorithm(AlgorithmId.CYCLE_DETECTION, make_graph(edges, directed=directed))
    assert trace.outcome["cycle"] is cycle
    assert trace[-1].message == ("Cycle detected" if cycle else "No cycle")


def test_bipartite_square():
    square = make_graph([("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")])
    trace = run_algorithm(AlgorithmId.BIPARTITE, square)
    assert trace.outcome["bipartite"] is True
    assert trace.outcome["colors"] == {"A": 0, "B": 1, "D": 1, "C": 0}


def test_odd_cycle_not_bipartite(triangle):
    trace = run_algorithm(AlgorithmId.BIPARTITE, triangle)
    assert trace.outcome["bipartite"] is False
    assert trace[-1].message == "Not bipartite"


# Shortest paths


def test_dijkstra_prefers_cheaper_detour(triangle):
    trace = run_algorithm(AlgorithmId.DIJKSTRA, triangle, {"start": "A", "goal": "C"})
    assert trace.outcome["path"] == ["A", "B", "C"]
    assert trace.outcome["distance"] == 2
    assert trace[-1].message == "Path: A -> B -> C"
    assert {EdgeRef("A", "B"), EdgeRef("B", "C")} <= trace[-1].highlight


def test_dijkstra_no_path():
    graph = make_graph([("A", "B")], vertices=["A", "B", "C"])
    trace = run_algorithm(AlgorithmId.DIJKSTRA, graph, {"start": "A", "goal": "C"})
    assert trace.outcome["path"] == []
    assert trace.outcome["distance"] is None
    assert trace[-1].message == "No path from A to C"


@pytest.mark.parametrize("kind", [AlgorithmId.DIJKSTRA, AlgorithmId.A_STAR])
def test_negative_weights_rejected(kind):
    graph = make_graph([("A", "B", -1)])
    trace = run_algorithm(kind, graph, {"start": "A", "goal": "B"})
    assert trace.rejection.kind is RejectionKind.PRECONDITION
    assert "non-negative" in trace.rejection.message


def test_bellman_ford_distances(triangle):
    trace = run_algorithm(AlgorithmId.BELLMAN_FORD, triangle, {"start": "A"})
    assert trace.outcome["distances"] == {"A": 0, "B": 1, "C": 2}
    assert trace.outcome["negative_cycle"] is False


def test_bellman_ford_negative_cycle():
    graph = make_graph([("A", "B", 1), ("B", "C", -2), ("C", "A", -1)], directed=True)
    trace = run_algorithm(AlgorithmId.BELLMAN_FORD, graph, {"start": "A"})
    assert trace.outcome["negative_cycle"] is True
    assert trace[-1].message == "Negative cycle detected"


def test_floyd_warshall(triangle):
    trace = run_algorithm(AlgorithmId.FLOYD_WARSHALL, triangle)
    distances = trace.outcome["distances"]
    assert distances["A"]["C"] == 2
    assert distances["C"]["A"] == 2
    assert distances["B"]["B"] == 0


def test_floyd_warshall_unreachable_pairs_stay_infinite(dag):
    distances = run_algorithm(AlgorithmId.FLOYD_WARSHALL, dag).outcome["distances"]
    assert distances["A"]["D"] == 2
    assert math.isinf(distances["D"]["A"])


def test_a_star(line_graph):
    trace = run_algorithm(AlgorithmId.A_STAR, line_graph, {"start": "A", "goal": "C"})
    assert trace.outcome["path"] == ["A", "B", "C"]
    assert trace.outcome["distance"] == 200
    assert trace[-1].message == "Path found: A -> B -> C"


def test_a_star_breaks_ties_toward_latest_opened():
    graph = WorkingGraph()
    for vertex_id, x, y in [("A", 0, 0), ("B", 100, 100), ("C", 100, -100), ("D", 200, 0)]:
        graph.add_vertex(vertex_id, x, y)
    for u, v in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]:
        graph.add_edge(u, v, 142)
    trace = run_algorithm(AlgorithmId.A_STAR, graph, {"start": "A", "goal": "D"})
    explored = [frame.message for frame in trace if frame.message.startswith("Exploring")]
    assert explored == ["Exploring A", "Exploring C", "Exploring B"]
    assert trace.outcome["path"] == ["A", "C", "D"]


# Spanning trees


def test_prim(triangle):
    trace = run_algorithm(AlgorithmId.PRIM, triangle)
    assert trace.outcome["mst"] == [("A", "B", 1), ("B", "C", 1)]
    assert trace.outcome["total"] == 2
    assert trace[-1].message == "MST complete"


def test_prim_spanning_forest():
    graph = make_graph([("A", "B", 1), ("C", "D", 2)])
    trace = run_algorithm(AlgorithmId.PRIM, graph)
    assert trace.outcome["trees"] == 2
    assert trace[-1].message == "Graph is disconnected: spanning forest with 2 trees"


def test_prim_on_empty_graph():
    trace = run_algorithm(AlgorithmId.PRIM, WorkingGraph())
    assert trace.rejection.kind is RejectionKind.STRUCTURAL


def test_kruskal(triangle):
    trace = run_algorithm(AlgorithmId.KRUSKAL, triangle)
    assert trace.outcome["mst"] == [("A", "B", 1), ("B", "C", 1)]
    assert trace.outcome["rejected"] == [("A", "C", 5)]
    assert trace.outcome["total"] == 2


@pytest.mark.parametrize("kind", [AlgorithmId.PRIM, AlgorithmId.KRUSKAL])
def test_spanning_trees_need_undirected_graph(dag, kind):
    trace = run_algorithm(kind, dag)
    assert trace.rejection.kind is RejectionKind.PRECONDITION


# Orderings


def test_topological_sort(dag):
    trace = run_algorithm(AlgorithmId.TOPOLOGICAL_SORT, dag)
    assert trace.outcome["order"] == ["A", "B", "C", "D"]
    assert trace.outcome["cycle"] is False


def test_topological_sort_reports_cycle():
    graph = make_graph([("A", "B"), ("B", "A"), ("C", "A")], directed=True)
    trace = run_algorithm(AlgorithmId.TOPOLOGICAL_SORT, graph)
    assert trace.outcome["cycle"] is True
    assert trace.outcome["order"] == ["C"]
    assert trace[-1].message == "Cycle detected"


@pytest.mark.parametrize("kind", [AlgorithmId.TOPOLOGICAL_SORT, AlgorithmId.SCC])
def test_orderings_need_directed_graph(triangle, kind):
    trace = run_algorithm(kind, triangle)
    assert trace.rejection.message == "Graph must be directed."


def test_strongly_connected_components():
    graph = make_graph([("A", "B"), ("B", "A"), ("B", "C")], directed=True)
    trace = run_algorithm(AlgorithmId.SCC, graph)
    assert trace.outcome["components"] == [["A", "B"], ["C"]]
    assert trace[-1].message == "2 strongly connected components"


def test_bfs_visits_by_layers():
    graph = make_graph([("A", "B"), ("A", "C"), ("B", "D")])
    assert run_algorithm(AlgorithmId.BFS, graph, {"start": "A"}).outcome["order"] == ["A", "B", "C", "D"]


def test_kruskal_rejects_heaviest_triangle_edge():
    graph = make_graph([("A", "B", 1), ("B", "C", 2), ("A", "C", 3)])
    trace = run_algorithm(AlgorithmId.KRUSKAL, graph)
    assert trace.outcome["mst"] == [("A", "B", 1), ("B", "C", 2)]
    assert trace.outcome["rejected"] == [("A", "C", 3)]

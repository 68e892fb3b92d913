"""Graph edits: add and remove vertices and edges."""

from __future__ import annotations

from dsatrace.algorithms.graphs.common import missing_vertex
from dsatrace.algorithms.params import EdgeEndpointsParams, EdgeParams, VertexParams
from dsatrace.algorithms.registry import AlgorithmRun, algorithm
from dsatrace.core.catalog import AlgorithmId
from dsatrace.core.identity import EdgeRef
from dsatrace.tracing import Trace
from dsatrace.working import WorkingGraph


@algorithm(AlgorithmId.GRAPH_ADD_VERTEX, params=VertexParams)
def add_vertex(run: AlgorithmRun[VertexParams], graph: WorkingGraph) -> Trace:
    vertex_id = run.params.vertex
    if graph.has_vertex(vertex_id):
        return run.precondition(graph, "Vertex already exists.")
    vertex = graph.add_vertex(vertex_id, run.params.x, run.params.y)
    run.step(graph, [vertex_id], 0, f"Added vertex {vertex_id}")
    return run.finish(vertex=vertex_id, x=vertex.x, y=vertex.y)


@algorithm(AlgorithmId.GRAPH_REMOVE_VERTEX, params=VertexParams)
def remove_vertex(run: AlgorithmRun[VertexParams], graph: WorkingGraph) -> Trace:
    vertex_id = run.params.vertex
    if not graph.has_vertex(vertex_id):
        return run.precondition(graph, "Vertex not found.")
    incident = [e.ref for e in graph.edges if vertex_id in (e.u, e.v)]
    run.step(graph, [vertex_id, *incident], 0, f"Removing vertex {vertex_id} and {len(incident)} edges")
    graph.remove_vertex(vertex_id)
    run.step(graph, line=1, message=f"Removed vertex {vertex_id}")
    return run.finish(vertex=vertex_id, removed_edges=len(incident))


@algorithm(AlgorithmId.GRAPH_ADD_EDGE, params=EdgeParams)
def add_edge(run: AlgorithmRun[EdgeParams], graph: WorkingGraph) -> Trace:
    u, v, weight = run.params.u, run.params.v, run.params.weight
    if (rejected := missing_vertex(run, graph, u, v)) is not None:
        return rejected
    if graph.find_edge(u, v) != -1:
        return run.precondition(graph, "Edge already exists.")
    graph.add_edge(u, v, weight)
    run.step(graph, [EdgeRef(u, v)], 0, f"Added edge {u}-{v}")
    return run.finish(edge=(u, v, weight))


@algorithm(AlgorithmId.GRAPH_REMOVE_EDGE, params=EdgeEndpointsParams)
def remove_edge(run: AlgorithmRun[EdgeEndpointsParams], graph: WorkingGraph) -> Trace:
    u, v = run.params.u, run.params.v
    index = graph.find_edge(u, v)
    if index == -1:
        return run.precondition(graph, "Edge not found.")
    edge = graph.edges[index]
    run.step(graph, [EdgeRef(u, v), u, v], 0, f"Removing edge {u}-{v}")
    graph.remove_edge(u, v)
    run.step(graph, line=1, message=f"Removed edge {u}-{v}")
    return run.finish(edge=(edge.u, edge.v, edge.weight))

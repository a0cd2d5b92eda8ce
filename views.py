"""
Derived graphs built from another graph by a structural transform.

Views are eager snapshots: the transformed graph is materialised into an
owned AdjacencyListGraph at construction time, and every Graph call is
delegated to it. Later changes to the source graph are not reflected.
"""

import logging
from typing import List, Optional, Union

from adjacency_list_graph import AdjacencyListGraph
from exceptions import VertexNotFoundError
from graph import Graph
from vertex import Edge, Vertex

logger = logging.getLogger(__name__)

MERGED_PATTERN = "{} -- {}"


class GraphView(Graph):
    """Graph delegating to an internally built adjacency-list graph."""

    def __init__(self, graph: AdjacencyListGraph) -> None:
        self._graph = graph

    def add_vertices(self, *vertices: Vertex) -> None:
        self._graph.add_vertices(*vertices)

    def add_edge(
        self,
        start: Union[Edge, Vertex],
        end: Optional[Vertex] = None,
        cost: Optional[float] = None,
    ) -> None:
        self._graph.add_edge(start, end, cost)

    def vertices(self) -> List[Vertex]:
        return self._graph.vertices()

    def edges(self) -> List[Edge]:
        return self._graph.edges()

    def connected(self, vertex: Vertex) -> List[Vertex]:
        return self._graph.connected(vertex)

    def connected_edges(self, vertex: Vertex) -> List[Edge]:
        return self._graph.connected_edges(vertex)


class ReversedGraph(GraphView):
    """Snapshot of a graph with every edge pointing the other way."""

    def __init__(self, origin: Graph) -> None:
        super().__init__(_reverse(origin))


class ContractedGraph(GraphView):
    """
    Snapshot of a graph with two vertices merged into one.

    The merged vertex is named "<first> -- <second>" after the two
    vertex names. Edges touching either vertex are rewired to the merged
    vertex; edges running directly between the two are dropped.
    """

    def __init__(self, origin: Graph, first: Vertex, second: Vertex) -> None:
        self.merged = merged_vertex(first, second)
        super().__init__(_contract(origin, first, second, self.merged))


def merged_vertex(first: Vertex, second: Vertex) -> Vertex:
    return Vertex(MERGED_PATTERN.format(first.name, second.name))


def reverse(graph: Graph) -> ReversedGraph:
    """Build the reversed view of graph."""
    return ReversedGraph(graph)


def contract(graph: Graph, first: Vertex, second: Vertex) -> ContractedGraph:
    """Build the view of graph with first and second contracted."""
    return ContractedGraph(graph, first, second)


def _reverse(origin: Graph) -> AdjacencyListGraph:
    result = AdjacencyListGraph()
    vertices = origin.vertices()
    result.add_vertices(*vertices)
    for vertex in vertices:
        for edge in origin.connected_edges(vertex):
            result.add_edge(edge.reversed())
    logger.debug(
        "Reversed graph built: %d vertices, %d edges",
        len(vertices),
        len(result.edges()),
    )
    return result


def _contract(
    origin: Graph, first: Vertex, second: Vertex, merged: Vertex
) -> AdjacencyListGraph:
    vertices = origin.vertices()
    if first == second or first not in vertices or second not in vertices:
        raise VertexNotFoundError(
            f"Contracted vertices {first} and {second} must be two distinct "
            f"vertices of the graph"
        )
    pair = (first, second)
    result = AdjacencyListGraph()
    result.add_vertices(*(v for v in vertices if v not in pair))
    result.add_vertices(merged)
    for vertex in vertices:
        for edge in origin.connected_edges(vertex):
            if {edge.start, edge.end} == {first, second}:
                continue
            start = merged if edge.start in pair else edge.start
            end = merged if edge.end in pair else edge.end
            result.add_edge(Edge(start, end, edge.cost))
    logger.debug(
        "Contracted %s and %s into %s: %d vertices, %d edges",
        first.name,
        second.name,
        merged.name,
        len(result.vertices()),
        len(result.edges()),
    )
    return result

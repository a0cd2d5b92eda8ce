"""
Concrete directed, weighted graph implementations.

Implements the Graph interface using a simple adjacency-list representation.
"""

from typing import Dict, List, Optional, Union

from graph import Graph, as_edge
from vertex import Edge, Vertex


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by a vertex -> outgoing edges mapping.

    Parallel edges are kept: adding the same edge twice records it twice.
    """

    def __init__(self) -> None:
        # dicts double as insertion-ordered sets
        self._vertices: Dict[Vertex, None] = {}
        self._edges: List[Edge] = []
        self._neighbors: Dict[Vertex, Dict[Vertex, None]] = {}
        self._outgoing: Dict[Vertex, List[Edge]] = {}

    # --- Mutation API --------------------------------------------------------

    def add_vertices(self, *vertices: Vertex) -> None:
        for vertex in vertices:
            self._vertices.setdefault(vertex, None)

    def add_edge(
        self,
        start: Union[Edge, Vertex],
        end: Optional[Vertex] = None,
        cost: Optional[float] = None,
    ) -> None:
        """
        Add a directed edge.

        The Edge form assumes the endpoints are already known; the
        start/end/cost form registers them first.
        """
        edge = as_edge(start, end, cost)
        if not isinstance(start, Edge):
            self.add_vertices(edge.start, edge.end)
        self._record(edge)

    def _record(self, edge: Edge) -> None:
        self._edges.append(edge)
        self._link(edge)

    def _link(self, edge: Edge) -> None:
        self._neighbors.setdefault(edge.start, {})[edge.end] = None
        self._outgoing.setdefault(edge.start, []).append(edge)

    # --- Graph interface -----------------------------------------------------

    def vertices(self) -> List[Vertex]:
        return list(self._vertices)

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def connected(self, vertex: Vertex) -> List[Vertex]:
        return list(self._neighbors.get(vertex, {}))  # defensive copy

    def connected_edges(self, vertex: Vertex) -> List[Edge]:
        return list(self._outgoing.get(vertex, []))


class UndirectedGraph(AdjacencyListGraph):
    """
    Adjacency-list graph where every added edge is recorded in both directions.

    edges() reports each added connection once, as it was added; the
    reverse direction only shows up in connected() and connected_edges().
    """

    def add_edge(
        self,
        start: Union[Edge, Vertex],
        end: Optional[Vertex] = None,
        cost: Optional[float] = None,
    ) -> None:
        edge = as_edge(start, end, cost)
        if not isinstance(start, Edge):
            self.add_vertices(edge.start, edge.end)
        self._record(edge)
        self._link(edge.reversed())

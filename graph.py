"""
Directed, weighted graph abstraction.

Vertices are Vertex instances.
Edges are directed: start -> end with float cost.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from vertex import Edge, Vertex


class Graph(ABC):
    """Mutable directed, weighted graph over Vertex objects."""

    @abstractmethod
    def add_vertices(self, *vertices: Vertex) -> None:
        """Register vertices. Adding a known vertex again is a no-op."""
        raise NotImplementedError

    @abstractmethod
    def add_edge(
        self,
        start: Union[Edge, Vertex],
        end: Optional[Vertex] = None,
        cost: Optional[float] = None,
    ) -> None:
        """
        Record a directed edge.

        Accepts either a single Edge, or start, end and cost. The
        three-argument form also registers both endpoints as vertices.
        """
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> List[Vertex]:
        """Return all vertices in the graph."""
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> List[Edge]:
        """Return all edges in the graph."""
        raise NotImplementedError

    @abstractmethod
    def connected(self, vertex: Vertex) -> List[Vertex]:
        """
        Distinct vertices one outgoing edge away from vertex.

        Returns an empty list when vertex has no outgoing edges.
        """
        raise NotImplementedError

    @abstractmethod
    def connected_edges(self, vertex: Vertex) -> List[Edge]:
        """
        Outgoing edges of vertex.

        Returns an empty list when vertex has no outgoing edges.
        """
        raise NotImplementedError


def as_edge(
    start: Union[Edge, Vertex],
    end: Optional[Vertex] = None,
    cost: Optional[float] = None,
) -> Edge:
    """Normalise the two add_edge call forms into an Edge."""
    if isinstance(start, Edge):
        if end is not None or cost is not None:
            raise TypeError("add_edge takes either an Edge or start, end and cost")
        return start
    if end is None or cost is None:
        raise TypeError("add_edge requires end and cost when start is a Vertex")
    return Edge(start, end, float(cost))

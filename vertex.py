"""
Vertex and edge value types.

Vertices are identified by their label only; edges are directed
start -> end triples with a real-valued cost.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Vertex:
    """Labelled vertex. Two vertices with the same name are interchangeable."""

    name: str

    def __str__(self) -> str:
        return f"Vertex [name={self.name}]"


@dataclass(frozen=True)
class Edge:
    """
    Directed, weighted edge start -> end.

    An undirected connection is modelled as two edges with swapped
    endpoints and equal cost.
    """

    start: Vertex
    end: Vertex
    cost: float

    def reversed(self) -> "Edge":
        """Same edge pointing the other way."""
        return Edge(self.end, self.start, self.cost)

    def __str__(self) -> str:
        return f"Edge [start={self.start}, end={self.end}, cost={self.cost}]"

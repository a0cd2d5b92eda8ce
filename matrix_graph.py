"""
Fixed-capacity directed graph backed by an adjacency matrix.

Vertex i owns row and column i of a square numpy matrix; a NaN cell
means "no edge". The matrix cannot hold parallel edges: adding an edge
for an ordered pair that already has one overwrites its cost.
"""

from typing import Dict, List, Optional, Union

import numpy as np

from exceptions import CapacityExceededError
from graph import Graph, as_edge
from vertex import Edge, Vertex


class MatrixGraph(Graph):
    """Directed, weighted graph over at most ``capacity`` vertices."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._costs = np.full((capacity, capacity), np.nan, dtype=float)
        self._index: Dict[Vertex, int] = {}
        self._vertex_at: List[Vertex] = []

    @property
    def capacity(self) -> int:
        return self._costs.shape[0]

    def add_vertices(self, *vertices: Vertex) -> None:
        """
        Register vertices, assigning each the next free matrix slot.

        Raises CapacityExceededError when the new vertices do not all fit,
        in which case none of them is registered.
        """
        new = [
            vertex for vertex in dict.fromkeys(vertices) if vertex not in self._index
        ]
        if len(self._vertex_at) + len(new) > self.capacity:
            raise CapacityExceededError(
                f"Maximum of {self.capacity} vertices can be added"
            )
        for vertex in new:
            self._index[vertex] = len(self._vertex_at)
            self._vertex_at.append(vertex)

    def add_edge(
        self,
        start: Union[Edge, Vertex],
        end: Optional[Vertex] = None,
        cost: Optional[float] = None,
    ) -> None:
        """Add or overwrite the edge start -> end. Auto-adds both endpoints."""
        edge = as_edge(start, end, cost)
        self.add_vertices(edge.start, edge.end)
        self._costs[self._index[edge.start], self._index[edge.end]] = edge.cost

    def vertices(self) -> List[Vertex]:
        return list(self._vertex_at)

    def edges(self) -> List[Edge]:
        rows, cols = np.nonzero(~np.isnan(self._costs))
        return [
            Edge(self._vertex_at[i], self._vertex_at[j], float(self._costs[i, j]))
            for i, j in zip(rows.tolist(), cols.tolist())
        ]

    def connected(self, vertex: Vertex) -> List[Vertex]:
        return [edge.end for edge in self.connected_edges(vertex)]

    def connected_edges(self, vertex: Vertex) -> List[Edge]:
        idx = self._index.get(vertex)
        if idx is None:
            return []
        row = self._costs[idx]
        return [
            Edge(vertex, self._vertex_at[j], float(row[j]))
            for j in np.flatnonzero(~np.isnan(row)).tolist()
        ]

"""
Shared graph builders for the test-suite.
"""

from typing import Iterable, Tuple

import pytest

from adjacency_list_graph import AdjacencyListGraph, UndirectedGraph
from graph import Graph
from vertex import Vertex


def v(name) -> Vertex:
    return Vertex(str(name))


def populate(graph: Graph, count: int, edges: Iterable[Tuple[int, int, float]]) -> Graph:
    """Add vertices "1".."count" then one edge per (start, end, cost)."""
    graph.add_vertices(*(v(i) for i in range(1, count + 1)))
    for start, end, cost in edges:
        graph.add_edge(v(start), v(end), cost)
    return graph


# 8 vertices, 11 edges, everything reachable from 1.
EIGHT_ELEVEN = [
    (1, 2, 1), (1, 3, 1), (2, 4, 1), (3, 4, 1), (3, 5, 1), (4, 6, 1),
    (5, 6, 1), (5, 7, 1), (5, 8, 1), (6, 8, 1), (7, 8, 1),
]

# Three 3-cycles, the first feeding into the second.
TRIPLES = [
    (1, 4, 1), (4, 7, 1), (7, 1, 1),
    (3, 6, 1), (6, 9, 1), (9, 3, 1),
    (2, 5, 1), (5, 8, 1), (8, 2, 1),
    (1, 2, 1), (4, 5, 1), (7, 8, 1),
]


@pytest.fixture
def directed_eight() -> AdjacencyListGraph:
    return populate(AdjacencyListGraph(), 8, EIGHT_ELEVEN)


@pytest.fixture
def undirected_eight() -> UndirectedGraph:
    return populate(UndirectedGraph(), 8, EIGHT_ELEVEN)


@pytest.fixture
def six_isolated() -> AdjacencyListGraph:
    return populate(AdjacencyListGraph(), 6, [])


@pytest.fixture
def triples() -> AdjacencyListGraph:
    return populate(AdjacencyListGraph(), 9, TRIPLES)

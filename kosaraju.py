"""
Kosaraju's two-pass strongly connected components.

Pass 1 runs an iterative depth-first search over the reversed graph and
orders vertices by decreasing finishing time. Pass 2 walks that order,
running a depth-first search over the original graph from the first
unassigned vertex; everything it reaches among the unassigned vertices
forms one component.
"""

import logging
from typing import Dict, Iterator, List, Set, Tuple

from algorithms import ComponentEngine
from graph import Graph
from traversal import DepthFirst
from vertex import Vertex
from views import ReversedGraph

logger = logging.getLogger(__name__)


class Kosaraju(ComponentEngine):
    """
    Iterator over the strongly connected components of a graph.

    Components are computed at construction and handed out one vertex set
    at a time, sink components of the original graph first. The order of
    vertices inside a component carries no meaning.
    """

    def __init__(self, graph: Graph) -> None:
        self._components: List[Set[Vertex]] = _scc(graph)
        self._cursor = 0

    def has_next(self) -> bool:
        return self._cursor < len(self._components)

    def __next__(self) -> Set[Vertex]:
        if not self.has_next():
            raise StopIteration
        component = self._components[self._cursor]
        self._cursor += 1
        return component


def _scc(graph: Graph) -> List[Set[Vertex]]:
    remaining: Dict[Vertex, None] = dict.fromkeys(finishing_order(ReversedGraph(graph)))
    result: List[Set[Vertex]] = []
    while remaining:
        root = next(iter(remaining))
        component: Set[Vertex] = set()
        for vertex in DepthFirst(graph, root, within=remaining):
            component.add(vertex)
            del remaining[vertex]
        result.append(component)
    logger.debug(
        "Found %d strongly connected components over %d vertices",
        len(result),
        sum(len(c) for c in result),
    )
    return result


def finishing_order(graph: Graph) -> List[Vertex]:
    """
    Vertices of graph by decreasing depth-first finishing time.

    The search restarts from the first unvisited vertex (in vertices()
    order) whenever it runs dry, so every vertex is covered.
    """
    visited: Set[Vertex] = set()
    finished: List[Vertex] = []
    for root in graph.vertices():
        if root in visited:
            continue
        visited.add(root)
        stack: List[Tuple[Vertex, Iterator[Vertex]]] = [
            (root, iter(graph.connected(root)))
        ]
        while stack:
            vertex, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append((neighbor, iter(graph.connected(neighbor))))
                    break
            else:
                stack.pop()
                finished.append(vertex)
    finished.reverse()
    return finished

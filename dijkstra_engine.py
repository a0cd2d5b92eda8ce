"""
Heap-based Dijkstra shortest paths.

Uses IndexedMinHeap keyed by (tentative distance, relaxation sequence) to
compute single-source shortest paths over any implementation of the Graph
interface. Edge costs must be non-negative; this is not checked, and
negative costs give unspecified results.
"""

import logging
from typing import Dict, List, Optional, Set

from algorithms import ShortestPathEngine
from graph import Graph
from min_heap import HeapNode, IndexedMinHeap
from vertex import Edge, Vertex

logger = logging.getLogger(__name__)

UNREACHED_COST = -1.0


class DijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra, optionally stopping early at an end vertex.

    The precedence map (vertex -> edge that last extended its shortest
    path) is computed at construction. The start vertex never appears in
    it. Among equally cheap ways to reach a vertex, the first edge that
    was relaxed is kept, and vertices at equal distance settle in the
    order their current best edge was relaxed.

    Complexity:
        O((V + E) log V) over the vertices reachable from the start.
    """

    def __init__(self, graph: Graph, start: Vertex, end: Optional[Vertex] = None) -> None:
        self.start = start
        self.end = end
        # Instrumentation counters for the computation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self._settled: Dict[Vertex, float] = {}
        self._precedent: Dict[Vertex, Edge] = self._calculate(graph)

    @property
    def precedence(self) -> Dict[Vertex, Edge]:
        return dict(self._precedent)

    def reached(self) -> List[Vertex]:
        """Vertices whose shortest path is known, in the order they settled."""
        return list(self._settled)

    def cost(self, vertex: Vertex) -> float:
        if vertex == self.start:
            return 0.0
        if vertex not in self._precedent:
            return UNREACHED_COST
        total = 0.0
        current = vertex
        while current != self.start:
            edge = self._precedent[current]
            total += edge.cost
            current = edge.start
        return total

    def path(self, vertex: Vertex) -> List[Vertex]:
        if vertex == self.start:
            return [vertex]
        if vertex not in self._precedent:
            return []
        result = [vertex]
        current = vertex
        while current != self.start:
            current = self._precedent[current].start
            result.append(current)
        result.reverse()
        return result

    def _calculate(self, graph: Graph) -> Dict[Vertex, Edge]:
        precedent: Dict[Vertex, Edge] = {}
        # best edge so far into each queued, not yet settled vertex
        candidates: Dict[Vertex, Edge] = {}
        heap: IndexedMinHeap[Vertex] = IndexedMinHeap(_capacity(graph, self.start))
        # Keys are (distance, seq); seq grows on every relaxation so equal
        # distances leave the heap in relaxation order.
        seq = 0
        heap.insert(HeapNode(self.start, (0.0, seq)))
        self.last_heap_pushes += 1

        while heap:
            popped = heap.pop()
            self.last_heap_pops += 1
            u, d_u = popped.element, popped.key[0]
            self._settled[u] = d_u
            if u in candidates:
                precedent[u] = candidates.pop(u)
            if u == self.end:
                logger.debug("Reached end vertex %s at cost %s", u.name, d_u)
                break

            for edge in graph.connected_edges(u):
                self.last_edges_examined += 1
                v = edge.end
                if v in self._settled:
                    continue
                alt = d_u + edge.cost
                if v not in heap:
                    seq += 1
                    heap.insert(HeapNode(v, (alt, seq)))
                    self.last_heap_pushes += 1
                elif alt < heap.node(v).key[0]:
                    seq += 1
                    heap.node(v).update((alt, seq))
                    heap.update(v)
                else:
                    continue
                candidates[v] = edge
                self.last_relaxed += 1

        logger.debug(
            "Dijkstra from %s settled %d vertices (%d edges examined)",
            self.start.name,
            len(self._settled),
            self.last_edges_examined,
        )
        return precedent


def _capacity(graph: Graph, start: Vertex) -> int:
    """Number of distinct vertices that could ever be queued."""
    universe: Set[Vertex] = set(graph.vertices())
    universe.add(start)
    for edge in graph.edges():
        universe.add(edge.start)
        universe.add(edge.end)
    return len(universe)

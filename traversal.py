"""
Lazy breadth-first and depth-first traversal cursors.

Each cursor is a single-pass iterator over the vertices reachable from a
start vertex. has_next() peeks without consuming; next(cursor) consumes
and raises StopIteration once the traversal is exhausted.
"""

from collections import deque
from typing import Container, Deque, Iterator, List, Optional, Set

from graph import Graph
from vertex import Vertex


class BreadthFirst(Iterator[Vertex]):
    """
    BFS cursor.

    Newly discovered neighbours join the back of a FIFO queue in the order
    graph.connected() returns them; a vertex is queued at most once.
    """

    def __init__(self, graph: Graph, start: Vertex) -> None:
        self._graph = graph
        self._queue: Deque[Vertex] = deque([start])
        self._seen: Set[Vertex] = {start}

    def has_next(self) -> bool:
        return bool(self._queue)

    def __next__(self) -> Vertex:
        if not self._queue:
            raise StopIteration
        current = self._queue.popleft()
        for neighbor in self._graph.connected(current):
            if neighbor not in self._seen:
                self._seen.add(neighbor)
                self._queue.append(neighbor)
        return current


class DepthFirst(Iterator[Vertex]):
    """
    DFS cursor.

    Neighbours are pushed on a LIFO stack in graph.connected() order, so
    siblings come out in reverse. A vertex may sit on the stack more than
    once; entries already visited are discarded when reached.

    If within is given, the traversal never steps outside it.
    """

    def __init__(
        self,
        graph: Graph,
        start: Vertex,
        within: Optional[Container[Vertex]] = None,
    ) -> None:
        self._graph = graph
        self._within = within
        self._stack: List[Vertex] = [start]
        self._visited: Set[Vertex] = set()

    def has_next(self) -> bool:
        while self._stack and self._stack[-1] in self._visited:
            self._stack.pop()
        return bool(self._stack)

    def __next__(self) -> Vertex:
        if not self.has_next():
            raise StopIteration
        current = self._stack.pop()
        self._visited.add(current)
        self._stack.extend(
            v
            for v in self._graph.connected(current)
            if v not in self._visited
            and (self._within is None or v in self._within)
        )
        return current

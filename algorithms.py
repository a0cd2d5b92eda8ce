"""
Algorithm interfaces for graph analysis.

Keeps query contracts separate from the concrete algorithms behind them.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Set

from vertex import Vertex


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path queries.

    Implementations compute their result for a fixed graph and start vertex
    at construction time and then answer queries against it.
    """

    @abstractmethod
    def cost(self, vertex: Vertex) -> float:
        """
        Cost of the shortest path from the start to vertex.

        Returns:
            0 for the start itself, a negative sentinel when vertex was
            never reached.
        """
        raise NotImplementedError

    @abstractmethod
    def path(self, vertex: Vertex) -> List[Vertex]:
        """
        Vertices on the shortest path from the start to vertex, inclusive.

        Returns:
            An empty list when vertex was never reached.
        """
        raise NotImplementedError


class ComponentEngine(Iterator[Set[Vertex]], ABC):
    """
    Interface for enumerating a graph's components one vertex set at a time.
    """

    @abstractmethod
    def has_next(self) -> bool:
        """Whether another component is available."""
        raise NotImplementedError

    @abstractmethod
    def __next__(self) -> Set[Vertex]:
        """Consume the next component; StopIteration once exhausted."""
        raise NotImplementedError

    def components(self) -> List[Set[Vertex]]:
        """Drain and return every remaining component."""
        return list(self)

"""
Indexed binary min-heap with in-place key updates.

The heap lives in a 1-indexed list (parent i // 2, children 2i and
2i + 1) alongside an element -> position index, kept in sync on every
swap, so a node whose key changed can be re-seated in O(log n) without
a scan.
"""

import logging
from typing import Any, Dict, Generic, Hashable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Hashable)

FRONT = 1


class HeapNode(Generic[E]):
    """
    An element paired with the mutable key used for heap ordering.

    Keys only need to support `<`, so tuples work for tie-breaking.
    """

    __slots__ = ("element", "key")

    def __init__(self, element: E, key: Any) -> None:
        self.element = element
        self.key = key

    def update(self, key: Any) -> None:
        """
        Change the key in place.

        The owning heap must then be told via IndexedMinHeap.update.
        """
        self.key = key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeapNode):
            return NotImplemented
        return self.element == other.element

    def __hash__(self) -> int:
        return hash(self.element)

    def __repr__(self) -> str:
        return f"HeapNode(element={self.element!r}, key={self.key!r})"


class IndexedMinHeap(Generic[E]):
    """
    Fixed-capacity min-heap of HeapNode objects.

    Inserting into a full heap is a silent no-op (insert returns False).
    On equal keys, sift-down always moves towards the left child.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._heap: List[Optional[HeapNode[E]]] = [None]  # slot 0 unused
        self._positions: Dict[E, int] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._heap) - 1

    def __contains__(self, element: object) -> bool:
        return element in self._positions

    # --- Public API ----------------------------------------------------------

    def insert(self, node: HeapNode[E]) -> bool:
        if len(self) >= self._capacity:
            logger.debug("Heap full (capacity %d), dropping %r", self._capacity, node)
            return False
        self._heap.append(node)
        self._positions[node.element] = len(self)
        self._sift_up(len(self))
        return True

    def pop(self) -> Optional[HeapNode[E]]:
        """Remove and return the node with the smallest key, or None if empty."""
        if not len(self):
            return None
        popped = self._heap[FRONT]
        last = self._heap.pop()
        del self._positions[popped.element]
        if len(self):
            self._heap[FRONT] = last
            self._positions[last.element] = FRONT
            self._sift_down(FRONT)
        return popped

    def update(self, element: E) -> None:
        """
        Restore heap order after the element's node changed key in place.

        A single key change breaks the heap property in one direction only,
        so exactly one of sift-down or sift-up runs.
        """
        pos = self._positions[element]
        if not self._sift_down(pos):
            self._sift_up(pos)

    def node(self, element: E) -> HeapNode[E]:
        return self._heap[self._positions[element]]

    # --- Internals -----------------------------------------------------------

    def _key(self, pos: int) -> Any:
        return self._heap[pos].key

    def _swap(self, first: int, second: int) -> None:
        heap = self._heap
        heap[first], heap[second] = heap[second], heap[first]
        self._positions[heap[first].element] = first
        self._positions[heap[second].element] = second

    def _sift_up(self, pos: int) -> bool:
        moved = False
        while pos > FRONT and self._key(pos) < self._key(pos // 2):
            self._swap(pos, pos // 2)
            pos //= 2
            moved = True
        return moved

    def _sift_down(self, pos: int) -> bool:
        moved = False
        size = len(self)
        while 2 * pos <= size:
            child = 2 * pos
            right = child + 1
            if right <= size and self._key(right) < self._key(child):
                child = right
            if not self._key(child) < self._key(pos):
                break
            self._swap(pos, child)
            pos = child
            moved = True
        return moved

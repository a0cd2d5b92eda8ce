"""
Unit tests for IndexedMinHeap and HeapNode.
"""

import pytest

from min_heap import HeapNode, IndexedMinHeap


def _drain(heap):
    order = []
    while heap:
        order.append(heap.pop().element)
    return order


def _filled():
    heap = IndexedMinHeap(5)
    for element, key in (("a", 0), ("e", 4), ("b", 1), ("d", 3), ("c", 2)):
        assert heap.insert(HeapNode(element, key))
    return heap


def test_node_holds_element_and_key():
    node = HeapNode("x", 2.5)

    assert node.element == "x"
    assert node.key == 2.5

    node.update(1.0)
    assert node.key == 1.0


def test_node_equality_relies_on_element():
    assert HeapNode("x", 1) == HeapNode("x", 7)
    assert HeapNode("x", 1) != HeapNode("y", 1)
    assert hash(HeapNode("x", 1)) == hash(HeapNode("x", 7))


def test_pops_in_key_order():
    assert _drain(_filled()) == ["a", "b", "c", "d", "e"]


def test_update_after_raising_key():
    heap = _filled()

    heap.node("b").update(15)
    heap.update("b")

    assert _drain(heap) == ["a", "c", "d", "e", "b"]


def test_update_after_lowering_key():
    heap = _filled()

    heap.node("e").update(-1)
    heap.update("e")

    assert _drain(heap) == ["e", "a", "b", "c", "d"]


def test_update_without_change_keeps_order():
    heap = _filled()

    heap.update("d")

    assert _drain(heap) == ["a", "b", "c", "d", "e"]


def test_node_lookup_follows_swaps():
    heap = _filled()
    heap.pop()

    assert heap.node("c").key == 2
    assert "a" not in heap
    assert "c" in heap
    with pytest.raises(KeyError):
        heap.node("a")


def test_pop_empty_returns_none():
    heap = IndexedMinHeap(3)

    assert heap.pop() is None
    assert len(heap) == 0
    assert not heap


def test_insert_beyond_capacity_is_noop():
    heap = IndexedMinHeap(2)

    assert heap.insert(HeapNode("a", 1))
    assert heap.insert(HeapNode("b", 2))
    assert not heap.insert(HeapNode("c", 0))

    assert len(heap) == 2
    assert "c" not in heap
    assert _drain(heap) == ["a", "b"]


def test_equal_keys_sift_to_left_child():
    heap = IndexedMinHeap(4)
    for element, key in (("r", 0), ("x", 1), ("y", 1), ("z", 5)):
        heap.insert(HeapNode(element, key))

    assert _drain(heap) == ["r", "x", "y", "z"]


def test_update_unknown_element_raises():
    heap = _filled()

    with pytest.raises(KeyError):
        heap.update("missing")


def test_capacity_is_reusable_after_pop():
    heap = IndexedMinHeap(1)

    heap.insert(HeapNode("a", 1))
    heap.pop()

    assert heap.insert(HeapNode("b", 2))
    assert heap.capacity == 1
    assert _drain(heap) == ["b"]


def test_tuple_keys_break_ties_by_second_field():
    heap = IndexedMinHeap(3)
    for element, key in (("a", (1, 1)), ("b", (1, 2)), ("c", (1, 3))):
        heap.insert(HeapNode(element, key))

    assert _drain(heap) == ["a", "b", "c"]

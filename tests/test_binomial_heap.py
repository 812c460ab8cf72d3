import random

import pytest

from algorithms import binomial_heap as bh
from algorithms.errors import InvalidKeyError
from engine.inspector import check_binomial_heap
from structures import heap_size, iter_children, iter_nodes, iter_roots

from conftest import SEQUENCES


def root_degrees(head):
    return [r.degree for r in iter_roots(head)]


def keys(head):
    return sorted(n.key for n in iter_nodes(head))


def test_create_node_is_degree_zero():
    node = bh.create_node(10)
    assert node.degree == 0
    assert node.key == 10
    assert node.parent is None and node.child is None and node.sibling is None


def test_union_of_two_singletons_links_smaller_on_top():
    a = bh.create_node(5)
    b = bh.create_node(3)
    merged = bh.union(a, b)
    assert merged.degree == 1
    assert merged.key == 3
    assert merged.child.key == 5
    assert merged.child.parent is merged
    assert merged.sibling is None


def test_union_with_empty_side_returns_same_object():
    node = bh.create_node(5)
    assert bh.union(None, node) is node
    assert bh.union(node, None) is node
    assert bh.union(None, None) is None


def test_union_does_not_modify_inputs():
    h1 = bh.insert(bh.insert(None, 1), 2)
    h2 = bh.insert(bh.insert(None, 3), 4)
    merged = bh.union(h1, h2)
    assert root_degrees(h1) == [1] and root_degrees(h2) == [1]
    assert root_degrees(merged) == [2]
    assert keys(merged) == [1, 2, 3, 4]


def test_find_min(heap_from):
    heap = heap_from([7, 1, 9, 2, 5])
    assert bh.find_min(heap).key == 1
    assert bh.find_min(None) is None


def test_find_min_prefers_leftmost_on_ties():
    a = bh.create_node(2)
    b = bh.create_node(2)
    a.sibling = b
    assert bh.find_min(a) is a


def test_extract_min_example(heap_from):
    heap = heap_from([4, 8, 6, 1, 3])
    new_heap, min_node = bh.extract_min(heap)
    assert min_node is not None
    assert min_node.key == 1
    assert bh.find_min(new_heap).key != 1
    assert bh.find_min(new_heap).key == 3
    assert keys(new_heap) == [3, 4, 6, 8]
    # the extracted node comes back detached
    assert min_node.child is None and min_node.sibling is None and min_node.degree == 0


def test_extract_min_on_empty_heap():
    assert bh.extract_min(None) == (None, None)


def test_extract_min_leaves_old_heap_usable(heap_from):
    heap = heap_from([5, 2, 8])
    new_heap, _ = bh.extract_min(heap)
    assert keys(heap) == [2, 5, 8]
    assert keys(new_heap) == [5, 8]


def test_extract_until_empty_yields_sorted_keys(heap_from):
    values = [9, 3, 7, 3, 1, 8, 2, 6, 5, 4, 0]
    heap = heap_from(values)
    out = []
    while heap is not None:
        heap, node = bh.extract_min(heap)
        out.append(node.key)
    assert out == sorted(values)


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8, 13, 21])
def test_root_degrees_follow_binary_representation(heap_from, n):
    heap = heap_from(range(n, 0, -1))
    expected = [i for i in range(n.bit_length()) if n >> i & 1]
    assert root_degrees(heap) == expected
    assert heap_size(heap) == n


@pytest.mark.parametrize("values", SEQUENCES)
def test_invariants_survive_mixed_operations(values):
    rng = random.Random(len(values))
    heap = None
    live = []
    for v in values:
        heap = bh.insert(heap, v)
        live.append(v)
        if rng.random() < 0.3:
            heap, node = bh.extract_min(heap)
            assert node.key == min(live)
            live.remove(node.key)
        assert check_binomial_heap(heap) == []
        degrees = root_degrees(heap)
        assert len(degrees) == len(set(degrees))
        for node in iter_nodes(heap):
            for child in iter_children(node):
                assert node.key <= child.key
    assert keys(heap) == sorted(live)


def test_union_of_two_large_heaps(heap_from):
    h1 = heap_from(range(0, 40, 2))
    h2 = heap_from(range(1, 40, 2))
    merged = bh.union(h1, h2)
    assert check_binomial_heap(merged) == []
    assert keys(merged) == list(range(40))


def test_link_trees_prefers_first_on_equal_keys():
    a = bh.create_node(4)
    b = bh.create_node(4)
    winner = bh.link_trees(a, b)
    assert winner is a
    assert a.child is b and b.parent is a and a.degree == 1


def test_link_trees_prepends_child():
    a = bh.union(bh.create_node(1), bh.create_node(2))
    b = bh.union(bh.create_node(3), bh.create_node(4))
    winner = bh.link_trees(a, b)
    assert winner.key == 1
    assert [c.key for c in iter_children(winner)] == [3, 2]
    assert winner.degree == 2


def test_merge_root_lists_is_stable_by_degree():
    a0, b0 = bh.create_node(10), bh.create_node(20)
    a1 = bh.union(bh.create_node(1), bh.create_node(2))
    a0.sibling = a1
    head = bh.merge_root_lists(a0, b0)
    assert [(n.key, n.degree) for n in iter_roots(head)] == [(10, 0), (20, 0), (1, 1)]


def test_duplicate_keys_are_separate_entries(heap_from):
    heap = heap_from([5, 5, 5])
    assert heap_size(heap) == 3
    heap, node = bh.extract_min(heap)
    assert node.key == 5
    assert keys(heap) == [5, 5]


def test_invalid_key_rejected():
    with pytest.raises(InvalidKeyError):
        bh.insert(None, float("nan"))
    with pytest.raises(InvalidKeyError):
        bh.create_node("1")

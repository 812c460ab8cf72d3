from collections import defaultdict

import pytest

from algorithms import binomial_heap as bh
from algorithms import bst
from engine.layout import (
    LAYOUT,
    LayoutConfig,
    bounding_box,
    layout_binary_tree,
    layout_binomial_forest,
    tree_span,
    view_box,
)
from structures import iter_inorder, iter_children, iter_nodes, iter_preorder, iter_roots

from conftest import SEQUENCES, build


def coords(nodes):
    return [(n.id, n.x, n.y) for n in nodes]


def test_skewed_tree_positions():
    root = build(bst.insert, [1, 2, 3])
    layout_binary_tree(root)
    assert root.y == 0
    assert [n.y for n in iter_inorder(root)] == [0, 90, 180]
    assert [n.x for n in iter_inorder(root)] == [0, 70, 140]


def test_inorder_index_drives_x():
    root = build(bst.insert, [4, 2, 6, 1, 3, 5, 7])
    layout_binary_tree(root)
    assert [n.x for n in iter_inorder(root)] == [i * LAYOUT.h_gap for i in range(7)]
    assert root.x == 3 * LAYOUT.h_gap
    assert root.left.y == root.right.y == LAYOUT.v_gap


def test_empty_tree_is_fine():
    layout_binary_tree(None)
    layout_binomial_forest(None)


def test_custom_spacing():
    class Wide(LayoutConfig):
        h_gap = 100
        v_gap = 10

    root = build(bst.insert, [2, 1])
    layout_binary_tree(root, Wide())
    assert (root.left.x, root.left.y) == (0, 10)
    assert (root.x, root.y) == (100, 0)


@pytest.mark.parametrize("values", SEQUENCES)
def test_binary_layout_is_deterministic(values):
    root = build(bst.insert, values)
    layout_binary_tree(root)
    first = coords(iter_preorder(root))
    layout_binary_tree(root)
    assert coords(iter_preorder(root)) == first


@pytest.mark.parametrize("values", SEQUENCES)
def test_no_two_nodes_share_x_on_a_level(values):
    root = build(bst.insert, values)
    layout_binary_tree(root)
    by_depth = defaultdict(list)
    for n in iter_preorder(root):
        by_depth[n.y].append(n.x)
    for xs in by_depth.values():
        assert len(xs) == len(set(xs))


def test_single_binomial_node_gets_coordinates():
    head = bh.create_node(1)
    layout_binomial_forest(head)
    assert isinstance(head.x, (int, float))
    assert isinstance(head.y, (int, float))


def test_sibling_roots_are_spread_apart():
    a = bh.create_node(5)
    b = bh.create_node(3)
    a.sibling = b
    layout_binomial_forest(a)
    assert a.x < b.x
    assert a.y == b.y == 0


def test_small_forest_positions(heap_from):
    heap = heap_from([1, 2, 3])     # roots: 3 (degree 0), 1 (degree 1, child 2)
    layout_binomial_forest(heap)
    first, second = list(iter_roots(heap))
    assert (first.key, first.x, first.y) == (3, 0, 0)
    assert (second.key, second.x, second.y) == (1, 140, 0)
    child = second.child
    assert (child.key, child.x, child.y) == (2, 140, 90)


def test_children_sit_one_level_below_parent(heap_from):
    heap = heap_from(range(16))
    layout_binomial_forest(heap)
    for node in iter_nodes(heap):
        kids = list(iter_children(node))
        for child in kids:
            assert child.y == node.y + LAYOUT.v_gap
        if kids:
            assert min(c.x for c in kids) <= node.x <= max(c.x for c in kids)


@pytest.mark.parametrize("n", [3, 7, 12, 31])
def test_forest_layout_has_no_overlap_and_is_stable(heap_from, n):
    heap = heap_from(range(n))
    layout_binomial_forest(heap)
    first = coords(iter_nodes(heap))
    positions = [(x, y) for _, x, y in first]
    assert len(positions) == len(set(positions))
    layout_binomial_forest(heap)
    assert coords(iter_nodes(heap)) == first


def test_trees_never_overlap_horizontally(heap_from):
    heap = heap_from(range(13))     # degrees 0, 2, 3
    layout_binomial_forest(heap)
    extents = []
    for root in iter_roots(heap):
        xs = [root.x] + [n.x for n in iter_nodes(root.child)]
        extents.append((min(xs), max(xs)))
    for (_, right), (left, _) in zip(extents, extents[1:]):
        assert right < left


@pytest.mark.parametrize("degree,span", [(0, 1), (1, 1), (2, 2), (3, 4), (4, 8)])
def test_tree_span_grows_with_degree(heap_from, degree, span):
    heap = heap_from(range(2 ** degree))
    (root,) = list(iter_roots(heap))
    assert root.degree == degree
    assert tree_span(root) == span


def test_view_box_defaults_and_centering():
    assert view_box(None) == "0 0 1000 600"
    assert view_box((0, 0, 140, 180)) == "-430 -210 1000 600"


def test_view_box_grows_with_content():
    assert view_box((0, 0, 1400, 900)) == "-50 -50 1500 1000"


def test_bounding_box():
    assert bounding_box([]) is None
    assert bounding_box([(0, 5), (10, -2), (3, 3)]) == (0, -2, 10, 5)


def test_forest_layout_with_shared_node_ids(heap_from):
    heap = heap_from(range(7))      # degrees 0, 1, 2
    layout_binomial_forest(heap)
    expected = [(x, y) for _, x, y in coords(iter_nodes(heap))]
    for node in iter_nodes(heap):
        node.id = "same"
    layout_binomial_forest(heap)
    assert [(n.x, n.y) for n in iter_nodes(heap)] == expected

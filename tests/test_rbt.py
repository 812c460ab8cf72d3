import pytest

from algorithms import rbt
from engine.inspector import check_rbt
from structures import Color, inorder_values, iter_preorder

from conftest import SEQUENCES, SHAPED_SEQUENCES, build


def test_root_black_after_each_insert():
    root = None
    inserted = []
    for v in [10, 20, 30, 15, 25]:
        root = rbt.insert(root, v)
        inserted.append(v)
        assert root is not None
        assert root.color is Color.BLACK
        assert inorder_values(root) == sorted(inserted)


def test_known_shape():
    root = build(rbt.insert, [10, 20, 30, 15, 25])
    assert root.value == 20
    assert root.left.value == 10 and root.left.color is Color.BLACK
    assert root.right.value == 30 and root.right.color is Color.BLACK
    assert root.left.right.value == 15 and root.left.right.color is Color.RED
    assert root.right.left.value == 25 and root.right.left.color is Color.RED


def test_first_node_is_black_root():
    root = rbt.insert(None, 1)
    assert root.color is Color.BLACK
    assert root.parent is None


def test_inner_case_rotates_twice():
    root = build(rbt.insert, [10, 5, 7])
    assert (root.value, root.left.value, root.right.value) == (7, 5, 10)
    assert root.left.color is Color.RED and root.right.color is Color.RED


@pytest.mark.parametrize("values", SEQUENCES + SHAPED_SEQUENCES)
def test_invariants_hold_after_every_insert(values):
    root = None
    for v in values:
        root = rbt.insert(root, v)
        assert check_rbt(root) == []
        for node in iter_preorder(root):
            if node.color is Color.RED:
                assert all(c.color is Color.BLACK for c in node.children())
    assert inorder_values(root) == sorted(values)


def test_black_height():
    assert rbt.black_height(None) == 0
    root = build(rbt.insert, range(1, 16))
    assert rbt.black_height(root) > 0


def test_black_height_detects_mismatch():
    root = build(rbt.insert, [2, 1, 3])
    root.left.color = Color.BLACK
    root.right.color = Color.RED
    assert rbt.black_height(root) == -1


def test_previous_version_keeps_its_colors():
    v1 = build(rbt.insert, [10, 20])
    v2 = rbt.insert(v1, 30)
    assert v1.value == 10 and v1.right.color is Color.RED
    assert v2.value == 20

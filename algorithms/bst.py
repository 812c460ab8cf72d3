"""
bst.py — Binary Search Tree
============================
Plain, unbalanced BST.  Also hosts the ordered-insert primitive the AVL
and Red-Black engines build on.

Ordering convention: `value < node.value` goes left, anything else goes
right.  Equal keys therefore land in the RIGHT subtree, and every
engine in this package keeps that rule.

Public operations never modify their input: they work on a clone and
return the new root.  The caller's previous root stays a valid tree.
"""

import logging
from typing import List, Optional, Tuple

from structures.node import BinaryNode, Color, clone_tree
from algorithms.errors import check_key

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode — shown next to the tree
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def insert(node, value):",                     # 0
    "    if node is None: return Node(value)",      # 1
    "    if value < node.value:",                   # 2
    "        node.left = insert(node.left, value)", # 3
    "    else:",                                    # 4
    "        node.right = insert(node.right, value)",  # 5
    "    return node",                              # 6
    "",                                             # 7
    "def delete(node, value):",                     # 8
    "    if node is None: return None",             # 9
    "    if value < node.value: recurse left",      # 10
    "    elif value > node.value: recurse right",   # 11
    "    elif one child or none: return that child",  # 12
    "    else:",                                    # 13
    "        succ ← leftmost(node.right)",          # 14
    "        node.value ← succ.value",              # 15
    "        node.right = delete(node.right, succ.value)",  # 16
    "    return node",                              # 17
]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def insert(root: Optional[BinaryNode], value: float) -> BinaryNode:
    """Insert `value` and return the root of the new tree."""
    check_key(value)
    new_root, leaf = insert_node(clone_tree(root), value)
    logger.debug("bst insert %s -> node %s", value, leaf.id)
    return new_root


def delete(root: Optional[BinaryNode], value: float) -> Optional[BinaryNode]:
    """
    Remove one node holding `value`.  Absent values leave the tree (and
    the returned reference) untouched.  Returns None once the tree is empty.
    """
    check_key(value)
    if search(root, value)[0] is None:
        return root
    new_root = _delete(clone_tree(root), value)
    if new_root is not None:
        new_root.parent = None
    logger.debug("bst delete %s", value)
    return new_root


def search(root: Optional[BinaryNode], value: float) -> Tuple[Optional[BinaryNode], List[str]]:
    """
    Follow the ordering down from the root.

    Returns (node, path) where `path` lists the ids of every node
    visited, in order, ending with the match when there is one.
    """
    check_key(value)
    path: List[str] = []
    node = root
    while node is not None:
        path.append(node.id)
        if value == node.value:
            return node, path
        node = node.left if value < node.value else node.right
    return None, path


def contains(root: Optional[BinaryNode], value: float) -> bool:
    return search(root, value)[0] is not None


def minimum(node: BinaryNode) -> BinaryNode:
    while node.left is not None:
        node = node.left
    return node


# ---------------------------------------------------------------------------
# In-place primitives (shared with avl / rbt — callers pass a clone)
# ---------------------------------------------------------------------------
def insert_node(
    root: Optional[BinaryNode],
    value: float,
    color: Color = Color.BLACK,
) -> Tuple[BinaryNode, BinaryNode]:
    """
    Ordered insert, walking down with a loop.  Mutates the tree under
    `root`.

    Returns (root, new_leaf) so that callers needing the fresh node (the
    red-black fixup) do not have to search for it.
    """
    leaf = BinaryNode(value, color=color)
    if root is None:
        return leaf, leaf
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = leaf
                break
            node = node.left
        else:
            if node.right is None:
                node.right = leaf
                break
            node = node.right
    leaf.parent = node
    return root, leaf


def _delete(root: Optional[BinaryNode], value: float) -> Optional[BinaryNode]:
    target = root
    while target is not None and value != target.value:
        target = target.left if value < target.value else target.right
    if target is None:
        return root

    if target.left is not None and target.right is not None:
        # successor has no left child, so it can be spliced out below
        succ = minimum(target.right)
        target.value = succ.value
        target = succ

    child = target.left if target.left is not None else target.right
    parent = target.parent
    if child is not None:
        child.parent = parent
    if parent is None:
        return child
    if parent.left is target:
        parent.left = child
    else:
        parent.right = child
    target.parent = None
    return root

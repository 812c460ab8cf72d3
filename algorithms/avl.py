"""
avl.py — AVL Tree
==================
Height-balanced BST.  Insert is a plain ordered insert followed by a
bottom-up rebalance of the WHOLE tree: every node is checked after its
children, with heights recomputed by traversal rather than cached.

Rebalancing cases (bf = height(left) - height(right)):

    bf >  1, bf(left)  >= 0   →  rotate right            (LL)
    bf < -1, bf(right) <= 0   →  rotate left             (RR)
    bf >  1, bf(left)  <  0   →  left on child, right    (LR)
    bf < -1, bf(right) >  0   →  right on child, left    (RL)

No delete: AVL removal is not offered by this engine.
"""

import logging
from typing import List, Optional

from structures.node import BinaryNode, clone_tree
from algorithms.errors import check_key
from algorithms.bst import insert_node
from algorithms.rotations import balance_factor, rotate_left, rotate_right

logger = logging.getLogger(__name__)


PSEUDOCODE: List[str] = [
    "def insert(root, value):",                          # 0
    "    root ← bst_insert(root, value)",                # 1
    "    return rebalance(root)",                        # 2
    "",                                                  # 3
    "def rebalance(node):",                              # 4
    "    if node is None: return None",                  # 5
    "    node.left ← rebalance(node.left)",              # 6
    "    node.right ← rebalance(node.right)",            # 7
    "    bf ← height(node.left) - height(node.right)",   # 8
    "    if bf > 1 and bf(node.left) >= 0: return rotate_right(node)",   # 9
    "    if bf < -1 and bf(node.right) <= 0: return rotate_left(node)",  # 10
    "    if bf > 1: node.left ← rotate_left(node.left)",                 # 11
    "              return rotate_right(node)",                           # 12
    "    if bf < -1: node.right ← rotate_right(node.right)",             # 13
    "               return rotate_left(node)",                           # 14
    "    return node",                                   # 15
]


def insert(root: Optional[BinaryNode], value: float) -> BinaryNode:
    """Insert `value`, rebalance, and return the new root."""
    check_key(value)
    work, _ = insert_node(clone_tree(root), value)
    new_root = rebalance(work)
    new_root.parent = None
    return new_root


def rebalance(node: Optional[BinaryNode]) -> Optional[BinaryNode]:
    """Bottom-up rebalance of the subtree under `node` (in place)."""
    if node is None:
        return None
    node.left = rebalance(node.left)
    node.right = rebalance(node.right)

    bf = balance_factor(node)
    if bf > 1 and balance_factor(node.left) >= 0:
        logger.debug("avl LL case at %s", node.value)
        return rotate_right(node)
    if bf < -1 and balance_factor(node.right) <= 0:
        logger.debug("avl RR case at %s", node.value)
        return rotate_left(node)
    if bf > 1 and balance_factor(node.left) < 0:
        logger.debug("avl LR case at %s", node.value)
        node.left = rotate_left(node.left)
        return rotate_right(node)
    if bf < -1 and balance_factor(node.right) > 0:
        logger.debug("avl RL case at %s", node.value)
        node.right = rotate_right(node.right)
        return rotate_left(node)
    return node

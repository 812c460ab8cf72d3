"""
rotations.py — Shared Binary-Tree Restructuring
================================================
Single rotations plus the height / balance helpers the AVL engine
reads.  Both rotations relink every moved `parent` pointer, including
the child slot of the rotated node's original parent, so a rotation can
be applied anywhere in a tree without the caller patching links.

        x                 y
       / \\    left      / \\
      a   y   ----->    x   c
         / \\  <-----  / \\
        b   c  right  a   b
"""

import logging
from typing import Optional

from structures.node import BinaryNode

logger = logging.getLogger(__name__)


def height(node: Optional[BinaryNode]) -> int:
    """Full traversal height; an absent node has height 0."""
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))


def balance_factor(node: Optional[BinaryNode]) -> int:
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def rotate_left(x: BinaryNode) -> BinaryNode:
    """Lift x.right above x.  Returns the new subtree root."""
    y = x.right
    if y is None:
        raise ValueError(f"rotate_left needs a right child on {x!r}")
    logger.debug("rotate left at %s (%s)", x.value, x.id)

    x.right = y.left
    if y.left is not None:
        y.left.parent = x
    y.parent = x.parent
    if x.parent is not None:
        if x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
    y.left = x
    x.parent = y
    return y


def rotate_right(y: BinaryNode) -> BinaryNode:
    """Lift y.left above y.  Returns the new subtree root."""
    x = y.left
    if x is None:
        raise ValueError(f"rotate_right needs a left child on {y!r}")
    logger.debug("rotate right at %s (%s)", y.value, y.id)

    y.left = x.right
    if x.right is not None:
        x.right.parent = y
    x.parent = y.parent
    if y.parent is not None:
        if y is y.parent.left:
            y.parent.left = x
        else:
            y.parent.right = x
    x.right = y
    y.parent = x
    return x

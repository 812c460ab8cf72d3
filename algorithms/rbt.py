"""
rbt.py — Red-Black Tree
========================
Ordered insert of a RED leaf followed by the classic fixup loop.

While the current node's parent is RED:

  • uncle RED            → recolor parent + uncle BLACK, grandparent RED,
                           continue from the grandparent
  • uncle BLACK / absent → if the node is the inner grandchild, rotate at
                           the parent so it becomes the outer one; then
                           parent BLACK, grandparent RED, rotate at the
                           grandparent.  The loop ends here.

Whenever a rotation leaves a subtree root without a parent, that node is
the new root of the whole tree.  The root is forced BLACK at the end.

No delete: red-black removal is not offered by this engine.
"""

import logging
from typing import List, Optional

from structures.node import BinaryNode, Color, clone_tree
from algorithms.errors import check_key
from algorithms.bst import insert_node
from algorithms.rotations import rotate_left, rotate_right

logger = logging.getLogger(__name__)


PSEUDOCODE: List[str] = [
    "def insert(root, value):",                             # 0
    "    z ← bst_insert(root, value, color=RED)",           # 1
    "    while z.parent is RED:",                           # 2
    "        gp ← z.parent.parent",                         # 3
    "        uncle ← other child of gp",                    # 4
    "        if uncle is RED:",                             # 5
    "            z.parent.color ← BLACK; uncle.color ← BLACK",  # 6
    "            gp.color ← RED; z ← gp",                   # 7
    "        else:",                                        # 8
    "            if z is the inner child: z ← z.parent; rotate(z)",  # 9
    "            z.parent.color ← BLACK; gp.color ← RED",   # 10
    "            rotate(gp) the other way",                 # 11
    "    root.color ← BLACK",                               # 12
]


def _is_red(node: Optional[BinaryNode]) -> bool:
    return node is not None and node.color is Color.RED


def insert(root: Optional[BinaryNode], value: float) -> BinaryNode:
    """Insert `value` and restore the red-black properties."""
    check_key(value)
    root, z = insert_node(clone_tree(root), value, Color.RED)

    while z.parent is not None and z.parent.color is Color.RED:
        parent = z.parent
        gp = parent.parent
        if gp is None:
            # red root left over from an uncolored input; the final recolor fixes it
            break

        if parent is gp.left:
            uncle = gp.right
            if _is_red(uncle):
                logger.debug("rbt recolor at %s", gp.value)
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                gp.color = Color.RED
                z = gp
                continue
            if z is parent.right:
                z = parent
                sub = rotate_left(z)
                if sub.parent is None:
                    root = sub
            z.parent.color = Color.BLACK
            gp.color = Color.RED
            sub = rotate_right(gp)
            if sub.parent is None:
                root = sub
        else:
            uncle = gp.left
            if _is_red(uncle):
                logger.debug("rbt recolor at %s", gp.value)
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                gp.color = Color.RED
                z = gp
                continue
            if z is parent.left:
                z = parent
                sub = rotate_right(z)
                if sub.parent is None:
                    root = sub
            z.parent.color = Color.BLACK
            gp.color = Color.RED
            sub = rotate_left(gp)
            if sub.parent is None:
                root = sub

    root.color = Color.BLACK
    return root


def black_height(node: Optional[BinaryNode]) -> int:
    """
    Number of BLACK nodes on the path from `node` down to an absent
    child, `node` included.  Returns -1 if the paths disagree.
    """
    if node is None:
        return 0
    left = black_height(node.left)
    right = black_height(node.right)
    if left < 0 or right < 0 or left != right:
        return -1
    return left + (0 if node.color is Color.RED else 1)

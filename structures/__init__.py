"""
structures/
-----------
Core data layer.  Public API:

    from structures import BinaryNode, Color, BinomialNode
    from structures import clone_tree, clone_forest, iter_inorder, iter_roots
"""

from structures.node import (
    BinaryNode,
    Color,
    clone_tree,
    inorder_values,
    iter_inorder,
    iter_preorder,
    tree_size,
)
from structures.binomial import (
    BinomialNode,
    clone_forest,
    forest_to_dict,
    heap_size,
    iter_children,
    iter_nodes,
    iter_roots,
)

__all__ = [
    "BinaryNode",   "Color",
    "BinomialNode",
    "clone_tree",   "clone_forest",
    "iter_inorder", "iter_preorder", "inorder_values", "tree_size",
    "iter_roots",   "iter_children", "iter_nodes", "heap_size",
    "forest_to_dict",
]

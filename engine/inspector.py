"""
inspector.py — Structure Metrics & Invariant Checks
====================================================
Reads a structure and reports what the analytics panel shows: size,
height, black height, root degrees, and whether every invariant of the
variant holds.  Validators return a list of human-readable violations
(empty list = valid) instead of raising, so the UI can display them.

Usage:
    metrics = inspect("RBT", root)
    metrics.is_valid, metrics.violations
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from structures.node import BinaryNode, Color, iter_inorder, iter_preorder, tree_size
from structures.binomial import BinomialNode, iter_children, iter_nodes, iter_roots
from algorithms import get_structure
from algorithms.rbt import black_height

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class StructureMetrics:
    kind:          str             = ""
    size:          int             = 0
    height:        int             = 0      # levels; a heap reports its tallest tree
    black_height:  Optional[int]   = None   # RBT only
    min_key:       Optional[float] = None
    root_degrees:  List[int]       = field(default_factory=list)   # heap only
    is_valid:      bool            = True
    violations:    List[str]       = field(default_factory=list)


# ---------------------------------------------------------------------------
# Binary-tree validators
# ---------------------------------------------------------------------------
def check_parent_links(root: Optional[BinaryNode]) -> List[str]:
    problems: List[str] = []
    if root is None:
        return problems
    if root.parent is not None:
        problems.append(f"root {root.value} has a parent")
    for node in iter_preorder(root):
        for child in node.children():
            if child.parent is not node:
                problems.append(f"node {child.value} does not point back to parent {node.value}")
    return problems


def check_bst(root: Optional[BinaryNode], strict_ties: bool = True) -> List[str]:
    """
    Ordering check.  With `strict_ties` equal keys must sit in the right
    subtree (plain BST).  Rotations may move an equal key to the left of
    its twin, so balanced variants pass strict_ties=False.
    """
    problems: List[str] = []
    if root is None:
        return problems

    # (node, lower, upper): lower is inclusive, upper exclusive when strict
    stack = [(root, None, None)]
    while stack:
        node, lo, hi = stack.pop()
        v = node.value
        if lo is not None and v < lo:
            problems.append(f"{v} is below its lower bound {lo}")
        if hi is not None and (v >= hi if strict_ties else v > hi):
            problems.append(f"{v} is not below its upper bound {hi}")
        if node.left is not None:
            stack.append((node.left, lo, v))
        if node.right is not None:
            stack.append((node.right, v, hi))

    values = [n.value for n in iter_inorder(root)]
    if any(a > b for a, b in zip(values, values[1:])):
        problems.append("in-order traversal is not sorted")
    return problems


def _heights(root: Optional[BinaryNode]) -> Dict[int, int]:
    """Height of every subtree keyed by id(node), post-order without recursion."""
    heights: Dict[int, int] = {}
    for node in reversed(list(iter_preorder(root))):
        lh = heights[id(node.left)] if node.left else 0
        rh = heights[id(node.right)] if node.right else 0
        heights[id(node)] = 1 + max(lh, rh)
    return heights


def check_avl(root: Optional[BinaryNode]) -> List[str]:
    problems = check_bst(root, strict_ties=False) + check_parent_links(root)
    heights = _heights(root)
    for node in iter_preorder(root):
        lh = heights[id(node.left)] if node.left else 0
        rh = heights[id(node.right)] if node.right else 0
        if abs(lh - rh) > 1:
            problems.append(f"node {node.value} has balance factor {lh - rh}")
    return problems


def check_rbt(root: Optional[BinaryNode]) -> List[str]:
    problems = check_bst(root, strict_ties=False) + check_parent_links(root)
    if root is None:
        return problems
    if root.color is not Color.BLACK:
        problems.append("root is not black")
    for node in iter_preorder(root):
        if node.color is Color.RED:
            for child in node.children():
                if child.color is Color.RED:
                    problems.append(f"red node {node.value} has red child {child.value}")
    if black_height(root) < 0:
        problems.append("black height differs between paths")
    return problems


# ---------------------------------------------------------------------------
# Binomial-heap validator
# ---------------------------------------------------------------------------
def check_binomial_heap(head: Optional[BinomialNode]) -> List[str]:
    problems: List[str] = []
    last_degree = -1
    for root in iter_roots(head):
        if root.parent is not None:
            problems.append(f"root {root.key} has a parent")
        if root.degree <= last_degree:
            problems.append(
                f"root degrees not strictly increasing ({last_degree} then {root.degree})"
            )
        last_degree = root.degree
        size = _check_binomial_tree(root, problems)
        if size != 2 ** root.degree:
            problems.append(f"tree at {root.key} has {size} nodes, expected {2 ** root.degree}")
    return problems


def _check_binomial_tree(node: BinomialNode, problems: List[str]) -> int:
    children = list(iter_children(node))
    if len(children) != node.degree:
        problems.append(f"node {node.key} has degree {node.degree} but {len(children)} children")
    expected = node.degree - 1
    size = 1
    for child in children:
        if child.parent is not node:
            problems.append(f"child {child.key} does not point back to {node.key}")
        if child.key < node.key:
            problems.append(f"heap order broken: {child.key} under {node.key}")
        if child.degree != expected:
            problems.append(f"child {child.key} of {node.key} has degree {child.degree}, expected {expected}")
        expected -= 1
        size += _check_binomial_tree(child, problems)
    return size


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------
_BINARY_CHECKS = {
    "BST": lambda root: check_bst(root) + check_parent_links(root),
    "AVL": check_avl,
    "RBT": check_rbt,
}


def inspect(kind: str, structure) -> StructureMetrics:
    """Compute the metrics card for `structure` of variant `kind`."""
    info = get_structure(kind)

    if info.is_heap:
        keys = [n.key for n in iter_nodes(structure)]
        violations = check_binomial_heap(structure)
        degrees = [r.degree for r in iter_roots(structure)]
        return StructureMetrics(
            kind=kind,
            size=len(keys),
            height=(max(degrees) + 1) if degrees else 0,
            min_key=min(keys) if keys else None,
            root_degrees=degrees,
            is_valid=not violations,
            violations=violations,
        )

    violations = _BINARY_CHECKS[kind](structure)
    heights = _heights(structure)
    values = [n.value for n in iter_inorder(structure)]
    metrics = StructureMetrics(
        kind=kind,
        size=tree_size(structure),
        height=heights[id(structure)] if structure is not None else 0,
        min_key=values[0] if values else None,
        is_valid=not violations,
        violations=violations,
    )
    if kind == "RBT":
        bh = black_height(structure)
        metrics.black_height = bh if bh >= 0 else None
    if violations:
        logger.warning("%s invariants broken: %s", kind, "; ".join(violations))
    return metrics

"""
binomial_heap.py — Binomial Heap
=================================
Mergeable min-heap kept as a root list (linked through `sibling`) of
binomial trees in strictly increasing degree.

    union  = merge the two root lists by degree, then walk the result
             linking adjacent equal-degree trees
    insert = union with a one-node heap
    extract_min = cut the min root out, turn its children (reversed)
                  into a root list, union that with what is left

Linking always makes the SMALLER key the parent, so the min-heap
property holds on every edge whatever order the trees meet in.

Public operations clone their inputs before linking; the heads the
caller passed in remain valid heaps.
"""

import logging
from typing import List, Optional, Tuple

from structures.binomial import BinomialNode, clone_forest, iter_roots
from algorithms.errors import check_key

logger = logging.getLogger(__name__)


PSEUDOCODE: List[str] = [
    "def union(h1, h2):",                                      # 0
    "    head ← merge_root_lists(h1, h2)",                     # 1
    "    prev ← None; x ← head; next ← x.sibling",             # 2
    "    while next is not None:",                             # 3
    "        if x.degree ≠ next.degree or",                    # 4
    "           next.sibling.degree = x.degree:",              # 5
    "            prev ← x; x ← next",                          # 6
    "        else:",                                           # 7
    "            x ← link(x, next)   # smaller key on top",    # 8
    "        next ← x.sibling",                                # 9
    "    return head",                                         # 10
    "",                                                        # 11
    "def extract_min(head):",                                  # 12
    "    m ← root with the smallest key",                      # 13
    "    remove m from the root list",                         # 14
    "    kids ← reverse(m.children)",                          # 15
    "    return union(head, kids), m",                         # 16
]


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------
def create_node(key: float) -> BinomialNode:
    """A degree-0 tree: no parent, child or sibling."""
    check_key(key)
    return BinomialNode(key)


def merge_root_lists(
    h1: Optional[BinomialNode],
    h2: Optional[BinomialNode],
) -> Optional[BinomialNode]:
    """
    Merge two degree-sorted root lists into one, ascending by degree.
    On equal degrees the node from `h1` comes first.  Relinks `sibling`
    pointers in place.
    """
    if h1 is None:
        return h2
    if h2 is None:
        return h1

    head: Optional[BinomialNode] = None
    tail: Optional[BinomialNode] = None
    a, b = h1, h2
    while a is not None and b is not None:
        if a.degree <= b.degree:
            pick, a = a, a.sibling
        else:
            pick, b = b, b.sibling
        if tail is None:
            head = pick
        else:
            tail.sibling = pick
        tail = pick
    tail.sibling = a if a is not None else b
    return head


def link_trees(a: BinomialNode, b: BinomialNode) -> BinomialNode:
    """
    Join two trees of equal degree.  The smaller key (ties: `a`) becomes
    the root; the other is prepended to its child list.  The winner's
    `sibling` is left for the caller to set.
    """
    if b.key < a.key:
        a, b = b, a
    b.parent = a
    b.sibling = a.child
    a.child = b
    a.degree += 1
    logger.debug("link %s under %s (degree now %d)", b.key, a.key, a.degree)
    return a


# ---------------------------------------------------------------------------
# Heap operations
# ---------------------------------------------------------------------------
def union(
    h1: Optional[BinomialNode],
    h2: Optional[BinomialNode],
) -> Optional[BinomialNode]:
    """
    Union of two heaps.  With one side empty the other is returned as-is
    (same object).  Otherwise both are cloned and consolidated.
    """
    if h1 is None:
        return h2
    if h2 is None:
        return h1
    return _union(clone_forest(h1), clone_forest(h2))


def insert(head: Optional[BinomialNode], key: float) -> BinomialNode:
    return union(head, create_node(key))


def find_min(head: Optional[BinomialNode]) -> Optional[BinomialNode]:
    """Smallest root, leftmost on ties.  None for an empty heap."""
    best: Optional[BinomialNode] = None
    for root in iter_roots(head):
        if best is None or root.key < best.key:
            best = root
    return best


def extract_min(
    head: Optional[BinomialNode],
) -> Tuple[Optional[BinomialNode], Optional[BinomialNode]]:
    """
    Remove the minimum.  Returns (new_head, extracted); both None for an
    empty heap.  The extracted node comes back detached: no parent,
    children or sibling, degree 0.
    """
    if head is None:
        return None, None

    head = clone_forest(head)
    prev_min: Optional[BinomialNode] = None
    min_node = head
    prev, node = head, head.sibling
    while node is not None:
        if node.key < min_node.key:
            prev_min, min_node = prev, node
        prev, node = node, node.sibling

    # splice the min root out of the root list
    if prev_min is None:
        head = min_node.sibling
    else:
        prev_min.sibling = min_node.sibling

    # children run from high to low degree; reversing gives a valid root list
    reversed_kids: Optional[BinomialNode] = None
    child = min_node.child
    while child is not None:
        nxt = child.sibling
        child.sibling = reversed_kids
        child.parent = None
        reversed_kids = child
        child = nxt

    min_node.child = None
    min_node.sibling = None
    min_node.degree = 0
    logger.debug("extract min %s", min_node.key)
    return _union(head, reversed_kids), min_node


# ---------------------------------------------------------------------------
# Internal
# ---------------------------------------------------------------------------
def _union(
    h1: Optional[BinomialNode],
    h2: Optional[BinomialNode],
) -> Optional[BinomialNode]:
    """Merge + consolidate, in place on lists the caller owns."""
    head = merge_root_lists(h1, h2)
    if head is None:
        return None

    prev: Optional[BinomialNode] = None
    x = head
    nxt = x.sibling
    while nxt is not None:
        if x.degree != nxt.degree or (
            nxt.sibling is not None and nxt.sibling.degree == x.degree
        ):
            # different degrees, or three in a row: link the later pair
            prev, x = x, nxt
        else:
            rest = nxt.sibling
            x = link_trees(x, nxt)
            x.sibling = rest
            if prev is None:
                head = x
            else:
                prev.sibling = x
        nxt = x.sibling
    return head

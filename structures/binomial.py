"""
binomial.py — Binomial Heap Node
================================
One key of a binomial heap, stored in the classic left-child /
right-sibling form:

    child   : first (highest-degree) child
    sibling : next child of the same parent, or next root of the forest

A heap is simply the head of its root list, or None when empty.
"""

from typing import Optional, Iterator, List, Dict, Any
import uuid


class BinomialNode:
    """
    Attributes:
        id      : Unique identifier.
        key     : Ordering key (min-heap).
        degree  : Number of children; a degree-d node roots 2**d nodes.
        parent  : Parent node or None for roots.
        child   : First child or None.
        sibling : Next node on the same level or None.
        x, y    : Coordinates assigned by the layout engine.
    """

    __slots__ = ("id", "key", "degree", "parent", "child", "sibling", "x", "y")

    def __init__(self, key: float, node_id: Optional[str] = None):
        self.id:      str                      = node_id or str(uuid.uuid4())[:8]
        self.key:     float                    = key
        self.degree:  int                      = 0
        self.parent:  Optional["BinomialNode"] = None
        self.child:   Optional["BinomialNode"] = None
        self.sibling: Optional["BinomialNode"] = None
        self.x:       float                    = 0.0
        self.y:       float                    = 0.0

    def to_dict(self) -> dict:
        """Nested dict of the tree rooted here (siblings excluded)."""
        return {
            "id":       self.id,
            "key":      self.key,
            "degree":   self.degree,
            "x":        self.x,
            "y":        self.y,
            "children": [c.to_dict() for c in iter_children(self)],
        }

    def __repr__(self) -> str:
        return f"BinomialNode(id={self.id}, key={self.key}, degree={self.degree})"

    def __eq__(self, other) -> bool:
        return isinstance(other, BinomialNode) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


# ---------------------------------------------------------------------------
# Walking the forest
# ---------------------------------------------------------------------------
def iter_roots(head: Optional[BinomialNode]) -> Iterator[BinomialNode]:
    node = head
    while node is not None:
        yield node
        node = node.sibling


def iter_children(node: BinomialNode) -> Iterator[BinomialNode]:
    return iter_roots(node.child)


def iter_nodes(head: Optional[BinomialNode]) -> Iterator[BinomialNode]:
    """Every node of every tree, roots in list order, each tree pre-order."""
    stack: List[BinomialNode] = list(reversed(list(iter_roots(head))))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(iter_children(node))))


def heap_size(head: Optional[BinomialNode]) -> int:
    return sum(1 for _ in iter_nodes(head))


def forest_to_dict(head: Optional[BinomialNode]) -> List[Dict[str, Any]]:
    return [root.to_dict() for root in iter_roots(head)]


# ---------------------------------------------------------------------------
# Copy-on-write support
# ---------------------------------------------------------------------------
def clone_forest(head: Optional[BinomialNode]) -> Optional[BinomialNode]:
    """Deep copy of a whole root list, ids and coordinates preserved."""
    return _clone_level(head, None)


def _clone_level(
    first: Optional[BinomialNode],
    parent: Optional[BinomialNode],
) -> Optional[BinomialNode]:
    new_first: Optional[BinomialNode] = None
    prev: Optional[BinomialNode] = None
    for src in iter_roots(first):
        dup = BinomialNode(src.key, node_id=src.id)
        dup.degree = src.degree
        dup.x, dup.y = src.x, src.y
        dup.parent = parent
        # depth is bounded by the degree, so recursion stays shallow
        dup.child = _clone_level(src.child, dup)
        if prev is None:
            new_first = dup
        else:
            prev.sibling = dup
        prev = dup
    return new_first

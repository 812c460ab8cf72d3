"""
algorithms/__init__.py — Structure Registry
============================================
Single source of truth for every structure the visualizer knows about.

    from algorithms import REGISTRY, get_structure

REGISTRY is a dict:
    {
        "BST": StructureInfo(key, label, insert, delete, pseudocode, …),
        …
    }

The engine exposes one operation set per variant; StructureInfo is how
the workspace routes a user action to the right one.  A variant that
does not support an operation simply leaves that slot as None.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

from algorithms import bst, avl, rbt, binomial_heap
from algorithms.errors import UnknownStructureError


# ---------------------------------------------------------------------------
# StructureInfo — metadata card for each variant
# ---------------------------------------------------------------------------
@dataclass
class StructureInfo:
    key:               str                    # registry key, e.g. "AVL"
    label:             str                    # human label, e.g. "AVL Tree"
    insert:            Callable               # (structure, key) -> structure
    pseudocode:        List[str]              # lines for the side-panel
    delete:            Optional[Callable] = None   # (structure, key) -> structure
    extract_min:       Optional[Callable] = None   # heap only
    find_min:          Optional[Callable] = None   # heap only
    search:            Optional[Callable] = None   # binary trees only
    is_heap:           bool     = False
    tags:              List[str] = field(default_factory=list)
    complexity_time:   str      = ""          # insert cost, e.g. "O(log n)"
    description:       str      = ""          # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, StructureInfo] = {

    "BST": StructureInfo(
        key="BST", label="Binary Search Tree", insert=bst.insert, pseudocode=bst.PSEUDOCODE,
        delete=bst.delete, search=bst.search,
        tags=["binary", "unbalanced"],
        complexity_time="O(h)",
        description="Smaller keys go left, everything else right. No balancing at all.",
    ),

    "AVL": StructureInfo(
        key="AVL", label="AVL Tree", insert=avl.insert, pseudocode=avl.PSEUDOCODE,
        search=bst.search,
        tags=["binary", "balanced", "rotations"],
        complexity_time="O(n) here (full rebalance), O(log n) textbook",
        description="Keeps subtree heights within one of each other using rotations.",
    ),

    "RBT": StructureInfo(
        key="RBT", label="Red-Black Tree", insert=rbt.insert, pseudocode=rbt.PSEUDOCODE,
        search=bst.search,
        tags=["binary", "balanced", "rotations", "coloring"],
        complexity_time="O(log n)",
        description="Two colors and a few rules keep every path within 2× of the shortest.",
    ),

    "BH": StructureInfo(
        key="BH", label="Binomial Heap", insert=binomial_heap.insert,
        pseudocode=binomial_heap.PSEUDOCODE,
        extract_min=binomial_heap.extract_min, find_min=binomial_heap.find_min,
        is_heap=True,
        tags=["heap", "mergeable"],
        complexity_time="O(log n)",
        description="A forest of binomial trees, at most one per degree. Union is cheap.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_structure(key: str) -> StructureInfo:
    """Return StructureInfo by key; raises UnknownStructureError."""
    try:
        return REGISTRY[key]
    except KeyError:
        raise UnknownStructureError(f"Unknown structure: {key}") from None


def list_structures() -> List[StructureInfo]:
    """Return all registered structures in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "StructureInfo",
    "REGISTRY",
    "get_structure",
    "list_structures",
]

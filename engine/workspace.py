"""
workspace.py — Structure Workspace
===================================
The Workspace is the ONLY object the service layer talks to.  It plays
the collaborator role around the pure engine:

  1. holds the current version of every variant (BST / AVL / RBT / BH)
     and which one is selected
  2. routes insert / delete / extract-min / search to the selected
     variant's operation set through the registry
  3. records every change in a per-variant History (undo / redo)
  4. lays out the current structure and packs a serialisable snapshot

Usage:
    ws = Workspace()
    ws.select("AVL")
    ws.insert(3); ws.insert(2); ws.insert(1)
    ws.snapshot()        # nodes, edges, view box, metrics, history
"""

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Tuple

from structures.node import BinaryNode, iter_preorder
from structures.binomial import BinomialNode, iter_nodes
from algorithms import REGISTRY, StructureInfo, get_structure
from algorithms.bst import contains
from algorithms.errors import UnsupportedOperationError, check_key
from engine.history import History, Snapshot
from engine.inspector import inspect
from engine.layout import (
    LAYOUT,
    LayoutConfig,
    bounding_box,
    layout_binary_tree,
    layout_binomial_forest,
    view_box,
)

logger = logging.getLogger(__name__)


class Workspace:
    """
    Attributes:
        kind              : Registry key of the selected variant.
        histories         : {kind: History} — one undo buffer per variant.
        reject_duplicates : If True, inserting a key that is already
                            present is ignored instead of stored twice.
        layout_config     : Spacing used when laying out.
    """

    def __init__(
        self,
        kind: str = "BST",
        history_limit: int = 100,
        reject_duplicates: bool = False,
        layout_config: LayoutConfig = LAYOUT,
    ):
        get_structure(kind)
        self.kind:              str                = kind
        self.reject_duplicates: bool               = reject_duplicates
        self.layout_config:     LayoutConfig       = layout_config
        self.histories:         Dict[str, History] = {}
        for key in REGISTRY:
            self.histories[key] = History(limit=history_limit)
            self.histories[key].record(key, None, "empty")

    # ------------------------------------------------------------------
    # Selection & accessors
    # ------------------------------------------------------------------
    def select(self, kind: str) -> StructureInfo:
        info = get_structure(kind)
        self.kind = kind
        return info

    @property
    def info(self) -> StructureInfo:
        return get_structure(self.kind)

    @property
    def history(self) -> History:
        return self.histories[self.kind]

    @property
    def structure(self) -> Any:
        """Root node (binary variants) or root-list head (heap), or None."""
        snap = self.history.current
        return snap.structure if snap else None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def insert(self, value: float) -> bool:
        """Insert into the selected variant.  Returns True if anything changed."""
        check_key(value)
        if self.reject_duplicates and self._holds(value):
            logger.warning("%s: duplicate key %s ignored", self.kind, value)
            return False
        new = self.info.insert(self.structure, value)
        self._commit(new, f"insert {_label(value)}")
        return True

    def delete(self, value: float) -> bool:
        """Delete from the selected variant.  Absent keys change nothing."""
        info = self.info
        if info.delete is None:
            raise UnsupportedOperationError(f"{info.label} does not support delete")
        old = self.structure
        new = info.delete(old, value)
        if new is old:
            logger.info("%s: delete %s found nothing", self.kind, value)
            return False
        self._commit(new, f"delete {_label(value)}")
        return True

    def extract_min(self) -> Optional[float]:
        """Pop the minimum of the heap; returns its key or None when empty."""
        info = self.info
        if info.extract_min is None:
            raise UnsupportedOperationError(f"{info.label} does not support extract-min")
        new, node = info.extract_min(self.structure)
        if node is None:
            return None
        self._commit(new, f"extract-min {_label(node.key)}")
        return node.key

    def find_min(self) -> Optional[BinomialNode]:
        info = self.info
        if info.find_min is None:
            raise UnsupportedOperationError(f"{info.label} does not support find-min")
        return info.find_min(self.structure)

    def search(self, value: float) -> Tuple[Optional[BinaryNode], List[str]]:
        """(node, visited ids) for the binary variants."""
        info = self.info
        if info.search is None:
            raise UnsupportedOperationError(f"{info.label} does not support search")
        return info.search(self.structure, value)

    def reset(self) -> None:
        """Empty the selected variant (undoable)."""
        if self.structure is not None:
            self._commit(None, "clear")

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------
    def undo(self) -> bool:
        return self.history.undo() is not None

    def redo(self) -> bool:
        return self.history.redo() is not None

    def goto(self, idx: int) -> bool:
        return self.history.goto(idx) is not None

    # ------------------------------------------------------------------
    # Layout & snapshot
    # ------------------------------------------------------------------
    def layout(self) -> None:
        if self.info.is_heap:
            layout_binomial_forest(self.structure, self.layout_config)
        else:
            layout_binary_tree(self.structure, self.layout_config)

    def snapshot(self) -> Dict[str, Any]:
        """Everything a renderer needs for one frame, as plain data."""
        self.layout()
        info = self.info
        if info.is_heap:
            nodes, edges = _flatten_heap(self.structure)
            min_node = info.find_min(self.structure)
            min_id = min_node.id if min_node else None
        else:
            nodes, edges = _flatten_tree(self.structure)
            min_id = None

        history = self.history
        current: Optional[Snapshot] = history.current
        return {
            "kind":     self.kind,
            "label":    info.label,
            "nodes":    nodes,
            "edges":    edges,
            "min_id":   min_id,
            "view_box": view_box(bounding_box((n["x"], n["y"]) for n in nodes), self.layout_config),
            "metrics":  asdict(inspect(self.kind, self.structure)),
            "history": {
                "index":    history.current_idx,
                "length":   len(history),
                "labels":   history.labels(),
                "last":     current.label if current else "",
                "state":    history.state.value,
                "can_undo": history.can_undo,
                "can_redo": history.can_redo,
            },
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _commit(self, structure: Any, label: str) -> None:
        self.history.record(self.kind, structure, label)
        logger.info("%s: %s", self.kind, label)

    def _holds(self, value: float) -> bool:
        if self.info.is_heap:
            return any(n.key == value for n in iter_nodes(self.structure))
        return contains(self.structure, value)


# ---------------------------------------------------------------------------
# Flattening helpers (nodes + edges lists for the renderer)
# ---------------------------------------------------------------------------
def _flatten_tree(root: Optional[BinaryNode]) -> Tuple[List[dict], List[dict]]:
    nodes, edges = [], []
    for n in iter_preorder(root):
        nodes.append({
            "id":     n.id,
            "value":  n.value,
            "color":  n.color.value,
            "x":      n.x,
            "y":      n.y,
            "parent": n.parent.id if n.parent else None,
        })
        for side, child in (("left", n.left), ("right", n.right)):
            if child is not None:
                edges.append({"source": n.id, "target": child.id, "side": side})
    return nodes, edges


def _flatten_heap(head: Optional[BinomialNode]) -> Tuple[List[dict], List[dict]]:
    nodes, edges = [], []
    for n in iter_nodes(head):
        nodes.append({
            "id":      n.id,
            "value":   n.key,
            "degree":  n.degree,
            "is_root": n.parent is None,
            "x":       n.x,
            "y":       n.y,
            "parent":  n.parent.id if n.parent else None,
        })
        if n.parent is not None:
            edges.append({"source": n.parent.id, "target": n.id})
    return nodes, edges


def _label(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)

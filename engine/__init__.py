"""
engine/
-------
Layout, history and the workspace that ties the structures together.

    from engine import Workspace, layout_binary_tree, layout_binomial_forest
"""

from engine.layout    import (
    LayoutConfig,
    LAYOUT,
    layout_binary_tree,
    layout_binomial_forest,
    bounding_box,
    view_box,
)
from engine.history   import History, HistoryState, Snapshot
from engine.inspector import StructureMetrics, inspect
from engine.workspace import Workspace

__all__ = [
    "LayoutConfig",
    "LAYOUT",
    "layout_binary_tree",
    "layout_binomial_forest",
    "bounding_box",
    "view_box",
    "History",
    "HistoryState",
    "Snapshot",
    "StructureMetrics",
    "inspect",
    "Workspace",
]

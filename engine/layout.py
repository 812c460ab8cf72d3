"""
layout.py — Coordinate Assignment
==================================
Turns tree shape into draw coordinates.  Nothing here renders; the
presentation layer reads `x` / `y` off the nodes afterwards.

Binary trees:
    x = in-order visit index × H_GAP,  y = depth × V_GAP
  Every node owns its own column, so no two nodes can ever overlap,
  whatever the shape.

Binomial forests:
  Each node reserves `span` columns: 1 for a leaf, otherwise the sum of
  its children's spans.  Children sit side by side under their parent,
  the parent centred over them.  Trees are placed left to right, each
  shifted by its span (which grows with its degree) plus a gap.

Both layouts are pure functions of shape: running them twice on an
unchanged structure gives identical coordinates.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from structures.node import BinaryNode
from structures.binomial import BinomialNode, iter_children, iter_roots


# ---------------------------------------------------------------------------
# Layout Config — spacing and view-box fitting
# ---------------------------------------------------------------------------
class LayoutConfig:
    h_gap:       int = 70     # horizontal distance between columns
    v_gap:       int = 90     # vertical distance between levels
    tree_gap:    int = 70     # extra room between binomial trees
    node_radius: int = 18

    # view-box fitting
    margin:      int = 50
    min_width:   int = 1000
    min_height:  int = 600


LAYOUT = LayoutConfig()

Bounds = Tuple[float, float, float, float]   # (min_x, min_y, max_x, max_y)


# ---------------------------------------------------------------------------
# Binary trees
# ---------------------------------------------------------------------------
def layout_binary_tree(root: Optional[BinaryNode], config: LayoutConfig = LAYOUT) -> None:
    """Assign x, y to every node under `root` in place."""
    index = 0
    stack: List[Tuple[BinaryNode, int]] = []
    node, depth = root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        node.x = index * config.h_gap
        node.y = depth * config.v_gap
        index += 1
        node, depth = node.right, depth + 1


# ---------------------------------------------------------------------------
# Binomial forests
# ---------------------------------------------------------------------------
def layout_binomial_forest(head: Optional[BinomialNode], config: LayoutConfig = LAYOUT) -> None:
    """Assign x, y to every node of every tree in the root list."""
    offset = 0.0
    for root in iter_roots(head):
        spans: Dict[int, int] = {}
        _measure(root, spans)
        _place(root, offset, 0, spans, config)
        offset += spans[id(root)] * config.h_gap + config.tree_gap


def tree_span(root: BinomialNode) -> int:
    """Columns a tree needs: 1 for degree 0, 2**(degree-1) otherwise."""
    spans: Dict[int, int] = {}
    return _measure(root, spans)


def _measure(node: BinomialNode, spans: Dict[int, int]) -> int:
    total = sum(_measure(child, spans) for child in iter_children(node))
    spans[id(node)] = max(1, total)
    return spans[id(node)]


def _place(
    node: BinomialNode,
    left: float,
    depth: int,
    spans: Dict[int, int],
    config: LayoutConfig,
) -> None:
    node.y = depth * config.v_gap
    children = list(iter_children(node))
    if not children:
        node.x = left
        return
    cursor = left
    for child in children:
        _place(child, cursor, depth + 1, spans, config)
        cursor += spans[id(child)] * config.h_gap
    node.x = (children[0].x + children[-1].x) / 2


# ---------------------------------------------------------------------------
# View-box fitting
# ---------------------------------------------------------------------------
def bounding_box(points: Iterable[Tuple[float, float]]) -> Optional[Bounds]:
    """(min_x, min_y, max_x, max_y) over (x, y) pairs, or None if empty."""
    xs: List[float] = []
    ys: List[float] = []
    for x, y in points:
        xs.append(x)
        ys.append(y)
    if not xs:
        return None
    return min(xs), min(ys), max(xs), max(ys)


def view_box(bounds: Optional[Bounds], config: LayoutConfig = LAYOUT) -> str:
    """
    SVG viewBox string that fits `bounds` plus a margin, never smaller
    than the configured minimum and centred when the content is smaller.
    """
    if bounds is None:
        return f"0 0 {config.min_width} {config.min_height}"
    min_x, min_y, max_x, max_y = bounds

    width = max_x - min_x + config.margin * 2
    height = max_y - min_y + config.margin * 2
    final_w = max(config.min_width, width)
    final_h = max(config.min_height, height)

    off_x = min_x - config.margin - (final_w - width) / 2
    off_y = min_y - config.margin - (final_h - height) / 2
    return f"{_fmt(off_x)} {_fmt(off_y)} {_fmt(final_w)} {_fmt(final_h)}"


def _fmt(v: float) -> str:
    return str(int(v)) if float(v).is_integer() else f"{v:.2f}"

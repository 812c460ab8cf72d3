"""
node.py — Binary Tree Node
==========================
One key of a BST / AVL / Red-Black tree.

Design decisions:
  - A single node type serves all three binary variants.  `color` is
    always present; only the red-black engine reads it.
  - `parent` is a navigational back-reference.  The engines relink it on
    every structural change; clones rebuild it from scratch.
  - `x`, `y` are draw-time coordinates owned by the layout engine.  They
    are not part of the node's logical identity.
  - Cloning keeps the node `id`, so a node keeps its identity across the
    versions of a tree that the engines return.
"""

from enum import Enum
from typing import Optional, Dict, Any, Iterator, List
import uuid


# ---------------------------------------------------------------------------
# Color Enum — red-black labelling, also drives the renderer palette
# ---------------------------------------------------------------------------
class Color(Enum):
    RED   = "red"
    BLACK = "black"


# ---------------------------------------------------------------------------
# BinaryNode
# ---------------------------------------------------------------------------
class BinaryNode:
    """
    Attributes:
        id     : Unique identifier (short uuid string by default).
        value  : The ordering key.
        left   : Left child or None.
        right  : Right child or None.
        parent : Structural parent or None for the root.
        color  : Color.RED / Color.BLACK.
        x, y   : Coordinates assigned by the layout engine.
    """

    __slots__ = ("id", "value", "left", "right", "parent", "color", "x", "y")

    def __init__(
        self,
        value: float,
        color: Color = Color.BLACK,
        node_id: Optional[str] = None,
    ):
        self.id:     str                    = node_id or str(uuid.uuid4())[:8]
        self.value:  float                  = value
        self.left:   Optional["BinaryNode"] = None
        self.right:  Optional["BinaryNode"] = None
        self.parent: Optional["BinaryNode"] = None
        self.color:  Color                  = color
        self.x:      float                  = 0.0
        self.y:      float                  = 0.0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def is_red(self) -> bool:
        return self.color is Color.RED

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def children(self) -> List["BinaryNode"]:
        """Present children, left first."""
        return [c for c in (self.left, self.right) if c is not None]

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        """Nested dict of the subtree rooted here."""
        return {
            "id":    self.id,
            "value": self.value,
            "color": self.color.value,
            "x":     self.x,
            "y":     self.y,
            "left":  self.left.to_dict() if self.left else None,
            "right": self.right.to_dict() if self.right else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BinaryNode":
        node = cls(data["value"], color=Color(data.get("color", "black")), node_id=data.get("id"))
        node.x = data.get("x", 0.0)
        node.y = data.get("y", 0.0)
        if data.get("left"):
            node.left = cls.from_dict(data["left"])
            node.left.parent = node
        if data.get("right"):
            node.right = cls.from_dict(data["right"])
            node.right.parent = node
        return node

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"BinaryNode(id={self.id}, value={self.value}, color={self.color.value}, pos=({self.x:.1f},{self.y:.1f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, BinaryNode) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------
def iter_inorder(root: Optional[BinaryNode]) -> Iterator[BinaryNode]:
    """In-order walk with an explicit stack (skewed trees stay safe)."""
    stack: List[BinaryNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def iter_preorder(root: Optional[BinaryNode]) -> Iterator[BinaryNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder_values(root: Optional[BinaryNode]) -> List[float]:
    return [n.value for n in iter_inorder(root)]


def tree_size(root: Optional[BinaryNode]) -> int:
    return sum(1 for _ in iter_preorder(root))


# ---------------------------------------------------------------------------
# Copy-on-write support
# ---------------------------------------------------------------------------
def clone_tree(root: Optional[BinaryNode]) -> Optional[BinaryNode]:
    """
    Deep copy of the tree under `root`.

    Ids, values, colors and coordinates are carried over; every parent
    link of the copy points into the copy.  The returned root has no
    parent even if `root` was an inner node.
    """
    if root is None:
        return None

    def copy_one(src: BinaryNode) -> BinaryNode:
        dup = BinaryNode(src.value, color=src.color, node_id=src.id)
        dup.x, dup.y = src.x, src.y
        return dup

    new_root = copy_one(root)
    stack = [(root, new_root)]
    while stack:
        src, dup = stack.pop()
        if src.left is not None:
            dup.left = copy_one(src.left)
            dup.left.parent = dup
            stack.append((src.left, dup.left))
        if src.right is not None:
            dup.right = copy_one(src.right)
            dup.right.parent = dup
            stack.append((src.right, dup.right))
    return new_root

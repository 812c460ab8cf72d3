"""
history.py — Structure Version History
=======================================
Every engine operation returns a NEW structure and leaves the old one
intact, so keeping the old versions around is free.  History buffers
them and exposes undo / redo / goto over the buffer.

State machine:
    EMPTY    →  record()   →  LATEST
    LATEST   →  undo()     →  REWOUND
    REWOUND  →  redo() to the end  →  LATEST
    REWOUND  →  record()   →  LATEST   (the redo tail is dropped)
    any      →  clear()    →  EMPTY

Thread safety:
  Not thread-safe.  Each browser session owns its own History.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class HistoryState(Enum):
    EMPTY   = "empty"
    LATEST  = "latest"
    REWOUND = "rewound"


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        kind      : Registry key of the structure variant.
        structure : Root / heap head after the operation (may be None).
        label     : What produced it, e.g. "insert 42".
    """

    kind:      str
    structure: Any
    label:     str = ""


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------
class History:
    """
    Attributes:
        entries     : Recorded snapshots, oldest first.
        current_idx : Index of the snapshot currently shown (-1 when empty).
        limit       : Maximum number of snapshots kept; oldest are dropped.
    """

    def __init__(self, limit: int = 100):
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self.entries:     List[Snapshot] = []
        self.current_idx: int            = -1
        self.limit:       int            = limit

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------
    def record(self, kind: str, structure: Any, label: str = "") -> Snapshot:
        """Append a snapshot after the current one, discarding any redo tail."""
        del self.entries[self.current_idx + 1:]
        snap = Snapshot(kind=kind, structure=structure, label=label)
        self.entries.append(snap)
        overflow = len(self.entries) - self.limit
        if overflow > 0:
            del self.entries[:overflow]
            logger.debug("history trimmed %d oldest entries", overflow)
        self.current_idx = len(self.entries) - 1
        return snap

    def clear(self) -> None:
        self.entries = []
        self.current_idx = -1

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def undo(self) -> Optional[Snapshot]:
        """Step back one snapshot.  Returns None if already at the start."""
        if not self.can_undo:
            return None
        self.current_idx -= 1
        return self.current

    def redo(self) -> Optional[Snapshot]:
        """Step forward one snapshot.  Returns None if already at the end."""
        if not self.can_redo:
            return None
        self.current_idx += 1
        return self.current

    def goto(self, idx: int) -> Optional[Snapshot]:
        """Jump to an arbitrary recorded index; None if out of range."""
        if not (0 <= idx < len(self.entries)):
            return None
        self.current_idx = idx
        return self.current

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current(self) -> Optional[Snapshot]:
        if 0 <= self.current_idx < len(self.entries):
            return self.entries[self.current_idx]
        return None

    @property
    def can_undo(self) -> bool:
        return self.current_idx > 0

    @property
    def can_redo(self) -> bool:
        return self.current_idx < len(self.entries) - 1

    @property
    def state(self) -> HistoryState:
        if not self.entries:
            return HistoryState.EMPTY
        if self.can_redo:
            return HistoryState.REWOUND
        return HistoryState.LATEST

    def __len__(self) -> int:
        return len(self.entries)

    def labels(self) -> List[str]:
        return [e.label for e in self.entries]

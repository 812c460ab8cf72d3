"""
errors.py — Engine Exceptions & Key Guard
=========================================
The engine's error surface is deliberately small.  Empty structures and
duplicate keys are NOT errors; the only things that raise are a key
that cannot be ordered and an operation a variant does not offer.
"""

import math
import numbers


class StructureError(Exception):
    """Base class for everything the engine raises."""


class InvalidKeyError(StructureError, ValueError):
    """Key is not a finite real number."""


class UnsupportedOperationError(StructureError):
    """The selected structure has no such operation (e.g. AVL delete)."""


class UnknownStructureError(StructureError, KeyError):
    """Registry lookup for a structure key that does not exist."""


def check_key(value) -> None:
    """
    Reject anything that would break ordering before the engine touches
    the structure.  Raises InvalidKeyError; returns None otherwise.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidKeyError(f"Key must be a real number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidKeyError(f"Key must be finite, got {value!r}")

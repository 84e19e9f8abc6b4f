"""gridkit.errors
=================

Error taxonomy for the toolkit. Each error also derives from the closest
built-in exception so callers catching ``ValueError`` or ``LookupError`` keep
working. Out-of-bounds coordinate lookups are not errors: they return ``None``.
"""

from __future__ import annotations


class GridError(Exception):
    """Base class for every error raised by :mod:`gridkit`."""


class InvalidInput(GridError, ValueError):
    """Malformed construction arguments (ragged rows, non-positive sizes...)."""


class InvalidState(GridError, RuntimeError):
    """A node is in a state no algorithm can continue from, e.g. a ``None`` value."""


class EmptyCollection(GridError, LookupError):
    """An element was required from an empty collection."""


__all__ = ["GridError", "InvalidInput", "InvalidState", "EmptyCollection"]

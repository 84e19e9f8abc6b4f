"""gridkit.types
=================

Type aliases shared across the toolkit. Keeping them in one definitions-only
module means the grid, rendering and I/O layers all spell positions, colours
and callbacks the same way. Importing this module never has side effects.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Tuple, TypeVar

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------
Coord = Tuple[int, int]
Bounds = Tuple[int, int, int, int]
"""``(min_x, min_y, max_x, max_y)``, inclusive on both ends."""

# ---------------------------------------------------------------------------
# Row data and callbacks
# ---------------------------------------------------------------------------
Rows = Iterable[Iterable[Any]]
RGB = Tuple[int, int, int]
ColorFn = Callable[[Any], RGB]
Draw = Callable[[str], Any]
Equality = Callable[[Any, Any], bool]
StepFn = Callable[[Any], Optional[Any]]


__all__ = [
    "T",
    "Coord",
    "Bounds",
    "Rows",
    "RGB",
    "ColorFn",
    "Draw",
    "Equality",
    "StepFn",
]

"""gridkit.line
================

Integer line segments such as ``"0,9 -> 5,9"``, walkable cell by cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .errors import InvalidInput
from .parsing import split_to_ints
from .types import Coord


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Line:
    """Segment from ``(x1, y1)`` to ``(x2, y2)``."""

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def parse(cls, text: str, points: str = "->", coords: str = ",") -> "Line":
        """Build a line from text like ``"1,2 -> 9,2"``."""

        values = split_to_ints((part.strip() for part in text.split(points)), coords)
        if len(values) != 4:
            raise InvalidInput(f"Expected four coordinates in {text!r}, got {len(values)}")
        return cls(*values)

    @property
    def min_x(self) -> int:
        return min(self.x1, self.x2)

    @property
    def min_y(self) -> int:
        return min(self.y1, self.y2)

    @property
    def max_x(self) -> int:
        return max(self.x1, self.x2)

    @property
    def max_y(self) -> int:
        return max(self.y1, self.y2)

    @property
    def horizontal(self) -> bool:
        return self.y1 == self.y2

    @property
    def vertical(self) -> bool:
        return self.x1 == self.x2

    @property
    def diagonal(self) -> bool:
        return not self.horizontal and not self.vertical

    def path(self) -> Iterator[Coord]:
        """Yield every point from start to end inclusive.

        Each step moves by -1, 0 or 1 on both axes toward the end point, so
        horizontal, vertical and 45-degree lines are walked exactly and other
        slopes finish with a straight run.
        """

        x, y = self.x1, self.y1
        while (x, y) != (self.x2, self.y2):
            yield x, y
            x, y = x + _sign(self.x2 - x), y + _sign(self.y2 - y)
        yield x, y

    def __str__(self) -> str:
        return f"{self.x1},{self.y1} -> {self.x2},{self.y2}"


__all__ = ["Line"]

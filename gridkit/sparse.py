"""gridkit.sparse
=================

Open-ended grid for simulations where only occupied cells exist (falling
sand, growing crystals...). Nodes live in a plain list and lookups scan it
linearly, so there is no density invariant and :meth:`SparseGrid.create` can
add duplicates on purpose. Bounds are inclusive: a cell is addressable when
``0 <= x <= width`` and ``0 <= y <= height``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from .constants import VIEWPORT_MARGIN
from .errors import EmptyCollection
from .grid import BaseGrid
from .node import Node
from .types import Bounds, Coord, Rows, T

logger = logging.getLogger(__name__)


class SparseGrid(BaseGrid[T]):
    """Linear-scan collection of positioned nodes.

    Parameters
    ----------
    entities:
        ``(x, y, value)`` tuples, one node each.
    width, height:
        Maximum addressable coordinates. When either is ``0`` both are taken
        from the largest ``x`` and ``y`` among ``entities``.

    Raises
    ------
    EmptyCollection
        When the size has to be derived but ``entities`` is empty.
    """

    def __init__(self, entities: Iterable[Tuple[int, int, T]] = (), width: int = 0, height: int = 0) -> None:
        self._nodes = []
        self._steps = 0
        for x, y, value in entities:
            self._append(Node(x, y, value))

        if width == 0 or height == 0:
            if not self._nodes:
                raise EmptyCollection("Cannot derive the size of a sparse grid without entities")
            width = max(node.x for node in self._nodes)
            height = max(node.y for node in self._nodes)
        self._width = width
        self._height = height

    @classmethod
    def from_rows(cls, rows: Rows) -> "SparseGrid[T]":
        """Build from row data; every cell becomes a node at its 0-based position."""

        return cls((x, y, value) for y, row in enumerate(rows) for x, value in enumerate(row))

    def _append(self, node: Node[T]) -> Node[T]:
        node.index = len(self._nodes)
        self._nodes.append(node)
        return node

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def steps(self) -> int:
        return self._steps

    # ------------------------------------------------------------------
    # Lookup and creation
    # ------------------------------------------------------------------
    def get(self, x: int, y: int) -> Optional[Node[T]]:
        if x < 0 or x > self._width or y < 0 or y > self._height:
            return None
        for node in self._nodes:
            if node.x == x and node.y == y:
                return node
        return None

    def __getitem__(self, position: Coord) -> Optional[Node[T]]:
        return self.get(*position)

    def create(self, x: int, y: int, value: T) -> Node[T]:
        """Append a node without checking whether the cell is taken."""

        return self._append(Node(x, y, value))

    def get_or_create(self, x: int, y: int, value: T) -> Node[T]:
        node = self.get(x, y)
        if node is not None:
            return node
        return self.create(x, y, value)

    def get_or_create_with(self, position: Coord, factory: Callable[[Coord], Node[T]]) -> Node[T]:
        node = self.get(*position)
        if node is not None:
            return node
        return self._append(factory(position))

    # ------------------------------------------------------------------
    # Extent and views
    # ------------------------------------------------------------------
    @property
    def bounding_box(self) -> Bounds:
        if not self._nodes:
            raise EmptyCollection("Sparse grid has no nodes")
        xs = [node.x for node in self._nodes]
        ys = [node.y for node in self._nodes]
        return min(xs), min(ys), max(xs), max(ys)

    def _window(self, min_x: int, min_y: int, max_x: int, max_y: int, exclude_empty: bool) -> Iterator[List[Optional[Node[T]]]]:
        for y in range(min_y, max_y + 1):
            cells = (self.get(x, y) for x in range(min_x, max_x + 1))
            yield [cell for cell in cells if cell is not None or not exclude_empty]

    def rows(self, exclude_empty: bool = False) -> Iterator[List[Optional[Node[T]]]]:
        """Rows across the bounding box; empty cells are ``None`` unless excluded."""

        min_x, min_y, max_x, max_y = self.bounding_box
        return self._window(min_x, min_y, max_x, max_y, exclude_empty)

    def viewport(self, margin: int = VIEWPORT_MARGIN, exclude_empty: bool = False) -> Iterator[List[Optional[Node[T]]]]:
        """Rows across the bounding box widened by ``margin`` left, right and below."""

        min_x, min_y, max_x, max_y = self.bounding_box
        return self._window(min_x - margin, min_y, max_x + margin, max_y + margin, exclude_empty)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------
    def step(self, update: Callable[["SparseGrid[T]", Node[T], int], Any]) -> int:
        """Advance one tick, calling ``update`` bottom row first, left to right."""

        self._steps += 1
        for node in sorted(self._nodes, key=lambda n: (-n.y, n.x)):
            update(self, node, self._steps)
        logger.debug("Step %d processed %d node(s)", self._steps, len(self._nodes))
        return self._steps

    def try_move(self, node: Node[T]) -> Tuple[bool, Coord]:
        """Find where ``node`` would fall: straight down, then down-left, then down-right."""

        for dx in (0, -1, 1):
            if self.get(node.x + dx, node.y + 1) is None:
                return True, (node.x + dx, node.y + 1)
        return False, (node.x, node.y)

    # ------------------------------------------------------------------
    # Value ray casts
    # ------------------------------------------------------------------
    def _value_at(self, x: int, y: int) -> Optional[T]:
        node = self.get(x, y)
        return node.value if node is not None else None

    def up_from(self, node: Node[T]) -> Iterator[Optional[T]]:
        for y in range(node.y - 1, -1, -1):
            yield self._value_at(node.x, y)

    def down_from(self, node: Node[T]) -> Iterator[Optional[T]]:
        for y in range(node.y + 1, self._height + 1):
            yield self._value_at(node.x, y)

    def left_from(self, node: Node[T]) -> Iterator[Optional[T]]:
        for x in range(node.x - 1, -1, -1):
            yield self._value_at(x, node.y)

    def right_from(self, node: Node[T]) -> Iterator[Optional[T]]:
        for x in range(node.x + 1, self._width + 1):
            yield self._value_at(x, node.y)

    def __repr__(self) -> str:
        return f"SparseGrid(nodes={len(self._nodes)}, width={self._width}, height={self._height})"


__all__ = ["SparseGrid"]

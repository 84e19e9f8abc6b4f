"""gridkit.node
================

A single labelled cell. Nodes carry their position, a value and two pieces of
scratch state used by the traversal algorithms: ``distance`` and a ``visited``
counter. Neighbour links are stored as indices into the owning grid's backing
list rather than as node references, so mutual adjacency never creates
reference cycles. The owning grid resolves the indices (see
:meth:`gridkit.grid.BaseGrid.linked`).

``visited`` is a counter rather than a flag: some algorithms branch on how
many times a node has been entered.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Tuple

from .constants import UNREACHED
from .errors import InvalidInput
from .types import Coord, T


class Node(Generic[T]):
    """Positioned value with traversal metadata and an adjacency list.

    Parameters
    ----------
    x, y:
        Grid coordinates. Only meaningful inside a grid.
    value:
        Payload stored in the cell.
    index:
        Slot of the node in its owner's backing list. ``-1`` marks a node that
        no grid owns yet; such nodes cannot be linked as neighbours.
    """

    __slots__ = ("x", "y", "value", "distance", "visited", "index", "_neighbors")

    def __init__(self, x: int, y: int, value: T, index: int = -1) -> None:
        self.x = x
        self.y = y
        self.value = value
        self.distance = UNREACHED
        self.visited = 0
        self.index = index
        self._neighbors: List[int] = []

    # ------------------------------------------------------------------
    # Identity and value access
    # ------------------------------------------------------------------
    @property
    def position(self) -> Coord:
        return self.x, self.y

    def get_value(self) -> T:
        return self.value

    def set_value(self, value: T) -> T:
        self.value = value
        return value

    def update_value(self, setter: Callable[[T], T]) -> T:
        """Replace the value with ``setter(value)`` and return the new value."""

        return self.set_value(setter(self.value))

    def set_position(self, position: Coord) -> None:
        self.x, self.y = position

    def astuple(self) -> Tuple[int, int, Any]:
        return self.x, self.y, self.value

    # ------------------------------------------------------------------
    # Traversal scratch state
    # ------------------------------------------------------------------
    @property
    def is_visited(self) -> bool:
        return self.visited > 0

    def visit(self) -> int:
        self.visited += 1
        return self.visited

    def reset_visited(self) -> None:
        self.visited = 0

    def reset_distance(self) -> None:
        self.distance = UNREACHED

    def set_distance(self, distance: int) -> int:
        """Record ``distance`` and count the assignment as a visit."""

        self.visit()
        self.distance = distance
        return distance

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------
    @property
    def neighbor_indices(self) -> Tuple[int, ...]:
        return tuple(self._neighbors)

    def add_neighbor(self, neighbor: "Node[T]") -> None:
        if neighbor.index < 0:
            raise InvalidInput(f"Cannot link to unowned node {neighbor}")
        self._neighbors.append(neighbor.index)

    def add_neighbors(self, *neighbors: "Node[T]") -> None:
        for neighbor in neighbors:
            self.add_neighbor(neighbor)

    def clear_neighbors(self) -> None:
        self._neighbors.clear()

    def __str__(self) -> str:
        return f"{self.x},{self.y} {self.value}"

    def __repr__(self) -> str:
        return f"Node(x={self.x}, y={self.y}, value={self.value!r})"


__all__ = ["Node"]

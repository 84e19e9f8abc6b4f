"""gridkit.rays
================

Directional iterators ("ray casts"). Each walk starts one step away from the
given node and follows a fixed direction until the first coordinate the grid
reports as absent; that coordinate is not yielded. ``y`` grows downwards, so
"up" means decreasing ``y``.

The walks are lazy, finite and read-only. To restart one, call it again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Iterator

from .node import Node

if TYPE_CHECKING:  # pragma: no cover
    from .grid import BaseGrid


def cast(grid: "BaseGrid", node: Node, dx: int, dy: int) -> Iterator[Node]:
    """Yield nodes from ``node`` stepping by ``(dx, dy)`` until the edge."""

    if dx == 0 and dy == 0:
        return
    x, y = node.x + dx, node.y + dy
    current = grid.get(x, y)
    while current is not None:
        yield current
        x, y = x + dx, y + dy
        current = grid.get(x, y)


def up_from(grid: "BaseGrid", node: Node) -> Iterator[Node]:
    return cast(grid, node, 0, -1)


def down_from(grid: "BaseGrid", node: Node) -> Iterator[Node]:
    return cast(grid, node, 0, 1)


def left_from(grid: "BaseGrid", node: Node) -> Iterator[Node]:
    return cast(grid, node, -1, 0)


def right_from(grid: "BaseGrid", node: Node) -> Iterator[Node]:
    return cast(grid, node, 1, 0)


def up_left_from(grid: "BaseGrid", node: Node) -> Iterator[Node]:
    return cast(grid, node, -1, -1)


def up_right_from(grid: "BaseGrid", node: Node) -> Iterator[Node]:
    return cast(grid, node, 1, -1)


def down_left_from(grid: "BaseGrid", node: Node) -> Iterator[Node]:
    return cast(grid, node, -1, 1)


def down_right_from(grid: "BaseGrid", node: Node) -> Iterator[Node]:
    return cast(grid, node, 1, 1)


RAYS: Dict[str, Callable[["BaseGrid", Node], Iterator[Node]]] = {
    "up": up_from,
    "down": down_from,
    "left": left_from,
    "right": right_from,
    "up_left": up_left_from,
    "up_right": up_right_from,
    "down_left": down_left_from,
    "down_right": down_right_from,
}


def get_ray(name: str) -> Callable[["BaseGrid", Node], Iterator[Node]]:
    """Lookup ``name`` in :data:`RAYS` with a helpful error."""

    try:
        return RAYS[name]
    except KeyError as exc:
        raise KeyError(f"Unknown direction {name!r}. Known: {sorted(RAYS)}") from exc


__all__ = [
    "cast",
    "up_from",
    "down_from",
    "left_from",
    "right_from",
    "up_left_from",
    "up_right_from",
    "down_left_from",
    "down_right_from",
    "RAYS",
    "get_ray",
]

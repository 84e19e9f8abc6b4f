"""gridkit.regions
===================

Graph-level utilities layered on top of a grid: resetting traversal state,
wiring neighbour links, flood-filling connected regions and the depth-first
distance walk.

The functions accept either grid flavour. They rely only on ``nodes()``,
``neighbors()`` and ``linked()``, so this module never imports
:mod:`gridkit.grid` at runtime.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, List, Optional

from .constants import VISIT_LIMIT
from .errors import EmptyCollection, InvalidState
from .node import Node

if TYPE_CHECKING:  # pragma: no cover
    from .grid import BaseGrid

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# State resets
# ---------------------------------------------------------------------------
def reset_visited(grid: "BaseGrid") -> None:
    for node in grid.nodes():
        node.reset_visited()


def reset_distances(grid: "BaseGrid") -> None:
    for node in grid.nodes():
        node.reset_distance()


def clear_neighbors(grid: "BaseGrid") -> None:
    for node in grid.nodes():
        node.clear_neighbors()


# ---------------------------------------------------------------------------
# Neighbour graph construction
# ---------------------------------------------------------------------------
def set_neighbors(
    grid: "BaseGrid",
    include: Optional[Callable[[Node], bool]] = None,
    with_diagonals: bool = False,
) -> None:
    """Replace every node's links with its geometric neighbours.

    Parameters
    ----------
    grid:
        Grid whose nodes are rewired. Existing links are cleared first.
    include:
        Filter applied to each candidate neighbour. Filtering on the neighbour
        alone can produce one-way links, e.g. walls that link out but are
        never linked to.
    with_diagonals:
        Link the four diagonal cells as well.
    """

    clear_neighbors(grid)
    accept = include or (lambda _node: True)
    for node in grid.nodes():
        node.add_neighbors(*[n for n in grid.neighbors(node, with_diagonals) if accept(n)])


# ---------------------------------------------------------------------------
# Connected regions
# ---------------------------------------------------------------------------
def get_regions(grid: "BaseGrid") -> Iterator[List[Node]]:
    """Yield maximal 4-connected groups of equal-valued nodes.

    Seeds are taken in storage order and every node joins exactly one region.
    Visited state is *not* reset first: nodes already marked visited are left
    out, which lets callers mask cells before flood filling.

    Raises
    ------
    InvalidState
        When an unvisited neighbour holds ``None``.
    """

    for node in grid.nodes():
        if node.is_visited:
            continue

        node.visit()
        region = [node]
        queue = deque(region)
        while queue:
            current = queue.popleft()
            for neighbor in grid.neighbors(current, with_diagonals=False):
                if neighbor.is_visited:
                    continue
                if neighbor.value is None:
                    raise InvalidState(f"Node {neighbor.x},{neighbor.y} has no value")
                if neighbor.value == current.value:
                    neighbor.visit()
                    region.append(neighbor)
                    queue.append(neighbor)

        logger.debug("Region seeded at %s holds %d node(s)", node, len(region))
        yield region


# ---------------------------------------------------------------------------
# Depth-first distances and path walking
# ---------------------------------------------------------------------------
@dataclass
class _Frame:
    node: Node
    distance: int
    links: List[Node]
    position: int = 0
    descended: bool = False


def fill_distances_depth_first(
    grid: "BaseGrid",
    node: Node,
    distance: int = 0,
    visit_limit: int = VISIT_LIMIT,
) -> None:
    """Propagate distances from ``node`` depth-first along explicit links.

    Entering a node records its distance (counting a visit). A linked
    neighbour is entered when it is unvisited or holds a larger distance than
    ``distance + 1``. After each neighbour is handled, the walk backs out of
    the current node if that neighbour has been visited more than
    ``visit_limit`` times, which bounds the work on dense cyclic graphs.

    Visited and distance state are not reset; call
    :func:`reset_visited` and :func:`reset_distances` beforehand for a fresh
    run. An explicit stack replaces recursion so large grids do not hit the
    interpreter's recursion limit.
    """

    node.set_distance(distance)
    stack = [_Frame(node, distance, grid.linked(node))]
    while stack:
        frame = stack[-1]
        if frame.position >= len(frame.links):
            stack.pop()
            continue

        neighbor = frame.links[frame.position]
        if not frame.descended:
            frame.descended = True
            step = frame.distance + 1
            if not neighbor.is_visited or neighbor.distance > step:
                neighbor.set_distance(step)
                stack.append(_Frame(neighbor, step, grid.linked(neighbor)))
                continue

        frame.descended = False
        frame.position += 1
        if neighbor.visited > visit_limit:
            stack.pop()


def shortest_path_to(grid: "BaseGrid", start: Node, end: Node) -> Iterator[Node]:
    """Walk from ``start`` to ``end`` along the smallest recorded distances.

    Each step moves to the unvisited linked neighbour with the lowest
    ``distance`` (ties keep link order), marks it visited and yields it.
    Distances must already be filled, typically from ``end``.

    Raises
    ------
    EmptyCollection
        When the current node has no unvisited neighbour left.
    """

    current = start
    while current is not end:
        candidates = [n for n in sorted(grid.linked(current), key=lambda n: n.distance) if not n.is_visited]
        if not candidates:
            raise EmptyCollection(f"No unvisited neighbour left at {current}")
        step = candidates[0]
        step.visit()
        yield step
        current = step


__all__ = [
    "reset_visited",
    "reset_distances",
    "clear_neighbors",
    "set_neighbors",
    "get_regions",
    "fill_distances_depth_first",
    "shortest_path_to",
]

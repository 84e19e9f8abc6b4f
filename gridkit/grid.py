"""gridkit.grid
================

The dense rectangular grid and the behaviour it shares with
:class:`gridkit.sparse.SparseGrid`.

Both containers own their nodes in a flat backing list. Every spatial query is
composed from a single bounds-checked accessor, :meth:`BaseGrid.get`, which
returns ``None`` instead of raising for coordinates outside the grid. Neighbour
links stored on nodes are indices into the backing list and are resolved
through :meth:`BaseGrid.linked`.
"""

from __future__ import annotations

import logging
from collections import Counter, deque
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Union,
)

import numpy as np

from .errors import InvalidInput
from .node import Node
from .regions import reset_distances, reset_visited
from .types import Equality, Rows, StepFn, T

logger = logging.getLogger(__name__)

# Offsets in the order neighbours are reported: (dx, dy, is_diagonal).
NEIGHBOR_OFFSETS = (
    (1, -1, True),
    (1, 0, False),
    (0, -1, False),
    (-1, -1, True),
    (-1, 0, False),
    (-1, 1, True),
    (0, 1, False),
    (1, 1, True),
)


def _default_equality(left: Any, right: Any) -> bool:
    return left is not None and left == right


def _span(bounds: slice, length: int) -> range:
    """Resolve ``bounds`` against ``length`` the way list slicing does."""

    return range(*bounds.indices(length))


class BaseGrid(Generic[T]):
    """Arena behaviour shared by the dense and sparse grids.

    Subclasses provide :meth:`get` and keep their nodes in ``self._nodes``
    with ``node.index`` equal to the node's slot in that list.
    """

    _nodes: List[Node[T]]

    def get(self, x: int, y: int) -> Optional[Node[T]]:  # pragma: no cover - abstract
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def nodes(self) -> List[Node[T]]:
        return self._nodes

    def __iter__(self) -> Iterator[Node[T]]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------
    def neighbors(self, of: Node[T], with_diagonals: bool = True) -> List[Node[T]]:
        """Return the in-bounds cells around ``of`` in the fixed compass order.

        The order is ``(+1,-1) (+1,0) (0,-1) (-1,-1) (-1,0) (-1,+1) (0,+1)
        (+1,+1)``; diagonal offsets are skipped unless ``with_diagonals``.
        """

        found = []
        for dx, dy, diagonal in NEIGHBOR_OFFSETS:
            if diagonal and not with_diagonals:
                continue
            node = self.get(of.x + dx, of.y + dy)
            if node is not None:
                found.append(node)
        return found

    def linked(self, node: Node[T]) -> List[Node[T]]:
        """Resolve the neighbour indices stored on ``node``."""

        return [self._nodes[index] for index in node.neighbor_indices]

    def _incoming_links(self) -> Dict[int, List[Node[T]]]:
        incoming: Dict[int, List[Node[T]]] = {}
        for node in self._nodes:
            for target in dict.fromkeys(node.neighbor_indices):
                incoming.setdefault(target, []).append(node)
        return incoming

    # ------------------------------------------------------------------
    # Single steps
    # ------------------------------------------------------------------
    def up(self, node: Node[T]) -> Optional[Node[T]]:
        return self.get(node.x, node.y - 1)

    def down(self, node: Node[T]) -> Optional[Node[T]]:
        return self.get(node.x, node.y + 1)

    def left(self, node: Node[T]) -> Optional[Node[T]]:
        return self.get(node.x - 1, node.y)

    def right(self, node: Node[T]) -> Optional[Node[T]]:
        return self.get(node.x + 1, node.y)

    def up_right(self, node: Node[T]) -> Optional[Node[T]]:
        return self.get(node.x + 1, node.y - 1)

    def up_left(self, node: Node[T]) -> Optional[Node[T]]:
        return self.get(node.x - 1, node.y - 1)

    def down_right(self, node: Node[T]) -> Optional[Node[T]]:
        return self.get(node.x + 1, node.y + 1)

    def down_left(self, node: Node[T]) -> Optional[Node[T]]:
        return self.get(node.x - 1, node.y + 1)

    # ------------------------------------------------------------------
    # Bulk helpers
    # ------------------------------------------------------------------
    def each(self, action: Callable[[Node[T]], Any]) -> "BaseGrid[T]":
        for node in self._nodes:
            action(node)
        return self

    def while_true(self, operation: Callable[["BaseGrid[T]"], bool]) -> "BaseGrid[T]":
        while operation(self):
            pass
        return self

    def until(self, operation: Callable[["BaseGrid[T]"], bool]) -> "BaseGrid[T]":
        while not operation(self):
            pass
        return self

    def count(self, predicate: Callable[["BaseGrid[T]", Node[T]], bool]) -> int:
        return sum(1 for node in self._nodes if predicate(self, node))

    @staticmethod
    def manhattan_distance(start: Node[T], end: Node[T]) -> int:
        return abs(start.x - end.x) + abs(start.y - end.y)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def fill_distances(self, source: Node[T]) -> None:
        """Label every node with its hop count to ``source`` over explicit links.

        A node is relaxed from the dequeued node when its own neighbour list
        contains that node, it is not already waiting in the queue, and the
        candidate distance is strictly smaller than the one it holds. Relaxed
        nodes are queued again, so irregular or one-way link graphs still
        converge. Nodes that are never reached keep
        :data:`gridkit.constants.UNREACHED`.
        """

        reset_visited(self)
        reset_distances(self)
        source.set_distance(0)

        incoming = self._incoming_links()
        queue = deque([source])
        queued = Counter({source.index: 1})
        relaxations = 0
        while queue:
            current = queue.popleft()
            queued[current.index] -= 1
            for node in incoming.get(current.index, ()):
                if queued[node.index] > 0:
                    continue
                if current.distance + 1 < node.distance:
                    queue.append(node)
                    queued[node.index] += 1
                    node.set_distance(current.distance + 1)
                    relaxations += 1
        logger.debug("fill_distances from %s: %d relaxations", source, relaxations)

    def sequence_equal(
        self,
        sequence: Iterable[Any],
        start: Optional[Node[T]],
        next_node: StepFn,
        are_equal: Optional[Equality] = None,
    ) -> bool:
        """Return ``True`` when walking ``next_node`` from ``start`` spells ``sequence``.

        Parameters
        ----------
        sequence:
            Values to match; the first is compared against ``start``.
        start:
            First node of the walk.
        next_node:
            Step function returning the following node or ``None`` at the
            edge, e.g. :meth:`right`.
        are_equal:
            Comparison applied as ``are_equal(node.value, expected)``. The
            default requires a non-``None`` value equal to the expected one.

        Returns
        -------
        bool
            ``False`` as soon as a value differs or the walk hits ``None``
            (missing node, missing value or ``None`` in ``sequence``) before
            the sequence is exhausted.
        """

        compare = are_equal or _default_equality
        current = start
        for expected in sequence:
            if current is None or current.value is None or expected is None:
                return False
            if not compare(current.value, expected):
                return False
            current = next_node(current)
        return True


class Grid(BaseGrid[T]):
    """Dense ``width`` x ``height`` grid of nodes stored in row-major order.

    Parameters
    ----------
    rows:
        Iterable of rows, each an iterable of cell values. All rows must have
        the same length as the first one.
    on_create:
        Optional callback invoked with every node right after it is created.

    Raises
    ------
    InvalidInput
        When a row's length differs from the first row's.
    """

    def __init__(self, rows: Rows, on_create: Optional[Callable[[Node[T]], Any]] = None) -> None:
        self._nodes = []
        width: Optional[int] = None
        height = 0
        for y, row in enumerate(rows):
            start = len(self._nodes)
            for x, value in enumerate(row):
                node = Node(x, y, value, index=len(self._nodes))
                self._nodes.append(node)
                if on_create is not None:
                    on_create(node)
            row_width = len(self._nodes) - start
            if width is None:
                width = row_width
            elif row_width != width:
                raise InvalidInput(f"Row {y} has {row_width} cells, expected {width}")
            height += 1
        self._width = width or 0
        self._height = height
        logger.debug("Built %dx%d grid", self._width, self._height)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        factory: Optional[Callable[[str], Iterable[T]]] = None,
        pad: Optional[T] = None,
        on_create: Optional[Callable[[Node[T]], Any]] = None,
    ) -> "Grid[T]":
        """Build a grid from text lines, one cell per item ``factory`` yields.

        ``factory`` defaults to splitting a line into characters. When ``pad``
        is given, short rows are extended with it to the longest row's length.
        """

        make_row = factory or list
        rows = [list(make_row(line)) for line in lines]
        if pad is not None and rows:
            longest = max(len(row) for row in rows)
            rows = [row + [pad] * (longest - len(row)) for row in rows]
        return cls(rows, on_create)

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> "Grid[T]":
        if width <= 0 or height <= 0:
            raise InvalidInput(f"Grid size must be positive, got {width}x{height}")
        return cls([value] * width for _ in range(height))

    @classmethod
    def from_array(cls, array: Any, on_create: Optional[Callable[[Node[T]], Any]] = None) -> "Grid[T]":
        """Build a grid from a 2-D array-like; the first axis is ``y``."""

        data = np.asarray(array)
        if data.ndim != 2:
            raise InvalidInput(f"Expected a 2-D array, got {data.ndim} dimension(s)")
        return cls(data.tolist(), on_create)

    def to_array(self) -> np.ndarray:
        return np.array([[node.value for node in row] for row in self.rows()])

    # ------------------------------------------------------------------
    # Shape and lookup
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def get(self, x: int, y: int) -> Optional[Node[T]]:
        if x < 0 or x >= self._width or y < 0 or y >= self._height:
            return None
        return self._nodes[y * self._width + x]

    def __getitem__(self, key: Sequence[Union[int, slice]]) -> Union[Optional[Node[T]], List[Node[T]]]:
        x, y = key
        if isinstance(x, slice) and isinstance(y, slice):
            return list(self.region(x, y))
        if isinstance(x, slice):
            return list(self.row_slice(x, y))
        if isinstance(y, slice):
            return list(self.column_slice(x, y))
        return self.get(x, y)

    # ------------------------------------------------------------------
    # Rows, columns and slices
    # ------------------------------------------------------------------
    def rows(self) -> Iterator[List[Node[T]]]:
        for y in range(self._height):
            start = y * self._width
            yield self._nodes[start:start + self._width]

    def row(self, y: int) -> Iterator[Node[T]]:
        for x in range(self._width):
            node = self.get(x, y)
            if node is not None:
                yield node

    def column(self, x: int) -> Iterator[Node[T]]:
        for y in range(self._height):
            node = self.get(x, y)
            if node is not None:
                yield node

    def column_slice(self, x: int, ys: slice) -> Iterator[Node[T]]:
        """Nodes of column ``x`` for the rows selected by ``ys``."""

        for y in _span(ys, self._height):
            node = self.get(x, y)
            if node is not None:
                yield node

    def row_slice(self, xs: slice, y: int) -> Iterator[Node[T]]:
        """Nodes of row ``y`` for the columns selected by ``xs``."""

        for x in _span(xs, self._width):
            node = self.get(x, y)
            if node is not None:
                yield node

    def region(self, xs: slice, ys: slice) -> Iterator[Node[T]]:
        """Nodes of the rectangle ``xs`` x ``ys`` in row-major order."""

        for y in _span(ys, self._height):
            yield from self.row_slice(xs, y)

    def region_rows(self, xs: slice, ys: slice) -> Iterator[List[Node[T]]]:
        for y in _span(ys, self._height):
            yield list(self.row_slice(xs, y))

    def region_columns(self, xs: slice, ys: slice) -> Iterator[List[Node[T]]]:
        for x in _span(xs, self._width):
            yield list(self.column_slice(x, ys))

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"


__all__ = ["NEIGHBOR_OFFSETS", "BaseGrid", "Grid"]

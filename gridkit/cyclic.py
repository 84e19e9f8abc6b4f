"""gridkit.cyclic
=================

Wrap-around helpers: :class:`Cycle` hands out the elements of a fixed
sequence forever, :class:`CircularRange` is a dial of positions ``0..size-1``
that counts how often it passes zero.
"""

from __future__ import annotations

from typing import Generic, Iterable, List, Optional, TypeVar

from .errors import EmptyCollection, InvalidInput

T = TypeVar("T")


class Cycle(Generic[T]):
    """Explicit cyclic iterator over a snapshot of ``items``.

    ``current`` is ``None`` until the first :meth:`advance`.
    """

    def __init__(self, items: Iterable[T]) -> None:
        self._items: List[T] = list(items)
        if not self._items:
            raise EmptyCollection("Cannot cycle over an empty sequence")
        self._index = -1

    @property
    def current(self) -> Optional[T]:
        if self._index < 0:
            return None
        return self._items[self._index]

    @property
    def index(self) -> int:
        return self._index

    def advance(self) -> T:
        """Move to the next element, wrapping at the end, and return it."""

        self._index = (self._index + 1) % len(self._items)
        return self._items[self._index]

    def take(self, count: int) -> List[T]:
        return [self.advance() for _ in range(count)]

    def __len__(self) -> int:
        return len(self._items)


class CircularRange:
    """Dial with ``size`` positions that tracks zero crossings.

    ``crossed_zero`` counts every time the position lands on zero during a
    move, including intermediate passes; ``stopped_on_zero`` counts moves
    that end on zero.

    >>> dial = CircularRange()
    >>> dial.move_backward(68)
    1
    >>> dial.position
    82
    """

    def __init__(self, size: int = 100, start: int = 50) -> None:
        if size <= 0:
            raise InvalidInput(f"Size must be positive, got {size}")
        if not 0 <= start < size:
            raise InvalidInput(f"Start position {start} outside 0..{size - 1}")
        self.size = size
        self.position = start
        self.crossed_zero = 0
        self.stopped_on_zero = 0

    @staticmethod
    def _check_distance(distance: int) -> None:
        if distance <= 0:
            raise InvalidInput(f"Distance must be positive, got {distance}")

    def _finish(self, crossings: int) -> int:
        self.crossed_zero += crossings
        if self.position == 0:
            self.stopped_on_zero += 1
        return crossings

    def move_backward(self, distance: int) -> int:
        """Move toward lower numbers; return how many times zero was reached."""

        self._check_distance(distance)
        if self.position == 0:
            crossings = distance // self.size
        elif distance >= self.position:
            crossings = (distance - self.position) // self.size + 1
        else:
            crossings = 0
        self.position = (self.position - distance) % self.size
        return self._finish(crossings)

    def move_forward(self, distance: int) -> int:
        """Move toward higher numbers; return how many times zero was reached."""

        self._check_distance(distance)
        crossings = (self.position + distance) // self.size
        self.position = (self.position + distance) % self.size
        return self._finish(crossings)

    def reset(self, position: int = 50) -> None:
        if not 0 <= position < self.size:
            raise InvalidInput(f"Position {position} outside 0..{self.size - 1}")
        self.position = position
        self.crossed_zero = 0
        self.stopped_on_zero = 0

    def __str__(self) -> str:
        return (
            f"CircularRange[{self.position}/{self.size - 1}] "
            f"Crossed:{self.crossed_zero} Stopped:{self.stopped_on_zero}"
        )


__all__ = ["Cycle", "CircularRange"]

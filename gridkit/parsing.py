"""gridkit.parsing
==================

Small string and sequence helpers for pulling numbers out of puzzle input such
as ``"Card 3: 1, 2, 3"`` or ``"1,2 -> 9,2"``.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, TypeVar, Union

from .errors import EmptyCollection, InvalidInput

T = TypeVar("T")


def _after(source: str, skip_until: str) -> str:
    """Text following the first ``skip_until`` and the character after it."""

    index = source.find(skip_until)
    if index < 0:
        return ""
    return source[index + 2:]


def parse_int(source: str, split_on: str = " ") -> int:
    """Return the first token of ``source`` that parses as an integer.

    Raises
    ------
    EmptyCollection
        When no token is an integer.
    """

    for token in source.split(split_on):
        try:
            return int(token.strip())
        except ValueError:
            continue
    raise EmptyCollection(f"No integer found in {source!r}")


def parse_integers(source: str, skip_until: str = ":", split_on: str = ",") -> List[int]:
    """Parse the ``split_on`` separated integers after ``skip_until``.

    >>> parse_integers("Game 1: 3, 4,5")
    [3, 4, 5]
    """

    try:
        return [int(part) for part in parse_parts(source, skip_until, split_on) if part]
    except ValueError as exc:
        raise InvalidInput(f"Cannot parse integers from {source!r}") from exc


def parse_parts(source: str, skip_until: str, split_on: str) -> List[str]:
    """Split the text after ``skip_until`` on ``split_on``, trimming each part."""

    return [part.strip() for part in _after(source, skip_until).split(split_on)]


def split_to_ints(sources: Iterable[str], split_on: str) -> List[int]:
    """Flatten ``sources`` into the integers separated by ``split_on``."""

    values = []
    for source in sources:
        for part in source.split(split_on):
            if part.strip():
                values.append(int(part))
    return values


def bits_to_int(bits: Union[str, Iterable[Union[int, bool]]]) -> int:
    """Read ``bits`` (most significant first) as an unsigned integer.

    Strings treat ``"1"`` as set; other iterables treat any truthy or positive
    value as set.
    """

    if isinstance(bits, str):
        flags = [char == "1" for char in bits]
    else:
        flags = [bool(bit) and bit > 0 for bit in bits]
    value = 0
    for flag in flags:
        value = (value << 1) | int(flag)
    return value


def product(values: Iterable[int]) -> int:
    return math.prod(values)


def second(values: Sequence[T]) -> T:
    return values[1]


def third(values: Sequence[T]) -> T:
    return values[2]


def without_index(values: Sequence[T], index: int) -> List[T]:
    """Copy of ``values`` with the element at ``index`` removed."""

    return [value for position, value in enumerate(values) if position != index]


__all__ = [
    "parse_int",
    "parse_integers",
    "parse_parts",
    "split_to_ints",
    "bits_to_int",
    "product",
    "second",
    "third",
    "without_index",
]

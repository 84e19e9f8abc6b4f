"""gridkit.combinatorics
=========================

Combinations and permutations returned as lists, in lexicographic order of
the input positions.
"""

from __future__ import annotations

import itertools
from typing import Iterator, List, Sequence, TypeVar

from .errors import InvalidInput

T = TypeVar("T")


def combinations(items: Sequence[T], k: int) -> Iterator[List[T]]:
    """Yield every ``k``-element selection of ``items`` preserving input order."""

    if k < 0:
        raise InvalidInput(f"Combination size must not be negative, got {k}")
    for combo in itertools.combinations(items, k):
        yield list(combo)


def permutations(items: Sequence[T]) -> Iterator[List[T]]:
    """Yield every ordering of ``items``; an empty input yields nothing."""

    if not items:
        return
    for perm in itertools.permutations(items):
        yield list(perm)


__all__ = ["combinations", "permutations"]

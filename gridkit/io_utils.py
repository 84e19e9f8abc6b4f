"""gridkit.io_utils
===================

Line-oriented input reading. Puzzle programs take their input from the file
named by the first command-line argument, or from standard input when no
argument is given. Every reader here accepts an explicit ``source`` (a path,
or ``None`` for stdin) so the same helpers work in scripts and in tests.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence, TypeVar, Union

from .errors import InvalidInput

R = TypeVar("R")
Source = Union[str, Path, None]


def input_path(argv: Optional[Sequence[str]] = None) -> Optional[Path]:
    """Return the first command-line argument as a path, if there is one."""

    args = sys.argv if argv is None else argv
    if len(args) > 1 and args[1]:
        return Path(args[1])
    return None


def iter_lines(source: Source = None) -> Iterator[str]:
    """Yield lines from ``source`` (stdin when ``None``) without line endings."""

    if source is None:
        for line in sys.stdin:
            yield line.rstrip("\r\n")
        return
    with Path(source).open() as handle:
        for line in handle:
            yield line.rstrip("\r\n")


def read(factory: Callable[[str], R], source: Source = None) -> Iterator[R]:
    """Transform lines with ``factory`` until the first empty line."""

    for line in iter_lines(source):
        if not line:
            break
        yield factory(line)


def read_all_lines(source: Source = None) -> List[str]:
    """Return every line, blank ones included."""

    return list(iter_lines(source))


def read_lines(source: Source = None) -> List[str]:
    """Return the lines that contain something other than whitespace."""

    return [line for line in iter_lines(source) if line.strip()]


def split_integers(line: str, delimiter: str = " ") -> List[int]:
    """Split ``line`` on ``delimiter`` and whitespace and parse every token.

    Raises
    ------
    InvalidInput
        When a token is not an integer.
    """

    tokens = line.replace(delimiter, " ").split() if delimiter != " " else line.split()
    try:
        return [int(token) for token in tokens]
    except ValueError as exc:
        raise InvalidInput(f"Cannot parse integers from {line!r}") from exc


def read_int_rows(factory: Callable[[List[int]], R], source: Source = None) -> List[R]:
    """Parse each non-blank line as space separated integers and apply ``factory``."""

    return [factory(split_integers(line)) for line in read_lines(source)]


def read_records(factory: Callable[[List[str]], R], source: Source = None) -> List[R]:
    """Group lines into blank-line separated records and apply ``factory`` to each."""

    records: List[R] = []
    current: List[str] = []
    for line in iter_lines(source):
        if line.strip():
            current.append(line)
        elif current:
            records.append(factory(current))
            current = []
    if current:
        records.append(factory(current))
    return records


def read_integers(source: Source = None) -> List[int]:
    """One integer per line, stopping at the first empty line."""

    return list(read(lambda line: int(line.strip()), source))


def as_integers(text: str) -> List[int]:
    """Convert each digit character of ``text`` into its numeric value."""

    if not text.isdigit():
        raise InvalidInput(f"Expected only digits, got {text!r}")
    return [int(char) for char in text]


def read_digit_rows(source: Source = None) -> List[List[int]]:
    """Rows of single-digit integers, stopping at the first empty line."""

    return list(read(as_integers, source))


__all__ = [
    "input_path",
    "iter_lines",
    "read",
    "read_all_lines",
    "read_lines",
    "split_integers",
    "read_int_rows",
    "read_records",
    "read_integers",
    "as_integers",
    "read_digit_rows",
]

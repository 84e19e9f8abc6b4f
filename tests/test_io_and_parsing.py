from __future__ import annotations

import io
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from gridkit.errors import EmptyCollection, InvalidInput
from gridkit.io_utils import (
    as_integers,
    input_path,
    read,
    read_all_lines,
    read_digit_rows,
    read_int_rows,
    read_integers,
    read_lines,
    read_records,
    split_integers,
)
from gridkit.parsing import (
    bits_to_int,
    parse_int,
    parse_integers,
    parse_parts,
    product,
    second,
    split_to_ints,
    third,
    without_index,
)


@pytest.fixture
def puzzle(tmp_path: Path) -> Path:
    path = tmp_path / "input.txt"
    path.write_text("123\n456\n\n7 8\n  \n9\n")
    return path


def test_input_path_from_argv():
    assert input_path(["prog", "day01.txt"]) == Path("day01.txt")
    assert input_path(["prog"]) is None


def test_read_stops_at_first_blank_line(puzzle: Path):
    assert list(read(len, puzzle)) == [3, 3]
    assert read_digit_rows(puzzle) == [[1, 2, 3], [4, 5, 6]]
    assert read_integers(puzzle) == [123, 456]


def test_line_readers(puzzle: Path):
    assert read_all_lines(puzzle) == ["123", "456", "", "7 8", "  ", "9"]
    assert read_lines(puzzle) == ["123", "456", "7 8", "9"]
    assert read_int_rows(sum, puzzle) == [123, 456, 15, 9]


def test_read_records_groups_blank_separated_blocks(puzzle: Path):
    assert read_records(len, puzzle) == [2, 1, 1]


def test_reads_stdin_when_no_source(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ab\ncd\n"))
    assert read_lines() == ["ab", "cd"]


def test_line_integer_helpers():
    assert split_integers("10 20  30") == [10, 20, 30]
    assert split_integers("1,2, 3", delimiter=",") == [1, 2, 3]
    assert as_integers("907") == [9, 0, 7]
    with pytest.raises(InvalidInput):
        split_integers("1 x")
    with pytest.raises(InvalidInput):
        as_integers("1a")


def test_parse_helpers():
    assert parse_int("Card  12 wins") == 12
    with pytest.raises(EmptyCollection):
        parse_int("no numbers")
    assert parse_integers("Game 1: 3, 4,5") == [3, 4, 5]
    assert parse_parts("Valve AA: to BB, CC", ":", ",") == ["to BB", "CC"]
    assert split_to_ints(["1,2", "3"], ",") == [1, 2, 3]


def test_sequence_helpers():
    assert bits_to_int("1011") == 11
    assert bits_to_int([1, 0, 0]) == 4
    assert bits_to_int([True, True]) == 3
    assert product([2, 3, 7]) == 42
    assert second("abc") == "b"
    assert third([1, 2, 3]) == 3
    assert without_index([1, 2, 3], 1) == [1, 3]

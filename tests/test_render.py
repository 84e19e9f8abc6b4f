from __future__ import annotations

import struct
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from gridkit.errors import InvalidInput
from gridkit.grid import Grid
from gridkit.regions import set_neighbors
from gridkit.render import (
    bitmap_bytes,
    render,
    render_distances,
    render_sparse,
    render_sprites,
    render_text,
    render_window,
    write_bitmap,
)
from gridkit.sparse import SparseGrid


def capture(fn, *args, **kwargs):
    parts = []
    fn(*args, draw=parts.append, **kwargs)
    return "".join(parts)


def test_bitmap_two_by_one_layout(tmp_path: Path):
    grid = Grid(["ab"])
    path = write_bitmap(grid, tmp_path / "out.bmp", lambda value: (10, 20, 30))
    data = path.read_bytes()
    assert len(data) == 62

    magic, size, reserved_a, reserved_b, offset = struct.unpack("<2sIHHI", data[:14])
    assert (magic, size, reserved_a, reserved_b, offset) == (b"BM", 62, 0, 0, 54)
    header = struct.unpack("<IiiHHIIiiII", data[14:54])
    assert header == (40, 2, 1, 1, 24, 0, 8, 2835, 2835, 0, 0)
    assert data[54:] == bytes([30, 20, 10, 30, 20, 10, 0, 0])


def test_bitmap_rows_are_bottom_up():
    grid = Grid(["r", "g"])
    palette = {"r": (255, 0, 0), "g": (0, 255, 0)}
    data = bitmap_bytes(grid, palette.__getitem__)
    pixels = data[54:]
    assert pixels[:4] == bytes([0, 255, 0, 0])
    assert pixels[4:] == bytes([0, 0, 255, 0])


def test_bitmap_scale_enlarges_cells():
    grid = Grid(["ab"])
    data = bitmap_bytes(grid, lambda value: (1, 2, 3), scale=3)
    width, height = struct.unpack("<ii", data[18:26])
    assert (width, height) == (6, 3)
    stride = (6 * 3 + 3) & ~3
    assert len(data) == 54 + stride * 3
    with pytest.raises(InvalidInput):
        bitmap_bytes(grid, lambda value: (0, 0, 0), scale=0)


def test_render_text_and_default_render():
    grid = Grid(["ab", "cd"])
    assert render_text(grid) == "ab\ncd"
    assert capture(render, grid) == "ab\ncd\n"


def test_render_within_bounds_skips_empty_rows():
    grid = Grid(["abc", "def", "ghi"])
    assert capture(render, grid, bounds=(1, 1, 2, 2)) == "ef\nhi\n"


def test_render_distances_and_sprites():
    grid = Grid(["...."])
    set_neighbors(grid)
    grid.fill_distances(grid.get(0, 0))
    assert capture(render_distances, grid) == "0123\n"
    assert capture(render_sprites, grid, {(1, 0): "@"}) == ".@..\n"


def test_render_window():
    grid = Grid(["abc", "def", "ghi"])
    assert capture(render_window, grid, 0, 0, 2) == "ab\nde\n"


def test_render_sparse_viewport():
    grid = SparseGrid([(0, 0, "o"), (1, 1, "#")])
    text = "".join(_collect_sparse(grid))
    lines = text.splitlines()
    assert lines[0] == "....o" + "." * 5
    assert len(lines) == 6


def _collect_sparse(grid):
    parts = []
    render_sparse(grid, draw=parts.append)
    return parts

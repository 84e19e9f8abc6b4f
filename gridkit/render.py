"""gridkit.render
==================

Presentation helpers: text dumps of a grid and an uncompressed 24-bit BMP
writer. Nothing here mutates the grid.

Text renderers take a ``draw`` callable (``sys.stdout.write`` by default) so
tests and the CLI can capture output. Cell renderers receive ``(node, draw)``
and decide what to emit for one cell.

The bitmap layout is fixed: a 14-byte file header, a 40-byte DIB header, then
pixel rows bottom-up in BGR order with every row padded to a multiple of four
bytes.
"""

from __future__ import annotations

import logging
import struct
import sys
from pathlib import Path
from typing import Callable, Dict, Optional, Union

import numpy as np

from .constants import (
    BMP_BITS_PER_PIXEL,
    BMP_DIB_HEADER_SIZE,
    BMP_PIXEL_OFFSET,
    BMP_PIXELS_PER_METER,
)
from .errors import InvalidInput
from .node import Node
from .types import Bounds, ColorFn, Coord, Draw

logger = logging.getLogger(__name__)

DrawCell = Callable[[Node, Draw], object]


def _draw_value(node: Node, draw: Draw) -> None:
    draw("C" if node.value is None else str(node.value))


# ---------------------------------------------------------------------------
# Console output
# ---------------------------------------------------------------------------
def render(
    grid,
    draw_cell: Optional[DrawCell] = None,
    draw: Optional[Draw] = None,
    bounds: Optional[Bounds] = None,
) -> None:
    """Draw ``grid`` row by row.

    With ``bounds = (min_x, min_y, max_x, max_y)`` only cells inside the
    inclusive box are drawn, and rows that draw nothing emit no newline.
    """

    out = draw or sys.stdout.write
    cell = draw_cell or _draw_value
    for row in grid.rows():
        drawn = False
        for node in row:
            if bounds is not None:
                min_x, min_y, max_x, max_y = bounds
                if not (min_x <= node.x <= max_x and min_y <= node.y <= max_y):
                    continue
            cell(node, out)
            drawn = True
        if drawn or bounds is None:
            out("\n")


def render_text(grid) -> str:
    """Return the grid's values as newline-separated rows."""

    return "\n".join("".join(str(node.value) for node in row) for row in grid.rows())


def render_distances(grid, draw: Optional[Draw] = None) -> None:
    render(grid, lambda node, out: out(str(node.distance % 10)), draw)


def render_sprites(grid, display: Dict[Coord, str], draw: Optional[Draw] = None) -> None:
    """Draw ``display[(x, y)]`` where present and the node value elsewhere."""

    def draw_cell(node: Node, out: Draw) -> None:
        sprite = display.get(node.position)
        if sprite is not None:
            out(sprite)
        else:
            _draw_value(node, out)

    render(grid, draw_cell, draw)


def render_window(grid, x: int, y: int, size: int, draw: Optional[Draw] = None) -> None:
    """Draw the cells strictly within ``size`` of ``(x, y)`` on both axes."""

    out = draw or sys.stdout.write
    for row in grid.rows():
        drawn = False
        for node in row:
            if abs(node.x - x) < size and abs(node.y - y) < size:
                _draw_value(node, out)
                drawn = True
        if drawn:
            out("\n")


def render_sparse(grid, draw_cell: Optional[DrawCell] = None, draw: Optional[Draw] = None, empty: str = ".") -> None:
    """Draw a :class:`gridkit.sparse.SparseGrid` viewport; empty cells use ``empty``."""

    out = draw or sys.stdout.write
    cell = draw_cell or _draw_value
    for row in grid.viewport():
        for node in row:
            if node is None:
                out(empty)
            else:
                cell(node, out)
        out("\n")


# ---------------------------------------------------------------------------
# Bitmap output
# ---------------------------------------------------------------------------
def bitmap_bytes(grid, get_color: ColorFn, scale: int = 1) -> bytes:
    """Encode ``grid`` as a 24-bit BMP image.

    Parameters
    ----------
    grid:
        Anything exposing ``width``, ``height`` and ``get``; cells it reports
        as absent are black.
    get_color:
        Maps a node value to an ``(r, g, b)`` tuple of bytes.
    scale:
        Each cell becomes a ``scale`` x ``scale`` block of pixels.

    Returns
    -------
    bytes
        Complete file contents, ``54 + stride * height`` bytes long where
        ``stride`` is the pixel row length rounded up to four bytes.
    """

    if scale < 1:
        raise InvalidInput(f"Bitmap scale must be at least 1, got {scale}")

    cells = np.zeros((grid.height, grid.width, 3), dtype=np.uint8)
    for y in range(grid.height):
        for x in range(grid.width):
            node = grid.get(x, y)
            if node is not None:
                red, green, blue = get_color(node.value)
                cells[y, x] = (blue, green, red)

    pixels = cells.repeat(scale, axis=0).repeat(scale, axis=1)
    height, width = pixels.shape[:2]
    stride = (width * 3 + 3) & ~3
    rows = pixels[::-1].reshape(height, width * 3)
    rows = np.pad(rows, ((0, 0), (0, stride - width * 3)))
    image_size = stride * height

    file_header = struct.pack("<2sIHHI", b"BM", BMP_PIXEL_OFFSET + image_size, 0, 0, BMP_PIXEL_OFFSET)
    dib_header = struct.pack(
        "<IiiHHIIiiII",
        BMP_DIB_HEADER_SIZE,
        width,
        height,
        1,
        BMP_BITS_PER_PIXEL,
        0,
        image_size,
        BMP_PIXELS_PER_METER,
        BMP_PIXELS_PER_METER,
        0,
        0,
    )
    return file_header + dib_header + rows.astype(np.uint8).tobytes()


def write_bitmap(grid, path: Union[str, Path], get_color: ColorFn, scale: int = 1) -> Path:
    """Write :func:`bitmap_bytes` to ``path`` and return the path."""

    target = Path(path)
    payload = bitmap_bytes(grid, get_color, scale)
    target.write_bytes(payload)
    logger.info("Wrote %d byte bitmap to %s", len(payload), target)
    return target


__all__ = [
    "render",
    "render_text",
    "render_distances",
    "render_sprites",
    "render_window",
    "render_sparse",
    "bitmap_bytes",
    "write_bitmap",
]

"""gridkit.constants
====================

Global constants used across the toolkit. Keeping them here avoids import
cycles between the grid, traversal and rendering modules.
"""

from __future__ import annotations

UNREACHED = 2**31 - 1
"""Distance sentinel for nodes no traversal has reached."""

VISIT_LIMIT = 5
"""Visit count past which the depth-first distance fill stops expanding a node."""

VIEWPORT_MARGIN = 4

BMP_FILE_HEADER_SIZE = 14
BMP_DIB_HEADER_SIZE = 40
BMP_PIXEL_OFFSET = BMP_FILE_HEADER_SIZE + BMP_DIB_HEADER_SIZE
BMP_BITS_PER_PIXEL = 24
BMP_PIXELS_PER_METER = 2835  # 72 DPI

DEFAULT_TRACE_LOG = "gridkit_trace.jsonl"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_PALETTE = (
    (0, 0, 0),
    (0, 116, 217),
    (255, 65, 54),
    (46, 204, 64),
    (255, 220, 0),
    (170, 170, 170),
    (240, 18, 190),
    (255, 133, 27),
    (127, 219, 255),
    (135, 12, 37),
)

__all__ = [
    "UNREACHED",
    "VISIT_LIMIT",
    "VIEWPORT_MARGIN",
    "BMP_FILE_HEADER_SIZE",
    "BMP_DIB_HEADER_SIZE",
    "BMP_PIXEL_OFFSET",
    "BMP_BITS_PER_PIXEL",
    "BMP_PIXELS_PER_METER",
    "DEFAULT_TRACE_LOG",
    "LOG_FORMAT",
    "DEFAULT_PALETTE",
]

"""gridkit.cli
===============

Command-line entry point: load a character map, optionally flood-fill its
regions, label distances from a start cell, print it and write a bitmap or a
JSON summary.
"""

from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List

from .config import GridConfig, load_config
from .constants import UNREACHED
from .errors import InvalidInput
from .grid import Grid
from .io_utils import read_lines
from .logging_utils import log_snapshot, setup_logging
from .parsing import split_to_ints
from .regions import fill_distances_depth_first, get_regions, reset_distances, reset_visited, set_neighbors
from .render import render, render_distances, write_bitmap

logger = logging.getLogger(__name__)


def _parse_position(text: str) -> List[int]:
    values = split_to_ints([text], ",")
    if len(values) != 2:
        raise InvalidInput(f"Expected X,Y but got {text!r}")
    return values


def summarise_regions(grid: Grid) -> Dict[str, Any]:
    """Flood-fill ``grid`` from scratch and describe the regions found."""

    reset_visited(grid)
    regions = list(get_regions(grid))
    per_value = Counter(str(region[0].value) for region in regions)
    return {
        "count": len(regions),
        "largest": max((len(region) for region in regions), default=0),
        "per_value": dict(sorted(per_value.items())),
    }


def summarise_distances(grid: Grid, source_xy: List[int], config: GridConfig, depth_first: bool = False) -> Dict[str, Any]:
    """Link open cells and label each with its distance from ``source_xy``."""

    source = grid.get(*source_xy)
    if source is None:
        raise InvalidInput(f"Start {source_xy} lies outside the {grid.width}x{grid.height} grid")

    walls = set(config.walls)
    set_neighbors(grid, include=lambda node: str(node.value) not in walls, with_diagonals=config.with_diagonals)
    for node in grid:
        if str(node.value) in walls:
            node.clear_neighbors()
    if depth_first:
        reset_visited(grid)
        reset_distances(grid)
        fill_distances_depth_first(grid, source, visit_limit=config.visit_limit)
    else:
        grid.fill_distances(source)

    reached = [node.distance for node in grid if node.distance != UNREACHED]
    return {
        "source": list(source_xy),
        "reached": len(reached),
        "max": max(reached, default=0),
        "mode": "depth_first" if depth_first else "breadth_first",
    }


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the requested grid analyses."""

    parser = argparse.ArgumentParser("gridkit")
    parser.add_argument("--infile", default=None, help="Grid text file (stdin when omitted)")
    parser.add_argument("--config", default=None, help="JSON file with GridConfig values")
    parser.add_argument("--pad", default=None, help="Pad short rows with this character")
    parser.add_argument("--walls", default=None, help="Characters that block distance propagation")
    parser.add_argument("--diagonals", dest="diagonals", action="store_true", help="Link diagonal neighbours")
    parser.add_argument("--no-diagonals", dest="diagonals", action="store_false")
    parser.set_defaults(diagonals=None)
    parser.add_argument("--regions", action="store_true", help="Report 4-connected equal-valued regions")
    parser.add_argument("--distances-from", default=None, metavar="X,Y", help="Label distances from this cell")
    parser.add_argument("--depth-first", action="store_true", help="Use the depth-first distance walk")
    parser.add_argument("--visit-limit", type=int, default=None, help="Visit cap for the depth-first walk")
    parser.add_argument("--render", action="store_true", help="Print the grid (or its distances) to stdout")
    parser.add_argument("--bitmap", default=None, help="Write the grid as a BMP image to this path")
    parser.add_argument("--scale", type=int, default=None, help="Pixels per cell in the bitmap")
    parser.add_argument("--summary", default=None, help="Write a JSON summary to this path")
    parser.add_argument("--trace", default=None, help="Append JSONL grid snapshots to this path")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--log-file", default=None, help="Write logs to this file instead of stderr")
    args = parser.parse_args(argv)

    config = load_config(args.config) if args.config else GridConfig()
    overrides = {
        "pad": args.pad,
        "walls": args.walls,
        "with_diagonals": args.diagonals,
        "visit_limit": args.visit_limit,
        "bitmap_scale": args.scale,
        "log_level": args.log_level,
        "trace_log": args.trace,
    }
    merged = {**config.__dict__, **{key: value for key, value in overrides.items() if value is not None}}
    config = GridConfig(**merged)
    setup_logging(config.log_level, args.log_file)

    lines = read_lines(args.infile)
    if not lines:
        parser.error("input contains no grid rows")
    grid = Grid.from_lines(lines, pad=config.pad)
    logger.info("Loaded %dx%d grid from %s", grid.width, grid.height, args.infile or "stdin")
    summary: Dict[str, Any] = {"width": grid.width, "height": grid.height}
    print(f"Grid {grid.width}x{grid.height}")

    if args.regions:
        summary["regions"] = summarise_regions(grid)
        regions = summary["regions"]
        print(f"Regions: {regions['count']} (largest {regions['largest']})")
        for value, count in regions["per_value"].items():
            print(f"   {value!r}: {count}")

    if args.distances_from:
        try:
            source_xy = _parse_position(args.distances_from)
        except (InvalidInput, ValueError) as exc:
            parser.error(str(exc))
        summary["distances"] = summarise_distances(grid, source_xy, config, depth_first=args.depth_first)
        distances = summary["distances"]
        print(f"Reached {distances['reached']} cell(s) from {tuple(source_xy)}; farthest at {distances['max']}")

    if config.trace_log:
        log_snapshot(grid, label=args.infile or "stdin", path=config.trace_log)

    if args.render:
        if args.distances_from:
            render_distances(grid)
        else:
            render(grid)

    if args.bitmap:
        colors = config.color_function(node.value for node in grid)
        write_bitmap(grid, args.bitmap, colors, scale=config.bitmap_scale)
        print(f"Bitmap saved to {args.bitmap}")

    if args.summary:
        Path(args.summary).write_text(json.dumps(summary, indent=2))
        print(f"Summary saved to {args.summary}")


__all__ = ["main", "summarise_regions", "summarise_distances"]


if __name__ == "__main__":  # pragma: no cover
    main()

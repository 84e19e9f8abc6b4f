"""gridkit.logging_utils
=========================

Logging setup for command-line runs, plus a JSONL trace that records grid
snapshots (values and distances) for later inspection.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .constants import DEFAULT_TRACE_LOG, LOG_FORMAT, UNREACHED


def setup_logging(level: str = "WARNING", log_file: Optional[Union[str, Path]] = None) -> None:
    """Configure the root logger, writing to ``log_file`` or stderr.

    A log file is overwritten on each run; its directory is created if needed.
    """

    options: Dict[str, Any] = {"level": level.upper(), "format": LOG_FORMAT, "force": True}
    if log_file is not None:
        target = Path(log_file)
        target.parent.mkdir(parents=True, exist_ok=True)
        options.update(filename=str(target), filemode="w")
    logging.basicConfig(**options)
    logging.getLogger(__name__).debug("Logging initialised at %s", options["level"])


def snapshot(grid, label: str = "") -> Dict[str, Any]:
    """Describe ``grid`` as a JSON-ready dictionary."""

    return {
        "label": label,
        "width": grid.width,
        "height": grid.height,
        "values": [[str(node.value) for node in row] for row in grid.rows()],
        "distances": [
            [None if node.distance == UNREACHED else node.distance for node in row] for row in grid.rows()
        ],
    }


def log_snapshot(grid, label: str = "", path: Union[str, Path] = DEFAULT_TRACE_LOG) -> None:
    """Append a JSON line describing ``grid`` to ``path``."""

    with Path(path).open("a") as handle:
        handle.write(json.dumps(snapshot(grid, label)) + "\n")


__all__ = ["setup_logging", "snapshot", "log_snapshot"]

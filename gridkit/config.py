"""gridkit.config
==================

Run configuration for the command-line front end. Values come from an
optional JSON file and are then overridden by command-line flags.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from .constants import DEFAULT_PALETTE, VISIT_LIMIT
from .cyclic import Cycle
from .errors import InvalidInput
from .types import RGB, ColorFn


def _as_rgb(name: str, value: Any) -> RGB:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise InvalidInput(f"Palette entry {name!r} must have three channels, got {value!r}")
    if not all(isinstance(channel, int) and 0 <= channel <= 255 for channel in value):
        raise InvalidInput(f"Palette entry {name!r} channels must be ints in 0..255, got {value!r}")
    return int(value[0]), int(value[1]), int(value[2])


@dataclass
class GridConfig:
    """Configuration knobs for loading, traversing and rendering a grid."""

    with_diagonals: bool = False
    walls: str = ""
    pad: Optional[str] = None
    visit_limit: int = VISIT_LIMIT
    bitmap_scale: int = 1
    palette: Dict[str, RGB] = field(default_factory=dict)
    log_level: str = "WARNING"
    trace_log: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("bitmap_scale", "visit_limit"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInput(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.with_diagonals, bool):
            raise InvalidInput(f"with_diagonals must be true or false, got {self.with_diagonals!r}")
        if not isinstance(self.walls, str):
            raise InvalidInput(f"walls must be a string of characters, got {self.walls!r}")
        if self.pad is not None and not isinstance(self.pad, str):
            raise InvalidInput(f"pad must be a string, got {self.pad!r}")
        if not isinstance(self.palette, dict):
            raise InvalidInput(f"palette must map values to colours, got {self.palette!r}")
        if self.bitmap_scale < 1:
            raise InvalidInput(f"bitmap_scale must be at least 1, got {self.bitmap_scale}")
        if self.visit_limit < 0:
            raise InvalidInput(f"visit_limit must not be negative, got {self.visit_limit}")
        if self.pad is not None and len(self.pad) != 1:
            raise InvalidInput(f"pad must be a single character, got {self.pad!r}")
        level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise InvalidInput(f"Unknown log level {self.log_level!r}")
        self.log_level = level
        self.palette = {str(key): _as_rgb(str(key), value) for key, value in self.palette.items()}

    def color_function(self, values: Iterable[Any]) -> ColorFn:
        """Map each distinct value to a colour.

        Values named in :attr:`palette` keep their colour; the rest take the
        default palette colours in sorted order, wrapping when it runs out.
        """

        colors: Dict[str, RGB] = dict(self.palette)
        defaults = Cycle(DEFAULT_PALETTE)
        for key in sorted({str(value) for value in values}):
            if key not in colors:
                colors[key] = defaults.advance()
        return lambda value: colors.get(str(value), (0, 0, 0))


def load_config(path: Union[str, Path]) -> GridConfig:
    """Read a JSON object from ``path``; unknown keys are ignored."""

    raw = json.loads(Path(path).read_text())
    if not isinstance(raw, dict):
        raise InvalidInput(f"Config file {path} must contain a JSON object")
    known = {item.name for item in fields(GridConfig)}
    return GridConfig(**{key: value for key, value in raw.items() if key in known})


__all__ = ["GridConfig", "load_config"]

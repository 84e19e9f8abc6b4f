"""Public package interface for gridkit."""

from .errors import EmptyCollection, GridError, InvalidInput, InvalidState
from .grid import BaseGrid, Grid
from .node import Node
from .regions import get_regions, set_neighbors
from .sparse import SparseGrid

__all__ = [
    "BaseGrid",
    "EmptyCollection",
    "Grid",
    "GridError",
    "InvalidInput",
    "InvalidState",
    "Node",
    "SparseGrid",
    "get_regions",
    "set_neighbors",
]

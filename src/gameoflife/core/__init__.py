"""Core grid and evolution logic."""

from .grid import CellState, Grid
from .game import GameOfLife, count_all_neighbors, count_neighbors, step
from .loader import FormatError, format_grid, load_grid, parse_grid

__all__ = [
    "CellState",
    "Grid",
    "GameOfLife",
    "count_all_neighbors",
    "count_neighbors",
    "step",
    "FormatError",
    "format_grid",
    "load_grid",
    "parse_grid",
]

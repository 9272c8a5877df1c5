"""Conway's Game of Life on a bounded grid, played in the terminal."""

__version__ = "0.1.0"

from .core.grid import CellState, Grid
from .core.game import GameOfLife, step
from .core.loader import FormatError, load_grid, parse_grid

__all__ = ["CellState", "Grid", "GameOfLife", "step", "FormatError", "load_grid", "parse_grid"]

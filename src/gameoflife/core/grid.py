"""Grid data structure for Conway's Game of Life."""

from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple
import logging

import numpy as np

logger = logging.getLogger(__name__)


class CellState(IntEnum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1


class Grid:
    """A dense, bounded 2D grid of cells.

    Cells are stored in a flat numpy array in row-major order: the cell at
    row ``i`` and column ``j`` lives at index ``i * width + j``. The grid has
    fixed edges, so any access outside ``0 <= i < height`` and
    ``0 <= j < width`` is an error.
    """

    def __init__(self, width: int, height: int, cells: Optional[Sequence[int]] = None) -> None:
        """Initialize a new grid.

        Args:
            width: Number of columns
            height: Number of rows
            cells: Optional flat row-major cell states; copied into the grid

        Raises:
            ValueError: If dimensions are not positive, or cells has the wrong
                length or holds values other than 0 and 1
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height

        if cells is None:
            self._cells = np.zeros(width * height, dtype=np.int8)
        else:
            arr = np.array(cells, dtype=np.int8).ravel()
            if arr.size != width * height:
                raise ValueError(f"Expected {width * height} cells for a {width}x{height} grid, got {arr.size}")
            if np.any((arr != CellState.DEAD) & (arr != CellState.ALIVE)):
                raise ValueError(f"Cell states must be 0 (dead) or 1 (alive), got {np.unique(arr).tolist()}")
            self._cells = arr

    @classmethod
    def random(cls, width: int, height: int, rng: Optional[np.random.Generator] = None) -> "Grid":
        """Create a grid where every cell is independently alive with probability 1/2.

        Args:
            width: Number of columns
            height: Number of rows
            rng: Random generator to draw from; a fresh unseeded one if omitted

        Returns:
            New randomly populated grid
        """
        if rng is None:
            rng = np.random.default_rng()
        grid = cls(width, height, rng.integers(0, 2, size=width * height, dtype=np.int8))
        logger.debug("Generated random %dx%d grid with %d live cells", width, height, grid.population)
        return grid

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> "Grid":
        """Create a grid from a list of rows.

        Args:
            rows: Rows of cell states, all of the same length

        Raises:
            ValueError: If there are no rows or the rows are ragged
        """
        arr = [list(row) for row in rows]
        if not arr or not arr[0]:
            raise ValueError("Cannot build a grid from empty rows")
        width = len(arr[0])
        for i, row in enumerate(arr):
            if len(row) != width:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {width}")
        return cls(width, len(arr), [state for row in arr for state in row])

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (height, width)."""
        return (self._height, self._width)

    @property
    def cells(self) -> np.ndarray:
        """Read-only flat view of the cell states in row-major order."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def _index(self, i: int, j: int) -> int:
        if not (0 <= i < self._height and 0 <= j < self._width):
            raise IndexError(f"Cell ({i}, {j}) out of bounds for {self._width}x{self._height} grid")
        return i * self._width + j

    def get(self, i: int, j: int) -> CellState:
        """Get the state of a cell.

        Args:
            i: Row index
            j: Column index

        Raises:
            IndexError: If the coordinates are out of bounds
        """
        return CellState(int(self._cells[self._index(i, j)]))

    def set(self, i: int, j: int, state: CellState) -> None:
        """Set the state of a cell.

        Raises:
            IndexError: If the coordinates are out of bounds
        """
        self._cells[self._index(i, j)] = CellState.ALIVE if state else CellState.DEAD

    def to_array(self) -> np.ndarray:
        """Read-only 2D view of the cells with shape (height, width)."""
        return self.cells.reshape(self._height, self._width)

    def rows(self) -> List[List[CellState]]:
        """Cell states as a list of rows."""
        return [[CellState(int(v)) for v in row] for row in self.to_array()]

    def copy(self) -> "Grid":
        """Return an independent copy of this grid."""
        return Grid(self._width, self._height, self._cells)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '@' and dead as ' '."""
        return "\n".join("".join("@" if v else " " for v in row) for row in self.to_array())

"""Conway's Game of Life evolution engine."""

from typing import List
import logging

import numpy as np
import torch
import torch.nn.functional as F

from .grid import CellState, Grid

logger = logging.getLogger(__name__)

_NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)

_OFFSETS = [(di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)]


def count_neighbors(grid: Grid, i: int, j: int) -> int:
    """Count living neighbors of a single cell.

    Positions outside the grid do not exist and add nothing to the count.

    Args:
        grid: Grid to inspect
        i: Row index
        j: Column index

    Returns:
        Number of living neighbors (0-8)
    """
    count = 0
    for di, dj in _OFFSETS:
        ni, nj = i + di, j + dj
        if 0 <= ni < grid.height and 0 <= nj < grid.width:
            count += grid.get(ni, nj)
    return count


def count_all_neighbors(grid: Grid) -> np.ndarray:
    """Count living neighbors for every cell using convolution.

    Zero padding stands in for the missing cells beyond the edges.

    Returns:
        Integer array of shape (height, width) with neighbor counts
    """
    cells = torch.from_numpy(grid.to_array().astype(np.float32)).reshape(1, 1, grid.height, grid.width)
    neighbors = F.conv2d(cells, _NEIGHBOR_KERNEL, padding=1)
    return neighbors[0, 0].round().to(torch.int8).numpy()


def step(current: Grid) -> Grid:
    """Compute the next generation.

    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Every count is taken from ``current`` before anything is written, and the
    result goes into a new grid, so ``current`` is left untouched.

    Args:
        current: Grid holding the current generation

    Returns:
        New grid of the same dimensions holding the next generation
    """
    neighbor_counts = count_all_neighbors(current)
    cells = current.to_array()

    birth = (cells == CellState.DEAD) & (neighbor_counts == 3)
    survival = (cells == CellState.ALIVE) & ((neighbor_counts == 2) | (neighbor_counts == 3))

    return Grid(current.width, current.height, (birth | survival).astype(np.int8))


class GameOfLife:
    """A running simulation: the current grid plus generation bookkeeping."""

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: Initial generation
        """
        self.grid = grid
        self._generation = 0
        self._population_history: List[int] = [grid.population]

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> List[int]:
        """Population of every generation so far, oldest first."""
        return list(self._population_history)

    def step(self) -> Grid:
        """Advance the simulation by one generation.

        Returns:
            The new current grid
        """
        self.grid = step(self.grid)
        self._generation += 1
        self._population_history.append(self.grid.population)
        logger.debug("Generation %d: population %d", self._generation, self.grid.population)
        return self.grid

    def run(self, generations: int) -> Grid:
        """Advance the simulation by several generations.

        Args:
            generations: Number of steps to take

        Returns:
            The grid after the last step
        """
        for _ in range(generations):
            self.step()
        return self.grid

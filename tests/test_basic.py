"""Basic tests for the gameoflife package."""

from pathlib import Path

import numpy as np

import gameoflife
from gameoflife import CellState, GameOfLife, Grid, parse_grid, step


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10, 10)
    assert grid.width == 10
    assert grid.height == 10
    assert grid.get(0, 0) is CellState.DEAD

    grid.set(5, 5, CellState.ALIVE)
    assert grid.get(5, 5) is CellState.ALIVE


def test_game_creation():
    """Test basic game creation."""
    game = GameOfLife(Grid.random(8, 8, np.random.default_rng(0)))
    assert game.generation == 0
    assert game.population == game.grid.population


def test_glider_example_file():
    """Test the bundled glider description."""
    path = Path(__file__).parent.parent / "examples" / "glider.txt"
    grid = parse_grid(path.read_text())

    assert grid.width == 8
    assert grid.height == 8
    assert grid.population == 5

    # A glider keeps five cells while it travels across open space
    assert step(step(grid)).population == 5


def test_version():
    """Test that the package exposes a version."""
    assert gameoflife.__version__ == "0.1.0"

#!/usr/bin/env python3
"""
Example usage of the gameoflife package.
"""

from pathlib import Path

from gameoflife import GameOfLife, load_grid
from gameoflife.frontends import render_frame


def main():
    """Demonstrate programmatic usage of the gameoflife package."""
    grid = load_grid(Path(__file__).parent / "examples" / "glider.txt")
    game = GameOfLife(grid)

    print("Initial state:")
    print(render_frame(game.grid))

    # Run simulation for 10 generations
    for _ in range(10):
        game.step()
        print(f"Generation {game.generation}, population {game.population}:")
        print(render_frame(game.grid))

    print(f"Population history: {game.population_history}")


if __name__ == "__main__":
    main()

"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional

import numpy as np
import torch

from ..core.game import step
from ..core.grid import Grid
from ..core.loader import FormatError, load_grid
from .terminal import TerminalRenderer

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Play Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 40x20 grid, 50 generations, half a second per generation
  gameoflife --width 40 --height 20 --iter 50 --display-time 0.5

  # Reproducible random start
  gameoflife -W 30 -H 15 --seed 42

  # Start from a grid description file ('@' = live cell, ' ' = dead cell)
  gameoflife --file glider.txt --iter 20
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=20, help="Grid width (default: 20)")

    parser.add_argument("-H", "--height", type=int, default=10, help="Grid height (default: 10)")

    parser.add_argument(
        "-f",
        "--file",
        type=str,
        help="Load the initial grid from a description file (overrides --width and --height)",
    )

    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Seed for the random initial grid",
    )

    # Simulation configuration
    parser.add_argument(
        "-i",
        "--iter",
        type=int,
        default=10,
        help="Number of generations to display (default: 10)",
    )

    parser.add_argument(
        "-d",
        "--display-time",
        type=float,
        default=1.0,
        help="Seconds to show each generation (default: 1.0)",
    )

    # Output configuration
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between generations",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    # Dimensions come from the file when one is given
    if args.file is None:
        if args.width <= 0:
            errors.append("Width must be positive")

        if args.height <= 0:
            errors.append("Height must be positive")

    if args.iter < 0:
        errors.append("Iterations must be non-negative")

    if args.display_time < 0:
        errors.append("Display time must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def build_initial_grid(args: argparse.Namespace) -> Grid:
    """Create the first generation from a file or at random.

    Raises:
        OSError: If the description file cannot be read
        FormatError: If the description file is malformed
    """
    if args.file is not None:
        return load_grid(args.file)
    return Grid.random(args.width, args.height, np.random.default_rng(args.seed))


def run(
    grid: Grid,
    iterations: int,
    display_time: float,
    renderer: TerminalRenderer,
    sleep: Optional[Callable[[float], None]] = None,
) -> Grid:
    """Display ``iterations`` generations, pausing after each one.

    Args:
        grid: First generation
        iterations: Number of generations to display
        display_time: Seconds to wait after each display
        renderer: Where generations are displayed
        sleep: Delay function, time.sleep if omitted

    Returns:
        The last generation displayed
    """
    if sleep is None:
        sleep = time.sleep

    for i in range(iterations):
        renderer.display(grid)
        sleep(display_time)
        if i < iterations - 1:
            grid = step(grid)
    return grid


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if not validate_args(args):
        return 1

    # Keep torch on a single thread
    torch.set_num_threads(1)

    try:
        grid = build_initial_grid(args)
    except OSError as e:
        print(f"Error: Failed to open file: {args.file} ({e.strerror or e})")
        return 1
    except FormatError as e:
        print(f"Error: Invalid file structure in {args.file}: {e}")
        return 1

    logger.debug("Starting %d iterations on a %dx%d grid", args.iter, grid.width, grid.height)

    try:
        run(grid, args.iter, args.display_time, TerminalRenderer(clear=not args.no_clear))
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

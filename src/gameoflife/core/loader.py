"""Reading and writing the text grid description format.

A description looks like this for a grid 3 columns wide and 4 rows high::

    3 4
    @@@
    @ @
     @@
    @@@

The first line holds the width and height. Each following line is one row of
exactly ``width`` characters, ``'@'`` for a live cell and ``' '`` for a dead
one, and every row ends with a newline.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union
import logging

from .grid import CellState, Grid

logger = logging.getLogger(__name__)

ALIVE_MARKER = "@"
DEAD_MARKER = " "

_MARKERS = {ALIVE_MARKER: CellState.ALIVE, DEAD_MARKER: CellState.DEAD}


class FormatError(ValueError):
    """A grid description could not be parsed.

    Attributes:
        line: 1-based line number in the description, if known
        column: 1-based column number in that line, if known
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
        location = ""
        if line is not None:
            location = f"line {line}" if column is None else f"line {line}, column {column}"
            location += ": "
        super().__init__(f"{location}{message}")
        self.line = line
        self.column = column


def _parse_header(lines: List[str]) -> Tuple[int, int]:
    if not lines:
        raise FormatError("missing header, first line must be 'width height' (eg. '50 100')")

    fields = lines[0].split()
    if len(fields) != 2:
        raise FormatError("first line must be 'width height' (eg. '50 100')", line=1)
    try:
        width, height = int(fields[0]), int(fields[1])
    except ValueError:
        raise FormatError(f"width and height must be integers, found {lines[0].rstrip()!r}", line=1) from None
    if width <= 0 or height <= 0:
        raise FormatError(f"width and height must be positive, found {width}x{height}", line=1)
    return width, height


def parse_grid(text: str) -> Grid:
    """Parse a grid description.

    Every row is checked before the grid is built, so a bad row anywhere
    means no grid at all.

    Args:
        text: Full description text

    Returns:
        Parsed grid

    Raises:
        FormatError: If the header or any row is malformed
    """
    # The piece after the final "\n" is not a complete line
    *lines, tail = text.split("\n")
    width, height = _parse_header(lines if lines or not tail else [tail])

    cells: List[CellState] = []
    for i in range(height):
        line_number = i + 2
        if line_number > len(lines):
            if line_number == len(lines) + 1 and tail:
                raise FormatError(f"row {i} is not terminated by a newline", line=line_number)
            raise FormatError(f"missing grid rows (expected: {height}, found: {i})")

        row = lines[line_number - 1]
        if len(row) != width:
            raise FormatError(
                f"wrong number of cells on row {i} (expected: {width}, found: {len(row)})",
                line=line_number,
            )

        for j, char in enumerate(row):
            state = _MARKERS.get(char)
            if state is None:
                raise FormatError(
                    f"invalid grid value (expected: {DEAD_MARKER!r} or {ALIVE_MARKER!r}, found: {char!r})",
                    line=line_number,
                    column=j + 1,
                )
            cells.append(state)

    return Grid(width, height, cells)


def load_grid(path: Union[str, Path]) -> Grid:
    """Load a grid from a description file.

    Raises:
        OSError: If the file cannot be read
        FormatError: If its contents are malformed
    """
    with open(path, "r", encoding="utf-8", newline="") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise FormatError(f"file is not valid UTF-8 text ({e.reason})") from e
    grid = parse_grid(text)
    logger.debug("Loaded %dx%d grid from %s", grid.width, grid.height, path)
    return grid


def format_grid(grid: Grid) -> str:
    """Serialize a grid to the description format."""
    lines = [f"{grid.width} {grid.height}\n"]
    for row in grid.to_array():
        lines.append("".join(ALIVE_MARKER if v else DEAD_MARKER for v in row) + "\n")
    return "".join(lines)

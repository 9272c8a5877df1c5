"""Plain-text terminal display for Game of Life grids."""

import sys
from typing import TextIO, Optional

from ..core.grid import Grid

# Move the cursor home and clear the screen
CLEAR_SCREEN = "\x1b[1;1H\x1b[2J"


def render_frame(grid: Grid) -> str:
    """Render a grid inside a border, live cells as '@'.

    A 4x2 grid with two live cells renders as::

         ----
        |@   |
        |  @ |
         ----
    """
    border = " " + "-" * grid.width
    lines = [border]
    lines.extend(f"|{row}|" for row in str(grid).split("\n"))
    lines.append(border)
    return "\n".join(lines) + "\n"


class TerminalRenderer:
    """Writes successive generations to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, clear: bool = True) -> None:
        """Initialize the renderer.

        Args:
            stream: Output stream, stdout if omitted
            clear: Whether to clear the terminal before each frame
        """
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear
        self.frames_displayed = 0

    def display(self, grid: Grid) -> None:
        """Write one frame for the given grid."""
        if self.clear:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(render_frame(grid))
        self.stream.flush()
        self.frames_displayed += 1

"""Frontend interfaces for the Game of Life."""

from .terminal import TerminalRenderer, render_frame

__all__ = ["TerminalRenderer", "render_frame"]

"""Text renderer drawing one frame per generation."""

import sys
from typing import Optional, TextIO

from ..core.grid import Grid
from ..config import ALIVE_GLYPH, DEAD_GLYPH

CLEAR_SEQUENCE = "\033[2J\033[H"  # erase display, cursor home


class DisplayError(RuntimeError):
    """Raised when the display cannot be cleared or drawn to."""


def format_frame(grid: Grid, alive_glyph: str = ALIVE_GLYPH, dead_glyph: str = DEAD_GLYPH) -> str:
    """Format a grid as ``height`` lines of ``width`` glyphs, top row first.

    Args:
        grid: Grid to format
        alive_glyph: Character for living cells
        dead_glyph: Character for dead cells

    Returns:
        The frame text, every line terminated by a newline
    """
    lines = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            row.append(alive_glyph if grid.cells[x, y] else dead_glyph)
        lines.append("".join(row) + "\n")
    return "".join(lines)


class TerminalRenderer:
    """Draws grids to a text stream, clearing it before every frame."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        alive_glyph: str = ALIVE_GLYPH,
        dead_glyph: str = DEAD_GLYPH,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.alive_glyph = alive_glyph
        self.dead_glyph = dead_glyph

    def clear(self) -> None:
        """Reset the display.

        Raises:
            DisplayError: If the stream rejects the write
        """
        self._write(CLEAR_SEQUENCE, "failed to clear screen")

    def render(self, grid: Grid, status: str = "") -> None:
        """Clear the display and draw one frame.

        Args:
            grid: Generation to draw
            status: Optional line printed below the frame
        """
        self.clear()
        frame = format_frame(grid, self.alive_glyph, self.dead_glyph)
        if status:
            frame += status + "\n"
        self._write(frame, "failed to draw frame")

    def _write(self, text: str, message: str) -> None:
        try:
            self.stream.write(text)
            self.stream.flush()
        except (OSError, ValueError) as e:
            raise DisplayError(f"{message}: {e}") from e

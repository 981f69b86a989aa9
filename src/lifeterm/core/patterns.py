"""Common Conway's Game of Life patterns."""

from typing import Dict, List, Optional, Tuple

from .grid import Grid


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def apply_to_grid(self, grid: Grid, offset_x: int = 0, offset_y: int = 0) -> None:
        """Stamp this pattern onto a grid, wrapping across its edges.

        Cells outside the pattern are left as they are.

        Args:
            grid: Target grid
            offset_x: Horizontal offset
            offset_y: Vertical offset
        """
        for x, y in self.cells:
            grid.set_cell(x + offset_x, y + offset_y, True)


class PatternLibrary:
    """Collection of well-known patterns."""

    def __init__(self) -> None:
        self.patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        self.add_pattern(Pattern("Block", [(0, 0), (1, 0), (0, 1), (1, 1)], "2x2 still life"))
        self.add_pattern(Pattern("Blinker", [(1, 0), (1, 1), (1, 2)], "Period 2 oscillator"))
        self.add_pattern(
            Pattern("Glider", [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], "Moves one cell diagonally every 4 steps")
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Register a pattern under its name."""
        self.patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Look up a pattern by name."""
        return self.patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Names of all available patterns."""
        return list(self.patterns.keys())

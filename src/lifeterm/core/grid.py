"""Toroidal grid data structure for the automaton."""

from typing import Tuple
import numpy as np
import torch
import torch.nn.functional as F

# Every cell except the center of its 3x3 neighborhood
NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


class Grid:
    """Represents a fixed-size 2D toroidal grid of boolean cells.

    Cells live in a numpy array indexed ``[x, y]``. Every coordinate
    wraps around both edges, so the last row and column are adjacent to
    the first.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize an all-dead grid.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self._cells = np.zeros((width, height), dtype=np.int8)

    @classmethod
    def from_array(cls, cells) -> "Grid":
        """Build a grid from a ``(width, height)`` array or nested list of truthy values."""
        arr = np.asarray(cells)
        width, height = arr.shape
        grid = cls(width, height)
        grid._cells[:] = (arr > 0).astype(np.int8)
        return grid

    @property
    def cells(self) -> np.ndarray:
        """Get the current cell array."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    def _wrap(self, x: int, y: int) -> Tuple[int, int]:
        return (x + self.width) % self.width, (y + self.height) % self.height

    def get_cell(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            True if cell is alive, False if dead
        """
        x, y = self._wrap(x, y)
        return bool(self._cells[x, y])

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            alive: Whether the cell should be alive
        """
        x, y = self._wrap(x, y)
        self._cells[x, y] = 1 if alive else 0

    def fill(self, alive: bool) -> None:
        """Set every cell to the same state."""
        self._cells.fill(1 if alive else 0)

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells."""
        return Grid.from_array(self._cells)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells > 0))

    def get_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dy in [-1, 0, 1]:
            for dx in [-1, 0, 1]:
                if dx == 0 and dy == 0:
                    continue

                nx = (x + dx + self.width) % self.width
                ny = (y + dy + self.height) % self.height
                count += int(self._cells[nx, ny])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a circular-padded convolution.

        Returns:
            ``(width, height)`` array with the neighbor count of each cell
        """
        # PyTorch expects (height, width)
        transposed = np.ascontiguousarray(self._cells.T > 0, dtype=np.float32)
        torch_input = torch.from_numpy(transposed).unsqueeze(0).unsqueeze(0)

        padded = F.pad(torch_input, (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, NEIGHBOR_KERNEL)

        return neighbors[0, 0].numpy().astype(np.int8).T

    def to_list(self) -> list:
        """Convert grid to nested list, indexed ``[x][y]``."""
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

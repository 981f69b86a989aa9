"""Conway's Game of Life engine on a toroidal grid."""

from typing import Any

from .grid import Grid
from ..config import WIDTH, HEIGHT, DEFAULT_CONFIG


def seed(
    rng: Any,
    width: int = WIDTH,
    height: int = HEIGHT,
    probability: float = DEFAULT_CONFIG.alive_probability,
) -> Grid:
    """Build a randomly populated grid.

    Each cell is alive with the given probability, 1/3 by default.
    ``rng`` only needs a numpy-style ``random(size)`` method returning
    floats in [0, 1), so a ``numpy.random.Generator`` works as well as a
    deterministic stub.

    Args:
        rng: Source of uniform random draws
        width: Number of columns
        height: Number of rows
        probability: Chance each cell starts alive

    Returns:
        A fully populated grid; ``draws[x, y]`` decides cell ``(x, y)``
    """
    draws = rng.random((width, height))
    return Grid.from_array(draws < probability)


def step(grid: Grid) -> Grid:
    """Compute the next generation.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    The input grid is left untouched; every count is taken from it
    before any cell of the new grid is written.

    Args:
        grid: Current generation

    Returns:
        A new grid holding the next generation
    """
    neighbor_counts = grid.count_all_neighbors()
    alive = grid.cells > 0

    survive = alive & ((neighbor_counts == 2) | (neighbor_counts == 3))
    birth = ~alive & (neighbor_counts == 3)

    return Grid.from_array(survive | birth)


class Automaton:
    """Holds the current generation and advances it one step at a time."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self._generation = 0

    @classmethod
    def seeded(
        cls,
        rng: Any,
        width: int = WIDTH,
        height: int = HEIGHT,
        probability: float = DEFAULT_CONFIG.alive_probability,
    ) -> "Automaton":
        """Create an automaton starting from a random grid."""
        return cls(seed(rng, width, height, probability))

    @property
    def generation(self) -> int:
        """Number of steps taken since the initial grid."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    def advance(self) -> Grid:
        """Replace the current grid with the next generation and return it."""
        self.grid = step(self.grid)
        self._generation += 1
        return self.grid

"""Basic tests for the lifeterm package."""

import numpy as np

import lifeterm
from lifeterm import Grid, Automaton, PatternLibrary, seed, step


def test_package_exports():
    """Test the top-level API."""
    assert lifeterm.__version__ == "0.1.0"
    assert callable(seed)
    assert callable(step)


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10, 10)
    assert grid.width == 10
    assert grid.height == 10
    assert grid.get_cell(0, 0) is False

    grid.set_cell(5, 5, True)
    assert grid.get_cell(5, 5) is True


def test_seed_and_step():
    """Test one generation from a seeded grid."""
    automaton = Automaton.seeded(np.random.default_rng(0))
    assert automaton.grid.shape == (30, 30)

    automaton.advance()
    assert automaton.generation == 1
    assert automaton.grid.shape == (30, 30)


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    grid = Grid(5, 5)
    PatternLibrary().get_pattern("Blinker").apply_to_grid(grid, 1, 1)

    assert grid.get_cell(2, 1) is True
    assert grid.get_cell(2, 2) is True
    assert grid.get_cell(2, 3) is True

    horizontal = step(grid)
    assert horizontal.population == 3
    assert horizontal.get_cell(1, 2) is True
    assert horizontal.get_cell(2, 2) is True
    assert horizontal.get_cell(3, 2) is True

    assert step(horizontal) == grid

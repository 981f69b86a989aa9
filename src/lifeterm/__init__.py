"""Terminal Conway's Game of Life on a fixed toroidal grid."""

__version__ = "0.1.0"

from .core.grid import Grid
from .core.engine import Automaton, seed, step
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Grid", "Automaton", "seed", "step", "Pattern", "PatternLibrary"]

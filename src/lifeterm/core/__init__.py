"""Core cellular automata logic."""

from .grid import Grid
from .engine import Automaton, seed, step
from .patterns import Pattern, PatternLibrary

__all__ = ["Grid", "Automaton", "seed", "step", "Pattern", "PatternLibrary"]

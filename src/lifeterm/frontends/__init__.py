"""Frontend interfaces for the terminal automaton."""

from .terminal import TerminalRenderer, DisplayError, format_frame
from .cli import run, main

__all__ = ["TerminalRenderer", "DisplayError", "format_frame", "run", "main"]

#!/usr/bin/env python3
"""
Example usage of the lifeterm package.
"""

from lifeterm import Grid, Automaton, PatternLibrary
from lifeterm.frontends.terminal import format_frame


def main():
    """Step a glider across a small toroidal grid without clearing the screen."""
    grid = Grid(12, 12)
    automaton = Automaton(grid)

    library = PatternLibrary()
    glider = library.get_pattern("Glider")
    glider.apply_to_grid(grid, offset_x=8, offset_y=8)

    print("Initial state:")
    print(format_frame(automaton.grid, dead_glyph="."))

    # The glider reaches the opposite corner by wrapping
    for _ in range(16):
        automaton.advance()

    print(f"Generation {automaton.generation}:")
    print(format_frame(automaton.grid, dead_glyph="."))
    print(f"Population: {automaton.population}")


if __name__ == "__main__":
    main()

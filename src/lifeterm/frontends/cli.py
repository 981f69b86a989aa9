"""Command-line entry point running the automaton in the terminal."""

import argparse
import sys
import time
from typing import Callable, List, Optional

import numpy as np

from ..core.engine import Automaton
from ..config import DEFAULT_CONFIG
from .terminal import TerminalRenderer


def _status(automaton: Automaton, verbose: bool) -> str:
    if not verbose:
        return ""
    return f"Generation {automaton.generation}, population {automaton.population}"


def run(
    automaton: Automaton,
    renderer: TerminalRenderer,
    delay: float = DEFAULT_CONFIG.frame_delay,
    generations: Optional[int] = None,
    sleep: Optional[Callable[[float], None]] = None,
    verbose: bool = False,
) -> int:
    """Draw, step and pause until stopped.

    A bounded run draws its final generation and returns without a
    trailing pause.

    Args:
        automaton: Simulation to advance
        renderer: Display collaborator; its errors propagate
        delay: Seconds to pause between generations
        generations: Stop after this many steps (None runs forever)
        sleep: Pause function, defaults to time.sleep
        verbose: Print generation and population under each frame

    Returns:
        Number of generations advanced
    """
    if sleep is None:
        sleep = time.sleep

    steps = 0
    while generations is None or steps < generations:
        renderer.render(automaton.grid, _status(automaton, verbose))

        automaton.advance()
        steps += 1

        if generations is not None and steps >= generations:
            renderer.render(automaton.grid, _status(automaton, verbose))
            break

        sleep(delay)

    return steps


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a 30x30 toroidal grid in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run forever from a random grid (Ctrl-C to stop)
  lifeterm

  # Reproduce the same starting grid
  lifeterm --seed 42

  # Show 100 generations with a status line
  lifeterm --generations 100 --verbose
        """,
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible initial grid",
    )

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        help="Stop after this many generations (default: run forever)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show generation and population below each frame",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.seed is not None and args.seed < 0:
        errors.append("Seed must be non-negative")

    if args.generations is not None and args.generations <= 0:
        errors.append("Generations must be positive")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the terminal automaton.

    Returns:
        Exit code (0 for a finished run, 1 for error or interruption)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_args(args):
        return 1

    config = DEFAULT_CONFIG
    rng = np.random.default_rng(args.seed)
    automaton = Automaton.seeded(rng, config.width, config.height, config.alive_probability)
    renderer = TerminalRenderer(alive_glyph=config.alive_glyph, dead_glyph=config.dead_glyph)

    try:
        run(
            automaton,
            renderer,
            delay=config.frame_delay,
            generations=args.generations,
            verbose=args.verbose,
        )
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())

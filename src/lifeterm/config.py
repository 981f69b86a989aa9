"""Fixed simulation settings."""

from dataclasses import dataclass

WIDTH = 30
HEIGHT = 30
FRAME_DELAY = 0.150  # seconds between generations
ALIVE_PROBABILITY = 1 / 3
ALIVE_GLYPH = "#"
DEAD_GLYPH = " "


@dataclass(frozen=True)
class LifeConfig:
    """Settings for one terminal run of the automaton."""

    width: int = WIDTH
    height: int = HEIGHT
    frame_delay: float = FRAME_DELAY
    alive_probability: float = ALIVE_PROBABILITY
    alive_glyph: str = ALIVE_GLYPH
    dead_glyph: str = DEAD_GLYPH


DEFAULT_CONFIG = LifeConfig()

"""Seed pattern, glider stamp and a small library of classic patterns."""
import numpy as np

from .cell import Cell


WIDTH = 64
HEIGHT = 64


def seed_pattern(width: int = WIDTH, height: int = HEIGHT) -> np.ndarray:
    """
    Build the default starting grid.

    The live region is a union of row bands: two pairs of widening
    wedges (rows 5-16), two side bars (rows 17-24) and a shrinking
    trapezoid below them (rows 25+).

    Args:
        width: Grid width
        height: Grid height

    Returns:
        uint8 array of shape (height, width) holding 0/1 cell values
    """
    row, column = np.indices((height, width))
    w = width

    wedges = (row > 4) & (row <= 16)
    left_outer = wedges & (column > w - row - 3 * w // 4 + 1) & (column < w // 4)
    left_inner = wedges & (column > w // 4 - 1) & (column < w // 4 + row - 1)
    right_outer = (wedges & (column > w // 2 - 1)
                   & (column > w - row - w // 4 + 1) & (column < 3 * w // 4))
    right_inner = wedges & (column > 3 * w // 4 - 1) & (column < 3 * w // 4 + row - 1)

    bars = ((row > 16) & (row <= 24)
            & (((column > 1) & (column < w // 4))
               | ((column > 3 * w // 4) & (column < w - 1))))

    trapezoid = (row > 24) & (column > row - 24) & (column < w - row + 24)

    alive = left_outer | left_inner | right_outer | right_inner | bars | trapezoid
    return alive.astype(np.uint8)


# Keyed by (delta_row, delta_col) around the stamp center.
GLIDER_STAMP = {
    (-1, -1): Cell.DEAD,
    (-1, 0): Cell.ALIVE,
    (-1, 1): Cell.DEAD,
    (0, -1): Cell.DEAD,
    (0, 0): Cell.DEAD,
    (0, 1): Cell.ALIVE,
    (1, -1): Cell.ALIVE,
    (1, 0): Cell.ALIVE,
    (1, 1): Cell.ALIVE,
}


# Still Lifes (period 1)
BLOCK = np.array([
    [1, 1],
    [1, 1]
], dtype=np.uint8)

BEEHIVE = np.array([
    [0, 1, 1, 0],
    [1, 0, 0, 1],
    [0, 1, 1, 0]
], dtype=np.uint8)


# Oscillators (period 2)
BLINKER = np.array([
    [1, 1, 1]
], dtype=np.uint8)

TOAD = np.array([
    [0, 1, 1, 1],
    [1, 1, 1, 0]
], dtype=np.uint8)

BEACON = np.array([
    [1, 1, 0, 0],
    [1, 1, 0, 0],
    [0, 0, 1, 1],
    [0, 0, 1, 1]
], dtype=np.uint8)


# Spaceships (period 4), same shape add_glider stamps
GLIDER = np.array([
    [0, 1, 0],
    [0, 0, 1],
    [1, 1, 1]
], dtype=np.uint8)


PATTERN_CATEGORIES = {
    'still_lifes': {
        'block': BLOCK,
        'beehive': BEEHIVE,
    },
    'oscillators_p2': {
        'blinker': BLINKER,
        'toad': TOAD,
        'beacon': BEACON
    },
    'spaceships': {
        'glider': GLIDER
    }
}


def get_pattern(name: str) -> np.ndarray:
    """Return a copy of the requested pattern array by name."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return category[name].copy()

    available = [pattern for cat in PATTERN_CATEGORIES.values() for pattern in cat.keys()]
    raise ValueError(f"Pattern '{name}' not found. Available patterns: {available}")


def get_all_patterns():
    """Return all available patterns organized by category."""
    return PATTERN_CATEGORIES

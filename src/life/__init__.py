"""Toroidal Game of Life engine"""

from .cell import Cell
from .universe import Universe, next_state, place_pattern, simulate
from .patterns import (
    WIDTH,
    HEIGHT,
    GLIDER_STAMP,
    PATTERN_CATEGORIES,
    seed_pattern,
    get_pattern,
    get_all_patterns,
)

__all__ = [
    'Cell',
    'Universe',
    'next_state',
    'place_pattern',
    'simulate',
    'WIDTH',
    'HEIGHT',
    'GLIDER_STAMP',
    'PATTERN_CATEGORIES',
    'seed_pattern',
    'get_pattern',
    'get_all_patterns',
]

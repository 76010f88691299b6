"""Diagnostics for simulated generations."""

from .metrics import (
    population,
    density,
    hamming_distance,
    changed_cells,
    find_period,
    summarize_trajectory
)

__all__ = [
    'population',
    'density',
    'hamming_distance',
    'changed_cells',
    'find_period',
    'summarize_trajectory'
]

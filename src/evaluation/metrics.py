"""Diagnostics for Game of Life generations."""
import numpy as np
from typing import Optional


def population(state: np.ndarray) -> int:
    """Return the number of live cells."""
    return int(np.sum(state == 1))


def density(state: np.ndarray) -> float:
    """Return the fraction of live cells."""
    if state.size == 0:
        return 0.0
    return population(state) / state.size


def changed_cells(prev: np.ndarray, curr: np.ndarray) -> int:
    """Return the number of cells that differ between two generations."""
    return int(np.sum(prev != curr))


def hamming_distance(prev: np.ndarray, curr: np.ndarray) -> float:
    """Return normalized Hamming distance between two generations."""
    return float(np.mean(prev != curr))


def find_period(trajectory: np.ndarray, max_period: Optional[int] = None) -> int:
    """
    Return the period of the final state of a trajectory.

    The period is the smallest p >= 1 such that the last frame equals the
    frame p steps earlier. Returns -1 if no such p is found within
    max_period steps (default: the whole trajectory).
    """
    last = len(trajectory) - 1
    if max_period is None:
        max_period = last
    max_period = min(max_period, last)

    for p in range(1, max_period + 1):
        if np.array_equal(trajectory[last], trajectory[last - p]):
            return p
    return -1


def summarize_trajectory(trajectory: np.ndarray) -> dict:
    """Return population, per-step change counts and period for a trajectory."""
    populations = [population(frame) for frame in trajectory]
    changes = [changed_cells(trajectory[t - 1], trajectory[t])
               for t in range(1, len(trajectory))]

    return {
        'num_steps': len(trajectory) - 1,
        'populations': populations,
        'changes': changes,
        'initial_population': populations[0],
        'final_population': populations[-1],
        'period': find_period(trajectory),
    }

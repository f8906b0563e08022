"""
Parent selection for the terrain optimizer.
"""

import math

import numpy as np

from .data_models import Population


def tournament_selection(
    population: Population,
    tournament_size: int,
    rng: np.random.Generator
) -> int:
    """
    Pick a parent by tournament.

    Draws ``tournament_size`` slots uniformly with replacement and returns
    the one with the lowest fitness. On ties the first drawn slot wins.

    Args:
        population: Current population
        tournament_size: Number of slots drawn
        rng: Random number generator

    Returns:
        Slot index of the winner in ``population``
    """
    if tournament_size < 1:
        raise ValueError(f"Tournament needs at least one entrant, got {tournament_size}")

    best_fitness = math.inf
    best_index = None

    for _ in range(tournament_size):
        idx = int(rng.integers(0, len(population)))
        fit = population.score(idx)

        if best_index is None or fit < best_fitness:
            best_fitness = fit
            best_index = idx

    return best_index

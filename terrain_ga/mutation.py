"""
Mutation operators for the terrain optimizer.

Implements point mutation: random cells are overwritten with random terrain.
"""

from typing import Dict

import numpy as np

from .data_models import Grid


def point_mutation(
    individual: Grid,
    num_points: int,
    num_terrains: int,
    rng: np.random.Generator
) -> Grid:
    """
    Overwrite random cells with random terrain types, in place.

    Positions are drawn independently, so the same cell can be hit more
    than once (the last write wins), and a write may leave a cell unchanged.

    Args:
        individual: Grid to mutate (must not be frozen)
        num_points: Number of overwrites
        num_terrains: Number of terrain types
        rng: Random number generator

    Returns:
        The same grid, for chaining
    """
    if individual.is_frozen:
        raise ValueError("Cannot mutate a grid that already belongs to a population")

    for _ in range(num_points):
        mutation_index = int(rng.integers(0, len(individual)))
        individual[mutation_index] = int(rng.integers(0, num_terrains))

    return individual


def mutation_statistics(original: Grid, mutated: Grid) -> Dict:
    """
    Calculate statistics about a mutation.

    Args:
        original: Grid before mutation
        mutated: Grid after mutation

    Returns:
        Dictionary with mutation statistics
    """
    changed = np.flatnonzero(original.cells != mutated.cells)
    return {
        'total_cells': len(mutated),
        'cells_changed': int(changed.size),
        'changed_indices': changed.tolist(),
        'change_rate': changed.size / max(len(mutated), 1),
    }

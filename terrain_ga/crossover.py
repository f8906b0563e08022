"""
Crossover operators for the terrain optimizer.

Implements uniform crossover: every cell is inherited independently
from one parent or the other.
"""

from typing import Optional, Tuple

import numpy as np

from .data_models import Grid


def uniform_crossover(
    parent1: Grid,
    parent2: Grid,
    rng: np.random.Generator,
    mask: Optional[np.ndarray] = None
) -> Tuple[Grid, Grid]:
    """
    Combine two parents cell by cell.

    For each cell a fair coin is flipped. On 0, child1 takes parent1's
    value and child2 takes parent2's; on 1 the assignment is swapped. At
    every position the children together hold exactly the parents' values.

    Args:
        parent1: First parent
        parent2: Second parent
        rng: Random number generator
        mask: Optional precomputed coin flips (0/1 per cell); drawn from rng if omitted

    Returns:
        Tuple of (child1, child2), both writable
    """
    if parent1.size != parent2.size:
        raise ValueError(f"Parents differ in size: {parent1.size} vs {parent2.size}")

    if mask is None:
        mask = rng.integers(0, 2, size=len(parent1))
    else:
        mask = np.asarray(mask).reshape(-1)
        if mask.shape[0] != len(parent1):
            raise ValueError(f"Crossover mask has {mask.shape[0]} entries, grid has {len(parent1)} cells")

    take_first = mask == 0
    child1 = Grid(size=parent1.size, cells=np.where(take_first, parent1.cells, parent2.cells))
    child2 = Grid(size=parent1.size, cells=np.where(take_first, parent2.cells, parent1.cells))

    return child1, child2

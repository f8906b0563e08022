"""
Fitness evaluation for terrain grids.

A grid is scored by summing, over terrain types, the spatial variance of
the cells holding that type. The optimizer minimizes this score.
"""

import numpy as np

from .data_models import Grid, Population


def terrain_positions(grid: Grid, terrain_type: int) -> np.ndarray:
    """
    Collect coordinates of all cells holding a terrain type.

    Args:
        grid: Grid to scan
        terrain_type: Terrain identifier to look for

    Returns:
        Array of shape (k, 2) with one (row, col) per matching cell
    """
    return np.argwhere(grid.as_matrix() == terrain_type)


def variance_of_terrain(grid: Grid, terrain_type: int) -> float:
    """
    Mean squared Euclidean distance of a terrain's cells from their centroid.

    Args:
        grid: Grid to score
        terrain_type: Terrain identifier

    Returns:
        Spatial variance, or 0.0 if the terrain does not occur
    """
    positions = terrain_positions(grid, terrain_type)
    if positions.shape[0] == 0:
        return 0.0

    offsets = positions - positions.mean(axis=0)
    return float(np.mean(np.sum(offsets * offsets, axis=1)))


def fitness(grid: Grid, num_terrains: int) -> float:
    """
    Total spatial variance across terrain types (lower is better).

    Args:
        grid: Grid to score
        num_terrains: Number of terrain types

    Returns:
        Sum of per-terrain variances
    """
    total_variance = 0.0
    for terrain_type in range(num_terrains):
        total_variance += variance_of_terrain(grid, terrain_type)
    return total_variance


def average_fitness(population: Population) -> float:
    """Arithmetic mean of fitness over the population."""
    return sum(population.scores()) / len(population)


def fitness_report(grid: Grid, num_terrains: int) -> dict:
    """
    Per-terrain breakdown of a grid's fitness.

    Args:
        grid: Grid to analyze
        num_terrains: Number of terrain types

    Returns:
        Dictionary with per-terrain counts and variances and the total
    """
    counts = grid.terrain_counts(num_terrains)
    per_terrain = {
        terrain_type: {
            'count': int(counts[terrain_type]),
            'variance': variance_of_terrain(grid, terrain_type),
        }
        for terrain_type in range(num_terrains)
    }
    return {
        'per_terrain': per_terrain,
        'total': sum(entry['variance'] for entry in per_terrain.values()),
    }

"""
Terrain Dispersion Genetic Optimizer

This package evolves square terrain-type grids with a generational genetic
algorithm, scoring each grid by the spatial variance of every terrain type.

Key Features:
- Variance-based fitness (minimized)
- Tournament selection, uniform crossover, point mutation
- Two-phase mutation schedule (explore, then exploit)
- Independent rounds, each from a fresh random population

Modules:
- data_models: Core data structures (Grid, Population, RoundResult)
- config: Run configuration, validation, mutation schedule
- fitness: Per-terrain spatial variance and total fitness
- selection: Tournament selection
- crossover: Uniform crossover
- mutation: Point mutation
- orchestration: Generational loop and round loop
- reporting: Progress lines and final grid dump
"""

__version__ = "0.1.0"
__author__ = "Terrain Generation Team"

from .data_models import Grid, Population, RoundResult
from .config import EvolutionConfig, MutationSchedule, ConfigValidationError
from .fitness import fitness, variance_of_terrain
from .orchestration import run_evolution, run_round
from .reporting import ProgressReporter

__all__ = [
    "Grid",
    "Population",
    "RoundResult",
    "EvolutionConfig",
    "MutationSchedule",
    "ConfigValidationError",
    "fitness",
    "variance_of_terrain",
    "run_evolution",
    "run_round",
    "ProgressReporter",
]

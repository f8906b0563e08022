"""
Configuration for the terrain optimizer.

Run parameters live in a single dataclass validated on construction.
The mutation-point count is the only parameter that changes during a run,
so it is held separately by a MutationSchedule.
"""

from dataclasses import dataclass
from typing import Optional


class ConfigValidationError(Exception):
    """Raised when evolution configuration is invalid."""
    pass


@dataclass(frozen=True)
class EvolutionConfig:
    """
    Parameters for one optimizer run.

    Attributes:
        map_size: Side length of the square terrain grid
        num_terrains: Number of terrain types (identifiers 0..num_terrains-1)
        population_size: Individuals per generation (must be even)
        tournament_size: Individuals drawn per tournament
        generations: Generations per round
        rounds: Independent rounds, each from a fresh population
        mutation_points: Point mutations per child before the threshold
        reduced_mutation_points: Point mutations per child after the threshold
        mutation_threshold: Generation index after which the count is reduced
        reset_mutation_per_round: Restore mutation_points at the start of each round
        random_seed: Seed for the generator (None draws one from entropy)
    """
    map_size: int = 46
    num_terrains: int = 5
    population_size: int = 6
    tournament_size: int = 3
    generations: int = 4000
    rounds: int = 10
    mutation_points: int = 10
    reduced_mutation_points: int = 1
    mutation_threshold: int = 500
    reset_mutation_per_round: bool = False
    random_seed: Optional[int] = None

    def __post_init__(self):
        """Validate configuration."""
        validate_config(self)

    @property
    def cell_count(self) -> int:
        return self.map_size * self.map_size


def validate_config(config: EvolutionConfig) -> None:
    """
    Validate evolution configuration.

    Args:
        config: Configuration to check

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    positive_fields = ['map_size', 'population_size', 'tournament_size', 'generations', 'rounds']
    for name in positive_fields:
        value = getattr(config, name)
        if not isinstance(value, int) or value <= 0:
            raise ConfigValidationError(f"'{name}' must be a positive integer, got: {value}")

    # Final grids are dumped as one digit per cell
    if not isinstance(config.num_terrains, int) or not 1 <= config.num_terrains <= 10:
        raise ConfigValidationError(
            f"'num_terrains' must be an integer in [1, 10], got: {config.num_terrains}"
        )

    # Children are produced in pairs
    if config.population_size % 2 != 0:
        raise ConfigValidationError(
            f"'population_size' must be even, got: {config.population_size}"
        )

    for name in ['mutation_points', 'reduced_mutation_points', 'mutation_threshold']:
        value = getattr(config, name)
        if not isinstance(value, int) or value < 0:
            raise ConfigValidationError(f"'{name}' must be a non-negative integer, got: {value}")

    if config.random_seed is not None and (not isinstance(config.random_seed, int) or config.random_seed < 0):
        raise ConfigValidationError(
            f"'random_seed' must be a non-negative integer or None, got: {config.random_seed}"
        )


class MutationSchedule:
    """
    Two-phase mutation intensity: explore with many points, then exploit with few.

    Once the generation index passes the threshold the count drops and stays
    dropped. The schedule outlives a single round, so unless
    ``reset_per_round`` is set later rounds start with the reduced count.
    """

    def __init__(self, initial_points: int, reduced_points: int, threshold: int,
                 reset_per_round: bool = False):
        self.initial_points = initial_points
        self.reduced_points = reduced_points
        self.threshold = threshold
        self.reset_per_round = reset_per_round
        self.points = initial_points

    @classmethod
    def from_config(cls, config: EvolutionConfig) -> "MutationSchedule":
        return cls(
            initial_points=config.mutation_points,
            reduced_points=config.reduced_mutation_points,
            threshold=config.mutation_threshold,
            reset_per_round=config.reset_mutation_per_round,
        )

    def start_round(self) -> None:
        if self.reset_per_round:
            self.points = self.initial_points

    def points_for(self, generation: int) -> int:
        """
        Mutation points to use while building generation ``generation + 1``.

        Args:
            generation: 0-based index of the generation step

        Returns:
            Current mutation-point count
        """
        if generation > self.threshold:
            self.points = self.reduced_points
        return self.points


def print_config_summary(config: EvolutionConfig, seed: Optional[int] = None) -> None:
    """Print a summary of the run configuration."""
    print("Configuration Summary:")
    print(f"  Grid: {config.map_size}x{config.map_size} ({config.cell_count} cells)")
    print(f"  Terrain types: {config.num_terrains}")
    print(f"  Population: {config.population_size} (tournament size {config.tournament_size})")
    print(f"  Generations per round: {config.generations}")
    print(f"  Rounds: {config.rounds}")
    print(f"  Mutation points: {config.mutation_points} -> {config.reduced_mutation_points} "
          f"after generation {config.mutation_threshold}")
    print(f"  Reset mutation schedule per round: {config.reset_mutation_per_round}")
    if seed is not None:
        print(f"  Random seed: {seed}")

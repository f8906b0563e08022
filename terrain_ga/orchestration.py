"""
Orchestration module for the terrain optimizer.

Implements the generational loop and the outer loop over independent rounds.
"""

from typing import List, Optional

import numpy as np

from .config import EvolutionConfig, MutationSchedule
from .crossover import uniform_crossover
from .data_models import Grid, Population, RoundResult
from .fitness import average_fitness
from .mutation import point_mutation
from .reporting import ProgressReporter
from .selection import tournament_selection


def initialize_population(config: EvolutionConfig, rng: np.random.Generator) -> Population:
    """
    Build a fresh population of random grids.

    Args:
        config: Evolution configuration
        rng: Random number generator

    Returns:
        New Population of ``config.population_size`` grids
    """
    grids = [
        Grid.random(config.map_size, config.num_terrains, rng)
        for _ in range(config.population_size)
    ]
    return Population(grids=grids, num_terrains=config.num_terrains)


def next_generation(
    population: Population,
    config: EvolutionConfig,
    mutation_points: int,
    rng: np.random.Generator
) -> Population:
    """
    Breed a complete replacement population.

    Slots are filled in pairs: two tournaments pick the parents (they may be
    the same individual), crossover yields two children, each child is
    mutated, and both go into the next two slots.

    Args:
        population: Current population
        config: Evolution configuration
        mutation_points: Point mutations applied to each child
        rng: Random number generator

    Returns:
        Next Population, same size as the current one
    """
    children: List[Grid] = []

    for _ in range(0, config.population_size, 2):
        parent1_idx = tournament_selection(population, config.tournament_size, rng)
        parent2_idx = tournament_selection(population, config.tournament_size, rng)

        child1, child2 = uniform_crossover(population[parent1_idx], population[parent2_idx], rng)

        point_mutation(child1, mutation_points, config.num_terrains, rng)
        point_mutation(child2, mutation_points, config.num_terrains, rng)

        children.extend([child1, child2])

    return Population(grids=children, num_terrains=config.num_terrains)


def run_round(
    round_index: int,
    config: EvolutionConfig,
    schedule: MutationSchedule,
    rng: np.random.Generator,
    reporter: Optional[ProgressReporter] = None
) -> RoundResult:
    """
    Evolve one population from scratch for ``config.generations`` generations.

    Args:
        round_index: 0-based round number
        config: Evolution configuration
        schedule: Mutation schedule (shared across rounds)
        rng: Random number generator
        reporter: Optional progress reporter

    Returns:
        RoundResult holding the grid in slot 0 and the fitness history
    """
    schedule.start_round()
    population = initialize_population(config, rng)
    history = []

    for generation in range(config.generations):
        mutation_points = schedule.points_for(generation)
        population = next_generation(population, config, mutation_points, rng)

        average = average_fitness(population)
        history.append(average)
        if reporter is not None:
            reporter.on_generation(round_index, generation + 1, average)

    result = RoundResult(
        round_index=round_index,
        final_grid=population[0],
        average_fitness=history,
    )
    if reporter is not None:
        reporter.on_round_complete(result)

    return result


def resolve_seed(config: EvolutionConfig) -> int:
    """Seed from config, or a fresh one drawn from OS entropy."""
    if config.random_seed is not None:
        return config.random_seed
    return int(np.random.randint(0, 2**31))


def run_evolution(
    config: Optional[EvolutionConfig] = None,
    rng: Optional[np.random.Generator] = None,
    reporter: Optional[ProgressReporter] = None
) -> List[RoundResult]:
    """
    Run all rounds of the optimizer.

    Every round starts from a new random population. The mutation schedule
    is created once, so a count reduced in one round carries into the next
    unless ``config.reset_mutation_per_round`` is set.

    Args:
        config: Evolution configuration (defaults if omitted)
        rng: Random number generator; seeded from the config if omitted
        reporter: Optional progress reporter

    Returns:
        One RoundResult per round
    """
    config = config or EvolutionConfig()

    seed = None
    if rng is None:
        seed = resolve_seed(config)
        rng = np.random.default_rng(seed)

    schedule = MutationSchedule.from_config(config)
    results = []

    for round_index in range(config.rounds):
        if round_index > 0 and reporter is not None:
            reporter.on_round_boundary(round_index)

        result = run_round(round_index, config, schedule, rng, reporter)
        result.seed = seed
        results.append(result)

    return results

#!/usr/bin/env python3
"""
Terrain Dispersion Genetic Optimizer

Main entry point. Runs every round with the built-in configuration and
prints per-generation progress and each round's final grid to stdout.

When stdin is a terminal the run pauses for Enter between rounds;
otherwise rounds run back to back.

Usage:
    python3 main.py
"""

import sys
import time
from pathlib import Path

import numpy as np

# Add current directory to path for imports
sys.path.append(str(Path(__file__).parent))

from terrain_ga.config import EvolutionConfig, print_config_summary
from terrain_ga.fitness import fitness_report
from terrain_ga.orchestration import resolve_seed, run_evolution
from terrain_ga.reporting import ProgressReporter


def print_round_summary(results, config):
    """Print a table of round outcomes."""
    print("=" * 60)
    print("ROUND SUMMARY")
    print("=" * 60)
    print("Round | Final Avg Fitness | Slot 0 Fitness")
    print("------|-------------------|---------------")

    for result in results:
        report = fitness_report(result.final_grid, config.num_terrains)
        print(f"{result.round_index + 1:5} | {result.final_average_fitness:17.3f} | {report['total']:14.3f}")


def run_optimizer(config=None, interactive=None):
    """Run the optimizer with progress printed to stdout."""
    config = config or EvolutionConfig()
    if interactive is None:
        interactive = sys.stdin.isatty()

    seed = resolve_seed(config)

    print("=" * 60)
    print("TERRAIN DISPERSION OPTIMIZER")
    print("=" * 60)
    print_config_summary(config, seed)
    print()

    start_time = time.time()
    reporter = ProgressReporter(stream=sys.stdout, interactive=interactive)
    results = run_evolution(config, rng=np.random.default_rng(seed), reporter=reporter)
    elapsed_time = time.time() - start_time

    print_round_summary(results, config)
    print(f"\nCompleted {len(results)} rounds in {elapsed_time:.3f} seconds")
    return results


def main():
    """Main entry point."""
    try:
        run_optimizer()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")


if __name__ == "__main__":
    main()

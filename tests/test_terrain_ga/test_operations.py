"""
Tests for GA operations: selection, crossover, and mutation.
"""

import unittest
import numpy as np

from terrain_ga.data_models import Grid, Population
from terrain_ga.selection import tournament_selection
from terrain_ga.crossover import uniform_crossover
from terrain_ga.mutation import point_mutation, mutation_statistics


class TestTournamentSelection(unittest.TestCase):
    """Test tournament selection."""

    def setUp(self):
        rng = np.random.default_rng(42)
        self.population = Population(
            grids=[Grid.random(5, 3, rng) for _ in range(6)],
            num_terrains=3
        )

    def test_winner_beats_every_entrant(self):
        """Winner is in range and no drawn entrant scores lower."""
        for seed in range(20):
            rng = np.random.default_rng(seed)
            replay = np.random.default_rng(seed)

            winner = tournament_selection(self.population, 3, rng)
            drawn = [int(replay.integers(0, len(self.population))) for _ in range(3)]

            self.assertIn(winner, drawn)
            self.assertTrue(0 <= winner < len(self.population))
            for idx in drawn:
                self.assertLessEqual(self.population.score(winner), self.population.score(idx))

    def test_first_drawn_wins_ties(self):
        """With identical individuals the first drawn slot is returned."""
        grid = Grid.random(4, 2, np.random.default_rng(1))
        population = Population(grids=[grid.copy() for _ in range(6)], num_terrains=2)

        replay = np.random.default_rng(3)
        first_drawn = int(replay.integers(0, 6))

        self.assertEqual(tournament_selection(population, 4, np.random.default_rng(3)), first_drawn)

    def test_single_entrant(self):
        rng = np.random.default_rng(5)
        replay = np.random.default_rng(5)

        self.assertEqual(tournament_selection(self.population, 1, rng), int(replay.integers(0, 6)))

    def test_empty_tournament_rejected(self):
        with self.assertRaises(ValueError):
            tournament_selection(self.population, 0, np.random.default_rng(0))


class TestCrossover(unittest.TestCase):
    """Test uniform crossover."""

    def setUp(self):
        rng = np.random.default_rng(42)
        self.parent1 = Grid.random(6, 5, rng).freeze()
        self.parent2 = Grid.random(6, 5, rng).freeze()
        self.rng = np.random.default_rng(42)

    def test_conservation_with_fixed_mask(self):
        """Each position holds one value from each parent, assigned by the mask."""
        mask = self.rng.integers(0, 2, size=36)
        child1, child2 = uniform_crossover(self.parent1, self.parent2, self.rng, mask=mask)

        for pos in range(36):
            if mask[pos] == 0:
                self.assertEqual(child1[pos], self.parent1[pos])
                self.assertEqual(child2[pos], self.parent2[pos])
            else:
                self.assertEqual(child1[pos], self.parent2[pos])
                self.assertEqual(child2[pos], self.parent1[pos])

    def test_conservation_with_random_flips(self):
        child1, child2 = uniform_crossover(self.parent1, self.parent2, self.rng)

        for pos in range(36):
            self.assertEqual(
                sorted([child1[pos], child2[pos]]),
                sorted([self.parent1[pos], self.parent2[pos]])
            )

    def test_all_zero_mask_copies_parents(self):
        child1, child2 = uniform_crossover(self.parent1, self.parent2, self.rng, mask=np.zeros(36, dtype=int))

        self.assertEqual(child1, self.parent1)
        self.assertEqual(child2, self.parent2)

    def test_children_are_valid_and_writable(self):
        child1, child2 = uniform_crossover(self.parent1, self.parent2, self.rng)

        for child in (child1, child2):
            self.assertEqual(len(child), 36)
            self.assertEqual(child.validate(5), [])
            self.assertFalse(child.is_frozen)

        # Parents are untouched
        self.assertTrue(self.parent1.is_frozen)

    def test_size_mismatch_rejected(self):
        other = Grid.random(4, 5, self.rng)
        with self.assertRaises(ValueError):
            uniform_crossover(self.parent1, other, self.rng)

    def test_bad_mask_length_rejected(self):
        with self.assertRaises(ValueError):
            uniform_crossover(self.parent1, self.parent2, self.rng, mask=np.zeros(10, dtype=int))


class TestMutation(unittest.TestCase):
    """Test point mutation."""

    def setUp(self):
        self.rng = np.random.default_rng(42)
        self.grid = Grid.random(8, 4, self.rng)

    def test_zero_points_is_identity(self):
        before = self.grid.copy()

        point_mutation(self.grid, 0, 4, self.rng)

        self.assertEqual(self.grid, before)

    def test_mutation_stays_in_range(self):
        point_mutation(self.grid, 200, 4, self.rng)

        self.assertEqual(len(self.grid), 64)
        self.assertEqual(self.grid.validate(4), [])

    def test_changes_bounded_by_points(self):
        """At most num_points cells change; collisions and no-op writes only lower it."""
        before = self.grid.copy()

        point_mutation(self.grid, 5, 4, self.rng)

        stats = mutation_statistics(before, self.grid)
        self.assertLessEqual(stats['cells_changed'], 5)
        self.assertEqual(stats['total_cells'], 64)

    def test_mutation_replays_draws(self):
        """Each point draws a position then a value; the last write wins."""
        grid = Grid(size=3)
        point_mutation(grid, 6, 3, np.random.default_rng(11))

        expected = np.zeros(9, dtype=np.int64)
        replay = np.random.default_rng(11)
        for _ in range(6):
            index = int(replay.integers(0, 9))
            expected[index] = int(replay.integers(0, 3))

        self.assertTrue(np.array_equal(grid.cells, expected))

    def test_frozen_grid_rejected(self):
        self.grid.freeze()
        with self.assertRaises(ValueError):
            point_mutation(self.grid, 1, 4, self.rng)

    def test_mutation_statistics(self):
        original = Grid.from_rows([[0, 1], [1, 0]])
        mutated = Grid.from_rows([[0, 1], [0, 0]])

        stats = mutation_statistics(original, mutated)

        self.assertEqual(stats['cells_changed'], 1)
        self.assertEqual(stats['changed_indices'], [2])
        self.assertAlmostEqual(stats['change_rate'], 0.25)


if __name__ == '__main__':
    unittest.main()

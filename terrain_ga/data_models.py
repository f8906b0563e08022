"""
Data models for the terrain optimizer.

Core data structures representing terrain grids, populations, and round results.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np


@dataclass(eq=False)
class Grid:
    """
    A square terrain-type grid (one individual in the GA population).

    Cells are stored row-major in a flat integer array, so the cell at
    (row, col) lives at index ``row * size + col``.

    Attributes:
        size: Side length of the square grid
        cells: Flat array of ``size * size`` terrain identifiers
    """
    size: int
    cells: np.ndarray = None

    def __post_init__(self):
        """Allocate cells if missing and check sizing."""
        if self.size <= 0:
            raise ValueError(f"Grid size must be positive, got {self.size}")

        if self.cells is None:
            self.cells = np.zeros(self.size * self.size, dtype=np.int64)
        else:
            self.cells = np.asarray(self.cells, dtype=np.int64).reshape(-1)

        if self.cells.shape[0] != self.size * self.size:
            raise ValueError(
                f"Grid of size {self.size} needs {self.size * self.size} cells, "
                f"got {self.cells.shape[0]}"
            )

    @classmethod
    def random(cls, size: int, num_terrains: int, rng: np.random.Generator) -> "Grid":
        """
        Create a grid where every cell is drawn uniformly from the terrain types.

        Args:
            size: Side length of the grid
            num_terrains: Number of terrain types
            rng: Random number generator

        Returns:
            New random Grid
        """
        return cls(size=size, cells=rng.integers(0, num_terrains, size=size * size))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """
        Build a grid from a square nested sequence of terrain identifiers.

        Args:
            rows: One sequence per row, each of the same length as ``rows``

        Returns:
            New Grid
        """
        size = len(rows)
        for row in rows:
            if len(row) != size:
                raise ValueError(f"Rows must form a square, got a row of length {len(row)} for {size} rows")
        return cls(size=size, cells=np.array(rows, dtype=np.int64).reshape(-1))

    def index(self, row: int, col: int) -> int:
        """Flat index of (row, col), bounds-checked."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Cell ({row}, {col}) outside {self.size}x{self.size} grid")
        return row * self.size + col

    def get(self, row: int, col: int) -> int:
        return int(self.cells[self.index(row, col)])

    def set(self, row: int, col: int, value: int) -> None:
        self.cells[self.index(row, col)] = value

    def __getitem__(self, flat_index: int) -> int:
        if not 0 <= flat_index < len(self):
            raise IndexError(f"Flat index {flat_index} outside grid of {len(self)} cells")
        return int(self.cells[flat_index])

    def __setitem__(self, flat_index: int, value: int) -> None:
        if not 0 <= flat_index < len(self):
            raise IndexError(f"Flat index {flat_index} outside grid of {len(self)} cells")
        self.cells[flat_index] = value

    def __len__(self) -> int:
        return self.cells.shape[0]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    def as_matrix(self) -> np.ndarray:
        """Read-only 2D view of the cells."""
        view = self.cells.reshape(self.size, self.size)
        view.flags.writeable = False
        return view

    def rows(self) -> list[list[int]]:
        return self.cells.reshape(self.size, self.size).tolist()

    def copy(self) -> "Grid":
        """
        Create a writable deep copy of this grid.

        Returns:
            New Grid with its own cell buffer
        """
        return Grid(size=self.size, cells=self.cells.copy())

    def freeze(self) -> "Grid":
        """Make the cell buffer read-only. Returns self for chaining."""
        self.cells.flags.writeable = False
        return self

    @property
    def is_frozen(self) -> bool:
        return not self.cells.flags.writeable

    def terrain_counts(self, num_terrains: int) -> np.ndarray:
        """
        Count cells of each terrain type.

        Args:
            num_terrains: Number of terrain types

        Returns:
            Array of length ``num_terrains`` with per-type cell counts
        """
        return np.bincount(self.cells, minlength=num_terrains)[:num_terrains]

    def validate(self, num_terrains: int) -> list[str]:
        """
        Check the grid invariants.

        Args:
            num_terrains: Number of terrain types

        Returns:
            List of problems found (empty if the grid is valid)
        """
        problems = []
        if len(self) != self.size * self.size:
            problems.append(f"expected {self.size * self.size} cells, found {len(self)}")
        out_of_range = np.flatnonzero((self.cells < 0) | (self.cells >= num_terrains))
        if out_of_range.size:
            problems.append(
                f"{out_of_range.size} cells outside [0, {num_terrains}), first at index {int(out_of_range[0])}"
            )
        return problems


@dataclass(eq=False)
class Population:
    """
    Fixed-size collection of grids evolved together in one generation.

    Grids are frozen when the population is built, which makes the
    per-slot fitness memo safe: a slot's grid never changes after it
    has been scored.

    Attributes:
        grids: Individuals in slot order
        num_terrains: Number of terrain types used for scoring
    """
    grids: list[Grid]
    num_terrains: int
    _scores: list[Optional[float]] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        """Freeze members and reset the fitness memo."""
        if not self.grids:
            raise ValueError("Population must contain at least one grid")
        for grid in self.grids:
            grid.freeze()
        self._scores = [None] * len(self.grids)

    def __len__(self) -> int:
        return len(self.grids)

    def __getitem__(self, slot: int) -> Grid:
        return self.grids[slot]

    def __iter__(self):
        return iter(self.grids)

    def score(self, slot: int) -> float:
        """
        Fitness of the grid in ``slot``, computed once per population.

        Args:
            slot: Population slot index

        Returns:
            Fitness value (lower is better)
        """
        if self._scores[slot] is None:
            from .fitness import fitness
            self._scores[slot] = fitness(self.grids[slot], self.num_terrains)
        return self._scores[slot]

    def scores(self) -> list[float]:
        return [self.score(slot) for slot in range(len(self.grids))]


@dataclass
class RoundResult:
    """
    Outcome of one independent round.

    Attributes:
        round_index: 0-based round number
        final_grid: Grid held in population slot 0 after the last generation
        average_fitness: Mean population fitness after each generation
        seed: Seed of the generator the run was started with
    """
    round_index: int
    final_grid: Grid
    average_fitness: list[float] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def final_average_fitness(self) -> Optional[float]:
        return self.average_fitness[-1] if self.average_fitness else None

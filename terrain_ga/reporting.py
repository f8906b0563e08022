"""
Text reporting for the terrain optimizer.

Writes one progress line per generation and the final grid of each round
to a text stream, and marks the boundary between rounds.
"""

import sys
from typing import Optional, TextIO

from .data_models import Grid, RoundResult


def format_generation_line(generation: int, average: float) -> str:
    """
    Progress line for one generation.

    Args:
        generation: 1-based generation number
        average: Mean population fitness

    Returns:
        Line without trailing newline
    """
    return f"Generation {generation}: Average Fitness = {average:g}"


def format_grid(grid: Grid) -> str:
    """Render a grid as one line of digits per row."""
    return "\n".join("".join(str(value) for value in row) for row in grid.rows())


class ProgressReporter:
    """
    Prints optimizer progress to a text stream.

    With ``interactive`` set, the round boundary blocks until a line (or
    end of input) is read from ``input_stream``.
    """

    def __init__(self, stream: Optional[TextIO] = None, interactive: bool = False,
                 input_stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.interactive = interactive
        self.input_stream = input_stream if input_stream is not None else sys.stdin

    def on_generation(self, round_index: int, generation: int, average: float) -> None:
        print(format_generation_line(generation, average), file=self.stream, flush=True)

    def on_round_complete(self, result: RoundResult) -> None:
        print(file=self.stream)
        print("Final individual map:", file=self.stream)
        print(format_grid(result.final_grid), file=self.stream)
        print(file=self.stream, flush=True)

    def on_round_boundary(self, next_round: int) -> None:
        """Called between rounds, before round ``next_round`` starts."""
        if self.interactive:
            self.input_stream.readline()

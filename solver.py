"""Top-level solve interface.

Expose `solve_puzzle(puzzle)` that accepts a Grid, a notation string, a
sequence of 81 ints, or a record produced by `src.sudoku.loader.load_puzzles`.
"""

from collections.abc import Sequence
from typing import Any, Optional

from src.sudoku import solver_core
from src.sudoku.grid import Grid
from src.utils.trace import Tracer


def solve_puzzle(puzzle: Any, tracer: Optional[Tracer] = None) -> Grid:
    """
    Solve a puzzle and return the solved Grid.
    Accepts:
      - Grid instances (used directly)
      - Notation strings and sequences of 81 ints (wrapped in a Grid)
      - Loader records (their `grid` field)
    Steps are recorded only on `tracer`, when one is given.
    """
    if isinstance(puzzle, Grid):
        grid = puzzle
    elif isinstance(puzzle, dict):
        if "grid" not in puzzle:
            raise ValueError("Puzzle record has no 'grid' field")
        grid = Grid(puzzle["grid"])
    elif isinstance(puzzle, (str, Sequence)):
        grid = Grid(puzzle)
    elif hasattr(puzzle, "tolist"):
        # numpy arrays and pandas series
        grid = Grid(puzzle.tolist())
    else:
        raise TypeError("solve_puzzle expects a Grid, notation string, cell sequence or puzzle record")

    return solver_core.solve(grid, tracer=tracer)


__all__ = ["solve_puzzle"]

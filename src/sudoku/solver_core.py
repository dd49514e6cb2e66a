"""Iterative backtracking solver over a fixed cell order.

No propagation and no cell-ordering heuristics: cells are visited 0 -> 80 and
digits tried 1 -> 9, so the result is always the first solution in that order.
"""

from typing import List, Optional

from .errors import UnsolvableError
from .grid import CELL_COUNT, SIZE, Grid
from src.utils.trace import Tracer


def solve(grid: Grid, tracer: Optional[Tracer] = None) -> Grid:
    """
    Solve `grid` and return a new, fully filled Grid.
    The input is never modified. Raises UnsolvableError when the search runs
    out of cells to retry or the final grid is not a valid solution.
    """
    tracer = tracer or Tracer(enabled=False)
    work = grid.copy()
    stack: List[int] = []  # indices filled by the search, never givens
    backtrack_needed = False
    i = 0

    while i < CELL_COUNT:
        if work[i] != 0 and not backtrack_needed:
            i += 1
            continue

        backtrack_needed = False
        if _next_fitting_value(work, i):
            stack.append(i)
            tracer.log_assign(index=i, value=work[i], stack_depth=len(stack))
            i += 1
            continue

        work._assign(i, 0)
        tracer.log_backtrack(index=i, stack_depth=len(stack))
        if not stack:
            tracer.log_exhausted(reason=f"No earlier cell to retry from cell {i}")
            raise UnsolvableError(f"Search exhausted at cell {i}: puzzle has no solution")
        i = stack.pop()
        backtrack_needed = True

    if not work.is_solved():
        # Reached when every cell is filled but the givens themselves clash.
        tracer.log_exhausted(reason="Filled grid contains a conflict")
        raise UnsolvableError("Puzzle can not be solved: givens conflict")

    tracer.log_solution_found(filled_cells=len(stack))
    return work


def _next_fitting_value(work: Grid, index: int) -> bool:
    """Step the cell upward from its current value until the grid has no conflict.

    Returns False once 9 has been tried; the cell is then left holding 9.
    """
    for value in range(work[index] + 1, SIZE + 1):
        work._assign(index, value)
        if not work.contains_conflict():
            return True
    return False

"""Sudoku grid model, notation decoding, and backtracking solver core."""

from .errors import ShapeError, SudokuError, UnsolvableError
from .grid import Grid, has_duplicate_given
from .notation import decode_notation, parse_digits
from .solver_core import solve

__all__ = [
    "Grid",
    "ShapeError",
    "SudokuError",
    "UnsolvableError",
    "decode_notation",
    "has_duplicate_given",
    "parse_digits",
    "solve",
]

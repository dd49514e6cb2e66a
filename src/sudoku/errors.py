"""Error types raised by the grid model and the backtracking solver."""

from typing import Optional


class SudokuError(Exception):
    """Base class for puzzle errors."""


class ShapeError(SudokuError, ValueError):
    """Raised when a cell sequence does not hold exactly 81 values."""

    def __init__(self, length: int, message: Optional[str] = None):
        self.length = length
        super().__init__(message or f"Expected 81 cells, got {length}")


class UnsolvableError(SudokuError, RuntimeError):
    """Raised when the search exhausts every candidate without a solution."""

"""Grid model: 81 cell values plus the row, column and box checks."""

from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from .errors import ShapeError
from .notation import decode_notation, parse_digits

SIZE = 9
CELL_COUNT = SIZE * SIZE

_BOX_OFFSETS = (0, 1, 2, 9, 10, 11, 18, 19, 20)

# Geometry never changes, only values do, so the index groups are built once.
ROWS: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(range(SIZE * g, SIZE * g + SIZE)) for g in range(SIZE)
)
COLUMNS: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(range(g, CELL_COUNT, SIZE)) for g in range(SIZE)
)
BOXES: Tuple[Tuple[int, ...], ...] = tuple(
    tuple((g // 3) * 27 + (g % 3) * 3 + offset for offset in _BOX_OFFSETS)
    for g in range(SIZE)
)
GROUPS: Tuple[Tuple[int, ...], ...] = ROWS + COLUMNS + BOXES

GridInput = Union[str, Sequence[int]]


def has_duplicate_given(group: Iterable[int]) -> bool:
    """True if the non-zero values of `group` contain a repeat (zeros are empty cells)."""
    non_zero = [value for value in group if value != 0]
    return len(set(non_zero)) != len(non_zero)


def _check_value(index: int, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Cell {index} must be an int in [0, 9], got {value!r}")
    if not 0 <= value <= SIZE:
        raise ValueError(f"Cell {index} must be in [0, 9], got {value}")
    return value


class Grid:
    """
    A 9x9 puzzle state addressed by a row-major linear index in [0, 80].

    Accepts either a sequence of 81 ints (0 for an empty cell) or a notation
    string, which is decoded first. The cells are read-only from the outside;
    copies never share storage.
    """

    __slots__ = ("_cells",)

    def __init__(self, values: GridInput):
        if isinstance(values, str):
            values = decode_notation(values)
        cells = list(values)
        if len(cells) != CELL_COUNT:
            raise ShapeError(len(cells))
        self._cells: List[int] = [_check_value(i, v) for i, v in enumerate(cells)]

    @classmethod
    def from_digits(cls, text: str) -> "Grid":
        """Build a grid from the plain form, e.g. ``"530070000600195000..."``."""
        return cls(parse_digits(text))

    @classmethod
    def empty(cls) -> "Grid":
        return cls([0] * CELL_COUNT)

    @property
    def cells(self) -> Tuple[int, ...]:
        return tuple(self._cells)

    def __getitem__(self, index: int) -> int:
        return self._cells[index]

    def __len__(self) -> int:
        return CELL_COUNT

    def __iter__(self) -> Iterator[int]:
        return iter(tuple(self._cells))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self.to_digits()!r})"

    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone._cells = list(self._cells)
        return clone

    def _assign(self, index: int, value: int) -> None:
        # Only the solver writes, and only into its own working copy.
        self._cells[index] = value

    def _group_values(self, groups: Tuple[Tuple[int, ...], ...], g: int) -> List[int]:
        if not 0 <= g < SIZE:
            raise IndexError(f"Group index must be in [0, 8], got {g}")
        return [self._cells[i] for i in groups[g]]

    def row(self, g: int) -> List[int]:
        return self._group_values(ROWS, g)

    def column(self, g: int) -> List[int]:
        return self._group_values(COLUMNS, g)

    def box(self, g: int) -> List[int]:
        return self._group_values(BOXES, g)

    def rows(self) -> List[List[int]]:
        return [self.row(g) for g in range(SIZE)]

    def is_given(self, index: int) -> bool:
        return self._cells[index] != 0

    def empty_count(self) -> int:
        return self._cells.count(0)

    def contains_conflict(self) -> bool:
        """Check the 27 rows, columns and boxes for repeated non-zero values.

        Empty cells are not a conflict, so a partially filled grid can pass.
        """
        cells = self._cells
        for group in GROUPS:
            if has_duplicate_given([cells[i] for i in group]):
                return True
        return False

    def is_solved(self) -> bool:
        """No empty cells and no conflicts."""
        return 0 not in self._cells and not self.contains_conflict()

    def to_digits(self) -> str:
        return "".join(str(value) for value in self._cells)

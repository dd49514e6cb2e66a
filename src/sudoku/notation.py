"""Puzzle text formats.

Two encodings are understood:

- The compact notation used to author puzzles by hand. The glyphs
  一 二 三 四 五 六 七 八 九 stand for the given digits 1 to 9, an ASCII digit
  ``1``-``9`` stands for that many empty cells, and every other character is
  ignored so that rows and boxes can be separated visually
  (e.g. ``"一二三.四五六.七八九/四1六.七八九.一二三"``).
- The plain digit form found in most datasets: one character per cell,
  ``0`` or ``.`` for an empty cell.
"""

from typing import List

# Index 0-8 maps to digit 1-9.
GIVEN_GLYPHS = "一二三四五六七八九"

_EMPTY_RUN_CHARS = "123456789"
_PLAIN_EMPTY = "0."


def decode_notation(text: str) -> List[int]:
    """Decode a notation string into a flat list of cell values.

    The length of the result is not checked here; the grid rejects anything
    other than 81 cells.
    """
    values: List[int] = []
    for char in text:
        if char in GIVEN_GLYPHS:
            values.append(GIVEN_GLYPHS.index(char) + 1)
        elif char in _EMPTY_RUN_CHARS:
            # Each digit is its own run; "12" means 1 + 2 empties, not 12.
            values.extend([0] * int(char))
    return values


def parse_digits(text: str) -> List[int]:
    """Parse the plain one-character-per-cell form."""
    values: List[int] = []
    for char in text.strip():
        if char in _PLAIN_EMPTY:
            values.append(0)
        elif char.isascii() and char.isdigit():
            values.append(int(char))
        else:
            raise ValueError(f"Unexpected character {char!r} in digit string")
    return values


def looks_like_digits(text: str) -> bool:
    """True when `text` is an 81-character plain digit string."""
    stripped = text.strip()
    return len(stripped) == 81 and all(c in "0123456789." for c in stripped)

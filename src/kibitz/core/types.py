"""Square addressing between grid coordinates and algebraic names.

Grid layout (render order, white at the bottom):
    row 0 = rank 8, row 7 = rank 1
    col 0 = file a, col 7 = file h
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

from kibitz.core.errors import InvalidGestureTarget

Square: TypeAlias = str  # "a1".."h8"
Coord: TypeAlias = tuple[int, int]  # (row, col)

FILES = "abcdefgh"
RANKS = "12345678"


def to_square(row: int, col: int) -> Square:
    """Grid coordinates → square name, e.g. (6, 4) → 'e2'."""
    if not (0 <= row < 8 and 0 <= col < 8):
        raise InvalidGestureTarget(f"Grid coordinates out of range: {(row, col)!r}")
    return FILES[col] + str(8 - row)


def from_square(name: Square) -> Coord:
    """Square name → grid coordinates, e.g. 'a8' → (0, 0)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise InvalidGestureTarget(f"Invalid square name: {name!r}")
    return 8 - int(name[1]), FILES.index(name[0])


def is_light_square(row: int, col: int) -> bool:
    """a8 (0, 0) and h1 (7, 7) are light."""
    return (row + col) % 2 == 0


def iter_squares() -> Iterator[tuple[int, int, Square]]:
    """Yield ``(row, col, name)`` for all 64 cells in render order."""
    for row in range(8):
        for col in range(8):
            yield row, col, FILES[col] + str(8 - row)

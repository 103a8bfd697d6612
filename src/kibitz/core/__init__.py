"""Core domain layer — pieces, square addressing and the position codec.

Quick start::

    from kibitz.core import STARTING_FEN, decode, to_square

    grid = decode(STARTING_FEN)
    print(grid[6][4], to_square(6, 4))   # P e2
"""

from kibitz.core.codec import STARTING_FEN, Grid, decode, encode_placement
from kibitz.core.enums import Color, PieceType
from kibitz.core.errors import (
    IllegalMoveAttempt,
    InvalidGestureTarget,
    KibitzError,
    MalformedSnapshot,
)
from kibitz.core.piece import Piece
from kibitz.core.types import (
    Coord,
    Square,
    from_square,
    is_light_square,
    iter_squares,
    to_square,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "IllegalMoveAttempt",
    "InvalidGestureTarget",
    "KibitzError",
    "MalformedSnapshot",
    # Types / helpers
    "Coord",
    "Square",
    "from_square",
    "is_light_square",
    "iter_squares",
    "to_square",
    # Domain objects
    "Piece",
    # Codec
    "Grid",
    "STARTING_FEN",
    "decode",
    "encode_placement",
]

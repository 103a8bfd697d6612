"""Position codec: FEN placement field ↔ 8×8 grid of pieces."""

from __future__ import annotations

from typing import TypeAlias

from kibitz.core.errors import MalformedSnapshot
from kibitz.core.piece import PIECE_CHARS, Piece

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

Row: TypeAlias = tuple[Piece | None, ...]
Grid: TypeAlias = tuple[Row, ...]


def decode(snapshot: str) -> Grid:
    """Parse the placement field of *snapshot* into a grid.

    Row 0 of the result is rank 8, column 0 is file a.
    """
    fields = snapshot.split()
    if not fields:
        raise MalformedSnapshot(f"Empty snapshot: {snapshot!r}")

    ranks = fields[0].split("/")
    if len(ranks) != 8:
        raise MalformedSnapshot(f"Snapshot must contain 8 ranks: {snapshot!r}")

    rows: list[Row] = []
    for rank_text in ranks:
        row: list[Piece | None] = []
        for ch in rank_text:
            if "0" <= ch <= "9":
                step = int(ch)
                if not (1 <= step <= 8):
                    raise MalformedSnapshot(f"Invalid empty-run digit {ch!r}: {snapshot!r}")
                row.extend([None] * step)
            elif ch in PIECE_CHARS:
                row.append(Piece.from_char(ch))
            else:
                raise MalformedSnapshot(f"Unknown piece symbol {ch!r}: {snapshot!r}")
            if len(row) > 8:
                break
        if len(row) != 8:
            raise MalformedSnapshot(f"Rank {rank_text!r} does not span 8 squares")
        rows.append(tuple(row))
    return tuple(rows)


def encode_placement(grid: Grid) -> str:
    """Serialise *grid* back to a FEN placement field."""
    out: list[str] = []
    for row in grid:
        empty = 0
        text = ""
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        out.append(text)
    return "/".join(out)

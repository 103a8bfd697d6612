"""Move history formatting: flat ply list → numbered white/black pairs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from kibitz.core.enums import Color
from kibitz.game.state import MoveRecord

# Unicode figurine symbols: white = outline, black = filled
_FIGURINE: dict[Color, dict[str, str]] = {
    Color.WHITE: {"K": "♔", "Q": "♕", "R": "♖", "B": "♗", "N": "♘"},
    Color.BLACK: {"K": "♚", "Q": "♛", "R": "♜", "B": "♝", "N": "♞"},
}


@dataclass(frozen=True, slots=True)
class MovePair:
    """One numbered transcript row."""

    number: int
    white: str
    black: str = ""


def pair_moves(moves: Iterable[str | MoveRecord]) -> list[MovePair]:
    """Group plies two at a time, white first, numbering from 1.

    The numbering ignores any move numbers embedded in the notation.
    """
    sans = [m.san if isinstance(m, MoveRecord) else m for m in moves]
    return [
        MovePair(
            number=idx // 2 + 1,
            white=sans[idx],
            black=sans[idx + 1] if idx + 1 < len(sans) else "",
        )
        for idx in range(0, len(sans), 2)
    ]


def format_pair(pair: MovePair) -> str:
    """``"1. e4 e5"`` or ``"2. Nf3"`` when black has not replied."""
    text = f"{pair.number}. {pair.white}"
    if pair.black:
        text += f" {pair.black}"
    return text


def figurine_san(san: str, color: Color) -> str:
    """Replace piece letters in *san* with Unicode figurine symbols for *color*."""
    table = _FIGURINE[color]

    # Replace leading piece letter (Nf3, Qxd5, Ke2…)
    if san and san[0] in table:
        san = table[san[0]] + san[1:]

    # Replace promotion target (e8=Q → e8=♕)
    if "=" in san:
        prefix, _, promo = san.partition("=")
        san = prefix + "=" + table.get(promo[0], promo[0]) + promo[1:]

    return san

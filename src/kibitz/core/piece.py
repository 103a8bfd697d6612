"""Piece value object and its FEN / glyph spellings."""

from __future__ import annotations

from dataclasses import dataclass

from kibitz.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_TYPES: dict[str, PieceType] = {letter: pt for pt, letter in _LETTERS.items()}

# Unicode lays the glyphs out K Q R B N P, white block first (U+2654).
_GLYPH_BASE = 0x2654
_GLYPH_ORDER = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)

PIECE_CHARS = frozenset(_TYPES) | frozenset(letter.upper() for letter in _TYPES)


@dataclass(frozen=True, slots=True)
class Piece:
    """One of the twelve coloured chessmen."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN letter: uppercase for white, lowercase for black."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """``'N'`` → white knight, ``'n'`` → black knight."""
        if char not in PIECE_CHARS:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, _TYPES[char.lower()])

    @property
    def symbol(self) -> str:
        """Glyph drawn on the board, e.g. ♞."""
        offset = _GLYPH_ORDER.index(self.piece_type) + 6 * int(self.color)
        return chr(_GLYPH_BASE + offset)

"""Immutable records produced by the rules-engine adapter."""

from __future__ import annotations

from dataclasses import dataclass

from kibitz.core.enums import Color
from kibitz.core.types import Square


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    ply: int
    san: str

    @property
    def color(self) -> Color:
        return Color.WHITE if self.ply % 2 == 0 else Color.BLACK


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Check / game-over flags as reported by the rules engine."""

    side_to_move: Color
    in_check: bool = False
    checked_king: Square | None = None
    result: str | None = None

    @property
    def is_game_over(self) -> bool:
        return self.result is not None

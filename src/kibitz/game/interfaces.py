"""Abstract interfaces for the game layer.

The board controller depends on :class:`IRulesEngine`, never on a concrete
chess library, so tests can drive it with a stub engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kibitz.core.enums import Color, PieceType
    from kibitz.core.types import Square


@dataclass(frozen=True, slots=True)
class MoveDescriptor:
    """Verbose legal-move entry reported by a rules engine."""

    from_square: Square
    to_square: Square
    san: str = ""
    promotion: PieceType | None = None


class IRulesEngine(ABC):
    """Interface for the external chess rules collaborator.

    Owns the authoritative position: side to move, placement, castling,
    en passant and the move stack.
    """

    @abstractmethod
    def legal_moves(self, square: Square) -> list[MoveDescriptor]:
        """Legal moves starting on *square* (empty if none)."""

    @abstractmethod
    def apply_move(
        self,
        origin: Square,
        target: Square,
        promotion: PieceType | None = None,
    ) -> bool:
        """Play a move. Returns False and leaves the position untouched if illegal."""

    @abstractmethod
    def fen(self) -> str:
        """Snapshot of the current position."""

    @abstractmethod
    def turn(self) -> Color:
        """Side to move."""

    @abstractmethod
    def history(self) -> list[str]:
        """SAN of every ply played, oldest first."""

    # ── Status queries (display only) ────────────────────────────────────

    @abstractmethod
    def is_check(self) -> bool:
        """Is the side to move in check?"""

    @abstractmethod
    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, if present."""

    @abstractmethod
    def outcome(self) -> str | None:
        """Result token ("1-0", "0-1", "1/2-1/2") once the game is over."""

"""RulesEngineAdapter — the only gateway from the board to chess rules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kibitz.core.codec import decode
from kibitz.core.enums import PieceType
from kibitz.core.errors import IllegalMoveAttempt, MalformedSnapshot
from kibitz.core.types import Square, from_square
from kibitz.game.state import GameStatus, MoveRecord

if TYPE_CHECKING:
    from kibitz.core.enums import Color
    from kibitz.core.piece import Piece
    from kibitz.game.interfaces import IRulesEngine

_LOGGER = logging.getLogger(__name__)

# Promotions always become a queen.
PROMOTION_PIECE = PieceType.QUEEN


class RulesEngineAdapter:
    """Answers legality questions and applies moves via an :class:`IRulesEngine`.

    Holds no position state of its own; every answer is forwarded to the
    engine.
    """

    __slots__ = ("_engine",)

    def __init__(self, engine: IRulesEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> IRulesEngine:
        return self._engine

    # ── Queries ──────────────────────────────────────────────────────────

    def snapshot(self) -> str:
        return self._engine.fen()

    def side_to_move(self) -> Color:
        return self._engine.turn()

    def piece_at(self, square: Square) -> Piece | None:
        """Piece on *square* in the current snapshot."""
        row, col = from_square(square)
        return decode(self._engine.fen())[row][col]

    def owns(self, square: Square) -> bool:
        """Does *square* hold a piece of the side to move?"""
        try:
            piece = self.piece_at(square)
        except MalformedSnapshot as exc:
            _LOGGER.warning("Cannot read piece on %s: %s", square, exc)
            return False
        return piece is not None and piece.color == self._engine.turn()

    def legal_destinations(self, square: Square) -> frozenset[Square]:
        """Destinations reachable from *square*.

        Empty when *square* is empty or holds an opponent piece.
        """
        if not self.owns(square):
            return frozenset()
        return frozenset(m.to_square for m in self._engine.legal_moves(square))

    def current_history(self) -> tuple[MoveRecord, ...]:
        return tuple(
            MoveRecord(ply=ply, san=san)
            for ply, san in enumerate(self._engine.history())
        )

    def status(self) -> GameStatus:
        side = self._engine.turn()
        in_check = self._engine.is_check()
        return GameStatus(
            side_to_move=side,
            in_check=in_check,
            checked_king=self._engine.king_square(side) if in_check else None,
            result=self._engine.outcome(),
        )

    # ── Mutation ─────────────────────────────────────────────────────────

    def attempt_move(self, origin: Square, target: Square) -> str:
        """Play *origin* → *target* and return the new snapshot.

        Raises:
            IllegalMoveAttempt: *target* is not a legal destination, or the
                engine refused the move. The position is unchanged.
        """
        moves = [
            m for m in self._engine.legal_moves(origin) if m.to_square == target
        ]
        if not moves or not self.owns(origin):
            raise IllegalMoveAttempt(origin, target)

        promotion = PROMOTION_PIECE if any(m.promotion for m in moves) else None
        if not self._engine.apply_move(origin, target, promotion):
            raise IllegalMoveAttempt(origin, target)
        return self._engine.fen()

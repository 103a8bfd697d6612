"""IRulesEngine implementation backed by python-chess."""

from __future__ import annotations

import chess

from kibitz.core.enums import Color, PieceType
from kibitz.core.types import Square
from kibitz.game.interfaces import IRulesEngine, MoveDescriptor

_PROMOTIONS: dict[int, PieceType] = {
    chess.KNIGHT: PieceType.KNIGHT,
    chess.BISHOP: PieceType.BISHOP,
    chess.ROOK: PieceType.ROOK,
    chess.QUEEN: PieceType.QUEEN,
}
_PROMOTIONS_BACK: dict[PieceType, int] = {v: k for k, v in _PROMOTIONS.items()}


class PythonChessEngine(IRulesEngine):
    """Thin facade over :class:`chess.Board`."""

    def __init__(self, fen: str | None = None) -> None:
        self._board = chess.Board(fen) if fen else chess.Board()

    def legal_moves(self, square: Square) -> list[MoveDescriptor]:
        origin = chess.parse_square(square)
        return [
            MoveDescriptor(
                from_square=chess.square_name(move.from_square),
                to_square=chess.square_name(move.to_square),
                san=self._board.san(move),
                promotion=_PROMOTIONS.get(move.promotion) if move.promotion else None,
            )
            for move in self._board.legal_moves
            if move.from_square == origin
        ]

    def apply_move(
        self,
        origin: Square,
        target: Square,
        promotion: PieceType | None = None,
    ) -> bool:
        move = chess.Move(
            chess.parse_square(origin),
            chess.parse_square(target),
            promotion=_PROMOTIONS_BACK[promotion] if promotion else None,
        )
        if not self._board.is_legal(move):
            return False
        self._board.push(move)
        return True

    def fen(self) -> str:
        return self._board.fen()

    def turn(self) -> Color:
        return Color.WHITE if self._board.turn == chess.WHITE else Color.BLACK

    def history(self) -> list[str]:
        """SAN for every ply (replays from the root position)."""
        replay = self._board.root()
        san_moves: list[str] = []
        for move in self._board.move_stack:
            san_moves.append(replay.san(move))
            replay.push(move)
        return san_moves

    def is_check(self) -> bool:
        return self._board.is_check()

    def king_square(self, color: Color) -> Square | None:
        sq = self._board.king(chess.WHITE if color == Color.WHITE else chess.BLACK)
        return chess.square_name(sq) if sq is not None else None

    def outcome(self) -> str | None:
        outcome = self._board.outcome()
        return outcome.result() if outcome is not None else None

"""Tests for the python-chess backed rules engine."""

from kibitz.core.codec import STARTING_FEN
from kibitz.core.enums import Color, PieceType
from kibitz.game.chess_engine import PythonChessEngine


def _play(engine: PythonChessEngine, *moves: str) -> None:
    for uci in moves:
        assert engine.apply_move(uci[:2], uci[2:4])


class TestQueries:
    def test_default_is_starting_position(self) -> None:
        engine = PythonChessEngine()
        assert engine.fen() == STARTING_FEN
        assert engine.turn() == Color.WHITE

    def test_custom_fen(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"
        engine = PythonChessEngine(fen)
        assert engine.turn() == Color.BLACK

    def test_legal_moves_are_verbose(self) -> None:
        engine = PythonChessEngine()
        moves = engine.legal_moves("g1")
        assert {m.to_square for m in moves} == {"f3", "h3"}
        assert {m.san for m in moves} == {"Nf3", "Nh3"}
        assert all(m.from_square == "g1" for m in moves)

    def test_legal_moves_for_empty_square(self) -> None:
        assert PythonChessEngine().legal_moves("e4") == []

    def test_promotion_descriptors(self) -> None:
        engine = PythonChessEngine("1k6/P7/8/8/8/8/8/K7 w - - 0 1")
        promos = {m.promotion for m in engine.legal_moves("a7")}
        assert promos == {
            PieceType.QUEEN,
            PieceType.ROOK,
            PieceType.BISHOP,
            PieceType.KNIGHT,
        }


class TestApply:
    def test_apply_legal(self) -> None:
        engine = PythonChessEngine()
        assert engine.apply_move("e2", "e4")
        assert engine.turn() == Color.BLACK
        assert engine.history() == ["e4"]

    def test_apply_illegal_leaves_position(self) -> None:
        engine = PythonChessEngine()
        assert not engine.apply_move("e2", "e5")
        assert engine.fen() == STARTING_FEN
        assert engine.history() == []

    def test_apply_promotion(self) -> None:
        engine = PythonChessEngine("1k6/P7/8/8/8/8/8/K7 w - - 0 1")
        assert engine.apply_move("a7", "a8", PieceType.QUEEN)
        assert engine.fen().startswith("Qk6/")

    def test_promotion_without_piece_is_illegal(self) -> None:
        engine = PythonChessEngine("1k6/P7/8/8/8/8/8/K7 w - - 0 1")
        assert not engine.apply_move("a7", "a8")

    def test_history_from_custom_root(self) -> None:
        engine = PythonChessEngine("4k3/8/8/8/8/8/8/4K2R w K - 0 1")
        _play(engine, "e1g1")
        assert engine.history() == ["O-O"]


class TestStatus:
    def test_fools_mate(self) -> None:
        engine = PythonChessEngine()
        _play(engine, "f2f3", "e7e5", "g2g4", "d8h4")
        assert engine.is_check()
        assert engine.king_square(Color.WHITE) == "e1"
        assert engine.outcome() == "0-1"
        assert engine.history() == ["f3", "e5", "g4", "Qh4#"]

    def test_in_progress(self) -> None:
        engine = PythonChessEngine()
        assert not engine.is_check()
        assert engine.outcome() is None

    def test_missing_king(self) -> None:
        engine = PythonChessEngine("8/8/8/8/8/8/8/8 w - - 0 1")
        assert engine.king_square(Color.BLACK) is None

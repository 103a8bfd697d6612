"""Tests for BoardController — the interaction pipeline."""

import logging

import pytest

from kibitz.core.codec import STARTING_FEN, decode
from kibitz.core.enums import Color, PieceType
from kibitz.core.errors import InvalidGestureTarget
from kibitz.core.piece import Piece
from kibitz.game.controller import EMPTY_GRID, BoardController
from kibitz.game.history import MovePair
from kibitz.game.selection import IDLE, Armed, Gesture, TransitionKind
from kibitz.game.state import MoveRecord


class TestSetup:
    def test_default_game(self) -> None:
        ctrl = BoardController()
        assert ctrl.grid == decode(STARTING_FEN)
        assert ctrl.history == ()
        assert ctrl.pairs == []
        assert ctrl.interaction == IDLE
        assert ctrl.last_move is None

    def test_custom_fen(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        ctrl = BoardController(fen=fen)
        assert ctrl.status().side_to_move == Color.BLACK
        assert ctrl.grid[4][4] == Piece(Color.WHITE, PieceType.PAWN)

    def test_engine_and_fen_are_exclusive(self, make_stub_engine) -> None:
        with pytest.raises(ValueError):
            BoardController(make_stub_engine(STARTING_FEN), fen=STARTING_FEN)


class TestGestures:
    def test_scenario_e2_e4(self) -> None:
        ctrl = BoardController()
        ctrl.handle_gesture(Gesture.PRESS, "e2")
        assert {"e3", "e4"} <= ctrl.legal_set
        assert "e1" not in ctrl.legal_set

        t = ctrl.handle_gesture(Gesture.PRESS, "e4")
        assert t.committed
        assert ctrl.interaction == IDLE
        assert ctrl.legal_set == frozenset()
        assert ctrl.status().side_to_move == Color.BLACK
        assert ctrl.history == (MoveRecord(0, "e4"),)
        assert ctrl.grid[4][4] == Piece(Color.WHITE, PieceType.PAWN)
        assert ctrl.grid[6][4] is None
        assert ctrl.last_move == ("e2", "e4")

    def test_pairs_follow_history(self) -> None:
        ctrl = BoardController()
        for sq in ("e2", "e4", "e7", "e5", "g1", "f3"):
            ctrl.handle_gesture(Gesture.PRESS, sq)
        assert ctrl.pairs == [MovePair(1, "e4", "e5"), MovePair(2, "Nf3", "")]

    def test_handle_cell_uses_grid_coordinates(self) -> None:
        ctrl = BoardController()
        ctrl.handle_cell(Gesture.DRAG_START, 6, 4)
        assert ctrl.armed_origin == "e2"
        assert ctrl.handle_cell(Gesture.DROP, 4, 4).committed

    def test_handle_cell_out_of_range_is_fatal(self) -> None:
        ctrl = BoardController()
        with pytest.raises(InvalidGestureTarget):
            ctrl.handle_cell(Gesture.PRESS, 8, 0)

    def test_black_piece_on_white_turn(self) -> None:
        ctrl = BoardController()
        t = ctrl.handle_gesture(Gesture.PRESS, "d7")
        assert t.kind == TransitionKind.NONE
        assert ctrl.interaction == IDLE

    def test_reselect(self) -> None:
        ctrl = BoardController()
        ctrl.handle_gesture(Gesture.PRESS, "e2")
        ctrl.handle_gesture(Gesture.PRESS, "b1")
        assert ctrl.interaction == Armed("b1", frozenset({"a3", "c3"}))

    def test_clear_selection(self) -> None:
        ctrl = BoardController()
        changes: list[bool] = []
        ctrl.events.on_changed.append(lambda: changes.append(True))
        ctrl.clear_selection()
        assert changes == []
        ctrl.handle_gesture(Gesture.PRESS, "e2")
        ctrl.clear_selection()
        assert ctrl.interaction == IDLE
        assert len(changes) == 2


class TestEvents:
    def test_on_move_fires_with_record_and_snapshot(self) -> None:
        ctrl = BoardController()
        seen: list[tuple[MoveRecord, str]] = []
        ctrl.events.on_move.append(lambda rec, snap: seen.append((rec, snap)))
        ctrl.handle_gesture(Gesture.PRESS, "e2")
        ctrl.handle_gesture(Gesture.PRESS, "e4")
        assert seen == [(MoveRecord(0, "e4"), ctrl.snapshot)]

    def test_on_changed_skips_noops(self) -> None:
        ctrl = BoardController()
        changes: list[bool] = []
        ctrl.events.on_changed.append(lambda: changes.append(True))
        ctrl.handle_gesture(Gesture.PRESS, "e5")  # empty, idle
        assert changes == []
        ctrl.handle_gesture(Gesture.PRESS, "e2")
        ctrl.handle_gesture(Gesture.PRESS, "e4")
        assert len(changes) == 2

    def test_rejected_move_does_not_fire_on_move(self, make_stub_engine) -> None:
        engine = make_stub_engine(STARTING_FEN, {"e2": ["e4"]}, accept=False)
        ctrl = BoardController(engine)
        moves: list[MoveRecord] = []
        ctrl.events.on_move.append(lambda rec, _snap: moves.append(rec))
        ctrl.handle_gesture(Gesture.PRESS, "e2")
        t = ctrl.handle_gesture(Gesture.PRESS, "e4")
        assert t.kind == TransitionKind.REJECTED
        assert moves == []
        assert ctrl.interaction == IDLE
        assert ctrl.grid == decode(STARTING_FEN)


class TestMalformedSnapshot:
    def test_previous_grid_is_retained(self, make_stub_engine, caplog) -> None:
        engine = make_stub_engine(STARTING_FEN, {"e2": ["e4"]}, next_fen="garbage w - - 0 1")
        ctrl = BoardController(engine)
        before = ctrl.grid

        ctrl.handle_gesture(Gesture.PRESS, "e2")
        with caplog.at_level(logging.WARNING, logger="kibitz.game.controller"):
            t = ctrl.handle_gesture(Gesture.PRESS, "e4")

        assert t.committed
        assert ctrl.grid == before
        assert ctrl.history == (MoveRecord(0, "e2e4"),)
        assert "snapshot rejected" in caplog.text

    def test_initial_malformed_snapshot_gives_empty_grid(self, make_stub_engine) -> None:
        ctrl = BoardController(make_stub_engine("8/8 w - - 0 1"))
        assert ctrl.grid == EMPTY_GRID

    def test_recovers_on_next_valid_snapshot(self, make_stub_engine) -> None:
        engine = make_stub_engine("8/8 w - - 0 1")
        ctrl = BoardController(engine)
        engine.set_fen(STARTING_FEN)
        ctrl.refresh()
        assert ctrl.grid == decode(STARTING_FEN)

    def test_non_ascii_digit_keeps_previous_grid(self, make_stub_engine) -> None:
        engine = make_stub_engine(STARTING_FEN)
        ctrl = BoardController(engine)
        engine.set_fen("rnbqkbnr/pppppppp/²²²²/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1")
        ctrl.refresh()
        assert ctrl.grid == decode(STARTING_FEN)

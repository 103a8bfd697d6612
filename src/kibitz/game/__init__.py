"""Game layer — rules-engine adapter, selection state machine, history.

Quick start::

    from kibitz.game import BoardController, Gesture

    ctrl = BoardController()
    ctrl.handle_gesture(Gesture.PRESS, "e2")
    ctrl.handle_gesture(Gesture.PRESS, "e4")
    print(ctrl.pairs)   # [MovePair(number=1, white='e4', black='')]
"""

from kibitz.game.adapter import PROMOTION_PIECE, RulesEngineAdapter
from kibitz.game.chess_engine import PythonChessEngine
from kibitz.game.controller import BoardController, BoardEvents
from kibitz.game.history import MovePair, figurine_san, format_pair, pair_moves
from kibitz.game.interfaces import IRulesEngine, MoveDescriptor
from kibitz.game.selection import (
    IDLE,
    Armed,
    Gesture,
    Idle,
    InteractionState,
    SelectionMachine,
    Transition,
    TransitionKind,
)
from kibitz.game.state import GameStatus, MoveRecord

__all__ = [
    # Interfaces
    "IRulesEngine",
    "MoveDescriptor",
    # Concrete
    "BoardController",
    "BoardEvents",
    "PythonChessEngine",
    "RulesEngineAdapter",
    "SelectionMachine",
    # State
    "Armed",
    "GameStatus",
    "Gesture",
    "IDLE",
    "Idle",
    "InteractionState",
    "MoveRecord",
    "PROMOTION_PIECE",
    "Transition",
    "TransitionKind",
    # History
    "MovePair",
    "figurine_san",
    "format_pair",
    "pair_moves",
]

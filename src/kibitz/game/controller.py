"""BoardController — wires gestures, rules engine, codec and history together.

Data flow for one gesture::

    gesture → SelectionMachine → RulesEngineAdapter (legality / apply)
            → decode(new snapshot) → grid
            → current_history() → transcript
            → events.on_changed listeners (the view re-renders)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from kibitz.core.codec import Grid, decode
from kibitz.core.errors import MalformedSnapshot
from kibitz.core.types import Square, to_square
from kibitz.game.adapter import RulesEngineAdapter
from kibitz.game.chess_engine import PythonChessEngine
from kibitz.game.history import MovePair, pair_moves
from kibitz.game.interfaces import IRulesEngine
from kibitz.game.selection import (
    Gesture,
    InteractionState,
    SelectionMachine,
    Transition,
    TransitionKind,
)
from kibitz.game.state import GameStatus, MoveRecord

_LOGGER = logging.getLogger(__name__)

EMPTY_GRID: Grid = tuple(tuple(None for _ in range(8)) for _ in range(8))

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, str], None]  # record, snapshot
ChangedCallback = Callable[[], None]


@dataclass
class BoardEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_changed: list[ChangedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class BoardController:
    """Owns the interaction pipeline for one game.

    All methods run on the UI thread; each gesture is handled to completion
    before the next one.
    """

    __slots__ = (
        "_adapter",
        "_machine",
        "_grid",
        "_history",
        "_last_move",
        "events",
    )

    def __init__(
        self,
        engine: IRulesEngine | None = None,
        *,
        fen: str | None = None,
    ) -> None:
        if engine is None:
            engine = PythonChessEngine(fen)
        elif fen is not None:
            raise ValueError("Pass either an engine or a FEN, not both")
        self._adapter = RulesEngineAdapter(engine)
        self._machine = SelectionMachine(self._adapter)
        self._grid: Grid = EMPTY_GRID
        self._history: tuple[MoveRecord, ...] = ()
        self._last_move: tuple[Square, Square] | None = None
        self.events = BoardEvents()
        self.refresh()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def adapter(self) -> RulesEngineAdapter:
        return self._adapter

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return self._history

    @property
    def pairs(self) -> list[MovePair]:
        return pair_moves(self._history)

    @property
    def interaction(self) -> InteractionState:
        return self._machine.state

    @property
    def legal_set(self) -> frozenset[Square]:
        return self._machine.legal_set

    @property
    def armed_origin(self) -> Square | None:
        return self._machine.armed_origin

    @property
    def last_move(self) -> tuple[Square, Square] | None:
        return self._last_move

    @property
    def snapshot(self) -> str:
        return self._adapter.snapshot()

    def status(self) -> GameStatus:
        return self._adapter.status()

    # ── Input ────────────────────────────────────────────────────────────

    def handle_gesture(self, gesture: Gesture, square: Square | None) -> Transition:
        """Feed one gesture through the selection machine."""
        transition = self._machine.handle(gesture, square)

        if transition.committed:
            assert transition.move is not None and transition.snapshot is not None
            self._last_move = transition.move
            self.refresh()
            record = self._history[-1]
            _LOGGER.info("Move %d: %s", record.ply + 1, record.san)
            for cb in self.events.on_move:
                cb(record, transition.snapshot)
        elif transition.kind == TransitionKind.REJECTED:
            _LOGGER.debug("Gesture %s on %s rejected", gesture.name, square)

        if transition.kind != TransitionKind.NONE:
            self._emit_changed()
        return transition

    def handle_cell(self, gesture: Gesture, row: int, col: int) -> Transition:
        """Grid-coordinate variant of :meth:`handle_gesture`.

        Raises:
            InvalidGestureTarget: *row* or *col* outside 0–7.
        """
        return self.handle_gesture(gesture, to_square(row, col))

    def clear_selection(self) -> None:
        if self._machine.armed_origin is None:
            return
        self._machine.reset()
        self._emit_changed()

    # ── Derivation ───────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Re-derive grid and history from the engine's current snapshot.

        A malformed snapshot keeps the previous grid.
        """
        snapshot = self._adapter.snapshot()
        try:
            self._grid = decode(snapshot)
        except MalformedSnapshot as exc:
            _LOGGER.warning("Keeping previous board, snapshot rejected: %s", exc)
        self._history = self._adapter.current_history()

    def _emit_changed(self) -> None:
        for cb in self.events.on_changed:
            cb()

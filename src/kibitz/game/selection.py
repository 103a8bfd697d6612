"""Selection / drag state machine shared by click and drag input.

States::

    Idle ──arm──▶ Armed(origin, legal)
    Armed ──commit / cancel──▶ Idle
    Armed ──reselect──▶ Armed(other, legal')

Both input modalities feed the same :meth:`SelectionMachine.handle`; they
only differ in which :class:`Gesture` tag they send.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING, TypeAlias

from kibitz.core.errors import IllegalMoveAttempt

if TYPE_CHECKING:
    from kibitz.core.types import Square
    from kibitz.game.adapter import RulesEngineAdapter

_LOGGER = logging.getLogger(__name__)


class Gesture(IntEnum):
    """Abstract input events, independent of the widget toolkit."""

    PRESS = auto()  # click / tap on a square
    DRAG_START = auto()  # piece picked up
    DROP = auto()  # piece released (square may be None: off the board)


class TransitionKind(IntEnum):
    NONE = auto()
    ARMED = auto()
    REARMED = auto()
    COMMITTED = auto()
    REJECTED = auto()
    CANCELLED = auto()


@dataclass(frozen=True, slots=True)
class Idle:
    """Nothing selected."""

    @property
    def legal(self) -> frozenset[Square]:
        return frozenset()


@dataclass(frozen=True, slots=True)
class Armed:
    """A piece is selected (or grabbed) and its destinations are known."""

    origin: Square
    legal: frozenset[Square]


InteractionState: TypeAlias = Idle | Armed

IDLE = Idle()


@dataclass(frozen=True, slots=True)
class Transition:
    """Outcome of one :meth:`SelectionMachine.handle` call."""

    kind: TransitionKind
    state: InteractionState
    move: tuple[Square, Square] | None = None
    snapshot: str | None = None

    @property
    def committed(self) -> bool:
        return self.kind == TransitionKind.COMMITTED


class SelectionMachine:
    """Tracks the armed piece and turns gestures into moves."""

    __slots__ = ("_adapter", "_state")

    def __init__(self, adapter: RulesEngineAdapter) -> None:
        self._adapter = adapter
        self._state: InteractionState = IDLE

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def legal_set(self) -> frozenset[Square]:
        return self._state.legal

    @property
    def armed_origin(self) -> Square | None:
        return self._state.origin if isinstance(self._state, Armed) else None

    def reset(self) -> None:
        self._state = IDLE

    # ── Transition function ──────────────────────────────────────────────

    def handle(self, gesture: Gesture, square: Square | None) -> Transition:
        """Apply one gesture and return what happened."""
        state = self._state

        if gesture == Gesture.DRAG_START:
            # A new drag always starts from scratch.
            if square is None:
                return self._cancel() if isinstance(state, Armed) else self._noop()
            return self._arm(square, rearm=False)

        if not isinstance(state, Armed):
            if gesture == Gesture.PRESS and square is not None:
                return self._arm(square, rearm=False)
            return self._noop()

        if square is None:
            return self._cancel()

        if square in state.legal:
            return self._commit(state.origin, square)

        if square == state.origin and gesture == Gesture.DROP:
            # Dropped back where it started: keep the selection.
            return self._noop()

        if gesture == Gesture.PRESS and self._adapter.owns(square):
            return self._arm(square, rearm=True)

        return self._cancel()

    # ── Transitions ──────────────────────────────────────────────────────

    def _noop(self) -> Transition:
        return Transition(TransitionKind.NONE, self._state)

    def _arm(self, square: Square, *, rearm: bool) -> Transition:
        if not self._adapter.owns(square):
            if isinstance(self._state, Armed):
                return self._cancel()
            return self._noop()
        self._state = Armed(square, self._adapter.legal_destinations(square))
        kind = TransitionKind.REARMED if rearm else TransitionKind.ARMED
        return Transition(kind, self._state)

    def _commit(self, origin: Square, target: Square) -> Transition:
        self._state = IDLE
        try:
            snapshot = self._adapter.attempt_move(origin, target)
        except IllegalMoveAttempt as exc:
            _LOGGER.debug("Move rejected by rules engine: %s", exc)
            return Transition(TransitionKind.REJECTED, IDLE, (origin, target))
        return Transition(TransitionKind.COMMITTED, IDLE, (origin, target), snapshot)

    def _cancel(self) -> Transition:
        self._state = IDLE
        return Transition(TransitionKind.CANCELLED, IDLE)

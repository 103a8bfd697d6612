"""Error kinds raised by the board controller layers."""

from __future__ import annotations


class KibitzError(Exception):
    """Base class for all kibitz errors."""


class MalformedSnapshot(KibitzError, ValueError):
    """A position snapshot could not be decoded into a grid."""


class IllegalMoveAttempt(KibitzError):
    """The rules engine refused a move.

    Only reachable when the armed legal set and the engine disagree.
    """

    def __init__(self, origin: str, target: str) -> None:
        super().__init__(f"Illegal move attempt: {origin}{target}")
        self.origin = origin
        self.target = target


class InvalidGestureTarget(KibitzError, IndexError):
    """Grid coordinates or a square name outside the 8x8 board."""

"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from kibitz.core.enums import Color, PieceType
from kibitz.game.interfaces import IRulesEngine, MoveDescriptor

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


class StubEngine(IRulesEngine):
    """Scripted rules engine: legal moves and snapshots are given up front."""

    def __init__(
        self,
        fen: str,
        moves: dict[str, list[str]] | None = None,
        *,
        next_fen: str | None = None,
        accept: bool = True,
        promotions: frozenset[str] = frozenset(),
    ) -> None:
        self._fen = fen
        self._moves = moves or {}
        self._next_fen = next_fen
        self.accept = accept
        self._promotions = promotions
        self._history: list[str] = []
        self.applied: list[tuple[str, str, PieceType | None]] = []
        self.check = False

    def legal_moves(self, square: str) -> list[MoveDescriptor]:
        out: list[MoveDescriptor] = []
        for target in self._moves.get(square, []):
            if target in self._promotions:
                out.extend(
                    MoveDescriptor(square, target, promotion=p)
                    for p in (PieceType.QUEEN, PieceType.KNIGHT)
                )
            else:
                out.append(MoveDescriptor(square, target, san=target))
        return out

    def apply_move(
        self,
        origin: str,
        target: str,
        promotion: PieceType | None = None,
    ) -> bool:
        self.applied.append((origin, target, promotion))
        if not self.accept:
            return False
        self._history.append(f"{origin}{target}")
        if self._next_fen is not None:
            self._fen = self._next_fen
        return True

    def fen(self) -> str:
        return self._fen

    def set_fen(self, fen: str) -> None:
        self._fen = fen

    def turn(self) -> Color:
        return Color.WHITE if self._fen.split()[1] == "w" else Color.BLACK

    def history(self) -> list[str]:
        return list(self._history)

    def is_check(self) -> bool:
        return self.check

    def king_square(self, color: Color) -> str | None:
        return "e1" if color == Color.WHITE else "e8"

    def outcome(self) -> str | None:
        return None


@pytest.fixture
def make_stub_engine() -> Callable[..., StubEngine]:
    """Factory for :class:`StubEngine` instances."""
    return StubEngine


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()

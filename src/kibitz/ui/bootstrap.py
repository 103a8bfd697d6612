"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from kibitz.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


def _check_glyph_font() -> bool:
    """Warn when the font used for piece glyphs is not installed."""
    from PyQt6.QtGui import QFontDatabase

    from kibitz.ui.board.piece_item import PieceItem

    if PieceItem.GLYPH_FONT in QFontDatabase.families():
        return True
    _LOGGER.warning(
        "Piece glyph font %r not installed; Qt will substitute one",
        PieceItem.GLYPH_FONT,
    )
    return False


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    app.setApplicationName("Kibitz")
    app.setStyle("Fusion")
    _check_glyph_font()


def run_application(
    argv: list[str] | None = None,
    *,
    settings: AppSettings | None = None,
    fen: str | None = None,
) -> int:
    """Create and run the main Qt application.

    *fen* sets the starting position; the standard one is used when omitted.
    """
    from PyQt6.QtWidgets import QApplication

    from kibitz.game.controller import BoardController
    from kibitz.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(BoardController(fen=fen), settings)
    window.show()

    return app.exec()

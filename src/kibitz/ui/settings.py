"""User-configurable settings and how they are applied to the window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from kibitz.ui.styles.theme import app_style, board_theme


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Chrome only: never affects board colours or pieces
    dark_mode: bool = True

    # Board
    board_theme: str = "Blue"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Move list
    use_figurine_notation: bool = False


def apply_settings(host: Any) -> None:
    s = host._settings

    host.setStyleSheet(app_style(s.dark_mode))
    host.retranslate_ui()

    scene = host._board_view.board_scene
    scene.set_theme(board_theme(s.board_theme))
    scene.set_show_coordinates(s.show_coordinates)
    scene.set_show_legal_moves(s.show_legal_moves)

    host._move_panel.set_use_figurine_notation(s.use_figurine_notation)

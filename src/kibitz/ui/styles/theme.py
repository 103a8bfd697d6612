"""Visual theme constants and QSS styles for Kibitz.

Board colours (:class:`BoardTheme`) and the window chrome (:func:`app_style`)
are independent: the dark/light flag only ever selects the chrome.
"""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # armed piece origin
    highlight_to: QColor  # legal move dots on empty squares
    highlight_capture: QColor  # ring on occupied legal targets
    highlight_check: QColor  # king in check
    last_move: QColor  # last move origin / destination
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    piece_white: QColor
    piece_black: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(255, 255, 255),
            dark_square=QColor(80, 132, 178),  # steel blue
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(30, 144, 255),  # dodger blue dot
            highlight_capture=QColor(30, 144, 255, 160),
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            last_move=QColor(155, 199, 0, 105),  # green
            coord_light=QColor(255, 255, 255),
            coord_dark=QColor(0, 0, 0),
            piece_white=QColor(250, 250, 250),
            piece_black=QColor(20, 20, 20),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 60),
            highlight_capture=QColor(0, 0, 0, 90),
            highlight_check=QColor(255, 0, 0, 120),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(240, 217, 181),
            coord_dark=QColor(181, 136, 99),
            piece_white=QColor(250, 250, 250),
            piece_black=QColor(20, 20, 20),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 60),
            highlight_capture=QColor(0, 0, 0, 90),
            highlight_check=QColor(255, 0, 0, 120),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(236, 238, 220),
            coord_dark=QColor(112, 149, 120),
            piece_white=QColor(250, 250, 250),
            piece_black=QColor(20, 20, 20),
        )


BOARD_THEMES: dict[str, BoardTheme] = {
    "Blue": BoardTheme.default(),
    "Classic": BoardTheme.classic(),
    "Green": BoardTheme.green(),
}


def board_theme(name: str) -> BoardTheme:
    """Look up a preset by name, falling back to the default board."""
    return BOARD_THEMES.get(name, BoardTheme.default())


# ── Application-wide QSS ────────────────────────────────────────────────────

DARK_STYLE = """
QMainWindow, QWidget#central {
    background: #1c1c1c;
}

QWidget#card {
    background: #2b2b2b;
    border-radius: 12px;
}

QLabel {
    color: #ffffff;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QListWidget {
    background: #2a2a2a;
    color: #ffffff;
    border: none;
    border-radius: 8px;
    font-family: "AdwaitaMono Nerd Font", "Consolas", monospace;
    font-size: 13px;
}

QPushButton#themeToggle {
    background: #ffffff;
    color: #000000;
    border: none;
    border-radius: 6px;
    padding: 6px 12px;
    font-weight: bold;
}

QStatusBar {
    background: #1c1c1c;
    color: #e0e0e0;
}
"""

LIGHT_STYLE = """
QMainWindow, QWidget#central {
    background: #f5f5f5;
}

QWidget#card {
    background: #f5f5f5;
    border-radius: 12px;
}

QLabel {
    color: #000000;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QListWidget {
    background: #ffffff;
    color: #000000;
    border: none;
    border-radius: 8px;
    font-family: "AdwaitaMono Nerd Font", "Consolas", monospace;
    font-size: 13px;
}

QPushButton#themeToggle {
    background: #1c1c1c;
    color: #ffffff;
    border: none;
    border-radius: 6px;
    padding: 6px 12px;
    font-weight: bold;
}

QStatusBar {
    background: #f5f5f5;
    color: #202020;
}
"""


def app_style(dark_mode: bool) -> str:
    """Chrome style sheet for the given theme flag."""
    return DARK_STYLE if dark_mode else LIGHT_STYLE

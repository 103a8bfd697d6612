"""MovePanel — scrollable list of numbered move pairs."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QListWidget, QVBoxLayout, QWidget

from kibitz.game.history import figurine_san, format_pair, pair_moves
from kibitz.game.state import MoveRecord

HEADER_TEXT = "Move History"


class MovePanel(QWidget):
    """Displays the game's move history, one row per move number."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._records: list[MoveRecord] = []
        self._use_figurine_notation = False
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel(HEADER_TEXT)
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self._list.setFont(QFont("AdwaitaMono Nerd Font", 12))
        layout.addWidget(self._list)

    def clear(self) -> None:
        self._records.clear()
        self._list.clear()

    def set_use_figurine_notation(self, enabled: bool) -> None:
        """Toggle move text style between figurines and standard SAN letters."""
        if self._use_figurine_notation == enabled:
            return
        self._use_figurine_notation = enabled
        self._rebuild_list()

    def set_history(self, records: Sequence[MoveRecord]) -> None:
        """Rebuild the entire move list."""
        self._records = list(records)
        self._rebuild_list()

    def row_texts(self) -> list[str]:
        """Currently displayed rows, top to bottom."""
        return [self._list.item(i).text() for i in range(self._list.count())]

    def _display_sans(self) -> list[str]:
        if not self._use_figurine_notation:
            return [record.san for record in self._records]
        return [figurine_san(record.san, record.color) for record in self._records]

    def _rebuild_list(self) -> None:
        self._list.clear()
        for pair in pair_moves(self._display_sans()):
            self._list.addItem(format_pair(pair))
        self._list.scrollToBottom()

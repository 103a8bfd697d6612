"""MainWindow — top-level window assembling the board and the move list."""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from kibitz.core.enums import Color
from kibitz.game.controller import BoardController
from kibitz.game.state import GameStatus, MoveRecord
from kibitz.ui.board.board_view import BoardView
from kibitz.ui.panels.move_panel import MovePanel
from kibitz.ui.settings import AppSettings, apply_settings


def status_text(status: GameStatus) -> str:
    """One-line game status for the status bar."""
    if status.is_game_over:
        return f"Game over: {status.result}"
    side = "White" if status.side_to_move == Color.WHITE else "Black"
    if status.in_check:
        return f"{side} to move (check)"
    return f"{side} to move"


class MainWindow(QMainWindow):
    """Main application window for Kibitz."""

    def __init__(
        self,
        controller: BoardController | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Kibitz")
        self.setMinimumSize(760, 560)
        self.resize(1000, 640)

        self._controller = controller if controller is not None else BoardController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._connect_signals()
        self._apply_settings()
        self._refresh_panels()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        central.setObjectName("central")
        self.setCentralWidget(central)
        outer = QHBoxLayout(central)
        outer.setContentsMargins(10, 10, 10, 10)

        card = QWidget()
        card.setObjectName("card")
        root = QHBoxLayout(card)
        root.setContentsMargins(20, 20, 20, 20)
        root.setSpacing(20)
        outer.addWidget(card)

        # Board (left)
        self._board_view = BoardView(self._controller)
        root.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(10)

        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)

        self._btn_theme = QPushButton()
        self._btn_theme.setObjectName("themeToggle")
        right.addWidget(self._btn_theme)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(240)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _connect_signals(self) -> None:
        self._board_view.move_made.connect(self._on_move_made)
        self._btn_theme.clicked.connect(self.toggle_theme)

    def retranslate_ui(self) -> None:
        self._btn_theme.setText("Light Mode" if self._settings.dark_mode else "Dark Mode")

    # ── Settings ─────────────────────────────────────────────────────────

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def _apply_settings(self) -> None:
        apply_settings(self)

    def toggle_theme(self) -> None:
        """Flip between the dark and light window chrome."""
        self._settings.dark_mode = not self._settings.dark_mode
        self._apply_settings()

    # ── Game events ──────────────────────────────────────────────────────

    def _on_move_made(self, _record: MoveRecord) -> None:
        self._refresh_panels()

    def _refresh_panels(self) -> None:
        status = self._controller.status()
        self._move_panel.set_history(self._controller.history)
        self._status_label.setText(status_text(status))
        self._sync_board_interactivity(status)

    def _sync_board_interactivity(self, status: GameStatus) -> None:
        scene = self._board_view.board_scene
        if status.is_game_over:
            self._controller.clear_selection()
            scene.set_interactive(False)
            return
        scene.set_interactive(True)

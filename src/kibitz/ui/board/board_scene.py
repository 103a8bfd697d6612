"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QApplication,
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from kibitz.core.enums import Color
from kibitz.core.types import (
    FILES,
    Square,
    from_square,
    is_light_square,
    iter_squares,
    to_square,
)
from kibitz.game.selection import Gesture, TransitionKind
from kibitz.ui.board.piece_item import PieceItem
from kibitz.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from kibitz.game.controller import BoardController
    from kibitz.game.state import MoveRecord


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    Mouse input is translated into :class:`Gesture` tags and handed to the
    :class:`BoardController`; the scene never decides legality itself.

    Signals:
        move_made(MoveRecord): Emitted after the controller commits a move.
    """

    move_made = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(
        self,
        controller: BoardController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._controller: BoardController | None = None
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        # Pointer state
        self._press_square: Square | None = None
        self._press_pos: QPointF | None = None
        self._dragging_item: PieceItem | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._highlight_items: list[QGraphicsItem] = []
        self._legal_dot_items: dict[Square, QGraphicsEllipseItem] = {}
        self._capture_ring_items: dict[Square, QGraphicsEllipseItem] = {}

        self._draw_board()
        if controller is not None:
            self.set_controller(controller)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> BoardController | None:
        return self._controller

    def set_controller(self, controller: BoardController) -> None:
        """Attach the game whose state this scene renders."""
        if self._controller is not None:
            self._controller.events.on_changed.remove(self.sync)
            self._controller.events.on_move.remove(self._on_move)
        self._controller = controller
        controller.events.on_changed.append(self.sync)
        controller.events.on_move.append(self._on_move)
        self._reset_pointer()
        self.sync()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.sync()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move highlights."""
        self._show_legal_moves = visible
        self._sync_highlights()

    def sync(self) -> None:
        """Redraw pieces and highlights from the controller's current state."""
        self._sync_pieces()
        self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and the edge coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))
        font.setBold(True)

        for row, col, sq in iter_squares():
            light = is_light_square(row, col)
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(
                QBrush(self._theme.light_square if light else self._theme.dark_square)
            )
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            coord_color = self._theme.coord_dark if light else self._theme.coord_light

            # Rank numbers (left edge)
            if col == 0:
                txt = self._make_coord(str(8 - row), font, coord_color)
                txt.setPos(col * t + 2, row * t + 1)

            # File letters (bottom edge)
            if row == 7:
                txt = self._make_coord(FILES[col], font, coord_color)
                txt.setPos(col * t + t - 12, row * t + t - 16)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _make_coord(
        self, label: str, font: QFont, color: QColor
    ) -> QGraphicsSimpleTextItem:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)
        return txt

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the controller's grid."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()
        self._dragging_item = None

        if self._controller is None:
            return

        grid = self._controller.grid
        for row, col, sq in iter_squares():
            piece = grid[row][col]
            if piece is None:
                continue
            fill = (
                self._theme.piece_white
                if piece.color == Color.WHITE
                else self._theme.piece_black
            )
            outline = (
                self._theme.piece_black
                if piece.color == Color.WHITE
                else self._theme.piece_white
            )
            item = PieceItem(piece, sq, self.TILE, fill, outline)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Highlights ───────────────────────────────────────────────────────

    def _sync_highlights(self) -> None:
        self._clear_highlights()
        ctrl = self._controller
        if ctrl is None:
            return

        if ctrl.last_move is not None:
            for sq in ctrl.last_move:
                self._highlight_items.append(
                    self._make_highlight(sq, self._theme.last_move, 0.5)
                )

        status = ctrl.status()
        if status.checked_king is not None:
            self._highlight_items.append(
                self._make_highlight(
                    status.checked_king, self._theme.highlight_check, 0.6
                )
            )

        origin = ctrl.armed_origin
        if origin is None:
            return
        self._highlight_items.append(
            self._make_highlight(origin, self._theme.highlight_from, 0.8)
        )

        if not self._show_legal_moves:
            return
        for sq in sorted(ctrl.legal_set):
            row, col = from_square(sq)
            if ctrl.grid[row][col] is None:
                self._legal_dot_items[sq] = self._make_dot(sq)
            else:
                self._capture_ring_items[sq] = self._make_ring(sq)

    def _clear_highlights(self) -> None:
        for item in self._highlight_items:
            self.removeItem(item)
        self._highlight_items.clear()
        for dot in self._legal_dot_items.values():
            self.removeItem(dot)
        self._legal_dot_items.clear()
        for ring in self._capture_ring_items.values():
            self.removeItem(ring)
        self._capture_ring_items.clear()

    def _make_highlight(self, sq: Square, color: QColor, z: float) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        row, col = from_square(sq)
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(z)
        self.addItem(rect)
        return rect

    def _make_dot(self, sq: Square) -> QGraphicsEllipseItem:
        t = self.TILE
        row, col = from_square(sq)
        d = t * 0.3
        dot = QGraphicsEllipseItem(col * t + (t - d) / 2, row * t + (t - d) / 2, d, d)
        dot.setBrush(QBrush(self._theme.highlight_to))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(0.9)
        self.addItem(dot)
        return dot

    def _make_ring(self, sq: Square) -> QGraphicsEllipseItem:
        t = self.TILE
        row, col = from_square(sq)
        width = t * 0.08
        ring = QGraphicsEllipseItem(
            col * t + width / 2, row * t + width / 2, t - width, t - width
        )
        ring.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        ring.setPen(QPen(self._theme.highlight_capture, width))
        ring.setZValue(0.9)
        self.addItem(ring)
        return ring

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if (
            not self._interactive
            or self._controller is None
            or event is None
            or event.button() != Qt.MouseButton.LeftButton
        ):
            return super().mousePressEvent(event)
        self._on_press(event.scenePos())
        event.accept()

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if (
            event is not None
            and self._press_square is not None
            and event.buttons() & Qt.MouseButton.LeftButton
        ):
            self._on_drag_move(event.scenePos())
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None and self._press_square is not None:
            self._on_release(event.scenePos())
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def _on_press(self, pos: QPointF) -> None:
        assert self._controller is not None
        self._reset_pointer()
        sq = self._pos_to_square(pos)
        transition = self._controller.handle_gesture(Gesture.PRESS, sq)
        if sq is None or transition.kind in (
            TransitionKind.COMMITTED,
            TransitionKind.REJECTED,
        ):
            return
        # Any piece may be picked up; the controller decides whether it arms.
        if sq in self._piece_items:
            self._press_square = sq
            self._press_pos = pos

    def _on_drag_move(self, pos: QPointF) -> None:
        assert self._controller is not None
        if self._dragging_item is None:
            if self._press_pos is None or not self._beyond_drag_distance(pos):
                return
            sq = self._press_square
            self._controller.handle_gesture(Gesture.DRAG_START, sq)
            item = self._piece_items.get(sq) if sq is not None else None
            if item is None or self._controller.armed_origin != sq:
                self._reset_pointer()
                return
            item.start_drag()
            self._dragging_item = item
        self._dragging_item.follow(pos)

    def _on_release(self, pos: QPointF) -> None:
        assert self._controller is not None
        item = self._dragging_item
        self._reset_pointer()
        if item is None:
            # Plain click: the press already armed (or cleared) the piece.
            return
        transition = self._controller.handle_gesture(
            Gesture.DROP, self._pos_to_square(pos)
        )
        if transition.kind == TransitionKind.NONE:
            item.cancel_drag()

    def _reset_pointer(self) -> None:
        self._press_square = None
        self._press_pos = None
        self._dragging_item = None

    def _beyond_drag_distance(self, pos: QPointF) -> bool:
        assert self._press_pos is not None
        delta = pos - self._press_pos
        return delta.manhattanLength() >= QApplication.startDragDistance()

    def _on_move(self, record: MoveRecord, _snapshot: str) -> None:
        self.move_made.emit(record)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square (None off the board)."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return to_square(row, col)

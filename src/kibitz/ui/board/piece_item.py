"""PieceItem — chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from kibitz.core.piece import Piece
from kibitz.core.types import Square, from_square


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board.

    Stores its logical *square*; the scene moves it while it is dragged.
    """

    GLYPH_FONT = "DejaVu Sans"
    _GLYPH_RATIO = 0.78

    def __init__(
        self,
        piece: Piece,
        square: Square,
        tile_size: int,
        fill: QColor,
        outline: QColor,
    ) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.square = square
        self._tile_size = tile_size
        self._drag_origin: QPointF | None = None

        font = QFont(self.GLYPH_FONT)
        font.setPixelSize(max(int(tile_size * self._GLYPH_RATIO), 1))
        self.setFont(font)
        self.setBrush(QBrush(fill))
        self.setPen(QPen(outline, 1.0))
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)
        self.snap_to_square()

    def top_left_for(self, square: Square) -> QPointF:
        """Scene position that centres the glyph on *square*."""
        row, col = from_square(square)
        t = self._tile_size
        rect = self.boundingRect()
        return QPointF(
            col * t + (t - rect.width()) / 2,
            row * t + (t - rect.height()) / 2,
        )

    def snap_to_square(self) -> None:
        self.setPos(self.top_left_for(self.square))

    def start_drag(self) -> None:
        """Called at the beginning of a drag gesture."""
        self._drag_origin = self.pos()
        self.setZValue(10)  # bring to front
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))
        self.setOpacity(0.85)

    def follow(self, scene_pos: QPointF) -> None:
        """Keep the glyph centred under the cursor while dragging."""
        rect = self.boundingRect()
        self.setPos(scene_pos.x() - rect.width() / 2, scene_pos.y() - rect.height() / 2)

    def cancel_drag(self) -> None:
        """Snap back to original position."""
        if self._drag_origin is not None:
            self.setPos(self._drag_origin)
        self._drag_origin = None
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setOpacity(1.0)

    @property
    def is_dragging(self) -> bool:
        return self._drag_origin is not None

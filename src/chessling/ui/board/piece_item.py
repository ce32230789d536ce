"""PieceItem — draggable chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from chessling.core.enums import Color
from chessling.core.piece import Piece
from chessling.core.types import Square

_GLYPH_RATIO = 0.78


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board, drawn from its Unicode symbol.

    Stores its logical *square* and supports drag & drop.
    """

    def __init__(self, piece: Piece, square: Square, tile_size: int) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.square = square
        self._drag_origin: QPointF | None = None

        font = QFont()
        font.setPixelSize(int(tile_size * _GLYPH_RATIO))
        self.setFont(font)
        if piece.color == Color.WHITE:
            self.setBrush(QBrush(QColor(255, 255, 255)))
            self.setPen(QPen(QColor(40, 40, 40), 1.2))
        else:
            self.setBrush(QBrush(QColor(20, 20, 20)))

        bounds = self.boundingRect()
        self._offset = QPointF(
            (tile_size - bounds.width()) / 2, (tile_size - bounds.height()) / 2
        )

        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    @property
    def offset(self) -> QPointF:
        """Offset that centres the glyph inside its tile."""
        return self._offset

    def enable_drag(self, enabled: bool) -> None:
        """Allow / disallow dragging."""
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, enabled)
        if enabled:
            self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        else:
            self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))

    def start_drag(self) -> None:
        """Called at the beginning of a drag gesture."""
        self._drag_origin = self.pos()
        self.setZValue(10)  # bring to front
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))
        self.setOpacity(0.85)

    def cancel_drag(self) -> None:
        """Snap back to original position."""
        if self._drag_origin is not None:
            self.setPos(self._drag_origin)
        self._finish_drag()

    def finish_drag(self) -> None:
        """Cleanup after a successful drop."""
        self._finish_drag()

    def _finish_drag(self) -> None:
        self._drag_origin = None
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setOpacity(1.0)

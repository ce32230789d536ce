"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QAbstractGraphicsShapeItem,
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessling.core.move import Move
from chessling.core.types import Square
from chessling.game.state import GameState
from chessling.ui.board.piece_item import PieceItem
from chessling.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    All rules questions are answered by the :class:`GameState`; the scene only
    maps mouse positions to squares and draws what the state reports.

    Signals:
        move_made(Move): Emitted after a user move has been committed.
    """

    move_made = pyqtSignal(Move)

    TILE = 80  # px per square

    _DOT_RADIUS = 10
    _RING_WIDTH = 4

    def __init__(self, state: GameState, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._state = state
        self._theme = BoardTheme.default()
        self._flipped = False

        # Interaction state
        self._dragging_item: PieceItem | None = None
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._highlight_items: list[QGraphicsRectItem] = []
        self._status_items: list[QGraphicsRectItem] = []
        self._legal_marker_items: list[QAbstractGraphicsShapeItem] = []
        self._piece_items: dict[Square, PieceItem] = {}

        self._draw_board()
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    def refresh(self) -> None:
        """Redraw pieces and every highlight from the game state."""
        self._sync_pieces()
        self._draw_status_highlights()
        self._draw_selection()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive
        if not interactive:
            self._state.clear_selection()
            self._draw_selection()

    def is_interactive(self) -> bool:
        return self._interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self.refresh()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move markers."""
        self._show_legal_moves = visible
        self._draw_selection()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont()
        font.setPixelSize(max(9, t // 7))

        for row in range(8):
            for col in range(8):
                x, y = self._square_origin((row, col))
                is_light = (row + col) % 2 == 1
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(x, y, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[(row, col)] = rect

                coord_color = self._theme.coord_dark if is_light else self._theme.coord_light
                if col == (7 if self._flipped else 0):
                    self._add_coord(str(row + 1), font, coord_color, x + 2, y + 1)
                if row == (7 if self._flipped else 0):
                    letter = chr(ord("a") + col)
                    self._add_coord(letter, font, coord_color, x + t - 12, y + t - 16)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current position."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()
        self._dragging_item = None

        for sq, piece in self._state.position.board.squares():
            if piece is None:
                continue
            item = PieceItem(piece, sq, self.TILE)
            self._place_item(item, sq)
            self.addItem(item)
            self._piece_items[sq] = item

    def _place_item(self, item: PieceItem, sq: Square) -> None:
        x, y = self._square_origin(sq)
        item.setPos(x + item.offset.x(), y + item.offset.y())

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._state.clear_selection()
            self._draw_selection()
            return super().mousePressEvent(event)

        # Clicking a legal target → make the move
        if self._state.selected is not None and sq in self._state.targets():
            self._commit(sq)
            return

        self._state.select(*sq)
        self._draw_selection()
        if self._state.selected == sq and sq in self._piece_items:
            item = self._piece_items[sq]
            item.enable_drag(True)
            item.start_drag()
            self._dragging_item = item
            _LOGGER.debug("Dragging piece from %s", sq)

        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._dragging_item is not None and event is not None:
            item = self._dragging_item
            drop_sq = self._pos_to_square(event.scenePos())

            if (
                drop_sq is not None
                and drop_sq != item.square
                and drop_sq in self._state.targets()
            ):
                item.finish_drag()
                item.enable_drag(False)
                self._dragging_item = None
                self._commit(drop_sq)
                return

            # Invalid drop: snap back
            _LOGGER.debug("Drop on %s rejected", drop_sq)
            item.cancel_drag()
            item.enable_drag(False)
            self._dragging_item = None

        super().mouseReleaseEvent(event)

    def _commit(self, sq: Square) -> None:
        move = self._state.move_to(*sq)
        self.refresh()
        if move is not None:
            self.move_made.emit(move)

    # ── Selection / highlights ───────────────────────────────────────────

    def _draw_selection(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_marker_items)

        selected = self._state.selected
        if selected is None:
            return

        rect = self._make_highlight(selected, self._theme.highlight_from)
        self._highlight_items.append(rect)

        if not self._show_legal_moves:
            return
        board = self._state.position.board
        for target in self._state.targets():
            if board.is_empty(target):
                marker = self._make_dot(target)
            else:
                marker = self._make_ring(target)
            self._legal_marker_items.append(marker)

    def _draw_status_highlights(self) -> None:
        """Last-move squares and the checked king."""
        self._clear_items(self._status_items)

        last = self._state.last_move
        if last is not None:
            for sq in (last.from_sq, last.to_sq):
                rect = self._make_highlight(sq, self._theme.last_move)
                rect.setZValue(0.5)
                self._status_items.append(rect)

        king_sq = self._state.check_square()
        if king_sq is not None:
            rect = self._make_highlight(king_sq, self._theme.highlight_check)
            rect.setZValue(0.6)
            self._status_items.append(rect)

    def _clear_items(self, items: list[QGraphicsItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, row: int, col: int) -> tuple[int, int]:
        """Convert board row/col to visual column/row (row 7 at the top)."""
        if self._flipped:
            return 7 - col, row
        return col, 7 - row

    def _square_origin(self, sq: Square) -> tuple[float, float]:
        """Top-left scene position of *sq*."""
        vx, vy = self._visual_coords(*sq)
        return float(vx * self.TILE), float(vy * self.TILE)

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        vx = int(pos.x() // t)
        vy = int(pos.y() // t)
        if not (0 <= vx < 8 and 0 <= vy < 8):
            return None
        if self._flipped:
            return (vy, 7 - vx)
        return (7 - vy, vx)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        x, y = self._square_origin(sq)
        rect = QGraphicsRectItem(x, y, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _make_dot(self, sq: Square) -> QGraphicsEllipseItem:
        """Small filled circle marking a quiet move target."""
        x, y = self._square_origin(sq)
        r = self._DOT_RADIUS
        centre = self.TILE / 2
        dot = QGraphicsEllipseItem(x + centre - r, y + centre - r, 2 * r, 2 * r)
        dot.setBrush(QBrush(self._theme.highlight_to))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(1.5)
        self.addItem(dot)
        return dot

    def _make_ring(self, sq: Square) -> QGraphicsEllipseItem:
        """Hollow circle marking a capture target."""
        x, y = self._square_origin(sq)
        w = self._RING_WIDTH
        size = self.TILE - 2 * w
        ring = QGraphicsEllipseItem(x + w, y + w, size, size)
        ring.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        ring.setPen(QPen(self._theme.highlight_to, w))
        ring.setZValue(1.5)
        self.addItem(ring)
        return ring

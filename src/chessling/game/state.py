"""Game state — the application-side view of one game in progress."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessling.core.enums import Color
from chessling.core.move import Move
from chessling.core.piece import piece_color
from chessling.core.position import Position
from chessling.core.types import Square

_LOGGER = logging.getLogger(__name__)

_COLOR_NAMES: dict[Color, str] = {Color.WHITE: "White", Color.BLACK: "Black"}


@dataclass
class GameState:
    """Position plus the user's current selection.

    This is a pure data/logic class — no Qt, no rendering. The UI reads it to
    draw and feeds squares back through :meth:`select` and :meth:`move_to`.
    """

    position: Position = field(default_factory=Position)
    selected: Square | None = field(default=None, init=False)
    selected_moves: list[Move] = field(default_factory=list, init=False)
    last_move: Move | None = field(default=None, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def new_game(self) -> None:
        """Reset the position and forget any selection."""
        self.position.reset()
        self.clear_selection()
        self.last_move = None
        _LOGGER.info("New game started")

    # ── Selection / moves ────────────────────────────────────────────────

    def select(self, row: int, col: int) -> list[Move]:
        """Select the side-to-move piece on (row, col) and return its moves.

        Selecting an empty or opposing square (or any square once the game is
        over) clears the selection and returns an empty list.
        """
        pos = self.position
        if pos.game_over or piece_color(pos.board[(row, col)]) != pos.side_to_move:
            self.clear_selection()
            return []

        self.selected = (row, col)
        self.selected_moves = pos.legal_moves(row, col)
        _LOGGER.debug(
            "Selected %s with %d legal moves", self.selected, len(self.selected_moves)
        )
        return list(self.selected_moves)

    def clear_selection(self) -> None:
        self.selected = None
        self.selected_moves = []

    def move_to(self, row: int, col: int) -> Move | None:
        """Play the selected piece to (row, col) if that is one of its moves.

        Returns the committed move, or ``None`` when nothing was played. The
        selection is cleared either way.
        """
        if self.position.game_over:
            self.clear_selection()
            return None

        move = next(
            (m for m in self.selected_moves if m.to_sq == (row, col)),
            None,
        )
        self.clear_selection()
        if move is None:
            return None

        self.position.make_move(move)
        self.last_move = move
        return move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.position.game_over

    def targets(self) -> list[Square]:
        """Destination squares of the current selection."""
        return [m.to_sq for m in self.selected_moves]

    def check_square(self) -> Square | None:
        """King square of the side to move when it is in check."""
        pos = self.position
        if pos.game_over or not pos.is_in_check(pos.side_to_move):
            return None
        return pos.board.king_square(pos.side_to_move)

    def status_text(self) -> str:
        """Status line, e.g. ``"Black to move -- CHECK!"``."""
        pos = self.position
        if pos.game_over:
            return pos.result_text
        text = f"{_COLOR_NAMES[pos.side_to_move]} to move"
        if pos.is_in_check(pos.side_to_move):
            text += " -- CHECK!"
        return text

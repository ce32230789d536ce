"""Position — complete game state (board + metadata) with move application."""

from __future__ import annotations

import logging

from chessling.core.board import Board
from chessling.core.enums import CastlingRights, Color, GameResult, PieceType
from chessling.core.move import Move
from chessling.core.move_generator import MoveGenerator
from chessling.core.piece import Piece
from chessling.core.rules import Rules
from chessling.core.types import Square

_LOGGER = logging.getLogger(__name__)

# Rook home squares and the right each one guards.
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    (0, 0): CastlingRights.WHITE_QUEENSIDE,
    (0, 7): CastlingRights.WHITE_KINGSIDE,
    (7, 0): CastlingRights.BLACK_QUEENSIDE,
    (7, 7): CastlingRights.BLACK_KINGSIDE,
}

_KING_RIGHTS: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_BOTH,
    Color.BLACK: CastlingRights.BLACK_BOTH,
}

_PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}


class Position:
    """Full chess position: board, side to move, castling, en passant, result.

    The position is mutated only through :meth:`make_move` (and
    :meth:`reset`). Moves handed to :meth:`make_move` must come from a list
    just returned by :meth:`legal_moves` or :meth:`all_legal_moves`; they are
    not re-validated.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant_file",
        "game_over",
        "result",
        "result_text",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant_file: int | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant_file = en_passant_file
        self.game_over = False
        self.result = GameResult.IN_PROGRESS
        self.result_text = ""

    def reset(self) -> None:
        """Reinitialise in place to the standard starting position."""
        self.board.setup_initial()
        self.side_to_move = Color.WHITE
        self.castling = CastlingRights.ALL
        self.en_passant_file = None
        self.game_over = False
        self.result = GameResult.IN_PROGRESS
        self.result_text = ""

    # ── Core move operations ─────────────────────────────────────────────

    def apply_move_raw(self, move: Move) -> None:
        """Relocate pieces for *move* without any bookkeeping.

        Handles the en-passant pawn removal, the castling rook slide and
        automatic promotion to a queen.
        """
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        if (
            piece.piece_type == PieceType.PAWN
            and move.from_col != move.to_col
            and board.is_empty(move.to_sq)
        ):
            board[(move.from_row, move.to_col)] = None

        if piece.piece_type == PieceType.KING and abs(move.to_col - move.from_col) == 2:
            row = move.from_row
            if move.to_col == 6:
                rook_from, rook_to = (row, 7), (row, 5)
            else:
                rook_from, rook_to = (row, 0), (row, 3)
            board[rook_to] = board[rook_from]
            board[rook_from] = None

        board[move.to_sq] = piece
        board[move.from_sq] = None

        if (
            piece.piece_type == PieceType.PAWN
            and move.to_row == _PROMOTION_ROW[piece.color]
        ):
            board[move.to_sq] = Piece(piece.color, PieceType.QUEEN)

    def make_move(self, move: Move) -> None:
        """Commit *move*: update en passant, castling, side and game end."""
        piece = self.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")
        mover = self.side_to_move

        self.apply_move_raw(move)

        self.en_passant_file = None
        if piece.piece_type == PieceType.PAWN and abs(move.to_row - move.from_row) == 2:
            self.en_passant_file = move.from_col

        self._update_castling(move, piece)
        self.side_to_move = mover.opposite
        _LOGGER.debug("%s played %s", mover, move)

        result = Rules.game_result(self)
        if result != GameResult.IN_PROGRESS:
            self.game_over = True
            self.result = result
            self.result_text = Rules.result_text(result)
            _LOGGER.info("Game over: %s", self.result_text)

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def _update_castling(self, move: Move, piece: Piece) -> None:
        if piece.piece_type == PieceType.KING:
            self.castling &= ~_KING_RIGHTS[piece.color]

        if piece.piece_type == PieceType.ROOK and move.from_sq in _ROOK_CORNERS:
            self.castling &= ~_ROOK_CORNERS[move.from_sq]

        # Rights belong to the square: anything landing there revokes them.
        if move.to_sq in _ROOK_CORNERS:
            self.castling &= ~_ROOK_CORNERS[move.to_sq]

    @property
    def white_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_KINGSIDE)

    @property
    def white_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_QUEENSIDE)

    @property
    def black_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_KINGSIDE)

    @property
    def black_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_QUEENSIDE)

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self, row: int, col: int) -> list[Move]:
        """Legal moves for the piece on (row, col); empty if none or off-board."""
        return MoveGenerator(self).generate_legal_moves(row, col)

    def all_legal_moves(self) -> list[Move]:
        return MoveGenerator(self).generate_all_legal_moves()

    def is_in_check(self, color: Color) -> bool:
        return MoveGenerator(self).is_in_check(color)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy of the full state."""
        pos = Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant_file=self.en_passant_file,
        )
        pos.game_over = self.game_over
        pos.result = self.result
        pos.result_text = self.result_text
        return pos

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"

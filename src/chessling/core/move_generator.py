"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from chessling.core.enums import CastlingRights, Color, PieceType
from chessling.core.move import Move
from chessling.core.piece import Piece
from chessling.core.types import Square, in_bounds

if TYPE_CHECKING:
    from chessling.core.position import Position


# Offsets are (d_row, d_col).
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# Pawn geometry per color: (forward step, home row, en-passant capture row).
_PAWN_GEOMETRY: dict[Color, tuple[int, int, int]] = {
    Color.WHITE: (1, 1, 4),
    Color.BLACK: (-1, 6, 3),
}


class _CastleSide(NamedTuple):
    right: CastlingRights
    rook_col: int
    king_to_col: int
    transit_col: int
    between_cols: tuple[int, ...]


_CASTLE_SIDES: dict[Color, tuple[_CastleSide, ...]] = {
    Color.WHITE: (
        _CastleSide(CastlingRights.WHITE_KINGSIDE, 7, 6, 5, (5, 6)),
        _CastleSide(CastlingRights.WHITE_QUEENSIDE, 0, 2, 3, (1, 2, 3)),
    ),
    Color.BLACK: (
        _CastleSide(CastlingRights.BLACK_KINGSIDE, 7, 6, 5, (5, 6)),
        _CastleSide(CastlingRights.BLACK_QUEENSIDE, 0, 2, 3, (1, 2, 3)),
    ),
}

_HOME_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}
_KING_HOME_COL = 4


class MoveGenerator:
    """Generates moves for the piece on a square of a :class:`Position`.

    Legality is decided by playing each candidate on a scratch copy of the
    full position and testing whether the mover's king is attacked there, so
    en-passant removals and castling rook slides are part of the test.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, row: int, col: int) -> list[Move]:
        """Strictly legal moves for the piece on (row, col)."""
        piece = self._board[(row, col)]
        if piece is None:
            return []

        legal: list[Move] = []
        for move in self.generate_pseudo_legal_moves(row, col):
            scratch = self._pos.copy()
            scratch.apply_move_raw(move)
            if not MoveGenerator(scratch).is_in_check(piece.color):
                legal.append(move)
        return legal

    def generate_all_legal_moves(self) -> list[Move]:
        """Legal moves of every piece belonging to the side to move."""
        moves: list[Move] = []
        for row, col in self._board.pieces(self._pos.side_to_move):
            moves.extend(self.generate_legal_moves(row, col))
        return moves

    def generate_pseudo_legal_moves(self, row: int, col: int) -> list[Move]:
        """Moves obeying piece movement rules (may leave own king in check)."""
        piece = self._board[(row, col)]
        if piece is None:
            return []

        moves: list[Move] = []
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            self._gen_pawn(row, col, piece.color, moves)
        elif pt == PieceType.KNIGHT:
            self._gen_steps(row, col, piece.color, KNIGHT_OFFSETS, moves)
        elif pt == PieceType.KING:
            self._gen_steps(row, col, piece.color, KING_OFFSETS, moves)
            self._gen_castling(row, col, piece.color, moves)
        else:
            self._gen_sliding(row, col, piece.color, _SLIDER_DIRS[pt], moves)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        row, col = self._board.king_square(color)
        return self.is_square_attacked(row, col, color.opposite)

    def is_square_attacked(self, row: int, col: int, by_color: Color) -> bool:
        """Could any *by_color* piece capture on (row, col) next move?

        Ignores whose turn it is and whether the capture would expose the
        attacker's own king.
        """
        board = self._board

        knight = Piece(by_color, PieceType.KNIGHT)
        for dr, dc in KNIGHT_OFFSETS:
            if board[(row + dr, col + dc)] == knight:
                return True

        # White pawns attack upward, so they sit one row below the target.
        pawn = Piece(by_color, PieceType.PAWN)
        pawn_row = row - 1 if by_color == Color.WHITE else row + 1
        for dc in (-1, 1):
            if board[(pawn_row, col + dc)] == pawn:
                return True

        king = Piece(by_color, PieceType.KING)
        for dr, dc in KING_OFFSETS:
            if board[(row + dr, col + dc)] == king:
                return True

        queen = Piece(by_color, PieceType.QUEEN)
        if self._ray_hits(row, col, ROOK_DIRS, (Piece(by_color, PieceType.ROOK), queen)):
            return True
        return self._ray_hits(
            row, col, BISHOP_DIRS, (Piece(by_color, PieceType.BISHOP), queen)
        )

    # -- Piece-specific generators (private) -------------------------------

    def _ray_hits(
        self,
        row: int,
        col: int,
        dirs: tuple[tuple[int, int], ...],
        attackers: tuple[Piece, ...],
    ) -> bool:
        board = self._board
        for dr, dc in dirs:
            r, c = row + dr, col + dc
            while in_bounds(r, c):
                piece = board[(r, c)]
                if piece is not None:
                    if piece in attackers:
                        return True
                    break
                r += dr
                c += dc
        return False

    def _gen_pawn(self, row: int, col: int, color: Color, moves: list[Move]) -> None:
        board = self._board
        step, home_row, ep_row = _PAWN_GEOMETRY[color]
        ahead = row + step

        if in_bounds(ahead, col) and board.is_empty((ahead, col)):
            moves.append(Move(row, col, ahead, col))
            if row == home_row and board.is_empty((ahead + step, col)):
                moves.append(Move(row, col, ahead + step, col))

        for to_col in (col - 1, col + 1):
            if not in_bounds(ahead, to_col):
                continue
            target = board[(ahead, to_col)]
            if target is not None:
                if target.color != color:
                    moves.append(Move(row, col, ahead, to_col))
            elif row == ep_row and to_col == self._pos.en_passant_file:
                moves.append(Move(row, col, ahead, to_col))

    def _gen_steps(
        self,
        row: int,
        col: int,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for dr, dc in offsets:
            r, c = row + dr, col + dc
            if not in_bounds(r, c):
                continue
            target = board[(r, c)]
            if target is None or target.color != color:
                moves.append(Move(row, col, r, c))

    def _gen_sliding(
        self,
        row: int,
        col: int,
        color: Color,
        dirs: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for dr, dc in dirs:
            r, c = row + dr, col + dc
            while in_bounds(r, c):
                target = board[(r, c)]
                if target is None:
                    moves.append(Move(row, col, r, c))
                elif target.color != color:
                    moves.append(Move(row, col, r, c))
                    break
                else:
                    break
                r += dr
                c += dc

    def _gen_castling(self, row: int, col: int, color: Color, moves: list[Move]) -> None:
        home = _HOME_ROW[color]
        if row != home or col != _KING_HOME_COL:
            return
        if self.is_in_check(color):
            return

        board = self._board
        opponent = color.opposite
        rook = Piece(color, PieceType.ROOK)
        for side in _CASTLE_SIDES[color]:
            if not self._pos.castling & side.right:
                continue
            if board[(home, side.rook_col)] != rook:
                continue
            if any(not board.is_empty((home, c)) for c in side.between_cols):
                continue
            if self.is_square_attacked(home, side.transit_col, opponent):
                continue
            if self.is_square_attacked(home, side.king_to_col, opponent):
                continue
            moves.append(Move(row, col, home, side.king_to_col))

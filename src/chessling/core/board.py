"""Board - piece placement on a dense 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessling.core.enums import Color, PieceType
from chessling.core.piece import Piece
from chessling.core.types import Square, in_bounds

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square grid indexed by ``(row, col)``.

    Reads outside the board return ``None`` so callers can probe neighbouring
    squares without guarding every lookup.
    """

    __slots__ = ("_rows",)

    def __init__(self) -> None:
        self._rows: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        if not in_bounds(row, col):
            return None
        return self._rows[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        if not in_bounds(row, col):
            raise IndexError(f"Square out of bounds: {sq!r}")
        self._rows[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def squares(self) -> Iterator[tuple[Square, Piece | None]]:
        """Iterate over every square, row 0 first."""
        for row in range(8):
            for col in range(8):
                yield (row, col), self._rows[row][col]

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [
            sq for sq, piece in self.squares() if piece is not None and piece.color == color
        ]

    def king_square(self, color: Color) -> Square:
        """Locate *color*'s king by linear scan."""
        king = Piece(color, PieceType.KING)
        for sq, piece in self.squares():
            if piece == king:
                return sq
        raise ValueError(f"No {color.name} king on board")

    def rows(self) -> list[list[Piece | None]]:
        """Snapshot of the grid as nested lists (row 0 first)."""
        return [row.copy() for row in self._rows]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._rows = [row.copy() for row in self._rows]
        return b

    def clear(self) -> None:
        self._rows = [[None] * 8 for _ in range(8)]

    def setup_initial(self) -> None:
        """Place the standard starting position in place."""
        self.clear()
        for col, pt in enumerate(_BACK_RANK):
            self._rows[0][col] = Piece(Color.WHITE, pt)
            self._rows[1][col] = Piece(Color.WHITE, PieceType.PAWN)
            self._rows[6][col] = Piece(Color.BLACK, PieceType.PAWN)
            self._rows[7][col] = Piece(Color.BLACK, pt)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.setup_initial()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        lines: list[str] = []
        for row in range(7, -1, -1):
            cells = [str(p) if p else "." for p in self._rows[row]]
            lines.append(f"{row + 1} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)


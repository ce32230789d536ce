"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessling.core import Position

    pos = Position()
    for move in pos.legal_moves(1, 4):
        print(move)
    pos.make_move(pos.legal_moves(1, 4)[-1])
"""

from chessling.core.board import Board
from chessling.core.enums import CastlingRights, Color, GameResult, PieceType
from chessling.core.move import Move
from chessling.core.move_generator import MoveGenerator
from chessling.core.piece import Piece, piece_color
from chessling.core.position import Position
from chessling.core.rules import Rules
from chessling.core.types import Square, in_bounds, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "in_bounds",
    "parse_square",
    "piece_color",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
]

"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessling.core.enums import Color, GameResult
from chessling.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessling.core.position import Position

_RESULT_TEXT: dict[GameResult, str] = {
    GameResult.IN_PROGRESS: "",
    GameResult.WHITE_WINS: "White wins by checkmate",
    GameResult.BLACK_WINS: "Black wins by checkmate",
    GameResult.DRAW: "Stalemate — draw",
}


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Repetition and fifty-move draws are not tracked; the only terminal
    states are checkmate and stalemate.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        gen = MoveGenerator(position)
        return len(gen.generate_all_legal_moves()) == 0

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        gen = MoveGenerator(position)
        return len(gen.generate_all_legal_moves()) == 0

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the result for the side to move."""
        gen = MoveGenerator(position)
        if gen.generate_all_legal_moves():
            return GameResult.IN_PROGRESS

        if gen.is_in_check(position.side_to_move):
            return (
                GameResult.BLACK_WINS
                if position.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate

    @staticmethod
    def result_text(result: GameResult) -> str:
        """Human-readable description of *result*."""
        return _RESULT_TEXT[result]

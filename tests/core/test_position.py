"""Tests for Position: move application, bookkeeping and reset."""

import random

import pytest

from chessling.core.board import Board
from chessling.core.enums import CastlingRights, Color, GameResult, PieceType
from chessling.core.move import Move
from chessling.core.piece import Piece
from chessling.core.position import Position
from chessling.core.types import parse_square


def _at(pos: Position, name: str) -> Piece | None:
    return pos.board[parse_square(name)]


class TestMakeMove:
    def test_side_switches(self, play) -> None:
        pos = play(Position(), "e2e4")
        assert pos.side_to_move == Color.BLACK
        assert _at(pos, "e4") == Piece(Color.WHITE, PieceType.PAWN)
        assert _at(pos, "e2") is None

    def test_double_step_sets_en_passant_file(self, play) -> None:
        pos = play(Position(), "e2e4")
        assert pos.en_passant_file == 4

    def test_single_step_clears_en_passant_file(self, play) -> None:
        pos = play(Position(), "e2e4", "d7d6")
        assert pos.en_passant_file is None

    def test_new_double_step_replaces_file(self, play) -> None:
        pos = play(Position(), "e2e4", "d7d5")
        assert pos.en_passant_file == 3

    def test_raw_apply_skips_bookkeeping(self) -> None:
        pos = Position()
        pos.apply_move_raw(Move.parse("e2e4"))
        assert _at(pos, "e4") == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.side_to_move == Color.WHITE
        assert pos.en_passant_file is None

    def test_raw_apply_from_empty_square_raises(self) -> None:
        with pytest.raises(ValueError):
            Position().apply_move_raw(Move.parse("e4e5"))

    def test_copy_is_independent(self, play) -> None:
        pos = Position()
        clone = pos.copy()
        play(clone, "g1f3")
        assert _at(pos, "g1") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert pos.side_to_move == Color.WHITE
        assert clone.side_to_move == Color.BLACK


class TestEnPassant:
    _PLACEMENTS = {"e1": "K", "e8": "k", "e5": "P", "d7": "p", "a7": "p"}

    def test_capture_offered_and_removes_pawn(self, make_position, play) -> None:
        pos = make_position(self._PLACEMENTS, side_to_move=Color.BLACK)
        play(pos, "d7d5")
        assert Move.parse("e5d6") in pos.legal_moves(4, 4)
        play(pos, "e5d6")
        assert _at(pos, "d6") == Piece(Color.WHITE, PieceType.PAWN)
        assert _at(pos, "d5") is None
        assert _at(pos, "e5") is None

    def test_offer_expires_after_one_ply(self, make_position, play) -> None:
        placements = dict(self._PLACEMENTS, h2="P")
        pos = make_position(placements, side_to_move=Color.BLACK)
        play(pos, "d7d5", "h2h3", "a7a6")
        assert Move.parse("e5d6") not in pos.legal_moves(4, 4)

    def test_black_captures_white_double_step(self, make_position, play) -> None:
        pos = make_position({"e1": "K", "e8": "k", "d4": "p", "e2": "P"})
        play(pos, "e2e4")
        offered = [m for m in pos.legal_moves(3, 3) if m.to_sq == (2, 4)]
        assert offered == [Move.parse("d4e3")]
        play(pos, "d4e3")
        assert _at(pos, "e4") is None
        assert _at(pos, "e3") == Piece(Color.BLACK, PieceType.PAWN)

    def test_ordinary_capture_of_double_stepped_pawn(self, make_position, play) -> None:
        pos = make_position(
            {"e1": "K", "e8": "k", "e4": "P", "d7": "p"}, side_to_move=Color.BLACK
        )
        play(pos, "d7d5")
        targets = {m.to_sq for m in pos.legal_moves(3, 4)}
        assert targets == {(4, 4), (4, 3)}  # push and ordinary capture


class TestCastlingApplication:
    def _position(self, make_position) -> Position:
        return make_position(
            {"e1": "K", "a1": "R", "h1": "R", "e8": "k", "a8": "r", "h8": "r"},
            castling=CastlingRights.ALL,
        )

    def test_kingside_moves_rook(self, make_position, play) -> None:
        pos = play(self._position(make_position), "e1g1")
        assert _at(pos, "g1") == Piece(Color.WHITE, PieceType.KING)
        assert _at(pos, "f1") == Piece(Color.WHITE, PieceType.ROOK)
        assert _at(pos, "h1") is None
        assert pos.castling == CastlingRights.BLACK_BOTH

    def test_queenside_moves_rook(self, make_position, play) -> None:
        pos = play(self._position(make_position), "e1c1")
        assert _at(pos, "c1") == Piece(Color.WHITE, PieceType.KING)
        assert _at(pos, "d1") == Piece(Color.WHITE, PieceType.ROOK)
        assert _at(pos, "a1") is None

    def test_black_kingside(self, make_position, play) -> None:
        pos = play(self._position(make_position), "a1b1", "e8g8")
        assert _at(pos, "f8") == Piece(Color.BLACK, PieceType.ROOK)
        assert not pos.black_kingside and not pos.black_queenside

    def test_rook_move_clears_one_side(self, make_position, play) -> None:
        pos = play(self._position(make_position), "h1h2")
        assert not pos.white_kingside
        assert pos.white_queenside

    def test_king_move_clears_both(self, make_position, play) -> None:
        pos = play(self._position(make_position), "e1e2")
        assert not pos.white_kingside and not pos.white_queenside
        assert pos.black_kingside and pos.black_queenside

    def test_capture_on_rook_home_clears_right(self, make_position, play) -> None:
        pos = make_position(
            {"e1": "K", "h1": "R", "e8": "k", "a8": "r", "b7": "B"},
            side_to_move=Color.WHITE,
            castling=CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE,
        )
        play(pos, "b7a8")
        assert not pos.black_queenside
        assert pos.white_kingside

    def test_landing_on_empty_rook_home_clears_right(self, make_position, play) -> None:
        # The right is tied to the square, even if the rook is long gone.
        pos = make_position(
            {"e1": "K", "h1": "R", "e8": "k", "b7": "B"},
            castling=CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE,
        )
        play(pos, "b7a8")
        assert not pos.black_queenside

    def test_rights_never_come_back(self, make_position, play) -> None:
        pos = play(self._position(make_position), "h1h2", "h8h7", "h2h1", "h7h8")
        assert not pos.white_kingside
        assert not pos.black_kingside
        assert all(m.to_sq != (0, 6) for m in pos.legal_moves(0, 4))


class TestPromotion:
    def test_straight_advance_promotes_to_queen(self, make_position, play) -> None:
        pos = play(make_position({"e1": "K", "h8": "k", "b7": "P"}), "b7b8")
        assert _at(pos, "b8") == Piece(Color.WHITE, PieceType.QUEEN)

    def test_capture_promotes_to_queen(self, make_position, play) -> None:
        pos = play(make_position({"e1": "K", "h8": "k", "b7": "P", "c8": "n"}), "b7c8")
        assert _at(pos, "c8") == Piece(Color.WHITE, PieceType.QUEEN)

    def test_black_promotes(self, make_position, play) -> None:
        pos = make_position({"e1": "K", "h8": "k", "a2": "p"}, side_to_move=Color.BLACK)
        play(pos, "a2a1")
        assert _at(pos, "a1") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_single_move_per_promotion_square(self, make_position) -> None:
        pos = make_position({"e1": "K", "h8": "k", "b7": "P"})
        assert len(pos.legal_moves(6, 1)) == 1


class TestReset:
    def test_reset_restores_start(self, play) -> None:
        pos = play(Position(), "e2e4", "d7d5", "e4d5", "g8f6", "e1e2")
        pos.reset()
        assert pos.board == Board.initial()
        assert pos.castling == CastlingRights.ALL
        assert pos.en_passant_file is None
        assert pos.side_to_move == Color.WHITE
        assert not pos.game_over
        assert pos.result == GameResult.IN_PROGRESS
        assert pos.result_text == ""

    def test_reset_after_game_over(self, play) -> None:
        pos = play(Position(), "f2f3", "e7e5", "g2g4", "d8h4")
        assert pos.game_over
        board = pos.board
        pos.reset()
        assert pos.board is board  # reinitialised in place
        assert not pos.game_over
        assert len(pos.all_legal_moves()) == 20


class TestRandomGames:
    @pytest.mark.parametrize("seed", [1, 7, 42])
    def test_legal_moves_keep_invariants(self, seed: int) -> None:
        rng = random.Random(seed)
        pos = Position()
        rights = pos.castling
        for _ in range(120):
            if pos.game_over:
                break
            moves = pos.all_legal_moves()
            assert moves
            move = rng.choice(moves)
            mover = pos.side_to_move
            pos.make_move(move)

            assert not pos.is_in_check(mover)
            # Castling rights only ever shrink.
            assert pos.castling & ~rights == CastlingRights.NONE
            rights = pos.castling

            kings = [
                p for _, p in pos.board.squares() if p and p.piece_type == PieceType.KING
            ]
            assert sorted(k.color for k in kings) == [Color.WHITE, Color.BLACK]

"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from chessling.core.board import Board
from chessling.core.enums import CastlingRights, Color, PieceType
from chessling.core.move import Move
from chessling.core.piece import Piece
from chessling.core.position import Position
from chessling.core.types import parse_square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

_LETTERS: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "k": PieceType.KING,
    "q": PieceType.QUEEN,
}

PositionFactory = Callable[..., Position]
MovePlayer = Callable[..., Position]


def _piece(letter: str) -> Piece:
    color = Color.WHITE if letter.isupper() else Color.BLACK
    return Piece(color, _LETTERS[letter.lower()])


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture
def make_position() -> PositionFactory:
    """Build a position from ``{"e1": "K", "e8": "k", ...}`` placements."""

    def _make(
        placements: dict[str, str],
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant_file: int | None = None,
    ) -> Position:
        board = Board()
        for name, letter in placements.items():
            board[parse_square(name)] = _piece(letter)
        return Position(board, side_to_move, castling, en_passant_file)

    return _make


@pytest.fixture
def play() -> MovePlayer:
    """Play coordinate moves, asserting each one is offered as legal."""

    def _play(position: Position, *moves: str) -> Position:
        for text in moves:
            move = Move.parse(text)
            legal = position.legal_moves(move.from_row, move.from_col)
            assert move in legal, f"{text} is not legal here:\n{position!r}"
            position.make_move(move)
        return position

    return _play


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()

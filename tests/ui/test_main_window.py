"""Tests for MainWindow status handling, game over and menu actions."""

from __future__ import annotations

import pytest

from chessling.core.move import Move
from chessling.game.state import GameState
from chessling.ui.main_window import MainWindow
from chessling.ui.settings import AppSettings


def _play(window: MainWindow, *moves: str) -> None:
    scene = window.board_view.board_scene
    for text in moves:
        move = Move.parse(text)
        scene.state.select(move.from_row, move.from_col)
        scene._commit(move.to_sq)


@pytest.fixture
def shown_results(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    shown: list[str] = []
    monkeypatch.setattr(
        "chessling.ui.main_window.QMessageBox.information",
        lambda _parent, _title, text: shown.append(text),
    )
    return shown


def test_initial_status(qapp) -> None:
    window = MainWindow()
    assert window.status_text() == "White to move"


def test_status_follows_moves(qapp) -> None:
    window = MainWindow()
    _play(window, "e2e4", "d7d5", "f1b5")
    assert window.status_text() == "Black to move -- CHECK!"


def test_checkmate_reports_and_locks_board(qapp, shown_results: list[str]) -> None:
    window = MainWindow()
    _play(window, "f2f3", "e7e5", "g2g4", "d8h4")

    assert shown_results == ["Black wins by checkmate"]
    assert window.status_text() == "Black wins by checkmate"
    assert not window.board_view.board_scene.is_interactive()


def test_new_game_resets(qapp, shown_results: list[str]) -> None:
    window = MainWindow()
    _play(window, "f2f3", "e7e5", "g2g4", "d8h4")

    window._act_new_game.trigger()

    assert window.status_text() == "White to move"
    assert window.board_view.board_scene.is_interactive()
    assert not window.state.is_game_over
    assert len(window.board_view.board_scene._piece_items) == 32


def test_flip_toggles_orientation(qapp) -> None:
    settings = AppSettings()
    window = MainWindow(settings)
    window._act_flip.trigger()
    assert settings.flipped
    assert window.board_view.board_scene.is_flipped()


def test_settings_applied_on_start(qapp) -> None:
    settings = AppSettings(show_coordinates=False, show_legal_moves=False, flipped=True)
    window = MainWindow(settings, GameState())
    scene = window.board_view.board_scene
    assert scene.is_flipped()
    assert all(not item.isVisible() for item in scene._coord_items)
    assert not window._act_coords.isChecked()
    assert not window._act_legal.isChecked()


def test_theme_action_updates_settings(qapp) -> None:
    settings = AppSettings()
    window = MainWindow(settings)
    window._theme_actions["Green"].trigger()
    assert settings.board_theme == "Green"

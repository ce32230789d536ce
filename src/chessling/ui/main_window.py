"""MainWindow — top-level window assembling the board and status bar."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import QLabel, QMainWindow, QMessageBox, QStatusBar

from chessling.core.move import Move
from chessling.game.state import GameState
from chessling.ui.board.board_view import BoardView
from chessling.ui.settings import AppSettings
from chessling.ui.styles.theme import THEME_NAMES, BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Chessling."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        state: GameState | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Chessling")
        self.setMinimumSize(480, 520)
        self.resize(680, 720)

        self._settings = settings if settings is not None else AppSettings()
        self._state = state if state is not None else GameState()

        self._setup_ui()
        self._setup_menu()
        self._apply_settings()
        self._update_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView(self._state)
        self.setCentralWidget(self._board_view)
        self._board_view.move_made.connect(self._on_move_made)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_game = QAction("&New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        menu_game.addAction(self._act_new_game)

        self._act_flip = QAction("&Flip Board", self)
        self._act_flip.setShortcut("Ctrl+F")
        self._act_flip.triggered.connect(self._on_flip)
        menu_game.addAction(self._act_flip)

        menu_game.addSeparator()

        act_quit = QAction("&Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        menu_game.addAction(act_quit)

        # View menu
        menu_view = menu_bar.addMenu("&View")
        assert menu_view is not None

        self._act_coords = QAction("Show &Coordinates", self)
        self._act_coords.setCheckable(True)
        self._act_coords.toggled.connect(self._on_toggle_coordinates)
        menu_view.addAction(self._act_coords)

        self._act_legal = QAction("Show &Legal Moves", self)
        self._act_legal.setCheckable(True)
        self._act_legal.toggled.connect(self._on_toggle_legal_moves)
        menu_view.addAction(self._act_legal)

        menu_theme = menu_view.addMenu("Board &Theme")
        assert menu_theme is not None
        self._theme_group = QActionGroup(self)
        self._theme_actions: dict[str, QAction] = {}
        for name in THEME_NAMES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.triggered.connect(lambda _checked=False, n=name: self._on_theme(n))
            self._theme_group.addAction(act)
            menu_theme.addAction(act)
            self._theme_actions[name] = act

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_flipped(s.flipped)

        self._act_coords.setChecked(s.show_coordinates)
        self._act_legal.setChecked(s.show_legal_moves)
        act = self._theme_actions.get(s.board_theme)
        if act is not None:
            act.setChecked(True)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    def status_text(self) -> str:
        return self._status_label.text()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_made(self, move: Move) -> None:
        _LOGGER.debug("UI committed %s", move)
        self._update_status()
        if self._state.is_game_over:
            self._board_view.board_scene.set_interactive(False)
            self._show_game_over()

    def _on_new_game(self) -> None:
        self._state.new_game()
        scene = self._board_view.board_scene
        scene.set_interactive(True)
        scene.refresh()
        self._update_status()

    def _on_flip(self) -> None:
        self._settings.flipped = not self._settings.flipped
        self._board_view.board_scene.set_flipped(self._settings.flipped)

    def _on_toggle_coordinates(self, checked: bool) -> None:
        self._settings.show_coordinates = checked
        self._board_view.board_scene.set_show_coordinates(checked)

    def _on_toggle_legal_moves(self, checked: bool) -> None:
        self._settings.show_legal_moves = checked
        self._board_view.board_scene.set_show_legal_moves(checked)

    def _on_theme(self, name: str) -> None:
        self._settings.board_theme = name
        self._board_view.board_scene.set_theme(BoardTheme.named(name))

    # ── Helpers ──────────────────────────────────────────────────────────

    def _update_status(self) -> None:
        self._status_label.setText(self._state.status_text())

    def _show_game_over(self) -> None:
        QMessageBox.information(self, "Game Over", self._state.position.result_text)

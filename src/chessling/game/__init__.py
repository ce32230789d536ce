"""Game management layer — the explicit application state driven by the UI.

Quick start::

    from chessling.game import GameState

    state = GameState()
    state.select(1, 4)
    state.move_to(3, 4)
    print(state.status_text())
"""

from chessling.game.state import GameState

__all__ = ["GameState"]

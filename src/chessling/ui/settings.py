"""User-configurable application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

_ENV_PREFIX = "CHESSLING_"


@dataclass
class AppSettings:
    """All user-configurable settings (kept in memory only)."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flipped: bool = False

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``CHESSLING_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()
        level = env.get(f"{_ENV_PREFIX}LOG_LEVEL")
        if level:
            settings.log_level = level.upper()
        theme = env.get(f"{_ENV_PREFIX}THEME")
        if theme:
            settings.board_theme = theme
        return settings

"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chessling.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings) -> None:
    """Configure the root logger from *settings*."""
    level = logging.getLevelName(settings.log_level)
    known = isinstance(level, int)
    logging.basicConfig(level=level if known else logging.WARNING, format=_LOG_FORMAT)
    if not known:
        _LOGGER.warning("Unknown log level %r, using WARNING", settings.log_level)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chessling.ui.styles.theme import APP_STYLE

    app.setApplicationName("Chessling")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chessling.ui.main_window import MainWindow

    settings = AppSettings.from_env()
    configure_logging(settings)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Chessling window shown")

    return app.exec()

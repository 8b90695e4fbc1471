"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from checkie.ui.settings import AppSettings
from checkie.ui.styles.theme import THEME_NAMES

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from checkie.ui.styles.theme import APP_STYLE

    app.setApplicationName("Checkie")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from checkie.ui.main_window import MainWindow

    settings = settings if settings is not None else AppSettings()
    if settings.board_theme not in THEME_NAMES:
        _LOGGER.warning(
            "Unknown board theme %r, using Classic", settings.board_theme
        )

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    return app.exec()

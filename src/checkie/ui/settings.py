"""User-configurable options for the desktop front end."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUE = {"1", "true", "yes", "on"}


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_legal_moves: bool = True
    flipped: bool = False

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``CHECKIE_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()
        if "CHECKIE_THEME" in env:
            settings.board_theme = env["CHECKIE_THEME"]
        if "CHECKIE_SHOW_LEGAL_MOVES" in env:
            settings.show_legal_moves = env["CHECKIE_SHOW_LEGAL_MOVES"].lower() in _TRUE
        if "CHECKIE_FLIPPED" in env:
            settings.flipped = env["CHECKIE_FLIPPED"].lower() in _TRUE
        if "CHECKIE_LOG_LEVEL" in env:
            settings.log_level = env["CHECKIE_LOG_LEVEL"].upper()
        return settings

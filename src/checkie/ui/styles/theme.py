"""Visual theme constants and QSS styles for Checkie."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board and pieces."""

    light_square: QColor
    dark_square: QColor
    red_piece: QColor
    black_piece: QColor
    piece_outline: QColor
    king_marker: QColor  # crown disc on kings
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            red_piece=QColor(200, 30, 30),
            black_piece=QColor(30, 30, 30),
            piece_outline=QColor(0, 0, 0, 160),
            king_marker=QColor(255, 215, 0),  # gold
            highlight_from=QColor(76, 175, 80, 140),  # green transparent
            highlight_to=QColor(0, 0, 0, 60),  # dark dot overlay
        )

    @classmethod
    def walnut(cls) -> BoardTheme:
        return cls(
            light_square=QColor(228, 210, 184),
            dark_square=QColor(118, 74, 47),
            red_piece=QColor(178, 34, 34),
            black_piece=QColor(20, 20, 20),
            piece_outline=QColor(0, 0, 0, 160),
            king_marker=QColor(255, 215, 0),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 60),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            red_piece=QColor(210, 40, 40),
            black_piece=QColor(25, 25, 25),
            piece_outline=QColor(0, 0, 0, 160),
            king_marker=QColor(255, 215, 0),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 60),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by settings name; unknown names fall back to the default."""
        theme_map = {
            "Classic": cls.default,
            "Walnut": cls.walnut,
            "Green": cls.green,
        }
        return theme_map.get(name, cls.default)()


THEME_NAMES = ("Classic", "Walnut", "Green")


APP_STYLE = """
QMainWindow {
    background-color: #2b2b2b;
}
QLabel#statusLabel {
    color: #e0e0e0;
    font-size: 15px;
    font-weight: bold;
}
QLabel#hintLabel {
    color: #ffd54f;
    font-size: 13px;
}
QPushButton {
    background-color: #3c3f41;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
}
QPushButton:hover {
    background-color: #4c5052;
}
"""

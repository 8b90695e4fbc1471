"""MainWindow — top-level window assembling board, status, and controls."""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from checkie.core.enums import GameResult, Player
from checkie.game.controller import GameController
from checkie.game.state import GameState
from checkie.ui.board.board_view import BoardView
from checkie.ui.settings import AppSettings
from checkie.ui.styles.theme import BoardTheme

_PLAYER_NAMES = {Player.RED: "Red", Player.BLACK: "Black"}
_RESULT_TEXT = {
    GameResult.RED_WINS: "Red wins!",
    GameResult.BLACK_WINS: "Black wins!",
}


class MainWindow(QMainWindow):
    """Main application window for Checkie."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Checkie")
        self.setMinimumSize(480, 560)
        self.resize(720, 800)

        self._controller = GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._connect_signals()
        self._connect_game_events()
        self._apply_settings()

        self._on_state_changed(self._controller.state)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Header: whose turn + hint on the left, reset on the right
        header = QHBoxLayout()
        info = QVBoxLayout()
        self._status_label = QLabel()
        self._status_label.setObjectName("statusLabel")
        info.addWidget(self._status_label)
        self._hint_label = QLabel()
        self._hint_label.setObjectName("hintLabel")
        info.addWidget(self._hint_label)
        header.addLayout(info, stretch=1)

        self._reset_button = QPushButton("Reset Game")
        header.addWidget(self._reset_button)
        root.addLayout(header)

        # Board
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

    def _connect_signals(self) -> None:
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._reset_button.clicked.connect(self._on_reset_clicked)

    def _connect_game_events(self) -> None:
        self._controller.events.on_state_changed.append(self._on_state_changed)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_flipped(s.flipped)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_square_clicked(self, row: int, col: int) -> None:
        self._controller.click((row, col))

    def _on_reset_clicked(self) -> None:
        self._controller.reset()

    def _on_state_changed(self, state: GameState) -> None:
        self._board_view.board_scene.set_state(state)

        result = self._controller.result
        if result != GameResult.IN_PROGRESS:
            self._status_label.setText(_RESULT_TEXT[result])
            self._hint_label.setText("")
            return

        self._status_label.setText(
            f"Current Player: {_PLAYER_NAMES[state.current_player]}"
        )
        self._hint_label.setText(self._controller.hint or "")

"""Tests for MainWindow wiring between the board and the controller."""

from __future__ import annotations

from checkie.core.enums import Player
from checkie.game.session import MOVE_HINT
from checkie.game.state import GameState
from checkie.ui.main_window import MainWindow
from checkie.ui.settings import AppSettings


def test_initial_status() -> None:
    window = MainWindow()
    assert window._status_label.text() == "Current Player: Red"
    assert window._hint_label.text() == ""
    assert window.board_view.board_scene.state == GameState.initial()


def test_board_clicks_drive_controller() -> None:
    window = MainWindow()
    window.board_view.square_clicked.emit(5, 0)
    assert window.controller.state.selection == (5, 0)
    assert window._hint_label.text() == MOVE_HINT

    window.board_view.square_clicked.emit(4, 1)
    assert window.controller.state.current_player == Player.BLACK
    assert window._status_label.text() == "Current Player: Black"
    assert window.board_view.board_scene.state == window.controller.state


def test_reset_button_restores_initial_state() -> None:
    window = MainWindow()
    window.board_view.square_clicked.emit(5, 0)
    window.board_view.square_clicked.emit(4, 1)

    window._reset_button.click()

    assert window.controller.state == GameState.initial()
    assert window._status_label.text() == "Current Player: Red"


def test_settings_applied_to_scene() -> None:
    window = MainWindow(AppSettings(flipped=True, show_legal_moves=False))
    assert window.board_view.board_scene.is_flipped()

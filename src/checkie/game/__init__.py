"""Game management layer — snapshot, click state machine, controller.

Quick start::

    from checkie.game import GameController

    ctrl = GameController()
    ctrl.click((5, 0))   # pick up the red man on a3
    ctrl.click((4, 1))   # move it to b4; Black to move
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.session import (
    CAPTURE_HINT,
    MOVE_HINT,
    apply_move,
    can_select,
    initial,
    move_hint,
    on_square_clicked,
    reset,
)
from checkie.game.state import GameState

__all__ = [
    # Snapshot
    "GameState",
    # State machine
    "CAPTURE_HINT",
    "MOVE_HINT",
    "apply_move",
    "can_select",
    "initial",
    "move_hint",
    "on_square_clicked",
    "reset",
    # Controller
    "GameController",
    "GameEvents",
]

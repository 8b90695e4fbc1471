"""GameController holds the active snapshot and drives the click machine.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.enums import GameResult
from checkie.core.move import Move
from checkie.core.rules import game_result
from checkie.core.types import Position
from checkie.game import session
from checkie.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

StateCallback = Callable[[GameState], None]
MoveCallback = Callable[[Move, GameState], None]  # move, state after it
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns the single active :class:`GameState` and replaces it per click.

    Thread-safety: call from a single thread (the Qt main thread). Clicks are
    applied one at a time, each against the snapshot the previous one left.
    """

    __slots__ = ("_state", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else session.initial()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def result(self) -> GameResult:
        return game_result(self._state)

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS

    @property
    def hint(self) -> str | None:
        return session.move_hint(self._state)

    # ── Commands ─────────────────────────────────────────────────────────

    def click(self, pos: Position) -> GameState:
        """Feed one square click to the state machine; returns the new state."""
        before = self._state
        after = session.on_square_clicked(before, pos)
        if after == before:
            _LOGGER.debug("Click %s ignored", pos)
            return before

        self._state = after
        if after.board != before.board and before.selection is not None:
            move = Move(before.selection, pos)
            if after.current_player == before.current_player:
                _LOGGER.debug("%s plays %s, capture continues", before.current_player, move)
            else:
                _LOGGER.debug("%s plays %s", before.current_player, move)
            self._emit_move(move)
        elif after.selection is None:
            _LOGGER.debug("Selection %s cleared by click %s", before.selection, pos)
        else:
            _LOGGER.debug("%s picks up %s", after.current_player, pos)

        self._emit_state()

        result = game_result(after)
        if result != GameResult.IN_PROGRESS and after.board != before.board:
            _LOGGER.info("Game over: %s", result.name)
            self._emit_game_over(result)
        return after

    def reset(self) -> GameState:
        """Start over from the initial position."""
        self._state = session.reset()
        _LOGGER.debug("Game reset")
        self._emit_state()
        return self._state

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_state(self) -> None:
        for cb in self.events.on_state_changed:
            cb(self._state)

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)

"""GameState: one immutable snapshot of a checkers game."""

from __future__ import annotations

from dataclasses import dataclass, replace

from checkie.core.board import Board
from checkie.core.enums import Player
from checkie.core.types import Position


@dataclass(frozen=True, slots=True)
class GameState:
    """Board, side to move, and the currently picked-up piece (if any).

    Transitions never modify a snapshot; they build a new one. Whoever holds
    the previous snapshot may keep reading it safely.
    """

    board: Board
    current_player: Player = Player.RED
    selection: Position | None = None

    @classmethod
    def initial(cls) -> GameState:
        return cls(Board.initial(), Player.RED, None)

    @property
    def has_selection(self) -> bool:
        return self.selection is not None

    def select(self, pos: Position) -> GameState:
        return replace(self, selection=pos)

    def deselect(self) -> GameState:
        if self.selection is None:
            return self
        return replace(self, selection=None)

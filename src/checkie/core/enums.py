"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Side owning a piece. Red moves first and plays up the board."""

    RED = 0
    BLACK = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a forward step (Red decreases row, Black increases)."""
        return -1 if self is Player.RED else 1

    @property
    def promotion_row(self) -> int:
        """The opponent's back rank, where this side's men are crowned."""
        return 0 if self is Player.RED else 7

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    RED_WINS = 1
    BLACK_WINS = 2

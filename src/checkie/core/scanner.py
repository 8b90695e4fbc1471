"""Capture detection driving the mandatory-capture rule, plus target hints."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Player
from checkie.core.types import Position, is_on_board
from checkie.core.validator import DIRECTIONS, Direction, directions_for, is_legal_move

_ALL_DIRECTIONS = DIRECTIONS[(Player.RED, True)]


def _target(pos: Position, step: Direction, distance: int) -> Position:
    return pos[0] + step[0] * distance, pos[1] + step[1] * distance


def _reachable(board: Board, pos: Position, distance: int) -> list[Position]:
    targets: list[Position] = []
    for step in _ALL_DIRECTIONS:
        target = _target(pos, step, distance)
        if is_legal_move(board, pos, target):
            targets.append(target)
    return targets


def any_capture_available(board: Board, player: Player) -> bool:
    """Whether any piece of *player* has a legal jump anywhere on *board*."""
    for pos, square in board.occupied():
        if square.occupant != player:
            continue
        for step in directions_for(player, square.is_king):
            if is_legal_move(board, pos, _target(pos, step, 2)):
                return True
    return False


def capture_targets(board: Board, pos: Position) -> list[Position]:
    """Landing squares of every legal jump from *pos*."""
    if not is_on_board(pos):
        return []
    return _reachable(board, pos, 2)


def step_targets(board: Board, pos: Position) -> list[Position]:
    """Destinations of every legal non-capturing step from *pos*."""
    if not is_on_board(pos):
        return []
    return _reachable(board, pos, 1)


def piece_can_capture(board: Board, pos: Position) -> bool:
    """Whether the piece on *pos* itself has a legal jump."""
    return bool(capture_targets(board, pos))


def legal_targets(board: Board, pos: Position) -> list[Position]:
    """Destinations the piece on *pos* may move to this turn.

    Honours the mandatory-capture rule: while its owner has a jump somewhere
    on the board, only this piece's jumps are returned.
    """
    if not is_on_board(pos):
        return []
    owner = board[pos].occupant
    if owner is None:
        return []
    if any_capture_available(board, owner):
        return capture_targets(board, pos)
    return step_targets(board, pos)

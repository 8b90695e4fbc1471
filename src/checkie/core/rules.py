"""Board-wide rules: legal move generation and game outcome."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.board import Board
from checkie.core.enums import GameResult, Player
from checkie.core.move import Move
from checkie.core.scanner import any_capture_available, capture_targets, step_targets

if TYPE_CHECKING:
    from checkie.game.state import GameState


def legal_moves(board: Board, player: Player) -> list[Move]:
    """Every move *player* may start this turn.

    Only jumps are returned while any jump exists (mandatory capture).
    """
    must_capture = any_capture_available(board, player)
    moves: list[Move] = []
    for pos in board.pieces(player):
        targets = capture_targets(board, pos) if must_capture else step_targets(board, pos)
        moves.extend(Move(pos, target) for target in targets)
    return moves


def has_legal_move(board: Board, player: Player) -> bool:
    return bool(legal_moves(board, player))


def game_result(state: GameState) -> GameResult:
    """The side to move loses once it has no pieces or no legal move."""
    if has_legal_move(state.board, state.current_player):
        return GameResult.IN_PROGRESS
    if state.current_player == Player.RED:
        return GameResult.BLACK_WINS
    return GameResult.RED_WINS

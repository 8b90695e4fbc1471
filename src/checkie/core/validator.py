"""Single-move legality: steps and jumps of one piece."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Player
from checkie.core.move import Move
from checkie.core.types import Position, is_on_board

Direction = tuple[int, int]  # unit diagonal (row_step, col_step)

_UP: tuple[Direction, ...] = ((-1, -1), (-1, 1))
_DOWN: tuple[Direction, ...] = ((1, -1), (1, 1))

# (player, is_king) -> diagonal directions the piece may travel in.
DIRECTIONS: dict[tuple[Player, bool], tuple[Direction, ...]] = {
    (Player.RED, False): _UP,
    (Player.BLACK, False): _DOWN,
    (Player.RED, True): _UP + _DOWN,
    (Player.BLACK, True): _UP + _DOWN,
}


def directions_for(player: Player, is_king: bool) -> tuple[Direction, ...]:
    return DIRECTIONS[(player, is_king)]


def is_legal_move(board: Board, from_pos: Position, to_pos: Position) -> bool:
    """Whether the piece on *from_pos* may step or jump to *to_pos*.

    Pure predicate; off-board coordinates are rejected before the grid is
    touched.
    """
    if not (is_on_board(from_pos) and is_on_board(to_pos)):
        return False

    piece = board[from_pos]
    if piece.occupant is None:
        return False

    move = Move(from_pos, to_pos)
    if not move.is_diagonal or move.distance not in (1, 2):
        return False

    step = (move.row_delta // move.distance, move.col_delta // move.distance)
    if step not in directions_for(piece.occupant, piece.is_king):
        return False

    if not board.is_empty(to_pos):
        return False

    if move.distance == 1:
        return True

    jumped = (from_pos[0] + step[0], from_pos[1] + step[1])
    return board[jumped].occupant == piece.occupant.opposite

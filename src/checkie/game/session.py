"""Click-driven turn state machine.

A game is either waiting for a piece to be picked up (no selection) or has a
piece picked up (selection set). Every click maps the current
:class:`GameState` to a new one; rejected clicks return the state unchanged
or with the selection cleared, never an error.
"""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.move import Move
from checkie.core.piece import EMPTY
from checkie.core.scanner import any_capture_available, piece_can_capture
from checkie.core.types import Position, is_on_board
from checkie.core.validator import is_legal_move
from checkie.game.state import GameState

CAPTURE_HINT = "Capture move available!"
MOVE_HINT = "Select a valid move"


def initial() -> GameState:
    """Fresh game: starting board, Red to move, nothing selected."""
    return GameState.initial()


def reset() -> GameState:
    return GameState.initial()


def can_select(state: GameState, pos: Position) -> bool:
    """Whether clicking *pos* with nothing selected would pick the piece up."""
    if not is_on_board(pos):
        return False
    board = state.board
    if board[pos].occupant != state.current_player:
        return False
    if not any_capture_available(board, state.current_player):
        return True
    return piece_can_capture(board, pos)


def apply_move(board: Board, move: Move) -> Board:
    """Board after *move*, which the caller has already validated.

    Clears the origin (and the jumped square on a capture) and crowns a man
    that lands on the opponent's back rank.
    """
    piece = board[move.from_pos]
    assert piece.occupant is not None

    landed = piece
    if move.to_pos[0] == piece.occupant.promotion_row:
        landed = piece.crowned()

    changes = {move.from_pos: EMPTY, move.to_pos: landed}
    if move.jumped is not None:
        changes[move.jumped] = EMPTY
    return board.with_squares(changes)


def on_square_clicked(state: GameState, clicked: Position) -> GameState:
    """Advance *state* by one click on *clicked*."""
    from_pos = state.selection

    if from_pos is None:
        if can_select(state, clicked):
            return state.select(clicked)
        return state

    if not is_legal_move(state.board, from_pos, clicked):
        return state.deselect()

    move = Move(from_pos, clicked)
    if not move.is_capture and any_capture_available(state.board, state.current_player):
        return state.deselect()

    board = apply_move(state.board, move)

    # Only the piece that just jumped may keep going.
    if move.is_capture and piece_can_capture(board, clicked):
        return GameState(board, state.current_player, clicked)

    return GameState(board, state.current_player.opposite, None)


def move_hint(state: GameState) -> str | None:
    """Banner text shown while a piece is picked up."""
    if state.selection is None:
        return None
    if any_capture_available(state.board, state.current_player):
        return CAPTURE_HINT
    return MOVE_HINT

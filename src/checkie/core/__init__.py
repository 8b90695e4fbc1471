"""Core domain layer — pure checkers rules with zero external dependencies.

Quick start::

    from checkie.core import Board, Player, any_capture_available, is_legal_move

    board = Board.initial()
    is_legal_move(board, (5, 0), (4, 1))        # True
    any_capture_available(board, Player.RED)    # False
"""

from checkie.core.board import Board, initial_board
from checkie.core.enums import GameResult, Player
from checkie.core.move import Move
from checkie.core.notation import STARTING_TEXT, board_from_text, board_to_text
from checkie.core.piece import EMPTY, Square
from checkie.core.rules import game_result, has_legal_move, legal_moves
from checkie.core.scanner import (
    any_capture_available,
    capture_targets,
    legal_targets,
    piece_can_capture,
    step_targets,
)
from checkie.core.types import (
    BOARD_SIZE,
    Position,
    dark_squares,
    is_dark,
    is_on_board,
    parse_square,
    square_name,
)
from checkie.core.validator import DIRECTIONS, directions_for, is_legal_move

__all__ = [
    # Enums
    "GameResult",
    "Player",
    # Types / helpers
    "BOARD_SIZE",
    "Position",
    "dark_squares",
    "is_dark",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "EMPTY",
    "Move",
    "Square",
    "initial_board",
    # Rules
    "DIRECTIONS",
    "any_capture_available",
    "capture_targets",
    "directions_for",
    "game_result",
    "has_legal_move",
    "is_legal_move",
    "legal_moves",
    "legal_targets",
    "piece_can_capture",
    "step_targets",
    # Notation
    "STARTING_TEXT",
    "board_from_text",
    "board_to_text",
]

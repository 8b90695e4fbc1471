"""Tests for move generation and game outcome."""

from checkie.core.board import Board
from checkie.core.enums import GameResult, Player
from checkie.core.move import Move
from checkie.core.notation import board_from_text
from checkie.core.piece import EMPTY
from checkie.core.rules import game_result, has_legal_move, legal_moves
from checkie.game.session import apply_move
from checkie.game.state import GameState


def perft(state: GameState, depth: int) -> int:
    """Count single-move sequences of *depth* plies, alternating sides."""
    if depth == 0:
        return 1
    nodes = 0
    for move in legal_moves(state.board, state.current_player):
        board = apply_move(state.board, move)
        nodes += perft(GameState(board, state.current_player.opposite), depth - 1)
    return nodes


class TestLegalMoves:
    def test_opening_moves(self) -> None:
        moves = legal_moves(Board.initial(), Player.RED)
        assert len(moves) == 7
        assert Move((5, 0), (4, 1)) in moves

    def test_black_opening_moves(self) -> None:
        assert len(legal_moves(Board.initial(), Player.BLACK)) == 7

    def test_only_captures_when_capture_exists(self) -> None:
        board = board_from_text(
            """
            ........
            ........
            ........
            ........
            ...b....
            ..r...r.
            ........
            ........
            """
        )
        moves = legal_moves(board, Player.RED)
        assert moves == [Move((5, 2), (3, 4))]
        assert all(m.is_capture for m in moves)

    def test_empty_board_has_no_moves(self) -> None:
        assert legal_moves(Board.empty(), Player.RED) == []
        assert not has_legal_move(Board.empty(), Player.BLACK)


class TestPerft:
    def test_depth_1(self) -> None:
        assert perft(GameState.initial(), 1) == 7

    def test_depth_2(self) -> None:
        assert perft(GameState.initial(), 2) == 49


class TestGameResult:
    def test_in_progress_at_start(self) -> None:
        assert game_result(GameState.initial()) == GameResult.IN_PROGRESS

    def test_no_pieces_loses(self) -> None:
        board = Board.initial().with_squares(
            {pos: EMPTY for pos in Board.initial().pieces(Player.BLACK)}
        )
        state = GameState(board, Player.BLACK)
        assert game_result(state) == GameResult.RED_WINS

    def test_blocked_side_loses(self) -> None:
        # Red's only man on a7 is stuck behind a black man on b8.
        board = board_from_text(
            """
            .b......
            r.......
            ........
            ........
            ........
            ........
            ........
            ........
            """
        )
        assert game_result(GameState(board, Player.RED)) == GameResult.BLACK_WINS
        assert game_result(GameState(board, Player.BLACK)) == GameResult.IN_PROGRESS

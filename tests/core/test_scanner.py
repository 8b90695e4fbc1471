"""Tests for capture detection and target hints."""

from checkie.core.board import Board
from checkie.core.enums import Player
from checkie.core.notation import board_from_text
from checkie.core.scanner import (
    any_capture_available,
    capture_targets,
    legal_targets,
    piece_can_capture,
    step_targets,
)

# Red can jump c3xe5; the red man on g3 has only quiet steps.
MANDATORY = """
........
........
........
........
...b....
..r...r.
........
........
"""

# Red king on c5 with a black man behind it on d4.
KING_BEHIND = """
........
........
........
..R.....
...b....
........
........
........
"""


class TestAnyCaptureAvailable:
    def test_empty_board(self) -> None:
        board = Board.empty()
        assert not any_capture_available(board, Player.RED)
        assert not any_capture_available(board, Player.BLACK)

    def test_initial_board(self) -> None:
        board = Board.initial()
        assert not any_capture_available(board, Player.RED)
        assert not any_capture_available(board, Player.BLACK)

    def test_red_capture_found(self) -> None:
        board = board_from_text(MANDATORY)
        assert any_capture_available(board, Player.RED)

    def test_black_can_capture_forward(self) -> None:
        # d4 (4, 3) jumps c3 (5, 2) towards b2.
        board = board_from_text(MANDATORY)
        assert any_capture_available(board, Player.BLACK)

    def test_king_backward_capture_found(self) -> None:
        board = board_from_text(KING_BEHIND)
        assert any_capture_available(board, Player.RED)

    def test_man_backward_capture_ignored(self) -> None:
        board = board_from_text(KING_BEHIND.replace("R", "r"))
        assert not any_capture_available(board, Player.RED)

    def test_agrees_with_per_piece_scan(self) -> None:
        for text in (MANDATORY, KING_BEHIND, KING_BEHIND.replace("R", "r")):
            board = board_from_text(text)
            for player in Player:
                per_piece = any(
                    piece_can_capture(board, pos) for pos in board.pieces(player)
                )
                assert any_capture_available(board, player) == per_piece


class TestPieceTargets:
    def test_capture_targets(self) -> None:
        board = board_from_text(MANDATORY)
        assert capture_targets(board, (5, 2)) == [(3, 4)]
        assert capture_targets(board, (5, 6)) == []

    def test_piece_can_capture(self) -> None:
        board = board_from_text(MANDATORY)
        assert piece_can_capture(board, (5, 2))
        assert not piece_can_capture(board, (5, 6))
        assert not piece_can_capture(board, (4, 4))

    def test_step_targets(self) -> None:
        board = Board.initial()
        assert step_targets(board, (5, 0)) == [(4, 1)]
        assert sorted(step_targets(board, (5, 2))) == [(4, 1), (4, 3)]
        assert step_targets(board, (6, 1)) == []

    def test_legal_targets_only_jumps_under_mandatory_capture(self) -> None:
        board = board_from_text(MANDATORY)
        assert legal_targets(board, (5, 2)) == [(3, 4)]
        assert legal_targets(board, (5, 6)) == []

    def test_legal_targets_steps_when_no_capture(self) -> None:
        board = Board.initial()
        assert sorted(legal_targets(board, (5, 4))) == [(4, 3), (4, 5)]

    def test_legal_targets_empty_or_off_board(self) -> None:
        board = Board.initial()
        assert legal_targets(board, (4, 1)) == []
        assert legal_targets(board, (9, 9)) == []
        assert capture_targets(board, (-1, 0)) == []

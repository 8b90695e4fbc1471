"""Position type alias and coordinate helpers.

Board layout (row-major, row 0 at the top)::

    row 0   a8 b8 c8 d8 e8 f8 g8 h8   <- Black's back rank
    ...
    row 7   a1 b1 c1 d1 e1 f1 g1 h1   <- Red's back rank

Only dark squares, where ``(row + col) % 2 == 1``, are playable.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

Position: TypeAlias = tuple[int, int]  # (row, col), each 0–7

BOARD_SIZE = 8


def is_on_board(pos: Position) -> bool:
    """Check whether *pos* lies inside the 8x8 grid."""
    row, col = pos
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark(pos: Position) -> bool:
    """Dark (playable) squares have an odd coordinate sum."""
    row, col = pos
    return (row + col) % 2 == 1


def dark_squares() -> Iterator[Position]:
    """All 32 playable squares in row-major order."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if (row + col) % 2 == 1:
                yield row, col


def square_name(pos: Position) -> str:
    """Human-readable name, e.g. (7, 0) → 'a1', (0, 7) → 'h8'."""
    if not is_on_board(pos):
        raise ValueError(f"Position off the board: {pos!r}")
    row, col = pos
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Position:
    """Parse square name, e.g. 'a3' → (5, 0)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a")

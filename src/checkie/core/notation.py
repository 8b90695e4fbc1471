"""Plain-text board notation.

Eight lines of eight characters, row 0 first::

    .b.b.b.b
    b.b.b.b.
    .b.b.b.b
    ........
    ........
    r.r.r.r.
    .r.r.r.r
    r.r.r.r.

``.`` is an empty square, ``r``/``b`` are men and ``R``/``B`` are kings.
"""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.piece import Square
from checkie.core.types import BOARD_SIZE

STARTING_TEXT = "\n".join(
    [
        ".b.b.b.b",
        "b.b.b.b.",
        ".b.b.b.b",
        "........",
        "........",
        "r.r.r.r.",
        ".r.r.r.r",
        "r.r.r.r.",
    ]
)


def board_from_text(text: str) -> Board:
    """Parse a board diagram. Blank lines and surrounding spaces are ignored."""
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if len(lines) != BOARD_SIZE:
        raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(lines)}")

    rows: list[tuple[Square, ...]] = []
    for row, line in enumerate(lines):
        if len(line) != BOARD_SIZE:
            raise ValueError(f"Row {row} must have {BOARD_SIZE} squares: {line!r}")
        rows.append(tuple(Square.from_char(ch) for ch in line))
    return Board(tuple(rows))


def board_to_text(board: Board) -> str:
    """Serialise *board* in the format read by :func:`board_from_text`."""
    return "\n".join("".join(str(sq) for sq in row) for row in board.rows)

"""Board - immutable piece placement on an 8x8 checkers grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from checkie.core.enums import Player
from checkie.core.piece import EMPTY, Square
from checkie.core.types import BOARD_SIZE, Position, dark_squares, is_dark, is_on_board

_Rows = tuple[tuple[Square, ...], ...]


class Board:
    """Immutable 8x8 grid of :class:`Square` values indexed by ``(row, col)``.

    Every "mutation" returns a new board; a board handed to a caller can
    never change underneath it.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: _Rows | None = None) -> None:
        if rows is None:
            rows = tuple((EMPTY,) * BOARD_SIZE for _ in range(BOARD_SIZE))
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Board must be 8x8")
        for row, cells in enumerate(rows):
            for col, square in enumerate(cells):
                if not square.is_empty and not is_dark((row, col)):
                    raise ValueError(f"Piece on light square {(row, col)!r}")
        self._rows: _Rows = rows

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Square:
        if not is_on_board(pos):
            raise IndexError(f"Position off the board: {pos!r}")
        row, col = pos
        return self._rows[row][col]

    def is_empty(self, pos: Position) -> bool:
        return self[pos].is_empty

    @property
    def rows(self) -> _Rows:
        return self._rows

    # -- Query helpers ------------------------------------------------------

    def pieces(self, player: Player) -> list[Position]:
        """Positions occupied by *player*, in row-major order."""
        return [pos for pos in dark_squares() if self[pos].occupant == player]

    def count(self, player: Player) -> int:
        return len(self.pieces(player))

    def kings(self, player: Player) -> list[Position]:
        return [pos for pos in self.pieces(player) if self[pos].is_king]

    def occupied(self) -> Iterator[tuple[Position, Square]]:
        """Every non-empty square with its position."""
        for pos in dark_squares():
            square = self[pos]
            if not square.is_empty:
                yield pos, square

    # -- Copy-on-write ------------------------------------------------------

    def with_squares(self, changes: Mapping[Position, Square]) -> Board:
        """Return a new board with *changes* applied."""
        grid = [list(r) for r in self._rows]
        for pos, square in changes.items():
            if not is_on_board(pos):
                raise IndexError(f"Position off the board: {pos!r}")
            row, col = pos
            grid[row][col] = square
        return Board(tuple(tuple(r) for r in grid))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: Black on rows 0-2, Red on rows 5-7."""
        changes: dict[Position, Square] = {}
        for row, col in dark_squares():
            if row < 3:
                changes[(row, col)] = Square(Player.BLACK)
            elif row > 4:
                changes[(row, col)] = Square(Player.RED)
        return cls().with_squares(changes)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        lines: list[str] = []
        for row, cells in enumerate(self._rows):
            lines.append(f"{BOARD_SIZE - row} {' '.join(str(sq) for sq in cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)


def initial_board() -> Board:
    """Shortcut for :meth:`Board.initial`."""
    return Board.initial()

"""Move value object (one diagonal step or jump)."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.types import Position, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single step or jump."""

    from_pos: Position
    to_pos: Position

    @property
    def row_delta(self) -> int:
        return self.to_pos[0] - self.from_pos[0]

    @property
    def col_delta(self) -> int:
        return self.to_pos[1] - self.from_pos[1]

    @property
    def is_diagonal(self) -> bool:
        return abs(self.row_delta) == abs(self.col_delta)

    @property
    def distance(self) -> int:
        """Number of diagonal steps; only meaningful when ``is_diagonal``."""
        return abs(self.row_delta)

    @property
    def is_capture(self) -> bool:
        return self.is_diagonal and self.distance == 2

    @property
    def jumped(self) -> Position | None:
        """Square passed over by a capture, None for any other move."""
        if not self.is_capture:
            return None
        return (
            self.from_pos[0] + self.row_delta // 2,
            self.from_pos[1] + self.col_delta // 2,
        )

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{square_name(self.from_pos)}{sep}{square_name(self.to_pos)}"

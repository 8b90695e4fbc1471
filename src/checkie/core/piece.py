"""Square value object: what sits on one cell of the board."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Player

# Text character ↔ (occupant, is_king)
_CHAR_MAP: dict[str, tuple[Player | None, bool]] = {
    ".": (None, False),
    "r": (Player.RED, False),
    "R": (Player.RED, True),
    "b": (Player.BLACK, False),
    "B": (Player.BLACK, True),
}

_UNICODE: dict[tuple[Player | None, bool], str] = {
    (None, False): "·",
    (Player.RED, False): "⛀",
    (Player.RED, True): "⛁",
    (Player.BLACK, False): "⛂",
    (Player.BLACK, True): "⛃",
}

_TEXT_CHARS: dict[tuple[Player | None, bool], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable contents of a board cell.

    ``is_king`` carries no meaning on an empty square and is always False
    there, so two empty squares compare equal.
    """

    occupant: Player | None = None
    is_king: bool = False

    def __post_init__(self) -> None:
        if self.occupant is None and self.is_king:
            object.__setattr__(self, "is_king", False)

    @property
    def is_empty(self) -> bool:
        return self.occupant is None

    def crowned(self) -> Square:
        """Same occupant, promoted to king."""
        return Square(self.occupant, True)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Text character (lowercase = man, uppercase = king, '.' = empty)."""
        return _TEXT_CHARS[(self.occupant, self.is_king)]

    @classmethod
    def from_char(cls, char: str) -> Square:
        """Create square from text character, e.g. 'R' → red king."""
        try:
            occupant, is_king = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid square character: {char!r}") from None
        return cls(occupant, is_king)

    @property
    def symbol(self) -> str:
        """Unicode draughts symbol, e.g. ⛁."""
        return _UNICODE[(self.occupant, self.is_king)]


EMPTY = Square()

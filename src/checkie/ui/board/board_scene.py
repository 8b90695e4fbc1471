"""BoardScene — QGraphicsScene that draws the checkers board and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
)

from checkie.core.enums import Player
from checkie.core.scanner import legal_targets
from checkie.core.types import BOARD_SIZE, Position, is_dark
from checkie.game.state import GameState
from checkie.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders a :class:`GameState` and reports clicked squares.

    The scene holds no rules: it only translates mouse presses into board
    positions and redraws whatever snapshot it is given.

    Signals:
        square_clicked(int, int): row and column of a press inside the board.
    """

    square_clicked = pyqtSignal(int, int)

    TILE = 80  # px per square
    _PIECE_MARGIN = 10
    _KING_MARGIN = 26

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._state: GameState | None = None
        self._flipped = False
        self._interactive = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Position, QGraphicsRectItem] = {}
        self._piece_items: dict[Position, QGraphicsEllipseItem] = {}
        self._king_items: dict[Position, QGraphicsEllipseItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsEllipseItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState | None:
        return self._state

    def set_state(self, state: GameState) -> None:
        """Show *state* (full redraw of pieces and highlights)."""
        self._state = state
        self._sync_pieces()
        self._sync_selection()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click reporting."""
        self._interactive = interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board so Black's side is at the bottom."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-target dots for the picked-up piece."""
        self._show_legal_moves = visible
        self._sync_selection()

    def pick(self, pos: QPointF) -> Position | None:
        """Scene position → board ``(row, col)``, or None outside the board."""
        t = self.TILE
        vcol = int(pos.x() // t)
        vrow = int(pos.y() // t)
        if not (0 <= vcol < BOARD_SIZE and 0 <= vrow < BOARD_SIZE):
            return None
        return self._board_coords(vrow, vcol)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        if event.button() == Qt.MouseButton.LeftButton:
            pos = self.pick(event.scenePos())
            if pos is not None:
                self.square_clicked.emit(pos[0], pos[1])
                event.accept()
                return

        super().mousePressEvent(event)

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        self._sync_pieces()
        self._sync_selection()

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        t = self.TILE
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                vrow, vcol = self._visual_coords(row, col)
                color = (
                    self._theme.dark_square
                    if is_dark((row, col))
                    else self._theme.light_square
                )
                rect = QGraphicsRectItem(vcol * t, vrow * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[(row, col)] = rect

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current state."""
        for item in [*self._piece_items.values(), *self._king_items.values()]:
            self.removeItem(item)
        self._piece_items.clear()
        self._king_items.clear()

        if self._state is None:
            return

        for pos, square in self._state.board.occupied():
            color = (
                self._theme.red_piece
                if square.occupant == Player.RED
                else self._theme.black_piece
            )
            piece = self._make_disc(pos, self._PIECE_MARGIN, color)
            piece.setPen(QPen(self._theme.piece_outline, 2))
            piece.setZValue(1)
            self._piece_items[pos] = piece

            if square.is_king:
                crown = self._make_disc(pos, self._KING_MARGIN, self._theme.king_marker)
                crown.setZValue(1.5)
                self._king_items[pos] = crown

    # ── Selection / highlights ───────────────────────────────────────────

    def _sync_selection(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

        if self._state is None or self._state.selection is None:
            return

        selected = self._state.selection
        self._highlight_items.append(
            self._make_highlight(selected, self._theme.highlight_from)
        )

        if self._show_legal_moves:
            for target in legal_targets(self._state.board, selected):
                dot = self._make_disc(target, self.TILE * 3 // 8, self._theme.highlight_to)
                dot.setZValue(0.8)
                self._legal_dot_items.append(dot)

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, row: int, col: int) -> tuple[int, int]:
        """Board row/col → visual row/col."""
        if self._flipped:
            return BOARD_SIZE - 1 - row, BOARD_SIZE - 1 - col
        return row, col

    def _board_coords(self, vrow: int, vcol: int) -> Position:
        # Flipping is its own inverse.
        return self._visual_coords(vrow, vcol)

    def _make_highlight(self, pos: Position, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vrow, vcol = self._visual_coords(*pos)
        rect = QGraphicsRectItem(vcol * t, vrow * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.5)
        self.addItem(rect)
        return rect

    def _make_disc(self, pos: Position, margin: int, color: QColor) -> QGraphicsEllipseItem:
        """Create a filled circle inset *margin* px inside a square."""
        t = self.TILE
        vrow, vcol = self._visual_coords(*pos)
        size = t - 2 * margin
        disc = QGraphicsEllipseItem(vcol * t + margin, vrow * t + margin, size, size)
        disc.setBrush(QBrush(color))
        disc.setPen(QPen(Qt.PenStyle.NoPen))
        self.addItem(disc)
        return disc

"""
Board rendering for the Checkers GUI.

The renderer only needs a canvas-like object exposing ``delete``,
``create_rectangle``, ``create_oval`` and ``create_text``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

from checkerboard.types import BOARD_SIZE, BoardSnapshot, Color, Position, Targets
from checkerboard.gui.constants import (
    BOARD_BG_LIGHT, BOARD_BG_DARK, BOARD_HL_SQ, BOARD_HL_DEST, BOARD_HL_CAPTURE,
    SELECTABLE_OUTLINE, PIECE_BLACK_FILL, PIECE_BLACK_OUTLINE,
    PIECE_RED_FILL, PIECE_RED_OUTLINE, KING_TEXT_COLOR, SQUARE_SIZE
)

if TYPE_CHECKING:
    import tkinter as tk


class BoardRenderer:
    """Handles all board rendering and visual updates."""

    def __init__(self, canvas: "tk.Canvas", square_size: int = SQUARE_SIZE):
        self.canvas = canvas
        self.square_size = square_size
        self.selected_square: Optional[Position] = None
        self.targets: Targets = Targets()
        self.selectable: List[Position] = []
        self.show_hints = True

        # Pre-draw board grid
        self._draw_squares()

    def square_at(self, x: int, y: int) -> Optional[Position]:
        """Board cell under canvas pixel (x, y), or None outside the board."""
        if x < 0 or y < 0:
            return None
        r, c = y // self.square_size, x // self.square_size
        if r >= BOARD_SIZE or c >= BOARD_SIZE:
            return None
        return (r, c)

    def set_selected_square(self, square: Optional[Position]) -> None:
        self.selected_square = square

    def set_targets(self, targets: Targets) -> None:
        """Set the legal destinations to highlight for the selected piece."""
        self.targets = targets

    def set_selectable(self, squares: Iterable[Position]) -> None:
        self.selectable = list(squares)

    def redraw_board(self, board: BoardSnapshot) -> None:
        """Redraw the entire board with current state."""
        self._clear_overlays()
        self._draw_pieces(board)
        self._draw_selection_highlight()
        if self.show_hints:
            self._draw_destination_highlights()

    def _cell_box(self, r: int, c: int):
        x1 = c * self.square_size
        y1 = r * self.square_size
        return x1, y1, x1 + self.square_size, y1 + self.square_size

    def _draw_squares(self) -> None:
        """Draw the static board squares."""
        self.canvas.delete("square")
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                color = BOARD_BG_DARK if (r + c) % 2 == 1 else BOARD_BG_LIGHT
                self.canvas.create_rectangle(
                    *self._cell_box(r, c), fill=color, outline=color, tags=("square",)
                )

    def _clear_overlays(self) -> None:
        """Clear all overlay elements."""
        self.canvas.delete("piece")
        self.canvas.delete("sel")
        self.canvas.delete("dest")

    def _draw_pieces(self, board: BoardSnapshot) -> None:
        """Draw all pieces on the board."""
        size = self.square_size
        for r, row in enumerate(board):
            for c, piece in enumerate(row):
                if piece is None:
                    continue

                cx = c * size + size // 2
                cy = r * size + size // 2
                rad = int(size * 0.36)

                is_black = piece.color is Color.BLACK
                fill = PIECE_BLACK_FILL if is_black else PIECE_RED_FILL
                outline = PIECE_BLACK_OUTLINE if is_black else PIECE_RED_OUTLINE
                if (r, c) in self.selectable:
                    outline = SELECTABLE_OUTLINE

                self.canvas.create_oval(
                    cx - rad, cy - rad, cx + rad, cy + rad,
                    fill=fill, outline=outline, width=2, tags=("piece",)
                )

                # Draw king marker
                if piece.king:
                    self.canvas.create_text(
                        cx, cy, text="K", fill=KING_TEXT_COLOR,
                        font=("Segoe UI", int(size * 0.33), "bold"),
                        tags=("piece",)
                    )

    def _draw_selection_highlight(self) -> None:
        """Draw highlight for the selected square."""
        if self.selected_square is None:
            return

        x1, y1, x2, y2 = self._cell_box(*self.selected_square)
        self.canvas.create_rectangle(
            x1 + 3, y1 + 3, x2 - 3, y2 - 3,
            outline=BOARD_HL_SQ, width=3, tags=("sel",)
        )

    def _draw_destination_highlights(self) -> None:
        """Draw dots on step destinations and capture landings."""
        capture_cells = {(cap[0], cap[1]) for cap in self.targets.captures}
        size = self.square_size
        for r, c in self.targets.destinations():
            cx = c * size + size // 2
            cy = r * size + size // 2
            rad = int(size * 0.16)
            fill = BOARD_HL_CAPTURE if (r, c) in capture_cells else BOARD_HL_DEST

            self.canvas.create_oval(
                cx - rad, cy - rad, cx + rad, cy + rad,
                fill=fill, outline="", tags=("dest",)
            )

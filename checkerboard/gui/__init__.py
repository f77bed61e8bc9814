"""
GUI components for the Checkers application.

Tk-dependent modules (``checkers_ui``, ``factory``) are imported directly by
``run_gui`` so the renderer stays importable without a display.
"""
from __future__ import annotations

from .constants import *
from .board_renderer import BoardRenderer

__all__ = [
    # Constants
    "BOARD_BG_LIGHT", "BOARD_BG_DARK", "BOARD_HL_SQ", "BOARD_HL_DEST",
    "BOARD_HL_CAPTURE", "SELECTABLE_OUTLINE", "PIECE_BLACK_FILL",
    "PIECE_BLACK_OUTLINE", "PIECE_RED_FILL", "PIECE_RED_OUTLINE",
    "KING_TEXT_COLOR", "SQUARE_SIZE", "FONT_TITLE", "FONT_NORMAL",
    "FONT_LABEL", "TEXT_COLOR_NORMAL", "TEXT_COLOR_ERROR",

    # Core components
    "BoardRenderer",
]

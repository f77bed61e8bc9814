from __future__ import annotations

# Board appearance
BOARD_BG_LIGHT = "#EEEED2"   # light square
BOARD_BG_DARK  = "#769656"   # dark/playable square
BOARD_HL_SQ    = "#F6F669"   # selected square highlight
BOARD_HL_DEST  = "#9AE66E"   # step destination highlight
BOARD_HL_CAPTURE = "#E67E22"  # capture landing highlight
SELECTABLE_OUTLINE = "#F1C40F"  # pieces the side to move may pick up

# Piece appearance
PIECE_BLACK_FILL = "#222222"
PIECE_BLACK_OUTLINE = "#FFFFFF"
PIECE_RED_FILL   = "#C0392B"
PIECE_RED_OUTLINE = "#FFFFFF"
KING_TEXT_COLOR = "#FFD700"  # gold-ish

# Layout
SQUARE_SIZE = 72   # default pixels per square, overridden by UISettings.square_size

# UI Fonts
FONT_TITLE = ("Segoe UI", 18, "bold")
FONT_NORMAL = ("Segoe UI", 11, "bold")
FONT_LABEL = ("Segoe UI", 10, "bold")

# Colors for text and UI elements
TEXT_COLOR_NORMAL = "#000000"
TEXT_COLOR_ERROR = "#C0392B"

from __future__ import annotations

from typing import List, Optional

from checkerboard.types import (
    BOARD_SIZE,
    Board,
    BoardSnapshot,
    Color,
    InvalidPositionError,
    Piece,
    Position,
)

# Men fill the dark cells of the three rows nearest their own edge.
BLACK_HOME_ROWS = range(0, 3)
RED_HOME_ROWS = range(BOARD_SIZE - 3, BOARD_SIZE)
PIECES_PER_SIDE = 12


# ============================
# Coordinates
# ============================
def within(row: int, col: int) -> bool:
    """True iff (row, col) lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark(row: int, col: int) -> bool:
    """Dark (playable) cells are those where row + col is odd."""
    return (row + col) % 2 == 1


def dark_cells() -> List[Position]:
    return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE) if is_dark(r, c)]


# ============================
# Board setup and utilities
# ============================
def empty_board() -> Board:
    """An 8x8 grid with no pieces."""
    return [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


def setup_initial_pieces(board: Board) -> Board:
    """Black men on rows 0..2, Red men on rows 5..7 (dark cells only). Mutates ``board``."""
    for r, c in dark_cells():
        if r in BLACK_HOME_ROWS:
            board[r][c] = Piece(Color.BLACK)
        elif r in RED_HOME_ROWS:
            board[r][c] = Piece(Color.RED)
    return board


def new_board() -> Board:
    return setup_initial_pieces(empty_board())


def place_piece(board: Board, row: int, col: int, piece: Optional[Piece]) -> None:
    """Put ``piece`` on a dark cell (``None`` clears it)."""
    if not within(row, col):
        raise InvalidPositionError(f"({row}, {col}) is off the board")
    if piece is not None and not is_dark(row, col):
        raise InvalidPositionError(f"({row}, {col}) is a light cell")
    board[row][col] = piece


def count_pieces(board: Board, color: Color) -> int:
    return sum(1 for row in board for p in row if p is not None and p.color is color)


def pieces_of(board: Board, color: Color) -> List[Position]:
    """Positions of every piece of ``color`` in row-major order."""
    return [
        (r, c)
        for r in range(BOARD_SIZE)
        for c in range(BOARD_SIZE)
        if board[r][c] is not None and board[r][c].color is color
    ]


def snapshot(board: Board) -> BoardSnapshot:
    """Immutable copy of the board for rendering."""
    return tuple(tuple(row) for row in board)

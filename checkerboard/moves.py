from __future__ import annotations

from typing import List, Tuple

from checkerboard.board import pieces_of, within
from checkerboard.types import Board, Capture, Color, Direction, Piece, Position, Step

# Canonical enumeration order: up-left, up-right, down-left, down-right.
_DIRS: Tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def directions_for(piece: Piece) -> Tuple[Direction, ...]:
    """Directions a piece may move in, filtered from the canonical order.

    Red men move toward row 0, Black men toward row 7, kings both ways.
    """
    if piece.king:
        return _DIRS
    if piece.color is Color.RED:
        return _DIRS[:2]
    return _DIRS[2:]


def legal_steps(board: Board, row: int, col: int) -> List[Step]:
    """Empty cells one diagonal step away for the piece at (row, col)."""
    if not within(row, col):
        return []
    piece = board[row][col]
    if piece is None:
        return []
    steps: List[Step] = []
    for dr, dc in directions_for(piece):
        nr, nc = row + dr, col + dc
        if within(nr, nc) and board[nr][nc] is None:
            steps.append((nr, nc))
    return steps


def capture_moves(board: Board, row: int, col: int) -> List[Capture]:
    """Single jumps available to the piece at (row, col).

    Each entry is ``(landing_row, landing_col, middle_row, middle_col)``.
    """
    if not within(row, col):
        return []
    piece = board[row][col]
    if piece is None:
        return []
    caps: List[Capture] = []
    for dr, dc in directions_for(piece):
        mr, mc = row + dr, col + dc
        tr, tc = row + 2 * dr, col + 2 * dc
        if not within(tr, tc) or not within(mr, mc):
            continue
        middle = board[mr][mc]
        if middle is not None and middle.color is not piece.color and board[tr][tc] is None:
            caps.append((tr, tc, mr, mc))
    return caps


def capturing_pieces(board: Board, color: Color) -> List[Position]:
    """Pieces of ``color`` that have at least one capture."""
    return [(r, c) for r, c in pieces_of(board, color) if capture_moves(board, r, c)]


def any_capture_available(board: Board, color: Color) -> bool:
    for r, c in pieces_of(board, color):
        if capture_moves(board, r, c):
            return True
    return False

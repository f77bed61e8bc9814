"""Board mutations: moving, crowning and removing pieces."""
from __future__ import annotations

from checkerboard.types import BOARD_SIZE, Board, Color, Piece, Position


def crowning_row(color: Color) -> int:
    """The far row a man of ``color`` must reach to be kinged."""
    return 0 if color is Color.RED else BOARD_SIZE - 1


def maybe_king(row: int, piece: Piece, advanced: bool) -> Piece:
    """Promote ``piece`` if it stands on its far row. Simple mode never promotes."""
    if not advanced or piece.king:
        return piece
    if row == crowning_row(piece.color):
        return piece.crowned()
    return piece


def apply_move(board: Board, origin: Position, dest: Position, advanced: bool) -> Board:
    """Relocate the piece at ``origin`` to ``dest``, kinging it if due. Mutates ``board``."""
    fr, fc = origin
    tr, tc = dest
    moving = board[fr][fc]
    if moving is None:
        raise ValueError(f"No piece at {origin}")
    board[fr][fc] = None
    board[tr][tc] = maybe_king(tr, moving, advanced)
    return board


def remove_piece(board: Board, row: int, col: int) -> None:
    board[row][col] = None

"""
Turn and chain rules: which moves a selected piece may make right now.
"""
from __future__ import annotations

from typing import List

from checkerboard.board import pieces_of, within
from checkerboard.moves import any_capture_available, capture_moves, capturing_pieces, legal_steps
from checkerboard.types import GameState, Position, Targets


def capture_is_forced(state: GameState) -> bool:
    """In advanced mode a pending chain or any available capture forbids steps."""
    if not state.advanced:
        return False
    return state.chain_in_progress or any_capture_available(state.board, state.turn)


def compute_targets(state: GameState, row: int, col: int) -> Targets:
    """Legal steps and captures for the piece at (row, col). Never mutates ``state``.

    Simple mode offers both lists, captures being optional. In advanced mode a
    forced capture suppresses steps for every piece, and while a chain is in
    progress only the chain piece is offered anything.
    """
    if not within(row, col) or state.board[row][col] is None:
        return Targets()
    caps = tuple(capture_moves(state.board, row, col))
    if capture_is_forced(state):
        if state.chain_in_progress and state.chain_origin != (row, col):
            return Targets()
        return Targets(steps=(), captures=caps)
    return Targets(steps=tuple(legal_steps(state.board, row, col)), captures=caps)


def selectable(state: GameState, row: int, col: int) -> bool:
    """Whether the piece at (row, col) may be picked up by the side to move."""
    if not within(row, col):
        return False
    piece = state.board[row][col]
    if piece is None or piece.color is not state.turn:
        return False
    return state.chain_origin is None or state.chain_origin == (row, col)


def selectable_pieces(state: GameState) -> List[Position]:
    """Pieces the side to move can pick up and actually move, for outlining.

    When a capture is forced only the capturing pieces qualify.
    """
    if capture_is_forced(state):
        candidates = capturing_pieces(state.board, state.turn)
    else:
        candidates = pieces_of(state.board, state.turn)
    return [(r, c) for r, c in candidates if selectable(state, r, c)]

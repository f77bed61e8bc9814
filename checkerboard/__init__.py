"""Checkerboard package: a two-player checkers rules engine.

Usage examples:
    from checkerboard import GameSession, Color
    from checkerboard import legal_steps, capture_moves, compute_targets
    from checkerboard import run_self_tests
"""
from __future__ import annotations

from .types import (
    BOARD_SIZE,
    Board,
    Capture,
    CheckersError,
    Color,
    GameState,
    InvalidPositionError,
    Outcome,
    OutcomeStatus,
    Piece,
    Position,
    RejectReason,
    Step,
    Targets,
)
from .board import (
    count_pieces,
    empty_board,
    is_dark,
    new_board,
    place_piece,
    setup_initial_pieces,
    snapshot,
    within,
)
from .moves import any_capture_available, capture_moves, capturing_pieces, legal_steps
from .rules import capture_is_forced, compute_targets, selectable, selectable_pieces
from .mutation import apply_move, maybe_king, remove_piece
from .events import EventKind, EventLog, GameEvent, describe
from .session import GameSession
from .selftest import SelfTestResult, run_self_tests, summary

__all__ = [
    "BOARD_SIZE", "Board", "Capture", "CheckersError", "Color", "GameState",
    "InvalidPositionError", "Outcome", "OutcomeStatus", "Piece", "Position",
    "RejectReason", "Step", "Targets",
    "count_pieces", "empty_board", "is_dark", "new_board", "place_piece",
    "setup_initial_pieces", "snapshot", "within",
    "any_capture_available", "capture_moves", "capturing_pieces", "legal_steps",
    "capture_is_forced", "compute_targets", "selectable", "selectable_pieces",
    "apply_move", "maybe_king", "remove_piece",
    "EventKind", "EventLog", "GameEvent", "describe",
    "GameSession",
    "SelfTestResult", "run_self_tests", "summary",
]

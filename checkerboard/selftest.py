"""
Built-in rule checks, runnable from the GUI ("Run Tests") or the command line.

Every check builds its own scratch board, so running them never disturbs a
game in progress.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Tuple

from checkerboard.board import count_pieces, empty_board, new_board
from checkerboard.events import EventLog
from checkerboard.moves import any_capture_available, capture_moves, legal_steps
from checkerboard.mutation import apply_move, maybe_king
from checkerboard.rules import compute_targets
from checkerboard.types import Board, Color, GameState, Piece

logger = logging.getLogger(__name__)

RED = Piece(Color.RED)
BLACK = Piece(Color.BLACK)


@dataclass(frozen=True)
class SelfTestResult:
    name: str
    passed: bool


def _board_with(*placements: Tuple[int, int, Piece]) -> Board:
    board = empty_board()
    for r, c, piece in placements:
        board[r][c] = piece
    return board


def _lands_on(caps, row: int, col: int) -> bool:
    return any(cap[0] == row and cap[1] == col for cap in caps)


def _check_new_game_counts() -> bool:
    board = new_board()
    return count_pieces(board, Color.RED) == 12 and count_pieces(board, Color.BLACK) == 12


def _check_red_opening_step() -> bool:
    return (4, 1) in legal_steps(new_board(), 5, 0)


def _check_black_forward_step() -> bool:
    steps = legal_steps(new_board(), 2, 1)
    return (3, 0) in steps or (3, 2) in steps


def _check_simple_capture() -> bool:
    board = _board_with((3, 2, RED), (2, 3, BLACK))
    return _lands_on(capture_moves(board, 3, 2), 1, 4)


def _check_kinging() -> bool:
    return maybe_king(0, RED, advanced=True).king


def _check_move_clears_origin() -> bool:
    board = _board_with((5, 0, RED))
    apply_move(board, (5, 0), (4, 1), advanced=False)
    return board[5][0] is None and board[4][1] == RED


def _forced_capture_state() -> GameState:
    board = _board_with((5, 0, RED), (3, 2, RED), (2, 3, BLACK))
    return GameState(board=board, turn=Color.RED, advanced=True)


def _check_any_capture_available() -> bool:
    return any_capture_available(_forced_capture_state().board, Color.RED)


def _check_forced_capture_blocks_others() -> bool:
    return compute_targets(_forced_capture_state(), 5, 0).is_empty


def _check_capturing_piece_offers_captures() -> bool:
    targets = compute_targets(_forced_capture_state(), 3, 2)
    return bool(targets.captures) and not targets.steps


def _check_multi_jump() -> bool:
    board = _board_with((5, 1, RED), (4, 2, BLACK), (2, 4, BLACK))
    if not _lands_on(capture_moves(board, 5, 1), 3, 3):
        return False
    board[5][1] = None
    board[4][2] = None
    board[3][3] = RED
    return _lands_on(capture_moves(board, 3, 3), 1, 5)


def _check_king_captures_backward() -> bool:
    board = _board_with((2, 1, RED), (1, 2, BLACK), (1, 4, BLACK))
    if not _lands_on(capture_moves(board, 2, 1), 0, 3):
        return False
    board[2][1] = None
    board[1][2] = None
    board[0][3] = maybe_king(0, RED, advanced=True)
    return _lands_on(capture_moves(board, 0, 3), 2, 5)


def _check_capture_scores() -> bool:
    # Local import to avoid circular import during module initialization
    from checkerboard.session import GameSession

    session = GameSession(advanced=True, freeze_on_win=True, event_log=EventLog(50))
    for square in ((5, 2), (4, 3), (2, 5), (3, 4), (4, 3), (2, 5)):
        session.click(*square)
    return (session.score[Color.RED] == 1
            and session.remaining(Color.BLACK) == 11
            and session.turn is Color.BLACK)


CHECKS: List[Tuple[str, Callable[[], bool]]] = [
    ("New game has 12 pieces per side", _check_new_game_counts),
    ("Red at (5,0) can step to (4,1)", _check_red_opening_step),
    ("Black at (2,1) has forward step", _check_black_forward_step),
    ("Red capture 3,2 -> 1,4", _check_simple_capture),
    ("Kinging works", _check_kinging),
    ("Move clears origin and fills target", _check_move_clears_origin),
    ("Any capture available detects red capture", _check_any_capture_available),
    ("Forced capture blocks steps for others", _check_forced_capture_blocks_others),
    ("Capturing piece shows captures only", _check_capturing_piece_offers_captures),
    ("Multi-jump (5,1) -> (3,3) -> (1,5)", _check_multi_jump),
    ("After kinging, backward capture to (2,5)", _check_king_captures_backward),
    ("Capture scores and removes a piece", _check_capture_scores),
]


def run_self_tests() -> List[SelfTestResult]:
    results: List[SelfTestResult] = []
    for name, check in CHECKS:
        try:
            passed = bool(check())
        except Exception:
            logger.exception("Self test %r raised", name)
            passed = False
        results.append(SelfTestResult(name, passed))
    passed, total = summary(results)
    logger.info("Self tests: %d/%d passed", passed, total)
    return results


def summary(results: List[SelfTestResult]) -> Tuple[int, int]:
    """(passed, total) for a list of results."""
    return sum(1 for r in results if r.passed), len(results)

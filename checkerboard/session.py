"""
Game session: owns one GameState and applies selections and moves to it.

Every transition returns an ``Outcome``; rule violations are reported as
rejected outcomes plus a REJECTED event and never raise.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List, Optional

from config import get_game_rules, get_ui_settings
from checkerboard.board import count_pieces, new_board, snapshot, within
from checkerboard.events import EventKind, EventLog
from checkerboard.moves import capture_moves, legal_steps
from checkerboard.mutation import apply_move, remove_piece
from checkerboard.rules import capture_is_forced, compute_targets
from checkerboard.types import (
    Board,
    BoardSnapshot,
    Color,
    GameState,
    Outcome,
    Position,
    RejectReason,
    Targets,
)

if TYPE_CHECKING:
    from checkerboard.selftest import SelfTestResult

logger = logging.getLogger(__name__)


class GameSession:
    """A single two-player game. Not thread-safe; one caller drives it."""

    def __init__(self, advanced: Optional[bool] = None,
                 freeze_on_win: Optional[bool] = None,
                 event_log: Optional[EventLog] = None) -> None:
        rules = get_game_rules()
        self.freeze_on_win = rules.freeze_on_win if freeze_on_win is None else bool(freeze_on_win)
        self.log = event_log if event_log is not None else EventLog(get_ui_settings().log_limit)
        mode = rules.advanced_mode if advanced is None else bool(advanced)
        self.state = GameState(board=new_board(), advanced=mode)
        self.reset()

    # -------- Read side --------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def turn(self) -> Color:
        return self.state.turn

    @property
    def advanced(self) -> bool:
        return self.state.advanced

    @property
    def selected(self) -> Optional[Position]:
        return self.state.selected

    @property
    def chain_origin(self) -> Optional[Position]:
        return self.state.chain_origin

    @property
    def score(self) -> Dict[Color, int]:
        return dict(self.state.score)

    @property
    def winner(self) -> Optional[Color]:
        return self.state.winner

    @property
    def is_over(self) -> bool:
        return self.state.winner is not None

    @property
    def frozen(self) -> bool:
        return self.freeze_on_win and self.is_over

    def remaining(self, color: Color) -> int:
        return count_pieces(self.state.board, color)

    def targets(self) -> Targets:
        """Targets of the current selection, for hint highlighting."""
        if self.state.selected is None:
            return Targets()
        return compute_targets(self.state, *self.state.selected)

    def snapshot(self) -> BoardSnapshot:
        return snapshot(self.state.board)

    # -------- Lifecycle --------

    def reset(self) -> None:
        """Start over from the initial placement, keeping the current mode."""
        self.state = GameState(board=new_board(), advanced=self.state.advanced)
        logger.info("New game (%s mode)", "advanced" if self.state.advanced else "simple")
        self.log.emit(EventKind.NEW_GAME, turn=self.state.turn)

    def set_advanced(self, advanced: bool) -> None:
        self.state.advanced = bool(advanced)
        self.state.chain_origin = None
        logger.info("Mode set to %s", "advanced" if self.state.advanced else "simple")
        self.log.emit(EventKind.MODE_CHANGED, advanced=self.state.advanced)

    def toggle_mode(self) -> bool:
        self.set_advanced(not self.state.advanced)
        return self.state.advanced

    # -------- Transitions --------

    def click(self, row: int, col: int) -> Outcome:
        """Dispatch a square click: pieces are selected, empty cells are move targets."""
        if not within(row, col):
            return self._reject(RejectReason.OUT_OF_BOUNDS, f"Square {row},{col} is off the board.")
        if self.state.board[row][col] is not None:
            return self.select(row, col)
        return self.attempt_move(row, col)

    def select(self, row: int, col: int) -> Outcome:
        if not within(row, col):
            return self._reject(RejectReason.OUT_OF_BOUNDS, f"Square {row},{col} is off the board.")
        if self.frozen:
            return self._game_over_rejection()
        piece = self.state.board[row][col]
        if piece is None:
            return self._reject(RejectReason.NO_PIECE, f"No piece at {row},{col}.")
        if piece.color is not self.state.turn:
            return self._reject(
                RejectReason.ILLEGAL_SELECTION,
                f"That is a {piece.color.title} piece. {self.state.turn.title} to move.",
            )
        chain = self.state.chain_origin
        if chain is not None and chain != (row, col):
            return self._reject(RejectReason.CHAIN_LOCKED, "Must continue capture with the same piece.")
        self.state.selected = (row, col)
        self.log.emit(EventKind.SELECTED, color=piece.color, position=(row, col))
        return Outcome.ok()

    def attempt_move(self, row: int, col: int) -> Outcome:
        if not within(row, col):
            return self._reject(RejectReason.OUT_OF_BOUNDS, f"Square {row},{col} is off the board.")
        if self.frozen:
            return self._game_over_rejection()
        origin = self.state.selected
        if origin is None:
            return self._reject(RejectReason.NOTHING_SELECTED, "Select one of your pieces first.")
        if self.state.board[row][col] is not None:
            return self._reject(RejectReason.ILLEGAL_MOVE, "Illegal move: that square is occupied.")

        targets = compute_targets(self.state, *origin)
        if (row, col) in targets.steps:
            return self._step(origin, (row, col))
        capture = targets.capture_to(row, col)
        if capture is not None:
            return self._capture(origin, (row, col), (capture[2], capture[3]))
        if (row, col) in legal_steps(self.state.board, *origin) and capture_is_forced(self.state):
            return self._reject(RejectReason.FORCED_CAPTURE, "Capture available - you must take it.")
        return self._reject(RejectReason.ILLEGAL_MOVE, "Illegal move.")

    # -------- Internals --------

    def _step(self, origin: Position, dest: Position) -> Outcome:
        mover = self.state.turn
        kinged = self._relocate(origin, dest)
        logger.info("%s moved %s -> %s", mover.title, origin, dest)
        self.log.emit(EventKind.MOVED, color=mover, origin=origin, dest=dest, kinged=kinged)
        self._end_turn()
        return Outcome.ok()

    def _capture(self, origin: Position, dest: Position, middle: Position) -> Outcome:
        mover = self.state.turn
        board = self.state.board
        jumped = board[middle[0]][middle[1]]
        captured = jumped.color if jumped is not None else mover.opponent
        kinged = self._relocate(origin, dest)
        remove_piece(board, *middle)
        self.state.score[mover] += 1
        logger.info("%s captured %s at %s -> %s", mover.title, captured, middle, dest)
        self.log.emit(
            EventKind.CAPTURED, color=mover, captured=captured,
            origin=origin, middle=middle, dest=dest, kinged=kinged,
        )
        self.state.selected = dest
        self.state.chain_origin = dest
        self._check_game_over()
        if self.state.advanced and capture_moves(board, *dest):
            self.log.emit(EventKind.CHAIN_CONTINUES, color=mover, position=dest)
            return Outcome.ok("Another capture is available. Continue with the same piece.")
        self._end_turn()
        return Outcome.ok()

    def _relocate(self, origin: Position, dest: Position) -> bool:
        board = self.state.board
        was_king = board[origin[0]][origin[1]].king
        apply_move(board, origin, dest, self.state.advanced)
        return board[dest[0]][dest[1]].king and not was_king

    def _end_turn(self) -> None:
        self.state.selected = None
        self.state.chain_origin = None
        self.state.turn = self.state.turn.opponent
        self.log.emit(EventKind.TURN_PASSED, turn=self.state.turn)

    def _check_game_over(self) -> None:
        if self.state.winner is not None:
            return
        red, black = self.remaining(Color.RED), self.remaining(Color.BLACK)
        if red and black:
            return
        self.state.winner = Color.RED if red > 0 else Color.BLACK
        logger.info("Game over: %s wins", self.state.winner.title)
        self.log.emit(EventKind.GAME_OVER, winner=self.state.winner)

    def _game_over_rejection(self) -> Outcome:
        return self._reject(
            RejectReason.GAME_OVER,
            f"Game over: {self.state.winner.title} wins. Start a new game.",
        )

    def _reject(self, reason: RejectReason, message: str) -> Outcome:
        logger.debug("Rejected (%s): %s", reason.value, message)
        self.log.emit(EventKind.REJECTED, reason=reason, message=message)
        return Outcome.rejected(reason, message)

    # -------- Self tests --------

    def run_self_tests(self) -> List[SelfTestResult]:
        """Run the built-in rule checks on scratch boards and report them to the log."""
        # Local import to avoid circular import during module initialization
        from checkerboard.selftest import run_self_tests, summary

        results = run_self_tests()
        passed, total = summary(results)
        self.log.emit(EventKind.SELF_TEST, passed=passed, total=total, results=results)
        return results

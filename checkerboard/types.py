"""
Type definitions for the Checkerboard rules engine.

This module provides:
- Enumerations for colors, outcomes and rejection reasons
- Dataclass implementations for pieces, move targets and game state
- Type aliases for better code readability
- The exception hierarchy used for programming errors
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

# Basic type aliases
Position = Tuple[int, int]  # (row, col) coordinates
Step = Tuple[int, int]  # landing cell of a non-capturing move
Capture = Tuple[int, int, int, int]  # (landing_row, landing_col, middle_row, middle_col)
Direction = Tuple[int, int]

BOARD_SIZE = 8


class CheckersError(Exception):
    """Base class for errors raised by the engine."""


class InvalidPositionError(CheckersError, ValueError):
    """Raised when a piece is placed off the board or on a light cell."""


class Color(Enum):
    RED = "red"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.RED else Color.RED

    @property
    def title(self) -> str:
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Piece:
    """A checker. Promotion builds a new value instead of mutating."""

    color: Color
    king: bool = False

    def crowned(self) -> "Piece":
        if self.king:
            return self
        return Piece(self.color, king=True)


Board = List[List[Optional[Piece]]]
BoardSnapshot = Tuple[Tuple[Optional[Piece], ...], ...]


@dataclass(frozen=True)
class Targets:
    """Legal destinations for one selected piece."""

    steps: Tuple[Step, ...] = ()
    captures: Tuple[Capture, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.steps and not self.captures

    def destinations(self) -> List[Position]:
        """All landing cells, steps first, in generation order."""
        cells: List[Position] = list(self.steps)
        for lr, lc, _, _ in self.captures:
            if (lr, lc) not in cells:
                cells.append((lr, lc))
        return cells

    def capture_to(self, row: int, col: int) -> Optional[Capture]:
        for cap in self.captures:
            if cap[0] == row and cap[1] == col:
                return cap
        return None


class OutcomeStatus(Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class RejectReason(Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    NO_PIECE = "no_piece"
    NOTHING_SELECTED = "nothing_selected"
    ILLEGAL_SELECTION = "illegal_selection"
    CHAIN_LOCKED = "chain_locked"
    ILLEGAL_MOVE = "illegal_move"
    FORCED_CAPTURE = "forced_capture"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Outcome:
    """Result of a session transition."""

    status: OutcomeStatus
    reason: Optional[RejectReason] = None
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.status is OutcomeStatus.ACCEPTED

    @classmethod
    def ok(cls, message: str = "") -> "Outcome":
        return cls(OutcomeStatus.ACCEPTED, None, message)

    @classmethod
    def rejected(cls, reason: RejectReason, message: str) -> "Outcome":
        return cls(OutcomeStatus.REJECTED, reason, message)


@dataclass
class GameState:
    """
    Mutable state of one game session.

    The board is mutated in place by accepted moves; everything else is
    updated by the session's transition functions.
    """
    board: Board
    turn: Color = Color.RED
    advanced: bool = False
    selected: Optional[Position] = None
    chain_origin: Optional[Position] = None
    score: Dict[Color, int] = field(default_factory=lambda: {Color.RED: 0, Color.BLACK: 0})
    winner: Optional[Color] = None

    def __post_init__(self) -> None:
        """Validate the game state after initialization."""
        if len(self.board) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.board):
            raise ValueError("Board must be an 8x8 grid")
        if not isinstance(self.turn, Color):
            raise ValueError("Turn must be a Color")
        if set(self.score) != {Color.RED, Color.BLACK}:
            raise ValueError("Score must have an entry for each color")

    @property
    def chain_in_progress(self) -> bool:
        return self.chain_origin is not None

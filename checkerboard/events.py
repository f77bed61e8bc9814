"""
Structured game events and a bounded, subscribable event stream.

The engine emits ``GameEvent`` values (kind + payload). Front ends turn them
into text with ``describe`` for the activity log and the status line.
"""
from __future__ import annotations

import logging
import traceback
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from types import TracebackType
from typing import Any, Callable, Deque, Dict, List, Optional

from checkerboard.types import Position

logger = logging.getLogger(__name__)

DEFAULT_LOG_LIMIT = 200


class EventKind(Enum):
    NEW_GAME = "new_game"
    MODE_CHANGED = "mode_changed"
    SELECTED = "selected"
    MOVED = "moved"
    CAPTURED = "captured"
    CHAIN_CONTINUES = "chain_continues"
    TURN_PASSED = "turn_passed"
    REJECTED = "rejected"
    GAME_OVER = "game_over"
    SELF_TEST = "self_test"


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    payload: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default)


Listener = Callable[[GameEvent], None]


def _fmt(pos: Optional[Position]) -> str:
    if pos is None:
        return "?"
    return f"{pos[0]},{pos[1]}"


def describe(event: GameEvent) -> str:
    """Human readable one-liner for an event."""
    kind = event.kind
    if kind is EventKind.NEW_GAME:
        return f"New game. {event.get('turn').title} to move."
    if kind is EventKind.MODE_CHANGED:
        if event.get("advanced"):
            return "Mode: Advanced (forced captures + multi-jump + kinging)"
        return "Mode: Simple (single step)"
    if kind is EventKind.SELECTED:
        return f"{event.get('color').title} selected {_fmt(event.get('position'))}"
    if kind is EventKind.MOVED:
        text = f"{event.get('color').title} moved {_fmt(event.get('origin'))} -> {_fmt(event.get('dest'))}"
        return text + (" and was crowned" if event.get("kinged") else "")
    if kind is EventKind.CAPTURED:
        text = (
            f"{event.get('color').title} captured {event.get('captured')} at {_fmt(event.get('middle'))}"
            f" -> landed {_fmt(event.get('dest'))}"
        )
        return text + (" and was crowned" if event.get("kinged") else "")
    if kind is EventKind.CHAIN_CONTINUES:
        return "Another capture is available. Continue with the same piece."
    if kind is EventKind.TURN_PASSED:
        return f"Move complete. {event.get('turn').title} to move."
    if kind is EventKind.REJECTED:
        return str(event.get("message", "Illegal move."))
    if kind is EventKind.GAME_OVER:
        return f"Game Over: {event.get('winner').title} wins!"
    if kind is EventKind.SELF_TEST:
        return f"Tests: {event.get('passed')}/{event.get('total')} passed."
    return kind.value


def runtime_error_lines(exc_type: type, value: BaseException, tb: Optional[TracebackType]) -> List[str]:
    """Log lines for an unexpected error: a ``Runtime Error:`` headline, then the stack."""
    message = str(value) or "Unknown error"
    lines = [f"Runtime Error: {exc_type.__name__}: {message}"]
    for chunk in traceback.format_tb(tb):
        lines.extend(line.rstrip() for line in chunk.splitlines() if line.strip())
    return lines


class EventLog:
    """Append-only event stream keeping the most recent ``limit`` events."""

    def __init__(self, limit: int = DEFAULT_LOG_LIMIT) -> None:
        if limit < 1:
            raise ValueError("Event log limit must be positive")
        self._events: Deque[GameEvent] = deque(maxlen=limit)
        self._listeners: List[Listener] = []

    def __len__(self) -> int:
        return len(self._events)

    @property
    def limit(self) -> int:
        return self._events.maxlen  # type: ignore[return-value]

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, kind: EventKind, **payload: Any) -> GameEvent:
        event = GameEvent(kind, payload)
        self._events.append(event)
        logger.debug("event %s %s", kind.value, payload)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                # Listeners run after the state change; their failures are only logged.
                logger.exception("Event listener %r failed", listener)
        return event

    def events(self) -> List[GameEvent]:
        return list(self._events)

    def latest(self) -> Optional[GameEvent]:
        return self._events[-1] if self._events else None

    def clear(self) -> None:
        self._events.clear()

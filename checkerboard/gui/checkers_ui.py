"""
Main Checkers GUI: a thin adapter from Tk events to a GameSession.
"""
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk

from config import get_ui_settings
from checkerboard.events import EventKind, EventLog, GameEvent, describe, runtime_error_lines
from checkerboard.rules import selectable_pieces
from checkerboard.types import Color
from checkerboard.gui.constants import FONT_TITLE, FONT_NORMAL, TEXT_COLOR_ERROR, TEXT_COLOR_NORMAL
from checkerboard.gui.factory import GUIComponentFactory, GUIFactory

logger = logging.getLogger(__name__)


class CheckersUI(tk.Tk):
    """Two-player checkers window."""

    def __init__(self):
        super().__init__()
        self.title("Checkers")
        self.resizable(False, False)

        settings = get_ui_settings()
        self.square_size = settings.square_size
        self.show_selectable = settings.show_selectable

        # The log must exist before the session so NEW_GAME reaches the listbox.
        self.event_log = EventLog(settings.log_limit)
        self._build_ui()
        self.event_log.subscribe(self._on_event)
        self.session = GUIFactory.create_session(self.event_log)
        self.advanced_var.set(self.session.advanced)
        self._refresh_ui()
        self._append_log("Ready. Click a piece to move.")

    def _build_ui(self):
        """Build the main UI layout."""
        container = ttk.Frame(self, padding=8)
        container.grid(row=0, column=0, sticky="nsew")

        # Left: Board
        self.canvas = GUIComponentFactory.create_main_canvas(container, self.square_size)
        self.canvas.grid(row=0, column=0, rowspan=3, sticky="n")
        self.canvas.bind("<Button-1>", self.on_click)
        self.board_renderer = GUIFactory.create_board_renderer(self.canvas)

        # Right: Controls
        controls = GUIComponentFactory.create_controls_frame(container)
        controls.grid(row=0, column=1, sticky="nw")

        title = GUIComponentFactory.create_label(controls, "Checkers", FONT_TITLE)
        title.grid(row=0, column=0, columnspan=3, sticky="w", pady=(0, 10))

        self.advanced_var = tk.BooleanVar(value=False)
        mode_chk = GUIComponentFactory.create_checkbutton(
            controls, "Captures & Kinging (advanced)", self.advanced_var, self._toggle_mode
        )
        mode_chk.grid(row=1, column=0, columnspan=3, sticky="w")

        btns = ttk.Frame(controls)
        btns.grid(row=2, column=0, columnspan=3, sticky="we", pady=(10, 4))
        self.btn_new = GUIComponentFactory.create_button(btns, "New Game", self._new_game)
        self.btn_new.grid(row=0, column=0, padx=(0, 5))
        self.btn_tests = GUIComponentFactory.create_button(btns, "Run Tests", self._run_tests)
        self.btn_tests.grid(row=0, column=1, padx=5)

        GUIComponentFactory.create_label(controls, "Move log:").grid(row=3, column=0, columnspan=3, sticky="w", pady=(8, 2))
        self.log_list = GUIComponentFactory.create_listbox(controls)
        self.log_list.grid(row=4, column=0, columnspan=3, sticky="w")

        # Status panel
        status = GUIComponentFactory.create_status_frame(container)
        status.grid(row=2, column=1, sticky="nw")
        self.lbl_turn = GUIComponentFactory.create_label(status, "", FONT_NORMAL)
        self.lbl_turn.grid(row=0, column=0, sticky="w")
        self.lbl_score = GUIComponentFactory.create_label(status, "")
        self.lbl_score.grid(row=1, column=0, sticky="w", pady=(4, 0))
        self.lbl_remaining = GUIComponentFactory.create_label(status, "")
        self.lbl_remaining.grid(row=2, column=0, sticky="w", pady=(4, 0))
        # Status line plays the role of a screen-reader announcement.
        self.lbl_status = GUIComponentFactory.create_label(status, "", foreground=TEXT_COLOR_NORMAL)
        self.lbl_status.grid(row=3, column=0, sticky="w", pady=(4, 0))

    # -------- Controls --------

    def _new_game(self):
        self.session.reset()
        self._refresh_ui()

    def _toggle_mode(self):
        self.session.set_advanced(self.advanced_var.get())
        self._refresh_ui()

    def _run_tests(self):
        for result in self.session.run_self_tests():
            self._append_log(f"{'PASS' if result.passed else 'FAIL'} {result.name}")
        self._refresh_ui()

    # -------- Interaction --------

    def on_click(self, event):
        square = self.board_renderer.square_at(event.x, event.y)
        if square is None:
            return
        self.session.click(*square)
        self._refresh_ui()

    def _on_event(self, event: GameEvent) -> None:
        text = describe(event)
        if event.kind is not EventKind.SELECTED:
            self._append_log(text)
        color = TEXT_COLOR_ERROR if event.kind is EventKind.REJECTED else TEXT_COLOR_NORMAL
        self.lbl_status.config(text=text, foreground=color)

    def _append_log(self, text: str) -> None:
        # Newest first.
        self.log_list.insert(0, text)
        overflow = self.log_list.size() - self.event_log.limit
        if overflow > 0:
            self.log_list.delete(self.event_log.limit, tk.END)

    def report_callback_exception(self, exc, val, tb):
        """Surface errors raised in Tk callbacks in the move log and status line."""
        logger.error("Unhandled error in GUI callback", exc_info=(exc, val, tb))
        lines = runtime_error_lines(exc, val, tb)
        for line in reversed(lines):
            self._append_log(line)
        self.lbl_status.config(text=lines[0], foreground=TEXT_COLOR_ERROR)

    # -------- Rendering --------

    def _refresh_ui(self):
        """Refresh all UI elements."""
        session = self.session
        self.board_renderer.set_selected_square(session.selected)
        self.board_renderer.set_targets(session.targets())
        if self.show_selectable:
            self.board_renderer.set_selectable(selectable_pieces(session.state))
        self.board_renderer.redraw_board(session.snapshot())

        mode = "Advanced" if session.advanced else "Simple"
        self.lbl_turn.config(text=f"Turn: {session.turn.title} | Mode: {mode}")
        score = session.score
        self.lbl_score.config(text=f"Score: Red {score[Color.RED]} | Black {score[Color.BLACK]}")
        self.lbl_remaining.config(
            text=f"Remaining: Red {session.remaining(Color.RED)} | Black {session.remaining(Color.BLACK)}"
        )

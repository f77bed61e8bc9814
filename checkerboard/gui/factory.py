"""
GUI component factory for creating and configuring GUI components.
"""
from __future__ import annotations

from typing import Tuple, Any, Optional
import tkinter as tk
from tkinter import ttk

from config import get_ui_settings
from checkerboard.events import EventLog
from checkerboard.session import GameSession
from checkerboard.gui.board_renderer import BoardRenderer
from checkerboard.gui.constants import BOARD_BG_LIGHT, FONT_LABEL


class GUIComponentFactory:
    """Factory for creating and configuring GUI components."""

    @staticmethod
    def create_main_canvas(parent: ttk.Frame, square_size: int) -> tk.Canvas:
        """Create the main board canvas."""
        canvas = tk.Canvas(
            parent,
            width=8 * square_size,
            height=8 * square_size,
            highlightthickness=0,
            bg=BOARD_BG_LIGHT
        )
        return canvas

    @staticmethod
    def create_controls_frame(parent: ttk.Frame, padding: Tuple[int, int] = (10, 0)) -> ttk.Frame:
        """Create the controls frame."""
        return ttk.Frame(parent, padding=padding)

    @staticmethod
    def create_button(parent: ttk.Frame, text: str, command: Any) -> ttk.Button:
        """Create a styled button."""
        return ttk.Button(parent, text=text, command=command)

    @staticmethod
    def create_label(parent: Any, text: str, font: Tuple[str, int, str] = FONT_LABEL,
                    **kwargs) -> ttk.Label:
        """Create a styled label."""
        return ttk.Label(parent, text=text, font=font, **kwargs)

    @staticmethod
    def create_checkbutton(parent: ttk.Frame, text: str, variable: tk.Variable,
                          command: Any = None) -> ttk.Checkbutton:
        """Create a styled checkbutton."""
        return ttk.Checkbutton(parent, text=text, variable=variable, command=command)

    @staticmethod
    def create_listbox(parent: ttk.Frame, height: int = 14, width: int = 48,
                      **kwargs) -> tk.Listbox:
        """Create a styled listbox."""
        return tk.Listbox(parent, height=height, width=width, activestyle="dotbox", **kwargs)

    @staticmethod
    def create_status_frame(parent: ttk.Frame, padding: Tuple[int, int] = (0, 8)) -> ttk.Frame:
        """Create the status frame."""
        return ttk.Frame(parent, padding=padding)


class GUIFactory:
    """Main factory for the non-widget components the UI is built from."""

    @staticmethod
    def create_session(event_log: Optional[EventLog] = None) -> GameSession:
        """Create a new game session using the configured rules."""
        return GameSession(event_log=event_log)

    @staticmethod
    def create_board_renderer(canvas: tk.Canvas) -> BoardRenderer:
        """Create a board renderer with the given canvas."""
        settings = get_ui_settings()
        renderer = BoardRenderer(canvas, square_size=settings.square_size)
        renderer.show_hints = settings.show_hints
        return renderer

"""Shared base screen class for the glbrowse TUI."""

from __future__ import annotations

from textual.screen import Screen

from glbrowse.tui.common.keybindings import (
    NAV_DOWN_BINDING,
    NAV_UP_BINDING,
    QUIT_ESCAPE_BINDING,
    QUIT_Q_BINDING,
)


class BrowseScreen(Screen):
    """Base class for screens with the global quit/navigation bindings."""

    BINDINGS = [
        QUIT_ESCAPE_BINDING,
        QUIT_Q_BINDING,
        NAV_DOWN_BINDING,
        NAV_UP_BINDING,
    ]

    def action_quit(self) -> None:
        """Quit the app from any screen."""
        self.app.exit()

    def action_cursor_down(self) -> None:
        """Default no-op cursor movement hook."""
        return

    def action_cursor_up(self) -> None:
        """Default no-op cursor movement hook."""
        return

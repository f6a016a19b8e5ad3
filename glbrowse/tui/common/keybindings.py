"""Shared keybinding contract for TUI screens."""

from __future__ import annotations

from typing import TypeAlias

Binding: TypeAlias = tuple[str, str, str]

QUIT_ESCAPE_BINDING: Binding = ("escape", "quit", "Quit")
QUIT_Q_BINDING: Binding = ("q", "quit", "Quit")
NAV_DOWN_BINDING: Binding = ("down", "cursor_down", "Down")
NAV_UP_BINDING: Binding = ("up", "cursor_up", "Up")

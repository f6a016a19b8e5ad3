"""Contract tests for shared TUI keybindings."""

from glbrowse.tui.common import keybindings
from glbrowse.tui.common.base_screen import BrowseScreen
from glbrowse.tui.screens.projects.projects import ProjectsScreen


def test_global_keybinding_contract_exports_expected_bindings() -> None:
    """Shared keybinding module should export stable global bindings."""
    assert keybindings.QUIT_ESCAPE_BINDING == ("escape", "quit", "Quit")
    assert keybindings.QUIT_Q_BINDING == ("q", "quit", "Quit")
    assert keybindings.NAV_DOWN_BINDING == ("down", "cursor_down", "Down")
    assert keybindings.NAV_UP_BINDING == ("up", "cursor_up", "Up")


def test_base_screen_binds_the_global_contract() -> None:
    """Base screen carries exactly the quit and navigation bindings."""
    assert BrowseScreen.BINDINGS == [
        keybindings.QUIT_ESCAPE_BINDING,
        keybindings.QUIT_Q_BINDING,
        keybindings.NAV_DOWN_BINDING,
        keybindings.NAV_UP_BINDING,
    ]


def test_projects_screen_binds_only_quit_and_arrow_keys() -> None:
    """Projects screen recognizes escape, q, up and down; nothing else."""
    keys = {binding[0] for binding in ProjectsScreen.BINDINGS}
    assert keys == {"escape", "q", "up", "down"}

"""Main TUI app and lifecycle."""

from collections.abc import Sequence

from textual.app import App

from glbrowse.models import Project
from glbrowse.tui.screens.projects.projects import ProjectsScreen


class BrowserApp(App):
    """GitLab project browser. Single screen: project list with details."""

    TITLE = "glbrowse"
    SUB_TITLE = "GitLab projects"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = []

    def __init__(self, projects: Sequence[Project], **kwargs) -> None:  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self._projects = list(projects)

    def on_mount(self) -> None:
        """Push the projects screen on mount."""
        self.push_screen(ProjectsScreen(self._projects))

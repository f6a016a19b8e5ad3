"""Projects screen: browse fetched projects with a details panel."""

from glbrowse.tui.screens.projects.projects import ProjectsScreen

__all__ = ["ProjectsScreen"]

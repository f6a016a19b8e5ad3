"""Selection state for the project browser."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from glbrowse.models import Project


class BrowserState:
    """Fixed project list plus the index of the highlighted project.

    `selected_index` is 0 for a non-empty list and None for an empty one;
    movement clamps at both ends.
    """

    def __init__(self, projects: Sequence[Project]) -> None:
        self.projects: tuple[Project, ...] = tuple(projects)
        self.selected_index: Optional[int] = 0 if self.projects else None

    @property
    def selected(self) -> Optional[Project]:
        """Currently highlighted project, or None when the list is empty."""
        if self.selected_index is None:
            return None
        return self.projects[self.selected_index]

    def select_next(self) -> bool:
        """Move selection down one row. Returns True if it moved."""
        if self.selected_index is None or self.selected_index + 1 >= len(self.projects):
            return False
        self.selected_index += 1
        return True

    def select_previous(self) -> bool:
        """Move selection up one row. Returns True if it moved."""
        if self.selected_index is None or self.selected_index <= 0:
            return False
        self.selected_index -= 1
        return True

    def select(self, index: int) -> bool:
        """Select `index` if it is in range. Returns True if the selection changed."""
        if not 0 <= index < len(self.projects) or index == self.selected_index:
            return False
        self.selected_index = index
        return True

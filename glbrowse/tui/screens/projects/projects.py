"""Projects screen: scrollable project list above a details panel."""

from collections.abc import Sequence
from typing import Optional

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from glbrowse.models import Project
from glbrowse.tui.common.base_screen import BrowseScreen
from glbrowse.tui.state import BrowserState

LIST_TITLE = "Projects (Esc/q to quit)"
DETAILS_TITLE = "Details"
HIGHLIGHT_SYMBOL = "> "


class ProjectList(OptionList, can_focus=False):
    """Option list driven only by the screen's selection state."""


def format_details(project: Optional[Project]) -> Text:
    """Return the details panel body for `project` (blank when None)."""
    if project is None:
        return Text("")
    return Text(
        f"Name: {project.name}\n"
        f"Description: {project.description}\n"
        f"Web URL: {project.web_url}"
    )


class ProjectsScreen(BrowseScreen):
    """Browse fetched projects. Up/Down move the selection, Esc or q quits."""

    CSS_PATH = "projects.tcss"
    AUTO_FOCUS = None

    def __init__(self, projects: Sequence[Project]) -> None:
        super().__init__()
        self._browser_state = BrowserState(projects)

    @property
    def browser_state(self) -> BrowserState:
        return self._browser_state

    def compose(self) -> ComposeResult:
        with Vertical(id="projects-content"):
            yield ProjectList(id="projects-list")
            yield Static("", id="projects-details")

    def on_mount(self) -> None:
        """Populate the list and details panel from the fetched projects."""
        self._apply_list()

    def _option_prompt(self, index: int) -> Text:
        marker = HIGHLIGHT_SYMBOL if index == self._browser_state.selected_index else "  "
        return Text(f"{marker}{self._browser_state.projects[index].name}")

    def _apply_list(self) -> None:
        """Render project list from in-memory state."""
        opt_list = self.query_one("#projects-list", OptionList)
        opt_list.border_title = LIST_TITLE
        self.query_one("#projects-details", Static).border_title = DETAILS_TITLE

        opt_list.clear_options()
        opt_list.add_options(
            [
                Option(self._option_prompt(i), id=str(i))
                for i in range(len(self._browser_state.projects))
            ]
        )
        self._sync_selection(None)

    def _sync_selection(self, previous: Optional[int]) -> None:
        """Move marker, highlight and details to the current selection."""
        opt_list = self.query_one("#projects-list", OptionList)
        if previous is not None and previous != self._browser_state.selected_index:
            opt_list.replace_option_prompt_at_index(previous, self._option_prompt(previous))

        idx = self._browser_state.selected_index
        if idx is not None:
            opt_list.replace_option_prompt_at_index(idx, self._option_prompt(idx))
            # Highlighting scrolls the option into view
            opt_list.highlighted = idx
        self._update_detail_panel()

    def _update_detail_panel(self) -> None:
        self.query_one("#projects-details", Static).update(
            format_details(self._browser_state.selected)
        )

    def on_option_list_option_highlighted(
        self, event: OptionList.OptionHighlighted
    ) -> None:
        """Keep state in sync if the list moves its own highlight."""
        try:
            idx = int(event.option.id)
        except (ValueError, TypeError):
            return
        previous = self._browser_state.selected_index
        if self._browser_state.select(idx):
            self._sync_selection(previous)

    def action_cursor_down(self) -> None:
        """Select the next project; no-op on the last one."""
        previous = self._browser_state.selected_index
        if self._browser_state.select_next():
            self._sync_selection(previous)

    def action_cursor_up(self) -> None:
        """Select the previous project; no-op on the first one."""
        previous = self._browser_state.selected_index
        if self._browser_state.select_previous():
            self._sync_selection(previous)

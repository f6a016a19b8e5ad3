"""[Layer: Presentation] Typer CLI entry."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

import typer

from glbrowse.config import Settings, get_settings
from glbrowse.core.fetcher import FetchError, fetch_projects
from glbrowse.credentials import (
    CredentialProvider,
    Credentials,
    EnvCredentialProvider,
    MissingCredentialError,
)
from glbrowse.models import Project
from glbrowse.tui.app import BrowserApp

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="glbrowse",
    help="Browse your GitLab projects in the terminal.",
    add_completion=False,
)


def load_projects(credentials: Credentials, timeout: Optional[float] = None) -> list[Project]:
    """Fetch projects once; a failed fetch degrades to an empty list."""
    try:
        return fetch_projects(credentials.token, credentials.host, timeout=timeout)
    except FetchError as e:
        logger.error("Failed to fetch projects: %s", e)
        return []


@contextmanager
def _console_logging_suspended() -> Iterator[None]:
    """Detach stderr log handlers while the TUI owns the terminal.

    File handlers stay attached; console handlers are restored on exit.
    """
    root_logger = logging.getLogger()
    console_handlers = [
        handler
        for handler in root_logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.FileHandler)
    ]
    for handler in console_handlers:
        root_logger.removeHandler(handler)
    try:
        yield
    finally:
        for handler in console_handlers:
            root_logger.addHandler(handler)


def _launch_tui(
    settings: Settings,
    provider: Optional[CredentialProvider] = None,
) -> None:
    """Resolve credentials, fetch projects, then run the browser until quit.

    Raises:
        typer.Exit: With code 1 if credentials are missing, or with the
            app's return code if the UI failed.
    """
    provider = provider or EnvCredentialProvider(settings)
    try:
        credentials = provider.resolve()
    except MissingCredentialError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    projects = load_projects(credentials, timeout=settings.request_timeout)

    browser = BrowserApp(projects)
    with _console_logging_suspended():
        browser.run(mouse=False)
    if browser.return_code:
        logger.error("Browser exited with code %s", browser.return_code)
        raise typer.Exit(browser.return_code)


@app.command()
def browse() -> None:
    """Fetch your GitLab projects and browse them (Up/Down, Esc or q to quit)."""
    _launch_tui(get_settings())

"""GitLab credential resolution.

Reads GITLAB_TOKEN and GITLAB_HOST from settings (environment or .env).
Missing values are prompted for on standard input and appended to the
.env file so the next run picks them up.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import typer

from glbrowse.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = Path(".env")

TOKEN_ENV_KEY = "GITLAB_TOKEN"
HOST_ENV_KEY = "GITLAB_HOST"


@dataclass(frozen=True)
class Credentials:
    """Token and host used for the query API call."""

    token: str
    host: str


class MissingCredentialError(Exception):
    """A required credential was neither configured nor entered."""

    def __init__(self, label: str) -> None:
        super().__init__(f"GitLab {label} is required. Exiting.")
        self.label = label


def _prompt_stdin(text: str) -> str:
    return typer.prompt(text, default="", show_default=False)


class CredentialProvider(ABC):
    """Single resolution point for credentials."""

    @abstractmethod
    def resolve(self) -> Credentials:
        """Return credentials or raise MissingCredentialError."""
        ...


class StaticCredentialProvider(CredentialProvider):
    """Provider returning fixed credentials."""

    def __init__(self, credentials: Credentials) -> None:
        self._credentials = credentials

    def resolve(self) -> Credentials:
        return self._credentials


class EnvCredentialProvider(CredentialProvider):
    """Provider backed by settings, with an interactive fallback.

    Args:
        settings: Loaded settings (environment and .env already merged).
        env_file: File that entered values are appended to.
        prompt: Callable used to ask for a missing value; defaults to a stdin prompt.
    """

    def __init__(
        self,
        settings: Settings,
        env_file: Path = DEFAULT_ENV_FILE,
        prompt: Optional[Callable[[str], str]] = None,
    ) -> None:
        self._settings = settings
        self._env_file = env_file
        self._prompt = prompt or _prompt_stdin

    def resolve(self) -> Credentials:
        token = self._resolve_value(self._settings.gitlab_token, TOKEN_ENV_KEY, "token")
        host = self._resolve_value(self._settings.gitlab_host, HOST_ENV_KEY, "host")
        return Credentials(token=token, host=host)

    def _resolve_value(self, configured: Optional[str], env_key: str, label: str) -> str:
        if configured:
            return configured

        entered = self._prompt(f"Enter your GitLab {label} (leave blank to exit)").strip()
        if not entered:
            raise MissingCredentialError(label)

        self._persist(env_key, entered)
        return entered

    def _persist(self, env_key: str, value: str) -> None:
        """Append KEY=value to the env file, creating it if needed."""
        try:
            with open(self._env_file, "a", encoding="utf-8") as f:
                f.write(f"{env_key}={value}\n")
        except OSError as e:
            # Value is still used for this run
            logger.error("Failed to save %s to %s: %s", env_key, self._env_file, e)

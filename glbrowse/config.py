"""Environment and settings (Pydantic Settings)."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory: ~/.glbrowse/
_data_dir = Path.home() / ".glbrowse"


class Settings(BaseSettings):
    """glbrowse settings loaded from environment and .env.

    GitLab credentials keep their conventional unprefixed names
    (GITLAB_TOKEN, GITLAB_HOST) so an existing .env keeps working.
    """

    model_config = SettingsConfigDict(
        env_prefix="GLBROWSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # GitLab credentials (prompted for and appended to .env when missing)
    gitlab_token: Optional[str] = Field(None, validation_alias="GITLAB_TOKEN")
    gitlab_host: Optional[str] = Field(None, validation_alias="GITLAB_HOST")

    # Seconds; None waits indefinitely
    request_timeout: Optional[float] = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: Path = _data_dir / "glbrowse.log"


def get_settings() -> Settings:
    """Return application settings (singleton-like)."""
    return Settings()

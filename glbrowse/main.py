"""Application Bootstrap (Entry Point)."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .cli import app
from .config import get_settings

# Logging configuration constants
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024  # 5MB max log file size
LOG_FILE_BACKUP_COUNT = 3  # Keep 3 backup log files


def setup_logging() -> None:
    """Configure application-wide logging.

    Logs to both file (~/.glbrowse/glbrowse.log) and stderr.
    Log level controlled by GLBROWSE_LOG_LEVEL env var (default: INFO).

    Falls back to defaults if settings fail to load so that
    logging is always available.
    """
    try:
        settings = get_settings()
        log_file = settings.log_file
        log_level = settings.log_level
    except Exception as e:
        print(f"Warning: Failed to load settings for logging: {e}", file=sys.stderr)
        log_file = Path.home() / ".glbrowse" / "glbrowse.log"
        log_level = "INFO"

    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter("%(levelname)-8s | %(name)s | %(message)s")

    # File handler with rotation
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(logging.DEBUG)

    # Console handler (stderr) - only WARNING+ so the TUI stays clean
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # Quiet noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def main() -> None:
    """Main entry point for the glbrowse CLI."""
    setup_logging()
    app()


if __name__ == "__main__":
    main()

"""Application logic layer."""

from .fetcher import FetchError, fetch_projects, parse_projects

__all__ = ["FetchError", "fetch_projects", "parse_projects"]

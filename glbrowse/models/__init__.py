"""Domain models."""

from .project import (
    DESCRIPTION_PLACEHOLDER,
    NAME_PLACEHOLDER,
    WEB_URL_PLACEHOLDER,
    GraphQLResponse,
    Project,
)

__all__ = [
    "DESCRIPTION_PLACEHOLDER",
    "NAME_PLACEHOLDER",
    "WEB_URL_PLACEHOLDER",
    "GraphQLResponse",
    "Project",
]

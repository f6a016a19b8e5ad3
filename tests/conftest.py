"""Global fixtures: sample projects and GraphQL response bodies."""

import pytest

from glbrowse.models import Project


@pytest.fixture
def sample_projects() -> list[Project]:
    """Three projects in server order."""
    return [
        Project(name="alpha", description="First project", web_url="https://gitlab.example.com/g/alpha"),
        Project(name="beta", description="Second project", web_url="https://gitlab.example.com/g/beta"),
        Project(name="gamma", description="No description", web_url="N/A"),
    ]


@pytest.fixture
def single_node_body() -> dict[str, object]:
    """Response with one fully populated node."""
    return {
        "data": {
            "projects": {
                "nodes": [
                    {"id": "gid://gitlab/Project/1", "name": "A", "description": "d", "webUrl": "http://x"}
                ]
            }
        }
    }

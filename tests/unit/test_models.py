"""Unit tests for GraphQL response parsing into Project records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from glbrowse.core.fetcher import parse_projects
from glbrowse.models import Project


def test_single_node_parses_all_fields(single_node_body: dict[str, object]) -> None:
    """A fully populated node maps name/description/webUrl onto Project."""
    projects = parse_projects(single_node_body)

    assert projects == [Project(name="A", description="d", web_url="http://x")]


def test_missing_fields_use_placeholders() -> None:
    """Only a name present: description and URL fall back to placeholders."""
    body = {"data": {"projects": {"nodes": [{"name": "A"}]}}}

    assert parse_projects(body) == [
        Project(name="A", description="No description", web_url="N/A")
    ]


def test_non_string_and_null_fields_use_placeholders() -> None:
    """Null description (common on GitLab) and non-string values are replaced."""
    body = {
        "data": {
            "projects": {
                "nodes": [{"name": 42, "description": None, "webUrl": ["x"]}]
            }
        }
    }

    assert parse_projects(body) == [
        Project(name="N/A", description="No description", web_url="N/A")
    ]


def test_preserves_server_order_and_count() -> None:
    """N nodes yield N projects in the order the server returned them."""
    names = [f"project-{i}" for i in range(100)]
    body = {"data": {"projects": {"nodes": [{"name": n} for n in names]}}}

    projects = parse_projects(body)

    assert [p.name for p in projects] == names


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"data": None},
        {"data": {}},
        {"data": {"projects": None}},
        {"data": {"projects": {}}},
        {"data": {"projects": {"nodes": None}}},
        {"data": {"projects": {"nodes": {"name": "not-a-list"}}}},
        [],
        "unexpected",
    ],
)
def test_missing_nodes_path_yields_empty_list(body: object) -> None:
    """Absent or malformed data.projects.nodes is an empty result, not an error."""
    assert parse_projects(body) == []


def test_non_object_node_becomes_placeholder_project() -> None:
    """Nodes that are not objects still count, with every field defaulted."""
    body = {"data": {"projects": {"nodes": ["junk", {"name": "ok"}]}}}

    projects = parse_projects(body)

    assert projects == [
        Project(name="N/A", description="No description", web_url="N/A"),
        Project(name="ok", description="No description", web_url="N/A"),
    ]


def test_graphql_errors_are_logged_and_data_still_parsed(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Partial responses with errors keep their nodes; errors go to the log."""
    body = {
        "data": {"projects": {"nodes": [{"name": "A"}]}},
        "errors": [{"message": "Field 'foo' doesn't exist"}],
    }

    with caplog.at_level("WARNING", logger="glbrowse.core.fetcher"):
        projects = parse_projects(body)

    assert [p.name for p in projects] == ["A"]
    assert "Field 'foo' doesn't exist" in caplog.text


def test_project_is_immutable() -> None:
    """Project records cannot be changed after creation."""
    project = Project(name="A", description="d", web_url="http://x")

    with pytest.raises(ValidationError):
        project.name = "B"  # type: ignore[misc]

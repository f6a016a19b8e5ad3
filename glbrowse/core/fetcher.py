"""GitLab project fetcher using httpx for the GraphQL call."""

import logging
from typing import Any, Optional

import httpx

from glbrowse.core.constants import GRAPHQL_URL_TEMPLATE, PROJECTS_PAGE_SIZE, PROJECTS_QUERY
from glbrowse.models import GraphQLResponse, Project

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Project list could not be retrieved (transport, HTTP status or JSON)."""


def build_payload() -> dict[str, Any]:
    """Return the JSON body for the projects query."""
    return {"query": PROJECTS_QUERY, "variables": {"first": PROJECTS_PAGE_SIZE}}


def parse_projects(body: Any) -> list[Project]:
    """Parse a decoded GraphQL response body into projects.

    A body without a `data.projects.nodes` array yields an empty list.

    Args:
        body: Decoded JSON response.

    Returns:
        Projects in server order, placeholders applied to missing fields.
    """
    response = GraphQLResponse.model_validate(body)
    for message in response.error_messages():
        logger.warning("GitLab GraphQL error: %s", message)
    return response.projects()


def fetch_projects(
    token: str,
    host: str,
    *,
    client: Optional[httpx.Client] = None,
    timeout: Optional[float] = None,
) -> list[Project]:
    """Fetch up to 100 projects from a GitLab instance.

    Args:
        token: Personal access token, sent as a bearer token.
        host: GitLab host without scheme (e.g. "gitlab.com").
        client: Optional httpx client; one is created and closed if omitted.
        timeout: Request timeout in seconds for an owned client (None = no timeout).

    Returns:
        Parsed projects in server order.

    Raises:
        FetchError: On an invalid host, connection failure, non-2xx status
            or malformed JSON.
    """
    url = GRAPHQL_URL_TEMPLATE.format(host=host)
    headers = {"Authorization": f"Bearer {token}"}
    logger.debug("Fetching projects from %s", url)

    try:
        if client is None:
            with httpx.Client(timeout=timeout) as owned_client:
                response = owned_client.post(url, json=build_payload(), headers=headers)
        else:
            response = client.post(url, json=build_payload(), headers=headers)
        response.raise_for_status()
        body = response.json()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchError(f"{type(e).__name__}: {e}") from e
    except ValueError as e:
        raise FetchError(f"Malformed JSON response: {e}") from e

    projects = parse_projects(body)
    logger.info("Fetched %d projects from %s", len(projects), host)
    return projects

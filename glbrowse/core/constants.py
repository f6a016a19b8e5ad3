"""Constants for the GitLab query API client."""

# =============================================================================
# Query API
# =============================================================================

# Endpoint template; host carries no scheme
GRAPHQL_URL_TEMPLATE = "https://{host}/api/graphql"

# Single request, no pagination beyond this
PROJECTS_PAGE_SIZE = 100

PROJECTS_QUERY = """
query Projects($first: Int) {
  projects(first: $first) {
    nodes {
      id
      name
      description
      webUrl
    }
  }
}
"""

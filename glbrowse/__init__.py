"""Terminal browser for GitLab projects."""

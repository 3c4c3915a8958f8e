"""Infrastructure layer - Technical implementations"""

from .github import GitHubClient, application_github_client, with_error_handling

__all__ = ["GitHubClient", "application_github_client", "with_error_handling"]

"""GitHub API integration"""

from .client import GitHubClient, RateLimit
from .error_handling import (
    build_error_message,
    github_error_handling,
    translate_error,
    with_error_handling,
)
from .errors import (
    GitHubAPIError,
    GitHubClientError,
    GitHubNetworkError,
    RemoteErrorCategory,
    error_from_response,
)
from .factory import application_github_client

__all__ = [
    "GitHubClient",
    "RateLimit",
    "GitHubAPIError",
    "GitHubClientError",
    "GitHubNetworkError",
    "RemoteErrorCategory",
    "error_from_response",
    "application_github_client",
    "build_error_message",
    "github_error_handling",
    "translate_error",
    "with_error_handling",
]

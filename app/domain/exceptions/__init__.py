from .base import DomainError, ValidationError
from .github import (
    GitHubError,
    GitHubErrorKind,
    GitHubForbiddenError,
    GitHubNotFoundError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "GitHubError",
    "GitHubErrorKind",
    "GitHubForbiddenError",
    "GitHubNotFoundError",
]

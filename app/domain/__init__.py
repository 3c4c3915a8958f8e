"""Domain layer - Business rules and entities"""

from .exceptions import (
    DomainError,
    GitHubError,
    GitHubErrorKind,
    GitHubForbiddenError,
    GitHubNotFoundError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "GitHubError",
    "GitHubErrorKind",
    "GitHubForbiddenError",
    "GitHubNotFoundError",
]

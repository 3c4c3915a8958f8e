"""
GitHub連携のドメイン例外

GitHub APIの失敗は、呼び出し側が扱いやすいように
汎用エラー・権限エラー・未検出エラーの3種類に集約する。
"""

from enum import Enum
from typing import Optional

from .base import DomainError

GITHUB_HOST = "github.com"


class GitHubErrorKind(str, Enum):
    """GitHubドメインエラーの種別"""

    ERROR = "error"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"


class GitHubError(DomainError):
    """
    GitHub連携の汎用エラー

    GitHub側の障害やバリデーションエラーなど、
    権限・未検出以外の失敗を表す。
    """

    kind: GitHubErrorKind = GitHubErrorKind.ERROR
    default_message = f"There seems to be a problem on {GITHUB_HOST}, please try again."
    default_code = "github_error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message=message)


class GitHubForbiddenError(GitHubError):
    """GitHub上での操作権限がない場合のエラー（未認証を含む）"""

    kind = GitHubErrorKind.FORBIDDEN
    default_message = f"You are forbidden from performing this action on {GITHUB_HOST}"
    default_code = "github_forbidden"


class GitHubNotFoundError(GitHubError):
    """GitHub上にリソースが存在しない場合のエラー"""

    kind = GitHubErrorKind.NOT_FOUND
    default_message = f"Resource could not be found on {GITHUB_HOST}"
    default_code = "github_not_found"

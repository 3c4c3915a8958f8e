"""
GitHub APIエラーのドメインエラーへの変換

GitHubクライアントが送出するGitHubAPIErrorを分類し、
GitHubError / GitHubForbiddenError / GitHubNotFoundError に置き換える。
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, Mapping, Optional, TypeVar

from app.core.logging import get_logger
from app.domain.exceptions.github import (
    GitHubError,
    GitHubForbiddenError,
    GitHubNotFoundError,
)

from .errors import GitHubAPIError, RemoteErrorCategory

logger = get_logger(__name__)

T = TypeVar("T")

# 既存の利用者向け文言と互換性を保つため綴りはそのまま
DEFAULT_ERROR_MESSAGE = "An error has occured"


def build_error_message(error: Any) -> str:
    """
    422レスポンスの構造化エラーから表示用メッセージを組み立てる

    resource、（messageがなければ）code・field、（あれば）message の順に
    存在するものだけを半角スペースで連結する。codeの"_"はスペースに置き換える。

    Args:
        error: 構造化エラー（先頭の1件）。dict以外（文字列など）はmessageとして扱う

    Returns:
        表示用メッセージ

    Examples:
        >>> build_error_message({"resource": "Issue", "field": "title", "code": "missing_field"})
        'Issue missing field title'
        >>> build_error_message({"resource": "Issue", "message": "is invalid"})
        'Issue is invalid'
    """
    if not error:
        return DEFAULT_ERROR_MESSAGE
    if not isinstance(error, Mapping):
        error = {"message": error}

    parts: list[Any] = []
    if error.get("resource") is not None:
        parts.append(error["resource"])

    message = error.get("message")
    if message is None:
        if error.get("code") is not None:
            parts.append(str(error["code"]).replace("_", " "))
        if error.get("field") is not None:
            parts.append(error["field"])
    else:
        parts.append(message)

    text = " ".join(str(part) for part in parts)
    return text or DEFAULT_ERROR_MESSAGE


def translate_error(err: GitHubAPIError) -> Optional[GitHubError]:
    """
    GitHubAPIErrorに対応するドメインエラーを返す

    Args:
        err: GitHubクライアントの例外

    Returns:
        ドメインエラー。変換対象外の分類の場合はNone
    """
    match err.category:
        case RemoteErrorCategory.FORBIDDEN | RemoteErrorCategory.UNAUTHORIZED:
            return GitHubForbiddenError()
        case RemoteErrorCategory.NOT_FOUND:
            return GitHubNotFoundError()
        case RemoteErrorCategory.SERVER_ERROR:
            return GitHubError()
        case RemoteErrorCategory.UNPROCESSABLE_ENTITY:
            return GitHubError(build_error_message(err.errors[0] if err.errors else None))
        case _:
            return None


@contextmanager
def github_error_handling() -> Iterator[None]:
    """
    ブロック内で発生したGitHub APIエラーをドメインエラーに変換する

    変換対象外の分類のGitHubAPIErrorや、それ以外の例外はそのまま送出される。
    変換後の例外には元の例外をチェーンしない。

    Raises:
        GitHubForbiddenError: 403 / 401
        GitHubNotFoundError: 404
        GitHubError: 5xx / 422

    Examples:
        >>> with github_error_handling():
        ...     repo = client.repository("octocat", "Hello-World")
    """
    try:
        yield
    except GitHubAPIError as err:
        domain_error = translate_error(err)
        if domain_error is None:
            logger.warning(
                f"GitHub API error not translated ({err.category.value}, {err.status_code})"
            )
            raise
        logger.warning(
            f"GitHub API error translated ({err.category.value}, {err.status_code}): "
            f"{domain_error.code}"
        )
        raise domain_error from None


def with_error_handling(work: Callable[[], T]) -> T:
    """
    処理を実行し、GitHub APIエラーをドメインエラーに変換する

    成功時は戻り値をそのまま返す。

    Args:
        work: 実行する処理

    Returns:
        workの戻り値
    """
    with github_error_handling():
        return work()

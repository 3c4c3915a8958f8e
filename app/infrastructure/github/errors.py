"""
GitHub APIクライアントの例外

HTTPレスポンスのステータスコードから、呼び出し側がmatchで
分岐できる閉じた分類（RemoteErrorCategory）を決定する。
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

import httpx


class RemoteErrorCategory(str, Enum):
    """GitHub APIエラーレスポンスの分類"""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    NOT_ACCEPTABLE = "not_acceptable"
    CONFLICT = "conflict"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    UNPROCESSABLE_ENTITY = "unprocessable_entity"
    TOO_MANY_REQUESTS = "too_many_requests"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"

    @classmethod
    def from_status(cls, status_code: int) -> RemoteErrorCategory:
        """
        HTTPステータスコードから分類を決定する

        Args:
            status_code: 400以上のHTTPステータスコード

        Returns:
            対応する分類（個別定義のない4xxはCLIENT_ERROR）。500以上はSERVER_ERROR

        Raises:
            ValueError: エラーステータスでない場合
        """
        if status_code >= 500:
            return cls.SERVER_ERROR
        if 400 <= status_code <= 499:
            return _STATUS_CATEGORIES.get(status_code, cls.CLIENT_ERROR)
        raise ValueError(f"{status_code} is not an error status")


_STATUS_CATEGORIES: dict[int, RemoteErrorCategory] = {
    400: RemoteErrorCategory.BAD_REQUEST,
    401: RemoteErrorCategory.UNAUTHORIZED,
    403: RemoteErrorCategory.FORBIDDEN,
    404: RemoteErrorCategory.NOT_FOUND,
    405: RemoteErrorCategory.METHOD_NOT_ALLOWED,
    406: RemoteErrorCategory.NOT_ACCEPTABLE,
    409: RemoteErrorCategory.CONFLICT,
    415: RemoteErrorCategory.UNSUPPORTED_MEDIA_TYPE,
    422: RemoteErrorCategory.UNPROCESSABLE_ENTITY,
    429: RemoteErrorCategory.TOO_MANY_REQUESTS,
}


class GitHubClientError(Exception):
    """GitHubクライアントの基底例外"""


class GitHubNetworkError(GitHubClientError):
    """通信レイヤーのエラー（接続失敗・タイムアウト等）"""


class GitHubAPIError(GitHubClientError):
    """
    GitHub APIがエラーレスポンスを返した場合の例外

    Attributes:
        status_code: HTTPステータスコード
        category: エラー分類
        message: レスポンスボディのmessage
        errors: 構造化エラーのリスト（422で返される）
        documentation_url: GitHubのドキュメントURL
        method: リクエストメソッド
        url: リクエストURL
    """

    def __init__(
        self,
        status_code: int,
        message: str = "",
        *,
        errors: Optional[list[Any]] = None,
        documentation_url: Optional[str] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.category = RemoteErrorCategory.from_status(status_code)
        self.message = message
        self.errors: list[Any] = list(errors or [])
        self.documentation_url = documentation_url
        self.method = method
        self.url = url
        super().__init__(self._build_summary())

    def _build_summary(self) -> str:
        summary = f"{self.status_code}"
        if self.message:
            summary = f"{summary} - {self.message}"
        if self.method and self.url:
            summary = f"{self.method} {self.url}: {summary}"
        return summary


def error_from_response(
    response: httpx.Response,
    method: Optional[str] = None,
    url: Optional[str] = None,
) -> GitHubAPIError:
    """
    エラーレスポンスからGitHubAPIErrorを生成する

    Args:
        response: ステータス400以上のレスポンス
        method: リクエストメソッド（省略時はレスポンスのリクエストから取得）
        url: リクエストURL（省略時はレスポンスのリクエストから取得）

    Returns:
        GitHubAPIError
    """
    data: Any = None
    try:
        data = response.json()
    except ValueError:
        data = None

    message = ""
    errors: list[Any] = []
    documentation_url = None
    if isinstance(data, dict):
        message = str(data.get("message") or "")
        raw_errors = data.get("errors")
        if isinstance(raw_errors, list):
            errors = raw_errors
        documentation_url = data.get("documentation_url")
    elif response.text:
        message = response.text[:1000]

    if method is None or url is None:
        try:
            request = response.request
        except RuntimeError:
            request = None
        if request is not None:
            method = method or request.method
            url = url or str(request.url)

    return GitHubAPIError(
        response.status_code,
        message,
        errors=errors,
        documentation_url=documentation_url,
        method=method,
        url=url,
    )

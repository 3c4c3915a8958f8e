"""
GitHub REST APIクライアント

httpx.Clientをラップした同期クライアント。
アプリケーション単位（client_id / client_secret）のBasic認証と、
Linkヘッダーに従った自動ページネーションをサポートする。
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from types import TracebackType
from typing import Any, Optional
from urllib.parse import quote

import httpx

from app.core.logging import get_logger

from .errors import GitHubNetworkError, error_from_response

logger = get_logger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "github-gateway/0.1.0"
API_VERSION = "2022-11-28"
MAX_PER_PAGE = 100


def _path_segment(value: str) -> str:
    """
    ユーザー入力をAPIパスの1セグメントとしてエスケープする

    "/"・"?"・"#"は%エンコードされる。"."と".."はhttpxがパスを正規化してしまうため拒否する

    Raises:
        ValueError: 空文字列またはドットセグメントの場合
    """
    if value in ("", ".", ".."):
        raise ValueError(f"Invalid path segment: {value!r}")
    return quote(value, safe="")


@dataclass(frozen=True)
class RateLimit:
    """
    X-RateLimit-* ヘッダーから読み取ったレート制限情報

    Attributes:
        limit: 1時間あたりの上限
        remaining: 残りリクエスト数
        resets_at: リセット時刻（UTC）
    """

    limit: int
    remaining: int
    resets_at: Optional[datetime]

    @classmethod
    def from_headers(cls, headers: httpx.Headers) -> Optional[RateLimit]:
        if "X-RateLimit-Limit" not in headers:
            return None
        try:
            limit = int(headers["X-RateLimit-Limit"])
            remaining = int(headers.get("X-RateLimit-Remaining", "0"))
            reset = headers.get("X-RateLimit-Reset")
        except ValueError:
            return None
        resets_at = (
            datetime.fromtimestamp(int(reset), tz=timezone.utc)
            if reset and reset.isdigit()
            else None
        )
        return cls(limit=limit, remaining=remaining, resets_at=resets_at)


class GitHubClient:
    """
    GitHub APIクライアント

    Attributes:
        auto_paginate: GETでリストが返った場合に全ページを取得するか
        per_page: 自動ページネーション時の1ページあたり件数
        last_response: 直近のレスポンス
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        *,
        base_url: str = DEFAULT_API_URL,
        auto_paginate: bool = False,
        per_page: int = MAX_PER_PAGE,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Args:
            client_id: OAuthアプリのclient_id
            client_secret: OAuthアプリのclient_secret
            base_url: APIのベースURL（GitHub Enterprise用に変更可能）
            auto_paginate: 自動ページネーションを有効にするか
            per_page: 1ページあたり件数（最大100）
            timeout: リクエストタイムアウト（秒）
            user_agent: User-Agentヘッダー
            transport: httpxのトランスポート（テスト用）
        """
        self.client_id = client_id
        self.auto_paginate = auto_paginate
        self.per_page = max(1, min(per_page, MAX_PER_PAGE))
        self.last_response: Optional[httpx.Response] = None

        # クレデンシャルは検証せずそのまま使う。不正な場合はリクエスト時の401で判明する
        auth: Optional[httpx.BasicAuth] = None
        if client_id and client_secret:
            auth = httpx.BasicAuth(client_id, client_secret)

        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            auth=auth,
            headers={
                "Accept": "application/vnd.github+json",
                "User-Agent": user_agent,
                "X-GitHub-Api-Version": API_VERSION,
            },
            follow_redirects=True,
            transport=transport,
        )

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @property
    def is_application_authenticated(self) -> bool:
        """アプリケーションクレデンシャルで認証しているか"""
        return self._client.auth is not None

    @property
    def rate_limit(self) -> Optional[RateLimit]:
        """直近レスポンスのレート制限情報"""
        if self.last_response is None:
            return None
        return RateLimit.from_headers(self.last_response.headers)

    def _send(
        self,
        method: str,
        path_or_url: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json_body: Optional[Any] = None,
    ) -> httpx.Response:
        try:
            response = self._client.request(
                method, path_or_url, params=params, json=json_body
            )
        except httpx.RequestError as e:
            raise GitHubNetworkError(str(e)) from e

        self.last_response = response
        logger.debug(f"GitHub API {method} {response.request.url} -> {response.status_code}")

        if response.status_code >= 400:
            raise error_from_response(response, method=method, url=str(response.request.url))
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json_body: Optional[Any] = None,
    ) -> Any:
        """
        APIリクエストを送信する

        Args:
            method: HTTPメソッド
            path: APIパス（例: "/users/octocat"）
            params: クエリパラメータ
            json_body: JSONボディ

        Returns:
            デコード済みのレスポンス（JSON / テキスト / 空ならNone）

        Raises:
            GitHubAPIError: エラーレスポンスの場合
            GitHubNetworkError: 通信に失敗した場合
        """
        response = self._send(method, path, params=params, json_body=json_body)
        return self._decode(response)

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        if self.auto_paginate:
            return self.paginate(path, params)
        return self.request("GET", path, params=params)

    def post(self, path: str, json_body: Optional[Any] = None) -> Any:
        return self.request("POST", path, json_body=json_body)

    def patch(self, path: str, json_body: Optional[Any] = None) -> Any:
        return self.request("PATCH", path, json_body=json_body)

    def put(self, path: str, json_body: Optional[Any] = None) -> Any:
        return self.request("PUT", path, json_body=json_body)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def paginate(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        """
        Linkヘッダーのrel="next"をたどって全ページを取得する

        リスト以外のレスポンスはそのまま返す。検索APIのように
        "items"にリストを持つレスポンスはitemsを連結する。

        Args:
            path: APIパス
            params: クエリパラメータ

        Returns:
            連結済みのデータ
        """
        query = dict(params or {})
        query.setdefault("per_page", self.per_page)

        response = self._send("GET", path, params=query)
        data = self._decode(response)

        if isinstance(data, list):
            collected: list[Any] = data
        elif isinstance(data, dict) and isinstance(data.get("items"), list):
            collected = data["items"]
        else:
            return data

        next_url = response.links.get("next", {}).get("url")
        while next_url:
            # nextのURLにはクエリパラメータが含まれている
            response = self._send("GET", next_url)
            page = self._decode(response)
            if isinstance(page, dict):
                page = page.get("items")
            if isinstance(page, list):
                collected.extend(page)
            else:
                logger.warning(f"Ignoring non-list page from {next_url}")
            next_url = response.links.get("next", {}).get("url")

        return data

    def user(self, login: str) -> dict[str, Any]:
        """ユーザー情報を取得"""
        return self.request("GET", f"/users/{_path_segment(login)}")

    def repository(self, owner: str, repo: str) -> dict[str, Any]:
        """リポジトリ情報を取得"""
        return self.request(
            "GET", f"/repos/{_path_segment(owner)}/{_path_segment(repo)}"
        )

    def user_repositories(self, login: str) -> list[dict[str, Any]]:
        """ユーザーの公開リポジトリ一覧を取得"""
        return self.get(f"/users/{_path_segment(login)}/repos")

    def organization_repositories(self, org: str) -> list[dict[str, Any]]:
        """Organizationのリポジトリ一覧を取得"""
        return self.get(f"/orgs/{_path_segment(org)}/repos")

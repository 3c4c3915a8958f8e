"""GitHub APIスタブ用ヘルパー"""

from typing import Any, Callable, Optional

import httpx

from app.infrastructure.github import GitHubClient

API_URL = "https://api.github.test"

Handler = Callable[[httpx.Request], httpx.Response]


class GitHubStub:
    """
    httpx.MockTransportで動くGitHub APIのスタブ

    (method, path) ごとにレスポンスを登録し、受け取ったリクエストを記録する
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Optional[Any] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        """固定レスポンスを登録"""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=json, headers=headers)

        self.routes[(method.upper(), path)] = handler

    def add_handler(self, method: str, path: str, handler: Handler) -> None:
        """任意のハンドラーを登録"""
        self.routes[(method.upper(), path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return handler(request)

    def client(self, **kwargs: Any) -> GitHubClient:
        """スタブに接続するGitHubClientを生成"""
        kwargs.setdefault("base_url", API_URL)
        return GitHubClient(transport=httpx.MockTransport(self), **kwargs)


def repository_payload(full_name: str, **overrides: Any) -> dict[str, Any]:
    """GitHubのリポジトリレスポンス相当のdictを生成"""
    owner, name = full_name.split("/", 1)
    payload: dict[str, Any] = {
        "id": abs(hash(full_name)) % 10_000_000,
        "name": name,
        "full_name": full_name,
        "owner": {"login": owner, "id": 1, "type": "User"},
        "private": False,
        "html_url": f"https://github.com/{full_name}",
        "description": None,
        "fork": False,
        "language": "Python",
        "default_branch": "main",
        "stargazers_count": 0,
        "forks_count": 0,
        "open_issues_count": 0,
        "archived": False,
    }
    payload.update(overrides)
    return payload

import threading

from fastapi import HTTPException, Request, Security
from fastapi.security import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from ...core.config import get_settings
from ...infrastructure.github import GitHubClient, application_github_client

_github_client_lock = threading.Lock()


def get_github_client(request: Request) -> GitHubClient:
    """
    アプリケーション用GitHubクライアントを取得するdependency

    lifespanで生成したクライアントを使い回す。未生成の場合はここで生成して保持する
    """
    client = getattr(request.app.state, "github_client", None)
    if client is not None:
        return client

    # 同期エンドポイントはスレッドプールで並行に動くため、生成は1回に限る
    with _github_client_lock:
        client = getattr(request.app.state, "github_client", None)
        if client is None:
            client = application_github_client()
            request.app.state.github_client = client
    return client


# API認証用のヘッダーハンドラーを作成
api_key_header = APIKeyHeader(
    name="Authorization", scheme_name="Bearer", auto_error=False
)


def get_api_key(
    api_key_header: str = Security(api_key_header),
) -> str:
    """
    APIキー認証のdependency
    Authorizationヘッダーに'Bearer {api_key}'形式で指定されたAPIキーを検証

    - Authorization: Bearer your-api-key-here
    """
    settings = get_settings()

    if not api_key_header:
        raise HTTPException(
            status_code=HTTP_403_FORBIDDEN, detail="Authorization header missing"
        )

    scheme, _, api_key = api_key_header.partition(" ")
    if scheme.lower() != "bearer":
        raise HTTPException(
            status_code=HTTP_403_FORBIDDEN,
            detail="Authorization header must start with 'Bearer'",
        )

    if not api_key or api_key != settings.API_KEY:
        raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail="Invalid API key")

    return api_key

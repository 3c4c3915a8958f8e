"""アプリケーション用GitHubクライアントの生成"""

from typing import Optional

from app.core.config import Settings, get_settings
from app.core.logging import get_logger, mask_secret

from .client import GitHubClient

logger = get_logger(__name__)


def application_github_client(settings: Optional[Settings] = None) -> GitHubClient:
    """
    アプリケーションクレデンシャルで認証するGitHubクライアントを生成する

    自動ページネーションは有効。生成時に通信やクレデンシャルの検証は行わない。

    Args:
        settings: 設定（省略時はget_settings()）

    Returns:
        GitHubClient
    """
    settings = settings or get_settings()

    logger.info(
        f"Creating GitHub client for {settings.GITHUB_API_URL} "
        f"(client_id: {mask_secret(settings.GITHUB_CLIENT_ID)}, "
        f"client_secret: {mask_secret(settings.GITHUB_CLIENT_SECRET)})"
    )
    return GitHubClient(
        client_id=settings.GITHUB_CLIENT_ID,
        client_secret=settings.GITHUB_CLIENT_SECRET,
        base_url=settings.GITHUB_API_URL,
        auto_paginate=True,
        timeout=settings.GITHUB_TIMEOUT,
    )

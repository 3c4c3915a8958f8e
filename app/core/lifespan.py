"""アプリケーションライフサイクル管理"""

import contextlib
from datetime import datetime, timezone
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.logging import get_logger
from app.infrastructure.github import application_github_client

logger = get_logger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    アプリケーションのライフサイクル管理

    起動時:
    - 起動時刻の記録
    - アプリケーション用GitHubクライアントの生成

    シャットダウン時:
    - GitHubクライアントのクローズ

    Args:
        app: FastAPIアプリケーションインスタンス

    Yields:
        None
    """
    # 起動時刻を記録（healthcheckのuptime計算用）
    app.state.start_time = datetime.now(timezone.utc)

    # テストで差し替え済みの場合はそのまま使う
    if getattr(app.state, "github_client", None) is None:
        app.state.github_client = application_github_client()

    yield

    client = getattr(app.state, "github_client", None)
    if client is not None:
        client.close()
        app.state.github_client = None
        logger.info("GitHub client closed")

"""システム関連のスキーマ定義"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class GitHubStatus(BaseModel):
    """
    GitHub連携の設定状況

    Attributes:
        configured: アプリケーションクレデンシャルが設定されているか
        api_url: 接続先APIのベースURL
    """

    configured: bool
    api_url: str


class HealthCheckResponse(BaseModel):
    """
    ヘルスチェックレスポンス

    Attributes:
        status: 全体的なヘルス状態
        timestamp: レスポンス生成時刻
        uptime_seconds: アプリケーション起動からの経過秒数
        github: GitHub連携の設定状況
        environment: 実行環境（production/staging/local等）
    """

    status: Literal["ok"]
    timestamp: datetime
    uptime_seconds: float
    github: GitHubStatus
    environment: str

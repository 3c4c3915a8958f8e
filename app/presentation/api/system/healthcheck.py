from datetime import datetime, timezone

from fastapi import APIRouter, Request

from app.core.config import get_settings
from app.presentation.schemas.system import GitHubStatus, HealthCheckResponse

router = APIRouter()


@router.get("/", response_model=HealthCheckResponse)
async def healthcheck(request: Request) -> HealthCheckResponse:
    """
    ヘルスチェックエンドポイント

    - アプリケーションuptime
    - GitHub連携の設定状況
    - 環境情報を返す

    GitHubへの疎通確認は行わない（レート制限を消費しないため）
    """
    settings = get_settings()

    start_time = getattr(request.app.state, "start_time", None)
    uptime_seconds = 0.0
    if start_time:
        uptime_seconds = (datetime.now(timezone.utc) - start_time).total_seconds()

    return HealthCheckResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        uptime_seconds=uptime_seconds,
        github=GitHubStatus(
            configured=settings.has_github_credentials,
            api_url=settings.GITHUB_API_URL,
        ),
        environment=settings.normalized_env_mode,
    )

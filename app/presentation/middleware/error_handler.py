"""エラーハンドリングミドルウェア"""

import json
from collections.abc import Awaitable, Callable

import sentry_sdk
from fastapi import Request, Response, status
from fastapi.encoders import jsonable_encoder

from app.core.logging import get_logger
from app.infrastructure.github import GitHubNetworkError
from app.presentation.exceptions import ErrorResponse
from app.utils.headers import no_cache_headers

logger = get_logger(__name__)


def _error_response(
    error: ErrorResponse, status_code: int, headers: dict[str, str] | None = None
) -> Response:
    return Response(
        content=json.dumps(jsonable_encoder(error)),
        status_code=status_code,
        media_type="application/json",
        headers=headers,
    )


async def error_response_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """
    全ての未処理例外をキャッチしてJSON形式で返す

    - GitHubへの通信失敗: 502
    - ドメインエラーに変換されなかったGitHub APIエラー（429等）やその他の例外: 500

    Args:
        request: HTTPリクエスト
        call_next: 次のミドルウェア/エンドポイント

    Returns:
        HTTPレスポンス
    """
    try:
        return await call_next(request)
    except GitHubNetworkError as e:
        logger.warning(f"GitHub API is unreachable: {str(e)}")
        error = ErrorResponse(
            code="github_unreachable",
            message="Could not connect to github.com, please try again.",
        )
        return _error_response(error, status.HTTP_502_BAD_GATEWAY, no_cache_headers())
    except Exception as e:
        sentry_sdk.capture_exception(e)
        logger.error(f"Unhandled exception: {str(e)}", exc_info=e)

        error = ErrorResponse(
            code="internal_server_error",
            message="Internal server error occurred",
        )
        return _error_response(error, status.HTTP_500_INTERNAL_SERVER_ERROR)

"""FastAPI例外ハンドラー"""

import json
from typing import Awaitable, Callable, cast

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import DomainError, GitHubError, ValidationError
from app.presentation.exceptions import (
    APIError,
    ErrorResponse,
    domain_error_to_api_error,
)
from app.utils.headers import no_cache_headers


def _json_response(
    error: ErrorResponse,
    status_code: int,
    headers: dict[str, str] | None = None,
) -> Response:
    return Response(
        content=json.dumps(jsonable_encoder(error)),
        status_code=status_code,
        media_type="application/json",
        headers=headers,
    )


async def domain_error_handler(request: Request, exc: DomainError) -> Response:
    """
    DomainError例外ハンドラ

    GitHubエラーは権限状態を反映するため、キャッシュ禁止ヘッダーを付与する
    """
    api_error = domain_error_to_api_error(exc)
    headers = no_cache_headers() if isinstance(exc, GitHubError) else None
    return _json_response(api_error.to_response(), api_error.status_code, headers)


async def api_error_handler(request: Request, exc: APIError) -> Response:
    """APIError例外ハンドラ"""
    return _json_response(exc.to_response(), exc.status_code)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """HTTPException例外ハンドラ（ルーティングの404/405を含む）"""
    error = ErrorResponse(
        code="http_error",
        message=str(exc.detail),
    )
    return _json_response(error, exc.status_code, exc.headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    """バリデーションエラーハンドラ（Pydantic）"""
    error = ValidationError(
        message="Invalid request",
        details=[
            {"loc": err["loc"], "msg": err["msg"], "type": err["type"]}
            for err in exc.errors()
        ],
    )
    api_error = domain_error_to_api_error(error)
    return _json_response(api_error.to_response(), api_error.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """
    FastAPIアプリケーションに例外ハンドラーを登録

    Args:
        app: FastAPIアプリケーションインスタンス
    """
    # Starletteの型定義に合わせるためのキャスト
    handler_type = Callable[[Request, Exception], Awaitable[Response]]

    app.add_exception_handler(DomainError, cast(handler_type, domain_error_handler))
    app.add_exception_handler(APIError, cast(handler_type, api_error_handler))
    app.add_exception_handler(
        StarletteHTTPException, cast(handler_type, http_exception_handler)
    )
    app.add_exception_handler(
        RequestValidationError, cast(handler_type, validation_exception_handler)
    )

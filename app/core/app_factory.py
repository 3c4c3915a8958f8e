"""FastAPIアプリケーションファクトリー"""

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.lifespan import lifespan
from app.core.logging import get_logger
from app.presentation import api_router
from app.presentation.exception_handlers import register_exception_handlers
from app.presentation.middleware import (
    SecurityHeadersMiddleware,
    error_response_middleware,
)

logger = get_logger(__name__)


class HealthCheckFilter(logging.Filter):
    """ヘルスチェックログを除外するフィルター"""

    def filter(self, record: logging.LogRecord) -> bool:
        return "/api/system/healthcheck" not in record.getMessage()


def create_app() -> FastAPI:
    """
    FastAPIアプリケーションを生成

    Returns:
        FastAPIアプリケーションインスタンス
    """
    settings = get_settings()

    app_params: dict[str, Any] = {
        "title": "GitHub Gateway",
        "description": "GitHub REST APIをアプリケーションクレデンシャルで中継するAPI",
        "version": "0.1.0",
        "lifespan": lifespan,
    }

    # 本番環境ではドキュメントを無効化
    if settings.is_production:
        app_params["docs_url"] = None
        app_params["redoc_url"] = None
        app_params["openapi_url"] = None

    app = FastAPI(**app_params)

    logging.getLogger("uvicorn.access").addFilter(HealthCheckFilter())

    if len(settings.BACKEND_CORS_ORIGINS) > 0:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_middleware(SecurityHeadersMiddleware)

    register_exception_handlers(app)

    app.middleware("http")(error_response_middleware)

    app.include_router(api_router)

    return app

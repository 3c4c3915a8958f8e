"""
pytest設定と共通フィクスチャ
"""

import os
from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient

TEST_API_KEY = "test-api-key"


def pytest_configure(config: Any) -> None:
    """
    pytest実行前の設定

    設定はモジュールインポート時に読み込まれるため、
    フィクスチャではなくpytest_configureフックで環境変数を設定
    """
    os.environ["ENV_MODE"] = "test"
    os.environ["API_KEY"] = TEST_API_KEY
    os.environ["GITHUB_CLIENT_ID"] = "test-client-id"
    os.environ["GITHUB_CLIENT_SECRET"] = "test-client-secret"
    os.environ["GITHUB_API_URL"] = "https://api.github.test"


# pytest_configure後にインポート（環境変数設定後にモジュールをロード）
from app.core.app_factory import create_app  # noqa: E402
from app.core.config import get_settings  # noqa: E402
from tests.helpers import GitHubStub  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """テストごとに設定キャッシュをクリア"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def github_stub() -> GitHubStub:
    """
    GitHub APIスタブ

    Returns:
        GitHubStub
    """
    return GitHubStub()


@pytest.fixture
def client(github_stub: GitHubStub) -> Generator[TestClient, None, None]:
    """
    テスト用FastAPIクライアント

    アプリケーション用GitHubクライアントをスタブ接続のものに差し替える

    Args:
        github_stub: GitHub APIスタブ

    Yields:
        FastAPI TestClient
    """
    app = create_app()
    app.state.github_client = github_stub.client(
        client_id="test-client-id",
        client_secret="test-client-secret",
        auto_paginate=True,
    )
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """
    テスト用APIキーのAuthorizationヘッダー

    Returns:
        ヘッダーdict
    """
    return {"Authorization": f"Bearer {TEST_API_KEY}"}

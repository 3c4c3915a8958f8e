from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import get_logger

logger = get_logger(__name__)


class Settings(BaseSettings):
    """
    アプリケーション設定
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # 未定義のフィールドを無視
    )

    ENV_MODE: Literal["development", "production", "test", "local", "staging"] = (
        "development"
    )

    BACKEND_CORS_ORIGINS: str | list[str] = []

    @field_validator("BACKEND_CORS_ORIGINS")
    @classmethod
    def assemble_cors_origins(cls, v: str | list[str]) -> list[str] | str:
        if v == "":
            return []
        if v == "*":
            return ["*"]
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        if isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    SECURITY_HEADERS: bool = False
    CSP_POLICY: str = (
        "default-src 'self'; img-src 'self' data:; script-src 'self'; style-src 'self'"
    )

    API_KEY: str = "default_api_key_change_me_in_production"

    # GitHub OAuthアプリのクレデンシャル（アプリケーション単位のAPIアクセス用）
    GITHUB_CLIENT_ID: str = ""
    GITHUB_CLIENT_SECRET: str = ""
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_TIMEOUT: float = 10.0

    @field_validator("GITHUB_TIMEOUT")
    @classmethod
    def validate_github_timeout(cls, v: float) -> float:
        """タイムアウト値検証"""
        if v <= 0:
            raise ValueError("GITHUB_TIMEOUT must be greater than 0")
        return v

    @field_validator("GITHUB_API_URL")
    @classmethod
    def strip_github_api_url(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("GITHUB_CLIENT_SECRET")
    @classmethod
    def warn_missing_github_secret(cls, v: str) -> str:
        """クレデンシャル未設定時の警告（値そのものは出力しない）"""
        if not v:
            logger.warning(
                "GITHUB_CLIENT_SECRET is not set. GitHub API calls will be unauthenticated."
            )
        return v

    @property
    def has_github_credentials(self) -> bool:
        """GitHubクレデンシャル設定有無"""
        return bool(self.GITHUB_CLIENT_ID and self.GITHUB_CLIENT_SECRET)

    SENTRY_DSN: Optional[str] = None
    SENTRY_TRACES_SAMPLE_RATE: float = 1.0

    @field_validator("SENTRY_DSN")
    @classmethod
    def sentry_dsn_can_be_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        return v

    NEW_RELIC_LICENSE_KEY: Optional[str] = None
    NEW_RELIC_APP_NAME: str = "GitHub Gateway"
    NEW_RELIC_HIGH_SECURITY: bool = False
    NEW_RELIC_MONITOR_MODE: bool = True

    @property
    def is_development(self) -> bool:
        """開発環境かどうか"""
        return self.ENV_MODE == "development"

    @property
    def is_production(self) -> bool:
        """本番環境かどうか"""
        return self.ENV_MODE == "production"

    @property
    def is_test(self) -> bool:
        """テスト環境かどうか"""
        return self.ENV_MODE == "test"

    @property
    def is_local(self) -> bool:
        """ローカル環境かどうか（development含む）"""
        return self.ENV_MODE in ("local", "development")

    @property
    def normalized_env_mode(self) -> str:
        """
        監視ツール・ヘルスチェック向けの環境名

        developmentはlocalとして扱う
        """
        if self.ENV_MODE == "development":
            return "local"
        return self.ENV_MODE


@lru_cache
def get_settings() -> Settings:
    """
    アプリケーション設定を取得（キャッシュ）
    """
    return Settings()

"""監視ツール（Sentry, New Relic）の初期化"""

import os

import newrelic.agent
import sentry_sdk

from app.core.config import get_settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def init_monitoring() -> None:
    """
    Sentry/New Relicの初期化

    New Relicは本番環境かつライセンスキー設定時のみ、
    SentryはDSN設定時のみ有効化する
    """
    settings = get_settings()
    env_name = settings.normalized_env_mode

    if settings.is_production and settings.NEW_RELIC_LICENSE_KEY:
        os.environ["NEW_RELIC_LICENSE_KEY"] = settings.NEW_RELIC_LICENSE_KEY
        os.environ["NEW_RELIC_APP_NAME"] = settings.NEW_RELIC_APP_NAME

        newrelic_config = newrelic.agent.global_settings()
        newrelic_config.high_security = settings.NEW_RELIC_HIGH_SECURITY
        newrelic_config.monitor_mode = settings.NEW_RELIC_MONITOR_MODE
        newrelic_config.app_name = f"{settings.NEW_RELIC_APP_NAME}[{env_name}]"

        newrelic.agent.initialize(environment=settings.ENV_MODE)
        logger.info(f"New Relic is enabled (name: {newrelic_config.app_name})")
    else:
        logger.info(f"New Relic is disabled on {env_name} mode")

    if settings.SENTRY_DSN:
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            environment=env_name,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            # クレデンシャルを含むヘッダーを送信しない
            send_default_pii=False,
        )
        logger.info(f"Sentry is enabled on {env_name} mode")
    else:
        logger.info(f"Sentry is disabled on {env_name} mode")

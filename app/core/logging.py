"""アプリケーション用のロギングユーティリティ。"""

import logging
import sys
from typing import Optional


def is_fastapi_context() -> bool:
    """
    FastAPI/uvicornコンテキストで実行中かどうかを判定する。

    Returns:
        bool: uvicornがロードされている場合True、そうでない場合False。
    """
    return "uvicorn" in sys.modules


def get_logger(name: str) -> logging.Logger:
    """
    ロガーインスタンスを取得する。

    uvicornで起動している場合は"uvicorn"ロガーを返し、サーバーログと同じ
    フォーマット・出力先に揃える。テストやスクリプトから利用された場合は
    呼び出し元モジュール名のロガーを返す。

    Args:
        name: ロガー名、通常は呼び出し元モジュールの__name__を指定。

    Returns:
        logging.Logger: 設定済みのロガーインスタンス。

    Examples:
        >>> logger = get_logger(__name__)
        >>> logger.info("GitHub client created")
    """
    if is_fastapi_context():
        return logging.getLogger("uvicorn")
    return logging.getLogger(name)


def mask_secret(value: Optional[str]) -> str:
    """
    クレデンシャルをログ出力用に伏せる。

    値そのものは一切出力せず、設定有無のみを返す。

    Args:
        value: クレデンシャル文字列

    Returns:
        "<set>" または "<unset>"
    """
    return "<set>" if value else "<unset>"

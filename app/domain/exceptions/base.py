"""
ドメイン層の例外クラス

ビジネスロジックで発生するエラーを表現する純粋なPython例外。
フレームワークに依存しない。
"""

from typing import Any, Optional


class DomainError(Exception):
    """
    ドメイン層のベース例外

    Attributes:
        message: エラーメッセージ
        code: エラーコード（識別子）
        details: エラーの詳細情報（オプション）
    """

    default_message: str = "Domain error"
    default_code: str = "domain_error"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any] | list[dict[str, Any]]] = None,
    ) -> None:
        """
        Args:
            message: エラーメッセージ（省略時はクラスのデフォルト）
            code: エラーコード（省略時はクラスのデフォルト）
            details: エラーの詳細情報（オプション）
        """
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details
        super().__init__(self.message)


class ValidationError(DomainError):
    """リクエスト内容のバリデーションエラー"""

    default_message = "Validation error"
    default_code = "validation_error"

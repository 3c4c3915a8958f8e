"""
Presentation層のAPIエラークラス

FastAPI/Pydanticに依存するAPIエラークラス。
ドメインエラーをHTTPレスポンスに変換する。
"""

from typing import Any, Optional

from fastapi import HTTPException, status
from pydantic import BaseModel

from ...domain.exceptions import (
    DomainError,
    GitHubError,
    GitHubForbiddenError,
    GitHubNotFoundError,
    ValidationError,
)


class ErrorResponse(BaseModel):
    """
    標準エラーレスポンス

    Attributes:
        status: ステータス（常に"error"）
        code: エラーコード
        message: エラーメッセージ
        details: エラーの詳細情報（オプション）
    """

    status: str = "error"
    code: str
    message: str
    details: Optional[list[dict[str, Any]] | dict[str, Any]] = None


class APIError(HTTPException):
    """
    API エラーの基底クラス

    Attributes:
        status_code: HTTPステータスコード
        error_code: エラーコード
        error_message: エラーメッセージ
        details: エラーの詳細情報
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "internal_server_error"
    error_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[list[dict[str, Any]] | dict[str, Any]] = None,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
    ) -> None:
        """
        Args:
            message: エラーメッセージ（オプション）
            details: エラーの詳細情報（オプション）
            status_code: HTTPステータスコード（省略時はクラスのデフォルト）
            error_code: エラーコード（省略時はクラスのデフォルト）
        """
        self.error_message = message or self.error_message
        self.error_code = error_code or self.error_code
        self.details = details
        super().__init__(
            status_code=status_code or self.status_code, detail=self.error_message
        )

    def to_response(self) -> ErrorResponse:
        """
        標準エラーレスポンス形式に変換

        Returns:
            ErrorResponse: 標準エラーレスポンス
        """
        return ErrorResponse(
            code=self.error_code, message=self.error_message, details=self.details
        )


# サブクラスを先に解決するため、MROをたどって最初に見つかったものを使う
STATUS_MAP: dict[type[DomainError], int] = {
    GitHubForbiddenError: status.HTTP_403_FORBIDDEN,
    GitHubNotFoundError: status.HTTP_404_NOT_FOUND,
    GitHubError: status.HTTP_502_BAD_GATEWAY,
    ValidationError: status.HTTP_400_BAD_REQUEST,
}


def status_for(domain_error: DomainError) -> int:
    """
    ドメインエラーに対応するHTTPステータスコードを返す

    Args:
        domain_error: ドメイン層のエラー

    Returns:
        HTTPステータスコード（未定義の場合は500）
    """
    for klass in type(domain_error).__mro__:
        if klass in STATUS_MAP:
            return STATUS_MAP[klass]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def domain_error_to_api_error(domain_error: DomainError) -> APIError:
    """
    ドメインエラーをAPIエラーに変換

    Args:
        domain_error: ドメイン層のエラー

    Returns:
        APIError: API層のエラー

    Examples:
        >>> from app.domain.exceptions import GitHubNotFoundError
        >>> api_err = domain_error_to_api_error(GitHubNotFoundError())
        >>> api_err.status_code
        404
    """
    return APIError(
        message=domain_error.message,
        details=domain_error.details,
        status_code=status_for(domain_error),
        error_code=domain_error.code,
    )

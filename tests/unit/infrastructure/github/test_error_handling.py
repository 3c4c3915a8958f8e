"""
GitHub APIエラー変換（with_error_handling）の単体テスト
"""

from typing import Any

import pytest

from app.domain.exceptions import (
    GitHubError,
    GitHubErrorKind,
    GitHubForbiddenError,
    GitHubNotFoundError,
)
from app.infrastructure.github import (
    GitHubAPIError,
    GitHubNetworkError,
    build_error_message,
    github_error_handling,
    translate_error,
    with_error_handling,
)

FORBIDDEN_MESSAGE = "You are forbidden from performing this action on github.com"
NOT_FOUND_MESSAGE = "Resource could not be found on github.com"
SERVER_ERROR_MESSAGE = "There seems to be a problem on github.com, please try again."


def raising(error: Exception) -> Any:
    """errorを送出する処理を返す"""

    def work() -> Any:
        raise error

    return work


class TestWithErrorHandlingPassthrough:
    """成功時のパススルーのテスト"""

    @pytest.mark.parametrize(
        "value",
        [None, 0, "octocat", [1, 2, 3], {"login": "octocat"}, (1, "a")],
    )
    def test_returns_value_unchanged(self, value: Any) -> None:
        """戻り値がそのまま返ること"""
        assert with_error_handling(lambda: value) is value

    def test_work_is_called_once(self) -> None:
        """処理が1回だけ実行されること"""
        calls: list[int] = []

        def work() -> str:
            calls.append(1)
            return "done"

        assert with_error_handling(work) == "done"
        assert calls == [1]


class TestWithErrorHandlingTranslation:
    """GitHubAPIErrorの変換のテスト"""

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_forbidden_and_unauthorized(self, status_code: int) -> None:
        """401/403がGitHubForbiddenErrorになること"""
        with pytest.raises(GitHubForbiddenError) as exc_info:
            with_error_handling(raising(GitHubAPIError(status_code, "Bad credentials")))

        assert exc_info.value.message == FORBIDDEN_MESSAGE
        assert exc_info.value.kind is GitHubErrorKind.FORBIDDEN

    def test_not_found(self) -> None:
        """404がGitHubNotFoundErrorになること"""
        with pytest.raises(GitHubNotFoundError) as exc_info:
            with_error_handling(raising(GitHubAPIError(404, "Not Found")))

        assert exc_info.value.message == NOT_FOUND_MESSAGE
        assert exc_info.value.kind is GitHubErrorKind.NOT_FOUND

    @pytest.mark.parametrize("status_code", [500, 502, 503, 504, 600])
    def test_server_error(self, status_code: int) -> None:
        """500以上が汎用のGitHubErrorになること"""
        with pytest.raises(GitHubError) as exc_info:
            with_error_handling(raising(GitHubAPIError(status_code)))

        assert type(exc_info.value) is GitHubError
        assert exc_info.value.message == SERVER_ERROR_MESSAGE
        assert exc_info.value.kind is GitHubErrorKind.ERROR

    def test_unprocessable_entity_without_errors(self) -> None:
        """構造化エラーのない422はデフォルトメッセージになること"""
        with pytest.raises(GitHubError) as exc_info:
            with_error_handling(raising(GitHubAPIError(422, "Validation Failed")))

        assert type(exc_info.value) is GitHubError
        assert exc_info.value.message == "An error has occured"

    def test_unprocessable_entity_with_code_and_field(self) -> None:
        """messageのない構造化エラーはresource・code・fieldから組み立てること"""
        error = GitHubAPIError(
            422,
            "Validation Failed",
            errors=[{"resource": "Issue", "field": "title", "code": "missing_field"}],
        )

        with pytest.raises(GitHubError) as exc_info:
            with_error_handling(raising(error))

        assert exc_info.value.message == "Issue missing field title"

    def test_unprocessable_entity_with_message(self) -> None:
        """messageがある場合はcode・fieldを含めないこと"""
        error = GitHubAPIError(
            422,
            "Validation Failed",
            errors=[
                {
                    "resource": "Issue",
                    "field": "title",
                    "code": "custom",
                    "message": "is invalid",
                }
            ],
        )

        with pytest.raises(GitHubError) as exc_info:
            with_error_handling(raising(error))

        assert exc_info.value.message == "Issue is invalid"

    def test_unprocessable_entity_uses_first_error_only(self) -> None:
        """先頭の構造化エラーだけを使うこと"""
        error = GitHubAPIError(
            422,
            errors=[
                {"resource": "Label", "field": "name", "code": "already_exists"},
                {"resource": "Label", "field": "color", "code": "invalid"},
            ],
        )

        with pytest.raises(GitHubError) as exc_info:
            with_error_handling(raising(error))

        assert exc_info.value.message == "Label already exists name"

    def test_original_error_is_not_chained(self) -> None:
        """変換後の例外に元の例外がチェーンされないこと"""
        with pytest.raises(GitHubNotFoundError) as exc_info:
            with_error_handling(raising(GitHubAPIError(404)))

        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__ is True


class TestWithErrorHandlingPropagation:
    """変換対象外の例外のテスト"""

    @pytest.mark.parametrize("status_code", [400, 405, 409, 429, 451])
    def test_unmatched_categories_are_reraised(self, status_code: int) -> None:
        """変換対象外の分類のGitHubAPIErrorはそのまま再送出されること"""
        original = GitHubAPIError(status_code, "nope")

        with pytest.raises(GitHubAPIError) as exc_info:
            with_error_handling(raising(original))

        assert exc_info.value is original

    def test_network_error_propagates(self) -> None:
        """通信エラーは変換されないこと"""
        original = GitHubNetworkError("connection refused")

        with pytest.raises(GitHubNetworkError) as exc_info:
            with_error_handling(raising(original))

        assert exc_info.value is original

    def test_non_github_error_propagates(self) -> None:
        """GitHub以外の例外はそのまま送出されること"""
        with pytest.raises(KeyError):
            with_error_handling(raising(KeyError("login")))


class TestGitHubErrorHandlingContextManager:
    """コンテキストマネージャー版のテスト"""

    def test_block_without_error(self) -> None:
        """例外がなければ何もしないこと"""
        result = []
        with github_error_handling():
            result.append("ok")

        assert result == ["ok"]

    def test_block_with_forbidden(self) -> None:
        """ブロック内の403がGitHubForbiddenErrorになること"""
        with pytest.raises(GitHubForbiddenError):
            with github_error_handling():
                raise GitHubAPIError(403)


class TestTranslateError:
    """translate_error関数のテスト"""

    def test_returns_none_for_unmatched_category(self) -> None:
        """変換対象外はNoneを返すこと"""
        assert translate_error(GitHubAPIError(409)) is None

    def test_returns_domain_error(self) -> None:
        """変換対象はドメインエラーを返すこと"""
        assert isinstance(translate_error(GitHubAPIError(401)), GitHubForbiddenError)


class TestBuildErrorMessage:
    """build_error_message関数のテスト"""

    def test_none(self) -> None:
        """Noneはデフォルトメッセージになること"""
        assert build_error_message(None) == "An error has occured"

    def test_empty_dict(self) -> None:
        """空のdictはデフォルトメッセージになること"""
        assert build_error_message({}) == "An error has occured"

    def test_missing_resource_is_omitted(self) -> None:
        """resourceがない場合は先頭に空白を入れないこと"""
        assert build_error_message({"code": "missing_field", "field": "title"}) == (
            "missing field title"
        )

    def test_code_only(self) -> None:
        """codeだけの場合"""
        assert build_error_message({"resource": "Issue", "code": "invalid"}) == (
            "Issue invalid"
        )

    def test_field_only(self) -> None:
        """fieldだけの場合"""
        assert build_error_message({"resource": "Issue", "field": "title"}) == (
            "Issue title"
        )

    def test_none_values_are_omitted(self) -> None:
        """値がNoneの項目は含めないこと"""
        error = {"resource": None, "code": "custom", "field": None, "message": None}
        assert build_error_message(error) == "custom"

    def test_non_string_values_are_converted(self) -> None:
        """文字列以外の値も文字列に変換されること"""
        assert build_error_message({"resource": "Issue", "field": 42}) == "Issue 42"

    def test_string_entry_is_treated_as_message(self) -> None:
        """文字列のエラーはmessageとして扱うこと"""
        assert build_error_message("Only one reviewer allowed") == (
            "Only one reviewer allowed"
        )

    def test_unknown_keys_only(self) -> None:
        """既知の項目がない場合はデフォルトメッセージになること"""
        assert build_error_message({"documentation_url": "https://docs"}) == (
            "An error has occured"
        )

    @pytest.mark.parametrize(
        ("entry", "expected"),
        [
            (["title", "body"], "['title', 'body']"),
            (42, "42"),
        ],
    )
    def test_non_mapping_entry_is_treated_as_message(
        self, entry: Any, expected: str
    ) -> None:
        """dict以外のエラーもmessageとして扱い、例外にならないこと"""
        assert build_error_message(entry) == expected

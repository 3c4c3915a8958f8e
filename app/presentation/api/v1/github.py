"""
GitHub中継エンドポイント

アプリケーションクレデンシャルでGitHub APIを呼び出し、結果を返す。
GitHubのエラーはwith_error_handlingでドメインエラーに変換され、
例外ハンドラーで403/404/502のレスポンスになる。
"""

from fastapi import APIRouter, Depends, Path, Response

from app.core.logging import get_logger
from app.infrastructure.github import GitHubClient, with_error_handling
from app.presentation.api.deps import get_api_key, get_github_client
from app.presentation.schemas.github import GitHubRepository, GitHubUser
from app.utils.headers import no_cache_headers

router = APIRouter(dependencies=[Depends(get_api_key)])
logger = get_logger(__name__)

# GitHubのユーザー名・Organization名（英数字とハイフン）
ACCOUNT_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9-]*$"
# リポジトリ名（"."と".."のみの名前は不可）
REPOSITORY_PATTERN = r"^[A-Za-z0-9._-]*[A-Za-z0-9_-][A-Za-z0-9._-]*$"


@router.get("/users/{login}", response_model=GitHubUser)
def read_user(
    response: Response,
    login: str = Path(pattern=ACCOUNT_PATTERN),
    client: GitHubClient = Depends(get_github_client),
) -> GitHubUser:
    """
    ユーザー情報を取得
    """
    data = with_error_handling(lambda: client.user(login))
    response.headers.update(no_cache_headers())
    return GitHubUser.model_validate(data)


@router.get("/users/{login}/repos", response_model=list[GitHubRepository])
def read_user_repositories(
    response: Response,
    login: str = Path(pattern=ACCOUNT_PATTERN),
    client: GitHubClient = Depends(get_github_client),
) -> list[GitHubRepository]:
    """
    ユーザーの公開リポジトリ一覧を取得（全ページ）
    """
    repos = with_error_handling(lambda: client.user_repositories(login))
    logger.info(f"Fetched {len(repos)} repositories for user {login}")
    response.headers.update(no_cache_headers())
    return [GitHubRepository.model_validate(repo) for repo in repos]


@router.get("/orgs/{org}/repos", response_model=list[GitHubRepository])
def read_organization_repositories(
    response: Response,
    org: str = Path(pattern=ACCOUNT_PATTERN),
    client: GitHubClient = Depends(get_github_client),
) -> list[GitHubRepository]:
    """
    Organizationのリポジトリ一覧を取得（全ページ）
    """
    repos = with_error_handling(lambda: client.organization_repositories(org))
    logger.info(f"Fetched {len(repos)} repositories for organization {org}")
    response.headers.update(no_cache_headers())
    return [GitHubRepository.model_validate(repo) for repo in repos]


@router.get("/repos/{owner}/{repo}", response_model=GitHubRepository)
def read_repository(
    response: Response,
    owner: str = Path(pattern=ACCOUNT_PATTERN),
    repo: str = Path(pattern=REPOSITORY_PATTERN),
    client: GitHubClient = Depends(get_github_client),
) -> GitHubRepository:
    """
    リポジトリ情報を取得
    """
    data = with_error_handling(lambda: client.repository(owner, repo))
    response.headers.update(no_cache_headers())
    return GitHubRepository.model_validate(data)

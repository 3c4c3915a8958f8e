"""GitHub中継エンドポイントのスキーマ定義"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class GitHubSchema(BaseModel):
    """GitHubレスポンスの基本クラス（未定義フィールドは無視）"""

    model_config = ConfigDict(extra="ignore")


class GitHubOwner(GitHubSchema):
    login: str
    id: int
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    type: Optional[str] = None


class GitHubUser(GitHubOwner):
    """
    ユーザー情報

    Attributes:
        name: 表示名
        public_repos: 公開リポジトリ数
        followers: フォロワー数
    """

    name: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    created_at: Optional[datetime] = None


class GitHubRepository(GitHubSchema):
    """
    リポジトリ情報

    Attributes:
        full_name: "owner/repo"形式の名前
        private: 非公開リポジトリかどうか
        default_branch: デフォルトブランチ
    """

    id: int
    name: str
    full_name: str
    owner: GitHubOwner
    private: bool = False
    html_url: Optional[str] = None
    description: Optional[str] = None
    fork: bool = False
    language: Optional[str] = None
    default_branch: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    archived: bool = False
    pushed_at: Optional[datetime] = None

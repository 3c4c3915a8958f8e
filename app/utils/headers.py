"""レスポンスヘッダーのヘルパー"""

NO_CACHE_CONTROL = "no-cache, no-store"


def no_cache_headers() -> dict[str, str]:
    """
    キャッシュ禁止ヘッダーを返す

    権限状態に依存するGitHubのデータを中継するレスポンスに付与する。
    呼び出しごとに新しいdictを返す。
    """
    return {"Cache-Control": NO_CACHE_CONTROL}

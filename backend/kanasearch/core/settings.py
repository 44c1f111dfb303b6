"""
アプリケーション設定（環境変数・定数の一元管理）

【初心者向け】
- Pydantic Settings: 環境変数や.envを読んで型付きで扱うための仕組み
- ここで定義した値は kanasearch.core.settings.settings から参照できる
- 主な分類: CORS, カタログ, 検索
- あいまい検索エンジン本体（kanasearch.search）は設定を読まない（純粋関数のまま）
"""
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    アプリケーション設定クラス
    環境変数（または.env）の値が自動でここにマッピングされる
    """

    # CORS設定
    cors_origins: List[str] = ["http://localhost:3000"]

    # カタログ設定（リポジトリルートからの相対パス、絶対パスも可）
    catalog_path: str = Field(
        default="data/musics.json",
        alias="CATALOG_PATH",
        description="楽曲カタログJSONファイルのパス"
    )

    # 検索設定
    search_default_limit: int = Field(
        default=10,
        alias="SEARCH_DEFAULT_LIMIT",
        description="検索結果の既定件数"
    )
    search_max_limit: int = Field(
        default=50,
        alias="SEARCH_MAX_LIMIT",
        description="検索結果の最大件数（リクエストのlimitはこの値で頭打ち）"
    )
    search_min_score: float = Field(
        default=0.0,
        alias="SEARCH_MIN_SCORE",
        description="APIで返す最小スコア（これ未満の候補は結果から除外）"
    )

    # Pydantic v2の設定（Configクラスの代わりにmodel_configを使用）
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,  # Fieldのaliasとフィールド名の両方で読み込み可能
        extra="ignore"  # 未定義の環境変数を無視
    )


# グローバル設定インスタンス
settings = Settings()

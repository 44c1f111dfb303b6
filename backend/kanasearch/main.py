"""
楽曲タイトル検索APIのエントリーポイント

【初心者向け】
このファイルは楽曲タイトルあいまい検索APIサーバーを起動する「玄関」です。
- ルーターは3つ: health（死活確認）, search（あいまい検索）, musics（一覧・詳細）
- 起動イベントで楽曲カタログを読み込んでキャッシュします（失敗しても空のカタログで起動）

実行方法:
    backend/ で:
    pip install -e "..[test]"
    uvicorn kanasearch.main:app --reload --port 8000
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kanasearch import __version__
from kanasearch.catalog.cache import get_catalog
from kanasearch.catalog.loader import resolve_catalog_path
from kanasearch.core.settings import settings
from kanasearch.routers import health, musics, search

# ロガー設定
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Kanasearch API",
    description="Mixed-script fuzzy title search API",
    version=__version__,
)

# CORS設定: フロントエンドからAPIを呼ぶ際の跨域通信を許可
# 許可するオリジンは CORS_ORIGINS で変更できる
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ルーター登録
# /health=死活確認, /search=あいまい検索, /musics=楽曲一覧・詳細
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(search.router, prefix="/search", tags=["search"])
app.include_router(musics.router, prefix="/musics", tags=["musics"])


@app.on_event("startup")
async def startup_event():
    """
    起動時の処理: 楽曲カタログを読み込んでキャッシュする
    読み込みに失敗しても空のカタログで起動する（ログだけ出す）
    """
    catalog_path = resolve_catalog_path(settings.catalog_path)
    logger.info(f"CATALOG_PATH実パス: {catalog_path} (exists={catalog_path.exists()})")

    catalog = get_catalog(force_reload=True)
    logger.info(f"カタログ準備完了: {len(catalog)}件")


@app.get("/")
async def root():
    """ルートエンドポイント（APIの名前とバージョン）"""
    return {"message": "Kanasearch API", "version": __version__}

"""
Health check APIルーター（死活確認用）

【初心者向け】
- GET /health: サーバーが生きているか確認するだけのエンドポイント
- カタログの件数も返す（起動時の読み込みに失敗していないかの確認用）
"""
from fastapi import APIRouter

from kanasearch.catalog.cache import get_catalog

router = APIRouter()


@router.get("")
async def health_check():
    """ヘルスチェック用エンドポイント"""
    return {"status": "ok", "catalog_size": len(get_catalog())}

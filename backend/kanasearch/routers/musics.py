"""
Musics APIルーター（楽曲一覧・詳細）

【初心者向け】
- GET /musics?page=1&size=10: 実装日時（released_at）の新しい順に一覧
- GET /musics/{music_id}: 1件の詳細。存在しないIDはNOT_FOUNDエラー
"""
from fastapi import APIRouter, Query

from kanasearch.catalog.cache import find_music, get_catalog
from kanasearch.core.errors import raise_not_found
from kanasearch.schemas.common import ErrorResponse
from kanasearch.schemas.musics import MusicDetail, MusicListResponse, MusicSummary

router = APIRouter()


@router.get("", response_model=MusicListResponse)
async def list_musics(
    page: int = Query(default=1, ge=1, description="ページ番号（1始まり）"),
    size: int = Query(default=10, ge=1, le=100, description="1ページの件数"),
) -> MusicListResponse:
    """楽曲一覧を取得する（新しい順）"""
    catalog = get_catalog()
    ordered = sorted(catalog, key=lambda item: item.released_at, reverse=True)
    start = (page - 1) * size
    items = [MusicSummary.from_item(item) for item in ordered[start:start + size]]
    return MusicListResponse(total=len(catalog), page=page, size=size, items=items)


@router.get("/{music_id}", response_model=MusicDetail, responses={404: {"model": ErrorResponse}})
async def get_music(music_id: int) -> MusicDetail:
    """楽曲の詳細を取得する"""
    item = find_music(music_id)
    if item is None:
        raise_not_found(f"楽曲が見つかりません: id={music_id}")
    return MusicDetail.from_item(item)

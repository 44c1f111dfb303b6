"""
楽曲API用スキーマ

【初心者向け】
- MusicSummary: 一覧用（id, title, pronunciation, released_at）
- MusicDetail: 詳細用（作詞・作曲・編曲・別タイトルを含む）
"""
from pydantic import BaseModel

from kanasearch.catalog.models import MusicItem


class MusicSummary(BaseModel):
    """楽曲一覧の1件"""
    id: int
    title: str
    pronunciation: str
    released_at: int

    @classmethod
    def from_item(cls, item: MusicItem) -> "MusicSummary":
        return cls(
            id=item.id,
            title=item.title,
            pronunciation=item.pronunciation,
            released_at=item.released_at,
        )


class MusicDetail(BaseModel):
    """楽曲詳細"""
    id: int
    title: str
    titles: list[str]
    pronunciation: str
    lyricist: str
    composer: str
    arranger: str
    published_at: int
    released_at: int

    @classmethod
    def from_item(cls, item: MusicItem) -> "MusicDetail":
        return cls(
            id=item.id,
            title=item.title,
            titles=item.titles(),
            pronunciation=item.pronunciation,
            lyricist=item.lyricist,
            composer=item.composer,
            arranger=item.arranger,
            published_at=item.published_at,
            released_at=item.released_at,
        )


class MusicListResponse(BaseModel):
    """楽曲一覧レスポンス"""
    total: int
    page: int
    size: int
    items: list[MusicSummary]

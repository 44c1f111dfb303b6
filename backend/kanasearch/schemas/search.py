"""
検索API用スキーマ（Search のリクエスト・レスポンス型）

【初心者向け】
- SearchRequest: query, limit（取得件数）, offset（飛ばす件数）
- SearchResponse: query, total（しきい値以上の件数）, results
- ranges は [開始, 終了) の組のリスト。元の文字列の文字位置で表す
"""
from typing import Optional
from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """検索リクエスト"""
    query: str = Field(..., description="検索クエリ（かな・ローマ字・漢字・英字の混在可）")
    limit: Optional[int] = Field(
        default=None,
        ge=1,
        le=50,
        description="取得件数（1〜50）。省略時は SEARCH_DEFAULT_LIMIT"
    )
    offset: int = Field(default=0, ge=0, description="先頭から飛ばす件数")


class MatchRanges(BaseModel):
    """一致範囲"""
    query: list[tuple[int, int]]
    target: list[tuple[int, int]]


class SearchResult(BaseModel):
    """検索結果1件"""
    id: int
    title: str
    matched_text: str  # 最もスコアが高かった別名（曲名・別タイトル・読みのどれか）
    score: float  # 0.0〜1.0（大きいほど一致が強い）
    reversed_count: int
    ranges: MatchRanges
    highlighted: str  # 一致範囲を [ ] で囲んだ matched_text


class SearchResponse(BaseModel):
    """検索レスポンス"""
    query: str
    total: int
    results: list[SearchResult]

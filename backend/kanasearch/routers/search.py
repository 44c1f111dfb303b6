"""
Search APIルーター（楽曲タイトルのあいまい検索）
"""
import logging

from fastapi import APIRouter

from kanasearch.catalog.cache import get_catalog
from kanasearch.catalog.models import MusicItem
from kanasearch.core.errors import raise_invalid_input
from kanasearch.core.settings import settings
from kanasearch.schemas.common import ErrorResponse
from kanasearch.schemas.search import MatchRanges, SearchRequest, SearchResponse, SearchResult
from kanasearch.search import search_all
from kanasearch.search.highlight import highlight

# ロガー設定
logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=SearchResponse, responses={400: {"model": ErrorResponse}})
async def search(request: SearchRequest) -> SearchResponse:
    """
    楽曲タイトルをあいまい検索する

    - query: 必須。空文字列や空白のみの場合はINVALID_INPUTエラー
    - limit: 任意。SEARCH_MAX_LIMIT で頭打ち、省略時は SEARCH_DEFAULT_LIMIT
    - offset: 任意。デフォルト0
    """
    # バリデーション: 空文字列や空白のみはエラー
    if not request.query or not request.query.strip():
        raise_invalid_input("検索クエリを入力してください")

    limit = request.limit if request.limit is not None else settings.search_default_limit
    limit = min(limit, settings.search_max_limit)

    catalog = get_catalog()

    # 全件をスコア順に並べてから、しきい値未満を除外してページング
    hits = search_all(request.query, catalog, limit=len(catalog), keys=MusicItem.search_keys)
    hits = [hit for hit in hits if hit.score >= settings.search_min_score]
    page = hits[request.offset:request.offset + limit]

    results = []
    for hit in page:
        result = hit.result
        results.append(
            SearchResult(
                id=hit.item.id,
                title=hit.item.title,
                matched_text=result.target,
                score=result.score,
                reversed_count=result.reversed_count,
                ranges=MatchRanges(query=result.query_ranges, target=result.target_ranges),
                highlighted=highlight(result.target, result.target_ranges),
            )
        )

    logger.info(f"検索API: query='{request.query}', total={len(hits)}, returned={len(results)}")

    return SearchResponse(query=request.query, total=len(hits), results=results)

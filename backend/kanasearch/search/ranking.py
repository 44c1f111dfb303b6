"""
候補リスト全体のあいまい検索（スコア順の並べ替え・ページング）

【初心者向け】
- 候補1件ごとに match() を呼び、別名（曲名・別タイトル・読み）のうち最高スコアを採用
- スコア降順に並べ替えてから [offset, offset + limit) を切り出す
- 同点は候補リストの順序を保つ（安定ソート）
"""
import logging
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from kanasearch.search.fuzzy import FuzzyMatchResult, match

# ロガー設定
logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SearchHit(Generic[T]):
    """検索結果1件（候補と、その最良の一致結果）"""
    item: T
    result: FuzzyMatchResult

    @property
    def score(self) -> float:
        return self.result.score


def best_match(query: str, aliases: Sequence[str]) -> FuzzyMatchResult:
    """
    複数の別名のうち最もスコアが高い一致結果を返す

    同点なら先の別名を優先する。別名が1つもなければ空の対象として扱う（スコア0）。
    """
    best: Optional[FuzzyMatchResult] = None
    for alias in aliases:
        result = match(query, alias)
        if best is None or result.score > best.score:
            best = result
    return best if best is not None else match(query, "")


def search_all(
    query: str,
    candidates: Sequence[T],
    limit: int = 10,
    offset: int = 0,
    keys: Optional[Callable[[T], Sequence[str]]] = None,
) -> List[SearchHit[T]]:
    """
    候補リストをあいまい検索する

    Args:
        query: 検索語
        candidates: 候補リスト（この順序が同点時の順序になる）
        limit: 取得件数
        offset: 先頭から飛ばす件数
        keys: 候補から比較対象の別名リストを取り出す関数（省略時は候補そのものを文字列として使う）

    Returns:
        SearchHitのリスト（score降順）
    """
    if limit < 0 or offset < 0:
        raise ValueError(f"limit と offset は0以上で指定してください: limit={limit}, offset={offset}")

    get_keys = keys if keys is not None else (lambda candidate: [str(candidate)])

    logger.info(f"あいまい検索開始: query='{query}', candidates={len(candidates)}")

    hits = [SearchHit(item, best_match(query, get_keys(item))) for item in candidates]

    # score降順でソート（安定ソートなので同点は元の順序のまま）
    hits.sort(key=lambda hit: hit.score, reverse=True)

    logger.info(
        f"あいまい検索結果: total={len(hits)}, "
        f"top3_scores={[round(hit.score, 3) for hit in hits[:3]]}"
    )

    return hits[offset:offset + limit]

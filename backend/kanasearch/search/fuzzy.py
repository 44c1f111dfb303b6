"""
あいまい一致（かな・ローマ字・漢字・英字の混在対応）

【初心者向け】
- match(query, target) が1組の文字列を比べて FuzzyMatchResult を返す
- 漏字・倒序・隔字に対応。複数のクエリ文字を1つの対象トークンにまとめて一致させられる
  例: "shake" と "しゃけ" -> "sha"→しゃ, "ke"→け でスコア 0.9
- どんな文字列の組でも例外を投げない（空の対象ならスコア0・範囲なし）
- 共有する状態を持たないので、候補ごとに並列で呼んでもよい
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from kanasearch.search.aligner import find_optimal_matching
from kanasearch.search.ranges import map_ranges
from kanasearch.search.scoring import relevance
from kanasearch.search.tokenizer import tokenize


@dataclass(frozen=True)
class FuzzyMatchResult:
    """あいまい一致の結果"""
    score: float
    query: str                                                   # 元のクエリ（そのまま）
    target: str                                                  # 元の対象（そのまま）
    query_ranges: List[Tuple[int, int]] = field(default_factory=list)
    target_ranges: List[Tuple[int, int]] = field(default_factory=list)
    reversed_count: int = 0
    query_token_weights: List[float] = field(default_factory=list)
    target_token_weights: List[float] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """JSONに変換できる辞書を返す"""
        return {
            "score": self.score,
            "query": self.query,
            "target": self.target,
            "ranges": {
                "query": [list(r) for r in self.query_ranges],
                "target": [list(r) for r in self.target_ranges],
            },
            "reversed_count": self.reversed_count,
        }


def match(query: str, target: str) -> FuzzyMatchResult:
    """
    クエリと対象文字列をあいまい一致させる

    Args:
        query: ユーザーが入力した検索語
        target: 比較対象（曲名など）

    Returns:
        FuzzyMatchResult（score と、両文字列上の一致範囲）
    """
    query_tokens = tokenize(query)
    target_tokens = tokenize(target)

    if not target_tokens:
        return FuzzyMatchResult(score=0.0, query=query, target=target)

    strategy = find_optimal_matching(query_tokens, target_tokens)
    mapping = map_ranges(strategy, query, query_tokens, target, target_tokens)
    weight_sum = sum(m.weight for m in strategy.matches)

    return FuzzyMatchResult(
        score=relevance(weight_sum, len(target_tokens), mapping.missed_query_tokens),
        query=query,
        target=target,
        query_ranges=mapping.query_ranges,
        target_ranges=mapping.target_ranges,
        reversed_count=strategy.reversed_count,
        query_token_weights=mapping.query_token_weights,
        target_token_weights=mapping.target_token_weights,
    )
